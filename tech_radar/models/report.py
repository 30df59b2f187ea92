from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of one isolated check.

    Attributes
    ----------
    check:
        Check name (e.g. "quadrants", "unique_id").
    passed:
        True if the check raised nothing.
    message:
        Failure message, empty on success.
    error_kind:
        Name of the raised error class (e.g. "DuplicateError"), None on success.
    index, entry_id:
        Attribution for per-entry checks; None for document-level checks.
    """
    check: str
    passed: bool
    message: str = ""
    error_kind: Optional[str] = None
    index: Optional[int] = None
    entry_id: Optional[str] = None

    @property
    def test_id(self) -> str:
        """Label used for parametrized test ids, e.g. ``entry[3] - kotlin::timeline``."""
        if self.index is None:
            return self.check
        return f"entry[{self.index}] - {self.entry_id}::{self.check}"


@dataclass(frozen=True)
class ValidationReport:
    """
    All check results for one radar document.

    Examples
    --------
    >>> ValidationReport(source_path=Path("r.json"), results=()).ok
    True
    """
    source_path: Path
    results: Tuple[CheckResult, ...]
    warnings: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def failures(self) -> List[CheckResult]:
        return [r for r in self.results if not r.passed]

    def entry_results(self) -> List[CheckResult]:
        return [r for r in self.results if r.index is not None]

    def get(self, check: str) -> CheckResult:
        """Return the document-level result named ``check``."""
        for r in self.results:
            if r.index is None and r.check == check:
                return r
        raise KeyError(f"No document-level check named '{check}'.")

    def raise_if_errors(self) -> None:
        """Raise AssertionError listing every failed check."""
        failures = self.failures
        if failures:
            msg = f"{len(failures)} radar check(s) failed:\n" + "\n".join(
                f"- {r.test_id}: {r.message}" for r in failures
            )
            raise AssertionError(msg)

    def to_frame(self) -> pd.DataFrame:
        """One row per check, in execution order."""
        columns = ["check", "index", "entry_id", "passed", "error_kind", "message"]
        rows = [
            {
                "check": r.check,
                "index": r.index,
                "entry_id": r.entry_id,
                "passed": r.passed,
                "error_kind": r.error_kind,
                "message": r.message,
            }
            for r in self.results
        ]
        return pd.DataFrame(rows, columns=columns)

    def summary(self) -> Dict[str, object]:
        df = self.to_frame()
        n_failed = int((~df["passed"].astype(bool)).sum()) if len(df) else 0
        by_kind: Dict[str, int] = {}
        if n_failed:
            counts = df.loc[~df["passed"].astype(bool), "error_kind"].value_counts()
            by_kind = {str(k): int(v) for k, v in counts.items()}
        return {
            "n_checks": int(len(df)),
            "n_passed": int(len(df)) - n_failed,
            "n_failed": n_failed,
            "failures_by_kind": by_kind,
        }
