"""Radar validation runner - reusable API plus a small CLI.

This module provides:
1. validate_quadrants / validate_entries: run the individual checks with
   test-runner isolation (a failed check is recorded, siblings still run)
2. validate_radar: build the full ValidationReport for a loaded document
3. main: command line entry point (``tech-radar-check``)

Exit codes: 0 when every check passes, 1 when at least one fails, 2 when the
radar file cannot be found or parsed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Sequence, Set

from tech_radar.ingest.loader import find_radar_file, load_radar_json
from tech_radar.models.document import RadarDocument
from tech_radar.models.profile import RadarProfile, load_profile
from tech_radar.models.radar import TechRadar
from tech_radar.models.report import CheckResult, ValidationReport
from tech_radar.validation.checks import (
    check_entries_present,
    check_quadrant_reference,
    check_quadrants,
    check_required_fields,
    check_timeline,
    check_unique_id,
    check_unique_key,
    entry_label,
)
from tech_radar.validation.errors import ParseError, RadarValidationError

ENTRY_CHECK_NAMES = ("required_fields", "unique_id", "unique_key", "quadrant", "timeline")


def _run(check: str, fn: Callable[[], None], *, index: Optional[int] = None, entry_id: Optional[str] = None) -> CheckResult:
    try:
        fn()
    except RadarValidationError as exc:
        return CheckResult(
            check=check,
            passed=False,
            message=str(exc),
            error_kind=type(exc).__name__,
            index=index,
            entry_id=entry_id,
        )
    return CheckResult(check=check, passed=True, index=index, entry_id=entry_id)


def validate_quadrants(document: RadarDocument, profile: Optional[RadarProfile] = None) -> List[CheckResult]:
    profile = profile or RadarProfile()
    return [_run("quadrants", lambda: check_quadrants(document.quadrants, profile.allowed_quadrants))]


def validate_entries(document: RadarDocument, profile: Optional[RadarProfile] = None) -> List[CheckResult]:
    """Presence check, then five isolated checks per entry in document order.

    The seen-id and seen-key sets are shared across entries so that a
    duplicate fails on its second occurrence.
    """
    profile = profile or RadarProfile()
    entries = document.entries
    results = [_run("entries_present", lambda: check_entries_present(entries))]
    if not isinstance(entries, list):
        return results

    seen_ids: Set[str] = set()
    seen_keys: Set[str] = set()
    allowed = profile.allowed_quadrants

    for index, entry in enumerate(entries):
        eid = entry_label(entry)
        checks: List[tuple] = [
            ("required_fields", lambda e=entry, i=index: check_required_fields(e, index=i)),
            ("unique_id", lambda e=entry, i=index: check_unique_id(e, seen_ids, index=i)),
            ("unique_key", lambda e=entry, i=index: check_unique_key(e, seen_keys, index=i)),
            ("quadrant", lambda e=entry, i=index: check_quadrant_reference(e, allowed, index=i)),
            ("timeline", lambda e=entry, i=index: check_timeline(e, index=i)),
        ]
        for name, fn in checks:
            results.append(_run(name, fn, index=index, entry_id=eid))
    return results


def _empty_quadrant_warnings(document: RadarDocument, profile: RadarProfile) -> List[str]:
    entries = document.entries if isinstance(document.entries, list) else []
    used = {e["quadrant"] for e in entries if isinstance(e, dict) and isinstance(e.get("quadrant"), str)}
    return [f"Quadrant '{q}' has no entries" for q in profile.allowed_quadrants if q not in used]


def validate_radar(document: RadarDocument, profile: Optional[RadarProfile] = None) -> ValidationReport:
    profile = profile or RadarProfile()
    results = validate_quadrants(document, profile) + validate_entries(document, profile)

    warnings = list(document.warnings)
    if profile.warn_empty_quadrants:
        warnings.extend(_empty_quadrant_warnings(document, profile))

    return ValidationReport(source_path=document.source_path, results=tuple(results), warnings=tuple(warnings))


def _print_radar_summary(document: RadarDocument) -> None:
    radar = TechRadar.from_dict(document.data)
    df = radar.to_frame()
    if df.empty:
        return
    table = df.pivot_table(index="quadrant", columns="ring", values="id", aggfunc="count", fill_value=0)
    print(f"[info] {len(df)} entries by quadrant and current ring:")
    for line in table.to_string().splitlines():
        print(f"  {line}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse
    import textwrap

    p = argparse.ArgumentParser(
        prog="tech-radar-check",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Run the structural checks on a tech radar JSON file.

            Without PATH, platform-tech-radar.json is searched in the current
            directory and up to two parent levels.
            """
        ),
    )
    p.add_argument("path", nargs="?", default=None, help="Radar JSON file (default: located from the current directory)")
    p.add_argument("--profile", default=None, help="JSON profile overriding the allowed quadrants / file name")
    p.add_argument("--csv", default=None, help="Write the per-check report table to this CSV file")
    p.add_argument("--quiet", action="store_true", help="Only print failed checks and the final count")

    ns = p.parse_args(list(argv) if argv is not None else None)

    try:
        profile = load_profile(ns.profile) if ns.profile else RadarProfile()
    except (FileNotFoundError, TypeError, ValueError) as e:
        print(f"[error] invalid profile: {e}")
        return 2

    try:
        if ns.path:
            radar_path = Path(ns.path)
        else:
            radar_path = find_radar_file(Path.cwd(), filename=profile.radar_filename, max_up=profile.max_up)
            if not ns.quiet:
                print(f"[info] using {radar_path}")
        document = load_radar_json(radar_path)
    except (FileNotFoundError, ParseError) as e:
        print(f"[error] {e}")
        return 2

    report = validate_radar(document, profile)

    for r in report.results:
        if r.passed and ns.quiet:
            continue
        status = "ok" if r.passed else "FAIL"
        line = f"[{status}] {r.test_id}"
        if not r.passed:
            line += f" ({r.error_kind}): {r.message}"
        print(line)

    for w in report.warnings:
        print(f"[warn] {w}")

    if ns.csv:
        out_csv = Path(ns.csv)
        out_csv.parent.mkdir(parents=True, exist_ok=True)
        report.to_frame().to_csv(out_csv, index=False)
        print(f"[info] wrote: {out_csv}")

    s = report.summary()
    if report.ok and not ns.quiet:
        _print_radar_summary(document)
    print(f"{s['n_passed']} passed, {s['n_failed']} failed ({s['n_checks']} checks) in {report.source_path.name}")
    if s["failures_by_kind"]:
        kinds = ", ".join(f"{k}={v}" for k, v in sorted(s["failures_by_kind"].items()))
        print(f"  failures by kind: {kinds}")

    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
