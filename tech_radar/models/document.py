from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class RadarDocument:
    """
    In-memory representation of the radar JSON file right after parsing.

    Notes
    - data is the raw parsed object; no field is coerced or defaulted.
    - quadrants / entries return None when the key is absent so that the
      checks can report the problem instead of raising KeyError.
    """
    source_path: Path
    data: Dict[str, Any]
    warnings: Tuple[str, ...] = ()

    @property
    def quadrants(self) -> Optional[Any]:
        return self.data.get("quadrants")

    @property
    def entries(self) -> Optional[Any]:
        return self.data.get("entries")

    @property
    def n_entries(self) -> int:
        entries = self.entries
        return len(entries) if isinstance(entries, list) else 0
