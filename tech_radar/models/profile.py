"""Radar profile -- bundles every parameter that affects a validation run.

A RadarProfile groups the file lookup settings and the allowed quadrant set
into one frozen dataclass. It can be:

- Constructed with defaults (the platform radar conventions)
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict, or loaded from a JSON profile file
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

DEFAULT_RADAR_FILENAME = "platform-tech-radar.json"

ALLOWED_QUADRANTS: Tuple[str, ...] = ("infrastructure", "frameworks", "languages", "process")


@dataclass(frozen=True)
class RadarProfile:
    """Frozen configuration for a validation run.

    Fields
    ------
    radar_filename : str
        Name of the radar file looked up by :func:`~tech_radar.ingest.loader.find_radar_file`.
    allowed_quadrants : tuple of str
        The exact set of quadrant ids the radar must declare.
    max_up : int
        Number of parent directories searched when locating the radar file.
    warn_empty_quadrants : bool
        If True, an allowed quadrant without entries produces a report warning.
    """

    radar_filename: str = DEFAULT_RADAR_FILENAME
    allowed_quadrants: Tuple[str, ...] = ALLOWED_QUADRANTS
    max_up: int = 2
    warn_empty_quadrants: bool = True

    @property
    def expected_quadrant_count(self) -> int:
        return len(self.allowed_quadrants)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (tuples become lists)."""
        d = asdict(self)
        d["allowed_quadrants"] = list(d["allowed_quadrants"])
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> RadarProfile:
        """Reconstruct from a dict (e.g. loaded from JSON). Unknown keys raise TypeError."""
        d = dict(d)  # shallow copy
        if "allowed_quadrants" in d and not isinstance(d["allowed_quadrants"], tuple):
            d["allowed_quadrants"] = tuple(d["allowed_quadrants"])
        return cls(**d)


def load_profile(path: str | Path) -> RadarProfile:
    """Read a JSON profile file. Missing fields keep their defaults."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {path}")
    d = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(d, dict):
        raise TypeError(f"Profile file must contain a JSON object, got {type(d).__name__}: {path}")
    return RadarProfile.from_dict(d)
