"""Typed view of a structurally valid tech radar document.

The validators work on the raw parsed JSON so that mis-typed data can be
reported instead of crashing. Once a document passed validation it can be
turned into these frozen dataclasses for summaries and exports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class Quadrant:
    id: str
    name: str


@dataclass(frozen=True)
class TimelineItem:
    """One placement of an entry in a ring at a given date (``YYYY-MM`` by convention)."""

    ring_id: str
    date: str


@dataclass(frozen=True)
class RadarEntry:
    """
    One tracked technology or practice.

    Notes
    - key is optional; an empty string is treated as absent.
    - timeline lists the most recent placement first.
    """
    id: str
    title: str
    quadrant: str
    description: str
    timeline: Tuple[TimelineItem, ...]
    key: Optional[str] = None

    @property
    def current_ring(self) -> str:
        return self.timeline[0].ring_id

    @property
    def n_moves(self) -> int:
        """Number of ring changes recorded in the timeline."""
        rings = [t.ring_id for t in self.timeline]
        return sum(1 for a, b in zip(rings, rings[1:]) if a != b)


@dataclass(frozen=True)
class TechRadar:
    quadrants: Tuple[Quadrant, ...]
    entries: Tuple[RadarEntry, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TechRadar:
        """Build the typed model from a parsed radar document.

        Only call this on a document that passed validation; anything
        mis-shaped raises :class:`~tech_radar.validation.errors.SchemaError`.
        """
        # Avoid circular import at module level
        from tech_radar.validation.errors import SchemaError

        try:
            quadrants = tuple(Quadrant(id=str(q["id"]), name=str(q.get("name", q["id"]))) for q in data["quadrants"])
            entries: List[RadarEntry] = []
            for e in data["entries"]:
                timeline = tuple(TimelineItem(ring_id=t["ringId"], date=t["date"]) for t in e["timeline"])
                if not timeline:
                    raise SchemaError(f"entry '{e['id']}' has an empty timeline")
                entries.append(
                    RadarEntry(
                        id=e["id"],
                        title=e["title"],
                        quadrant=e["quadrant"],
                        description=e["description"],
                        timeline=timeline,
                        key=e.get("key") or None,
                    )
                )
        except (KeyError, TypeError, AttributeError) as exc:
            raise SchemaError(f"Document does not match the radar schema: {exc!r}") from exc
        return cls(quadrants=quadrants, entries=tuple(entries))

    def entries_in(self, quadrant_id: str) -> List[RadarEntry]:
        return [e for e in self.entries if e.quadrant == quadrant_id]

    def to_frame(self) -> pd.DataFrame:
        """One row per entry with its current ring and date."""
        rows = [
            {
                "id": e.id,
                "key": e.key,
                "title": e.title,
                "quadrant": e.quadrant,
                "ring": e.current_ring,
                "date": e.timeline[0].date,
                "n_moves": e.n_moves,
            }
            for e in self.entries
        ]
        columns = ["id", "key", "title", "quadrant", "ring", "date", "n_moves"]
        return pd.DataFrame(rows, columns=columns)
