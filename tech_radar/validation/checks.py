"""
Structural checks for a parsed radar document.

Each check is a plain function that raises one of the errors from
:mod:`tech_radar.validation.errors` on failure and returns None on success.
They work on the raw parsed JSON (dicts and lists) so that missing or
mis-typed fields are reported instead of crashing the run.

Examples
--------
>>> from tech_radar.validation.checks import check_entries_present
>>> check_entries_present([{"id": "a"}])
>>> try:
...     check_entries_present([])
... except AssertionError:
...     pass
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Set

from tech_radar.models.profile import ALLOWED_QUADRANTS
from tech_radar.validation.errors import (
    DuplicateError,
    EmptyCollectionError,
    InvalidReferenceError,
    SchemaError,
)

# Field name -> expected type, checked in this order.
REQUIRED_ENTRY_FIELDS = (
    ("id", str),
    ("title", str),
    ("quadrant", str),
    ("description", str),
    ("timeline", list),
)

REQUIRED_TIMELINE_FIELDS = ("ringId", "date")

_TYPE_NAMES = {str: "a string", list: "an array", dict: "an object"}


def entry_label(entry: Any) -> str:
    """Best-effort id of an entry for messages and test ids."""
    if isinstance(entry, dict):
        eid = entry.get("id")
        if isinstance(eid, str) and eid:
            return eid
    return "<no id>"


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _require_object(entry: Any, index: Optional[int]) -> dict:
    if not isinstance(entry, dict):
        raise SchemaError(f"expected an object, got {_type_name(entry)}", index=index, entry_id=entry_label(entry))
    return entry


# ---------------------------------------------------------------------------
# Document-level checks
# ---------------------------------------------------------------------------


def check_quadrants(quadrants: Any, allowed: Iterable[str] = ALLOWED_QUADRANTS) -> None:
    """Exactly len(allowed) quadrants, unique string ids, id set equal to ``allowed``."""
    allowed = tuple(allowed)
    if not isinstance(quadrants, list):
        raise SchemaError(f"'quadrants' must be an array, got {_type_name(quadrants)}")

    if len(quadrants) != len(allowed):
        raise SchemaError(f"expected exactly {len(allowed)} quadrants, got {len(quadrants)}")

    ids = []
    for i, q in enumerate(quadrants):
        if not isinstance(q, dict) or not isinstance(q.get("id"), str):
            raise SchemaError(f"quadrants[{i}] must be an object with a string 'id'")
        ids.append(q["id"])

    seen: Set[str] = set()
    dupes = set()
    for qid in ids:
        if qid in seen:
            dupes.add(qid)
        seen.add(qid)
    if dupes:
        raise DuplicateError(f"duplicated quadrant id(s): {sorted(dupes)}")

    unknown = sorted(set(ids) - set(allowed))
    missing = sorted(set(allowed) - set(ids))
    if unknown or missing:
        raise InvalidReferenceError(
            f"quadrant ids must be exactly {sorted(allowed)}; unknown={unknown} missing={missing}"
        )


def check_entries_present(entries: Any) -> None:
    if not isinstance(entries, list):
        raise SchemaError(f"'entries' must be an array, got {_type_name(entries)}")
    if not entries:
        raise EmptyCollectionError("'entries' must not be empty")


# ---------------------------------------------------------------------------
# Per-entry checks
# ---------------------------------------------------------------------------


def check_required_fields(entry: Any, index: Optional[int] = None) -> None:
    """id, title, quadrant, description are strings; timeline is an array."""
    e = _require_object(entry, index)
    problems = []
    for name, typ in REQUIRED_ENTRY_FIELDS:
        if name not in e:
            problems.append(f"missing '{name}'")
        elif not isinstance(e[name], typ):
            problems.append(f"'{name}' must be {_TYPE_NAMES[typ]}, got {_type_name(e[name])}")
    if problems:
        raise SchemaError("; ".join(problems), index=index, entry_id=entry_label(entry))


def check_unique_id(entry: Any, seen_ids: Set[str], index: Optional[int] = None) -> None:
    """Fail if the entry id was already recorded in ``seen_ids``; record it otherwise."""
    e = _require_object(entry, index)
    eid = e.get("id")
    if not isinstance(eid, str):
        raise SchemaError("cannot check id uniqueness: 'id' is missing or not a string", index=index, entry_id=entry_label(entry))
    if eid in seen_ids:
        raise DuplicateError(f"duplicated id '{eid}'", index=index, entry_id=eid)
    seen_ids.add(eid)


def check_unique_key(entry: Any, seen_keys: Set[str], index: Optional[int] = None) -> None:
    """Same as :func:`check_unique_id` for the optional ``key``. Absent or empty keys are skipped."""
    e = _require_object(entry, index)
    key = e.get("key")
    if key is None or key == "":
        return
    if not isinstance(key, str):
        raise SchemaError(f"'key' must be a string, got {_type_name(key)}", index=index, entry_id=entry_label(entry))
    if key in seen_keys:
        raise DuplicateError(f"duplicated key '{key}'", index=index, entry_id=entry_label(entry))
    seen_keys.add(key)


def check_quadrant_reference(entry: Any, allowed: Iterable[str] = ALLOWED_QUADRANTS, index: Optional[int] = None) -> None:
    e = _require_object(entry, index)
    allowed = tuple(allowed)
    quadrant = e.get("quadrant")
    if quadrant not in allowed:
        raise InvalidReferenceError(
            f"quadrant {quadrant!r} is not one of {list(allowed)}", index=index, entry_id=entry_label(entry)
        )


def check_timeline(entry: Any, index: Optional[int] = None) -> None:
    """Non-empty timeline whose items all carry non-empty string ringId and date."""
    e = _require_object(entry, index)
    eid = entry_label(entry)
    timeline = e.get("timeline")
    if not isinstance(timeline, list):
        raise SchemaError(f"'timeline' must be an array, got {_type_name(timeline)}", index=index, entry_id=eid)
    if not timeline:
        raise EmptyCollectionError("'timeline' must not be empty", index=index, entry_id=eid)

    for t_index, item in enumerate(timeline):
        if not isinstance(item, dict):
            raise SchemaError(f"timeline[{t_index}] must be an object, got {_type_name(item)}", index=index, entry_id=eid)
        for name in REQUIRED_TIMELINE_FIELDS:
            value = item.get(name)
            if not isinstance(value, str):
                raise SchemaError(
                    f"timeline[{t_index}] '{name}' must be a string, got {_type_name(value)}", index=index, entry_id=eid
                )
            if not value:
                raise SchemaError(f"timeline[{t_index}] '{name}' must not be empty", index=index, entry_id=eid)
