"""Tests for the individual structural checks.

Covers:
- quadrant count, duplicate ids and exact id set
- entries presence
- required entry fields and their types
- id / key uniqueness bookkeeping
- quadrant references
- timeline shape
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List

import pytest

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
from tech_radar.validation.errors import (
    DuplicateError,
    EmptyCollectionError,
    InvalidReferenceError,
    RadarValidationError,
    SchemaError,
)


def _quadrants() -> List[Dict[str, str]]:
    return [
        {"id": "infrastructure", "name": "Infrastructure"},
        {"id": "frameworks", "name": "Frameworks"},
        {"id": "languages", "name": "Languages"},
        {"id": "process", "name": "Process"},
    ]


def _entry(**overrides: Any) -> Dict[str, Any]:
    e: Dict[str, Any] = {
        "id": "a",
        "title": "T",
        "quadrant": "languages",
        "description": "d",
        "timeline": [{"ringId": "adopt", "date": "2024-01"}],
    }
    e.update(overrides)
    return e


# -----------------------------------------------------------------------
# Quadrants
# -----------------------------------------------------------------------


def test_quadrants_valid() -> None:
    check_quadrants(_quadrants())


def test_quadrants_order_does_not_matter() -> None:
    check_quadrants(list(reversed(_quadrants())))


def test_quadrants_too_few() -> None:
    with pytest.raises(SchemaError, match="exactly 4"):
        check_quadrants(_quadrants()[:3])


def test_quadrants_too_many() -> None:
    qs = _quadrants() + [{"id": "tools", "name": "Tools"}]
    with pytest.raises(SchemaError):
        check_quadrants(qs)


def test_quadrants_duplicate_id() -> None:
    qs = _quadrants()
    qs[3] = {"id": "languages", "name": "Languages again"}
    with pytest.raises(DuplicateError, match="languages"):
        check_quadrants(qs)


def test_quadrants_unknown_id() -> None:
    qs = _quadrants()
    qs[0] = {"id": "platforms", "name": "Platforms"}
    with pytest.raises(InvalidReferenceError) as excinfo:
        check_quadrants(qs)
    assert "platforms" in str(excinfo.value)
    assert "infrastructure" in str(excinfo.value)


def test_quadrants_not_a_list() -> None:
    with pytest.raises(SchemaError):
        check_quadrants(None)


def test_quadrants_item_without_string_id() -> None:
    qs = _quadrants()
    qs[1] = {"id": 7, "name": "Seven"}
    with pytest.raises(SchemaError, match=r"quadrants\[1\]"):
        check_quadrants(qs)


def test_quadrants_custom_allowed_set() -> None:
    check_quadrants([{"id": "x"}, {"id": "y"}], allowed=("x", "y"))


def test_check_failures_are_assertion_errors() -> None:
    with pytest.raises(AssertionError):
        check_quadrants([])


# -----------------------------------------------------------------------
# Entries presence
# -----------------------------------------------------------------------


def test_entries_present_ok() -> None:
    check_entries_present([_entry()])


def test_entries_empty() -> None:
    with pytest.raises(EmptyCollectionError):
        check_entries_present([])


@pytest.mark.parametrize("value", [None, {}, "entries"])
def test_entries_not_a_list(value: Any) -> None:
    with pytest.raises(SchemaError):
        check_entries_present(value)


# -----------------------------------------------------------------------
# Required fields
# -----------------------------------------------------------------------


def test_required_fields_ok() -> None:
    check_required_fields(_entry(), index=0)


def test_required_fields_key_is_optional() -> None:
    check_required_fields(_entry(key="k"), index=0)


@pytest.mark.parametrize("field", ["id", "title", "quadrant", "description", "timeline"])
def test_required_field_missing(field: str) -> None:
    e = _entry()
    del e[field]
    with pytest.raises(SchemaError, match=f"missing '{field}'"):
        check_required_fields(e, index=2)


def test_required_field_wrong_type() -> None:
    with pytest.raises(SchemaError, match="'title' must be a string, got number"):
        check_required_fields(_entry(title=12), index=0)


def test_timeline_must_be_array_for_required_fields() -> None:
    with pytest.raises(SchemaError, match="'timeline' must be an array"):
        check_required_fields(_entry(timeline={"ringId": "adopt"}), index=0)


def test_required_fields_reports_every_problem() -> None:
    with pytest.raises(SchemaError) as excinfo:
        check_required_fields({"id": "a"}, index=0)
    msg = str(excinfo.value)
    for field in ("title", "quadrant", "description", "timeline"):
        assert f"missing '{field}'" in msg


def test_entry_not_an_object() -> None:
    with pytest.raises(SchemaError, match="expected an object"):
        check_required_fields(["a"], index=5)


def test_failure_is_attributed_to_entry() -> None:
    with pytest.raises(RadarValidationError) as excinfo:
        check_required_fields(_entry(id="kotlin", description=None), index=3)
    assert excinfo.value.index == 3
    assert excinfo.value.entry_id == "kotlin"
    assert str(excinfo.value).startswith("entry[3] (kotlin):")


# -----------------------------------------------------------------------
# Uniqueness
# -----------------------------------------------------------------------


def test_unique_id_records_and_detects_second_occurrence() -> None:
    seen: set = set()
    check_unique_id(_entry(id="a"), seen, index=0)
    assert seen == {"a"}
    with pytest.raises(DuplicateError, match="duplicated id 'a'") as excinfo:
        check_unique_id(_entry(id="a"), seen, index=1)
    assert excinfo.value.index == 1


def test_unique_id_missing_id() -> None:
    e = _entry()
    del e["id"]
    with pytest.raises(SchemaError):
        check_unique_id(e, set(), index=0)


def test_unique_key_absent_is_skipped() -> None:
    seen: set = set()
    check_unique_key(_entry(), seen, index=0)
    check_unique_key(_entry(key=""), seen, index=1)
    check_unique_key(_entry(key=None), seen, index=2)
    assert seen == set()


def test_unique_key_duplicate() -> None:
    seen: set = set()
    check_unique_key(_entry(id="a", key="k"), seen, index=0)
    with pytest.raises(DuplicateError, match="duplicated key 'k'"):
        check_unique_key(_entry(id="b", key="k"), seen, index=1)


def test_key_and_id_namespaces_are_separate() -> None:
    ids: set = set()
    keys: set = set()
    check_unique_id(_entry(id="same"), ids, index=0)
    check_unique_key(_entry(id="other", key="same"), keys, index=1)


def test_unique_key_not_a_string() -> None:
    with pytest.raises(SchemaError, match="'key' must be a string"):
        check_unique_key(_entry(key=3), set(), index=0)


# -----------------------------------------------------------------------
# Quadrant reference
# -----------------------------------------------------------------------


@pytest.mark.parametrize("quadrant", ["infrastructure", "frameworks", "languages", "process"])
def test_quadrant_reference_ok(quadrant: str) -> None:
    check_quadrant_reference(_entry(quadrant=quadrant), index=0)


@pytest.mark.parametrize("quadrant", ["tools", "Languages", "", None])
def test_quadrant_reference_invalid(quadrant: Any) -> None:
    with pytest.raises(InvalidReferenceError):
        check_quadrant_reference(_entry(quadrant=quadrant), index=0)


# -----------------------------------------------------------------------
# Timeline
# -----------------------------------------------------------------------


def test_timeline_ok_with_history() -> None:
    e = _entry(timeline=[{"ringId": "adopt", "date": "2024-01"}, {"ringId": "trial", "date": "2023-01"}])
    check_timeline(e, index=0)


def test_timeline_empty() -> None:
    with pytest.raises(EmptyCollectionError):
        check_timeline(_entry(timeline=[]), index=0)


def test_timeline_missing() -> None:
    e = _entry()
    del e["timeline"]
    with pytest.raises(SchemaError):
        check_timeline(e, index=0)


@pytest.mark.parametrize("field", ["ringId", "date"])
def test_timeline_item_missing_field(field: str) -> None:
    e = _entry()
    item = copy.deepcopy(e["timeline"][0])
    del item[field]
    e["timeline"] = [e["timeline"][0], item]
    with pytest.raises(SchemaError, match=rf"timeline\[1\] '{field}'"):
        check_timeline(e, index=0)


@pytest.mark.parametrize("field", ["ringId", "date"])
def test_timeline_item_empty_string(field: str) -> None:
    e = _entry()
    e["timeline"][0][field] = ""
    with pytest.raises(SchemaError, match="must not be empty"):
        check_timeline(e, index=0)


@pytest.mark.parametrize("field", ["ringId", "date"])
def test_timeline_item_whitespace_is_not_empty(field: str) -> None:
    e = _entry()
    e["timeline"][0][field] = " "
    check_timeline(e, index=0)


def test_timeline_item_not_an_object() -> None:
    with pytest.raises(SchemaError, match=r"timeline\[0\] must be an object"):
        check_timeline(_entry(timeline=["adopt"]), index=0)


def test_timeline_date_number_rejected() -> None:
    with pytest.raises(SchemaError, match="got number"):
        check_timeline(_entry(timeline=[{"ringId": "adopt", "date": 2024}]), index=0)


# -----------------------------------------------------------------------
# Labels
# -----------------------------------------------------------------------


def test_entry_label() -> None:
    assert entry_label(_entry(id="kotlin")) == "kotlin"
    assert entry_label({"title": "no id"}) == "<no id>"
    assert entry_label("not an entry") == "<no id>"
