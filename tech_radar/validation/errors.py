"""Error kinds raised while loading and checking a radar document.

Check failures derive from AssertionError so that a test runner reports them
as failed assertions rather than crashes.
"""

from __future__ import annotations

from typing import Optional


class RadarError(Exception):
    """Base class for every radar-specific error."""


class ParseError(RadarError, ValueError):
    """The radar file is not valid JSON, or its top level is not an object."""


class RadarValidationError(RadarError, AssertionError):
    """A structural check failed.

    ``index`` and ``entry_id`` attribute the failure to an entry when the
    check runs per entry; both are None for document-level checks.
    """

    def __init__(self, message: str, *, index: Optional[int] = None, entry_id: Optional[str] = None) -> None:
        self.index = index
        self.entry_id = entry_id
        if index is not None:
            message = f"entry[{index}] ({entry_id}): {message}"
        super().__init__(message)


class SchemaError(RadarValidationError):
    """A required field is missing or has the wrong type."""


class DuplicateError(RadarValidationError):
    """An identifier (entry id, entry key or quadrant id) occurs more than once."""


class InvalidReferenceError(RadarValidationError):
    """A quadrant id is outside the allowed set, or an allowed one is missing."""


class EmptyCollectionError(RadarValidationError):
    """The entries collection or an entry timeline is empty."""
