"""Typed failures raised while decoding a TLE."""

from __future__ import annotations

import enum
from typing import Any, Dict


class ErrorKind(str, enum.Enum):
    MALFORMED_INPUT = "malformed_input"
    WRONG_LINE_NUMBER = "wrong_line_number"
    FIELD_OUT_OF_RANGE = "field_out_of_range"
    INVALID_FIELD_VALUE = "invalid_field_value"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    CATALOG_NUMBER_MISMATCH = "catalog_number_mismatch"


class TLEParseError(ValueError):
    """Base class for every decoding failure.

    Subclasses keep their context as attributes so callers can render their
    own messages; :meth:`context` returns the same data as a dict.
    """

    kind: ErrorKind

    def context(self) -> Dict[str, Any]:
        return {}


class MalformedInputError(TLEParseError):
    """Input did not resolve to a name line plus two data lines."""

    kind = ErrorKind.MALFORMED_INPUT

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} non-empty lines, got {actual}")

    def context(self) -> Dict[str, Any]:
        return {"expected": self.expected, "actual": self.actual}


class WrongLineNumberError(TLEParseError):
    """Column 1 of a data line carried the wrong line marker."""

    kind = ErrorKind.WRONG_LINE_NUMBER

    def __init__(self, expected: int, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expected line number {expected}, found {found!r}")

    def context(self) -> Dict[str, Any]:
        return {"expected": self.expected, "found": self.found}


class FieldOutOfRangeError(TLEParseError):
    """A data line is too short to hold a field's columns."""

    kind = ErrorKind.FIELD_OUT_OF_RANGE

    def __init__(self, field: str, line_number: int, start: int, end: int, line_length: int) -> None:
        self.field = field
        self.line_number = line_number
        self.start = start
        self.end = end
        self.line_length = line_length
        super().__init__(
            f"line {line_number} has {line_length} characters; "
            f"{field} needs columns {start}-{end}"
        )

    def context(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "line_number": self.line_number,
            "start": self.start,
            "end": self.end,
            "line_length": self.line_length,
        }


class InvalidFieldValueError(TLEParseError):
    """A field's text could not be converted to its expected type."""

    kind = ErrorKind.INVALID_FIELD_VALUE

    def __init__(self, field: str, line_number: int, raw: str) -> None:
        self.field = field
        self.line_number = line_number
        self.raw = raw
        super().__init__(f"invalid {field} on line {line_number}: {raw!r}")

    def context(self) -> Dict[str, Any]:
        return {"field": self.field, "line_number": self.line_number, "raw": self.raw}


class ChecksumMismatchError(TLEParseError):
    """Strict mode only: column 69 disagrees with the computed checksum."""

    kind = ErrorKind.CHECKSUM_MISMATCH

    def __init__(self, line_number: int, expected: int, computed: int) -> None:
        self.line_number = line_number
        self.expected = expected
        self.computed = computed
        super().__init__(
            f"checksum failed on line {line_number}: found {expected}, computed {computed}"
        )

    def context(self) -> Dict[str, Any]:
        return {"line_number": self.line_number, "expected": self.expected, "computed": self.computed}


class CatalogNumberMismatchError(TLEParseError):
    """Strict mode only: the two data lines name different objects."""

    kind = ErrorKind.CATALOG_NUMBER_MISMATCH

    def __init__(self, line1: int, line2: int) -> None:
        self.line1 = line1
        self.line2 = line2
        super().__init__(f"catalog numbers differ between L1 ({line1}) and L2 ({line2})")

    def context(self) -> Dict[str, Any]:
        return {"line1": self.line1, "line2": self.line2}


__all__ = [
    "ErrorKind",
    "TLEParseError",
    "MalformedInputError",
    "WrongLineNumberError",
    "FieldOutOfRangeError",
    "InvalidFieldValueError",
    "ChecksumMismatchError",
    "CatalogNumberMismatchError",
]
