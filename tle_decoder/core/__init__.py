"""Public API for tle_decoder core primitives."""

from .errors import (
    CatalogNumberMismatchError,
    ChecksumMismatchError,
    ErrorKind,
    FieldOutOfRangeError,
    InvalidFieldValueError,
    MalformedInputError,
    TLEParseError,
    WrongLineNumberError,
)
from .python_impl import checksum_ok, compute_checksum, extract_field, parse, parse_catalog, split_lines
from .types import OrbitalElements

__all__ = [
    "OrbitalElements",
    "parse",
    "parse_catalog",
    "split_lines",
    "extract_field",
    "compute_checksum",
    "checksum_ok",
    "ErrorKind",
    "TLEParseError",
    "MalformedInputError",
    "WrongLineNumberError",
    "FieldOutOfRangeError",
    "InvalidFieldValueError",
    "ChecksumMismatchError",
    "CatalogNumberMismatchError",
]
