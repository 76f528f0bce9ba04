"""Decode NORAD Two-Line Element sets into typed orbital-element records.

Example::

    from tle_decoder import parse

    record = parse(raw_text)
    record.inclination, record.drag_term

Decoding failures raise a :class:`~tle_decoder.core.errors.TLEParseError`
subclass carrying the failing field, line number and raw text.
"""

from __future__ import annotations

from .config import DecoderConfig, FeatureFlags, load_config
from .core import (
    CatalogNumberMismatchError,
    ChecksumMismatchError,
    ErrorKind,
    FieldOutOfRangeError,
    InvalidFieldValueError,
    MalformedInputError,
    OrbitalElements,
    TLEParseError,
    WrongLineNumberError,
    checksum_ok,
    compute_checksum,
    parse,
    parse_catalog,
)
from .logging import configure_logging, get_logger, log_context

__all__ = [
    "parse",
    "parse_catalog",
    "OrbitalElements",
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
    "DecoderConfig",
    "FeatureFlags",
    "load_config",
    "configure_logging",
    "get_logger",
    "log_context",
]
