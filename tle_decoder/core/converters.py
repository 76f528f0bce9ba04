"""Converters from raw column text to typed values.

Every converter receives the untrimmed column text together with the
:class:`~tle_decoder.core.columns.FieldSpec` it came from, so a failure can
name the field and line. Only ASCII digits are accepted.
"""

from __future__ import annotations

import re

from .columns import FieldSpec
from .errors import InvalidFieldValueError

_UNSIGNED = re.compile(r"\d+", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
# [sign]DDDDD[sign]E, e.g. "-12345-3"; a blank exponent sign reads as "+".
_IMPLIED_EXPONENT = re.compile(r"([+-]?)(\d+)([+\- ]?)(\d)", re.ASCII)
_ALPHA5 = re.compile(r"([A-HJ-NP-Z])(\d{4})", re.ASCII)
_ALPHA5_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"


def _invalid(raw: str, spec: FieldSpec) -> InvalidFieldValueError:
    return InvalidFieldValueError(spec.name, spec.line_number, raw)


def to_int(raw: str, spec: FieldSpec, *, allow_blank: bool = False) -> int:
    text = raw.strip()
    if not text:
        if allow_blank:
            return 0
        raise _invalid(raw, spec)
    if not _UNSIGNED.fullmatch(text):
        raise _invalid(raw, spec)
    return int(text)


def to_digit(raw: str, spec: FieldSpec) -> int:
    if len(raw) != 1 or raw not in "0123456789":
        raise _invalid(raw, spec)
    return int(raw)


def to_separator(raw: str, spec: FieldSpec) -> str:
    """Accept only the single blank that separates two fields."""

    if raw != " ":
        raise _invalid(raw, spec)
    return raw


def to_catalog_number(raw: str, spec: FieldSpec) -> int:
    """Decode a five-column catalog number, including Alpha-5 (``A0001`` -> 100001)."""

    text = raw.strip()
    match = _ALPHA5.fullmatch(text)
    if match:
        prefix = _ALPHA5_LETTERS.index(match.group(1)) + 10
        return prefix * 10_000 + int(match.group(2))
    return to_int(raw, spec)


def to_classification(raw: str, spec: FieldSpec) -> str:
    text = raw.strip()
    if len(text) != 1:
        raise _invalid(raw, spec)
    return text


def to_float(raw: str, spec: FieldSpec) -> float:
    """Parse a plain decimal such as ``" .00000950"`` or ``"-.00002182"``."""

    text = raw.strip()
    if not _DECIMAL.fullmatch(text):
        raise _invalid(raw, spec)
    try:
        return float(text)
    except ValueError as exc:  # pragma: no cover - guarded by the regex
        raise _invalid(raw, spec) from exc


def to_implied_exponent(raw: str, spec: FieldSpec) -> float:
    """Parse the compact ``[sign]DDDDD[sign]E`` notation.

    ``25302-4`` means ``0.25302e-4``; ``-12345+1`` means ``-0.12345e+1``.
    Missing signs default to positive.
    """

    match = _IMPLIED_EXPONENT.fullmatch(raw.strip())
    if not match:
        raise _invalid(raw, spec)
    mantissa_sign, digits, exponent_sign, exponent = match.groups()
    exponent_sign = exponent_sign.strip() or "+"
    return float(f"{mantissa_sign}0.{digits}e{exponent_sign}{exponent}")


def to_implied_decimal(raw: str, spec: FieldSpec) -> float:
    """Parse a digit string with an assumed leading ``0.`` (eccentricity)."""

    digits = raw.replace(" ", "0")
    if not _UNSIGNED.fullmatch(digits):
        raise _invalid(raw, spec)
    return float(f"0.{digits}")


__all__ = [
    "to_int",
    "to_digit",
    "to_separator",
    "to_catalog_number",
    "to_classification",
    "to_float",
    "to_implied_exponent",
    "to_implied_decimal",
]
