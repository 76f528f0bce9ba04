"""Pure Python TLE decoder: split, extract, convert, assemble."""

from __future__ import annotations

from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

from ..config import load_config
from ..logging import get_logger, log_context
from . import converters
from .columns import LINE1_LAYOUT, LINE1_SEPARATORS, LINE2_LAYOUT, LINE2_SEPARATORS, FieldSpec
from .errors import (
    CatalogNumberMismatchError,
    ChecksumMismatchError,
    FieldOutOfRangeError,
    MalformedInputError,
    TLEParseError,
    WrongLineNumberError,
)
from .types import OrbitalElements

LOGGER = get_logger("core")

Converter = Callable[[str, FieldSpec], object]


def _trimmed(raw: str, spec: FieldSpec) -> str:
    return raw.strip()


_CONVERTERS: Dict[str, Converter] = {
    "satellite_number": converters.to_catalog_number,
    "classification": converters.to_classification,
    "international_designator": _trimmed,
    "epoch": _trimmed,
    "first_derivative_mean_motion": converters.to_float,
    "second_derivative_mean_motion": converters.to_implied_exponent,
    "drag_term": converters.to_implied_exponent,
    "ephemeris_type": partial(converters.to_int, allow_blank=True),
    "element_number": partial(converters.to_int, allow_blank=True),
    "inclination": converters.to_float,
    "right_ascension": converters.to_float,
    "eccentricity": converters.to_implied_decimal,
    "argument_of_perigee": converters.to_float,
    "mean_anomaly": converters.to_float,
    "mean_motion": converters.to_float,
    "revolution_number": converters.to_int,
    "checksum": converters.to_digit,
}


_SEPARATORS = frozenset(LINE1_SEPARATORS + LINE2_SEPARATORS)


def compute_checksum(line: str) -> int:
    """NORAD modulo-10 checksum over columns 1-68: digits add their value, '-' adds 1."""

    total = 0
    for ch in line[:68]:
        if ch in "0123456789":
            total += int(ch)
        elif ch == "-":
            total += 1
    return total % 10


def checksum_ok(line: str) -> bool:
    line = line.rstrip()
    if len(line) < 69 or line[68] not in "0123456789":
        return False
    return int(line[68]) == compute_checksum(line)


def _text_lines(text: str) -> List[str]:
    # Only CR, LF and CRLF end a line; form feeds and the like stay in the text.
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def split_lines(text: str) -> Tuple[str, str, str]:
    """Return ``(name, line1, line2)``, ignoring blank lines around the set."""

    lines = _text_lines(text)
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    non_blank = sum(1 for ln in lines if ln.strip())
    if len(lines) != 3 or non_blank != 3:
        raise MalformedInputError(expected=3, actual=non_blank if non_blank != 3 else len(lines))
    return lines[0], lines[1], lines[2]


def extract_field(line: str, spec: FieldSpec) -> str:
    """Return the raw, untrimmed text in ``spec``'s columns of ``line``."""

    if line and line[0] != str(spec.line_number):
        raise WrongLineNumberError(expected=spec.line_number, found=line[0])
    if len(line) < spec.end:
        raise FieldOutOfRangeError(
            field=spec.name,
            line_number=spec.line_number,
            start=spec.start,
            end=spec.end,
            line_length=len(line),
        )
    return line[spec.slice]


def _decode_line(line: str, layout: Tuple[FieldSpec, ...]) -> Dict[str, object]:
    values: Dict[str, object] = {}
    for spec in layout:
        raw = extract_field(line, spec)
        if spec in _SEPARATORS:
            converters.to_separator(raw, spec)
        else:
            values[spec.name] = _CONVERTERS[spec.name](raw, spec)
    return values


def _verify_checksum(line: str, line_number: int, found: int) -> None:
    computed = compute_checksum(line)
    if found != computed:
        raise ChecksumMismatchError(line_number=line_number, expected=found, computed=computed)


def _assemble(text: str, strict: bool) -> OrbitalElements:
    name, line1, line2 = split_lines(text)

    first = _decode_line(line1, LINE1_LAYOUT)
    checksum1 = first.pop("checksum")
    if strict:
        _verify_checksum(line1, 1, checksum1)

    second = _decode_line(line2, LINE2_LAYOUT)
    checksum2 = second.pop("checksum")
    catnum = second.pop("satellite_number")
    if strict:
        if catnum != first["satellite_number"]:
            raise CatalogNumberMismatchError(line1=first["satellite_number"], line2=catnum)
        _verify_checksum(line2, 2, checksum2)

    return OrbitalElements(name=name.strip(), **first, **second)


def parse(text: str, *, strict: Optional[bool] = None) -> OrbitalElements:
    """Decode a name line plus two data lines into :class:`OrbitalElements`.

    Raises a :class:`TLEParseError` subclass on the first field that fails;
    no partial record is ever returned. ``strict`` additionally verifies the
    checksum digit of both lines and that both lines carry the same catalog
    number. When ``strict`` is ``None`` the ``TLE_DECODER_STRICT`` setting
    decides.
    """

    if strict is None:
        strict = load_config().strict
    try:
        record = _assemble(text, strict)
    except TLEParseError as exc:
        LOGGER.debug("tle_rejected", extra={"kind": exc.kind.value, **exc.context()})
        raise
    LOGGER.debug(
        "tle_parsed",
        extra={"satellite_number": record.satellite_number, "tle_name": record.name},
    )
    return record


def parse_catalog(text: str, *, strict: Optional[bool] = None) -> List[OrbitalElements]:
    """Decode consecutive three-line sets; blank lines between sets are ignored."""

    lines = [ln for ln in _text_lines(text) if ln.strip()]
    remainder = len(lines) % 3
    if remainder:
        raise MalformedInputError(expected=len(lines) + 3 - remainder, actual=len(lines))

    records: List[OrbitalElements] = []
    for index in range(0, len(lines), 3):
        with log_context(catalog_index=index // 3):
            records.append(parse("\n".join(lines[index:index + 3]), strict=strict))
    return records


__all__ = [
    "checksum_ok",
    "compute_checksum",
    "extract_field",
    "parse",
    "parse_catalog",
    "split_lines",
]
