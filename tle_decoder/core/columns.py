"""Fixed column layout of the two TLE data lines.

Columns are 1-indexed and inclusive, as printed in the NORAD/CelesTrak
format description. ``FieldSpec.slice`` gives the matching zero-based slice.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

LINE_LENGTH = 69


@dataclass(frozen=True)
class FieldSpec:
    name: str
    line_number: int
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length - 1

    @property
    def slice(self) -> slice:
        return slice(self.start - 1, self.end)


LINE1_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("satellite_number", 1, 3, 5),
    FieldSpec("classification", 1, 8, 1),
    FieldSpec("international_designator", 1, 10, 8),
    FieldSpec("epoch", 1, 19, 14),
    FieldSpec("first_derivative_mean_motion", 1, 34, 10),
    FieldSpec("second_derivative_mean_motion", 1, 45, 8),
    FieldSpec("drag_term", 1, 54, 8),
    FieldSpec("ephemeris_type", 1, 63, 1),
    FieldSpec("element_number", 1, 65, 4),
)

LINE2_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("inclination", 2, 9, 8),
    FieldSpec("right_ascension", 2, 18, 8),
    FieldSpec("eccentricity", 2, 27, 7),
    FieldSpec("argument_of_perigee", 2, 35, 8),
    FieldSpec("mean_anomaly", 2, 44, 8),
    FieldSpec("mean_motion", 2, 53, 11),
    FieldSpec("revolution_number", 2, 64, 5),
)

LINE2_SATELLITE_NUMBER = FieldSpec("satellite_number", 2, 3, 5)
CHECKSUMS: Dict[int, FieldSpec] = {
    1: FieldSpec("checksum", 1, LINE_LENGTH, 1),
    2: FieldSpec("checksum", 2, LINE_LENGTH, 1),
}

LINE1_SEPARATORS: Tuple[FieldSpec, ...] = tuple(
    FieldSpec(f"separator_{column}", 1, column, 1) for column in (2, 9, 18, 33, 44, 53, 62, 64)
)
LINE2_SEPARATORS: Tuple[FieldSpec, ...] = tuple(
    FieldSpec(f"separator_{column}", 2, column, 1) for column in (2, 8, 17, 26, 34, 43, 52)
)

# Columns 2-69 of each data line in order; column 1 is the line marker.
LINE1_LAYOUT: Tuple[FieldSpec, ...] = tuple(
    sorted(LINE1_FIELDS + LINE1_SEPARATORS + (CHECKSUMS[1],), key=lambda spec: spec.start)
)
LINE2_LAYOUT: Tuple[FieldSpec, ...] = tuple(
    sorted(
        LINE2_FIELDS + LINE2_SEPARATORS + (LINE2_SATELLITE_NUMBER, CHECKSUMS[2]),
        key=lambda spec: spec.start,
    )
)

_BY_KEY: Dict[Tuple[str, int], FieldSpec] = {
    (spec.name, spec.line_number): spec
    for spec in LINE1_LAYOUT + LINE2_LAYOUT
}


def field(name: str, line_number: int) -> FieldSpec:
    """Return the column spec for ``name`` on data line ``line_number``."""

    try:
        return _BY_KEY[(name, line_number)]
    except KeyError as exc:
        raise KeyError(f"no TLE field {name!r} on line {line_number}") from exc


__all__ = [
    "LINE_LENGTH",
    "FieldSpec",
    "LINE1_FIELDS",
    "LINE2_FIELDS",
    "LINE2_SATELLITE_NUMBER",
    "CHECKSUMS",
    "LINE1_SEPARATORS",
    "LINE2_SEPARATORS",
    "LINE1_LAYOUT",
    "LINE2_LAYOUT",
    "field",
]
