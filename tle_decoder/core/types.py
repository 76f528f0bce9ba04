"""Record type produced by the decoder."""

from __future__ import annotations

import dataclasses
import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidFieldValueError


@dataclass(frozen=True)
class OrbitalElements:
    """Orbital elements decoded from one name line and two data lines.

    Angles are in degrees, ``mean_motion`` in revolutions per day and
    ``epoch`` is the raw ``YYDDD.DDDDDDDD`` text from line 1.
    """

    name: str
    satellite_number: int
    classification: str
    international_designator: str
    epoch: str
    first_derivative_mean_motion: float
    second_derivative_mean_motion: float
    drag_term: float
    ephemeris_type: int
    element_number: int
    inclination: float
    right_ascension: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float
    revolution_number: int

    @property
    def epoch_datetime(self) -> dt.datetime:
        """The epoch as a timezone-aware UTC datetime (years 57-99 are 19xx).

        Raises :class:`InvalidFieldValueError` when the raw epoch text is not
        ``YYDDD.DDDDDDDD``.
        """

        try:
            year2 = int(self.epoch[:2])
            doy = float(self.epoch[2:])
            day_int = int(doy)
        except (ValueError, OverflowError) as exc:
            raise InvalidFieldValueError("epoch", 1, self.epoch) from exc
        if not self.epoch[:2].isdigit() or not 1 <= day_int <= 367:
            raise InvalidFieldValueError("epoch", 1, self.epoch)
        year = 1900 + year2 if year2 >= 57 else 2000 + year2
        frac = doy - day_int
        base = dt.datetime(year, 1, 1, tzinfo=dt.timezone.utc) + dt.timedelta(days=day_int - 1)
        return base + dt.timedelta(seconds=frac * 86400.0)

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


__all__ = ["OrbitalElements"]
