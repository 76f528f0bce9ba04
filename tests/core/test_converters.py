from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from tle_decoder.core.columns import FieldSpec, field
from tle_decoder.core.converters import (
    to_catalog_number,
    to_classification,
    to_digit,
    to_float,
    to_implied_decimal,
    to_implied_exponent,
    to_int,
    to_separator,
)
from tle_decoder.core.errors import ErrorKind, InvalidFieldValueError

DRAG = field("drag_term", 1)
NDDOT = field("second_derivative_mean_motion", 1)
NDOT = field("first_derivative_mean_motion", 1)
ECC = field("eccentricity", 2)
ELNUM = field("element_number", 1)
SATNUM = field("satellite_number", 1)
REVNUM = field("revolution_number", 2)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("00000-0", 0.0),
        (" 00000-0", 0.0),
        (" 00000+0", 0.0),
        ("25302-4", 0.000025302),
        (" 36258-4", 0.36258e-4),
        ("-36258-4", -0.36258e-4),
        ("-12345+1", -1.2345),
        (" 12345 1", 1.2345),
        ("123451", 1.2345),
        ("25302", 25.3),
        ("+11606-3", 0.11606e-3),
    ],
)
def test_implied_exponent(raw: str, expected: float) -> None:
    assert to_implied_exponent(raw, DRAG) == expected


@pytest.mark.parametrize("raw", ["", "        ", "2530a-4", "25302-45", "--2530-4", "2.5302-4"])
def test_implied_exponent_rejects(raw: str) -> None:
    with pytest.raises(InvalidFieldValueError) as info:
        to_implied_exponent(raw, NDDOT)
    assert info.value.field == "second_derivative_mean_motion"
    assert info.value.raw == raw
    assert info.value.kind is ErrorKind.INVALID_FIELD_VALUE


@given(
    st.booleans(),
    st.text(alphabet="0123456789", min_size=5, max_size=5),
    st.sampled_from(["-", "+", ""]),
    st.integers(min_value=0, max_value=9),
)
def test_implied_exponent_sign_handling(negative: bool, digits: str, exp_sign: str, exponent: int) -> None:
    raw = f"{'-' if negative else ''}{digits}{exp_sign}{exponent}"
    value = to_implied_exponent(raw, DRAG)
    magnitude = int(digits) * 10.0 ** (int(f"{exp_sign or '+'}{exponent}") - 5)
    assert value == pytest.approx(-magnitude if negative else magnitude, rel=1e-12, abs=0.0)
    if int(digits):
        assert (value < 0) is negative


def test_implied_decimal() -> None:
    assert to_implied_decimal("0004885", ECC) == 0.0004885
    assert to_implied_decimal("0000000", ECC) == 0.0
    assert to_implied_decimal("9999999", ECC) == 0.9999999
    assert to_implied_decimal(" 004885", ECC) == 0.0004885


@pytest.mark.parametrize("raw", ["-004885", "00.4885", "0004e85"])
def test_implied_decimal_rejects(raw: str) -> None:
    with pytest.raises(InvalidFieldValueError) as info:
        to_implied_decimal(raw, ECC)
    assert info.value.line_number == 2


@pytest.mark.parametrize(
    "raw, expected",
    [(" .00000950", 0.0000095), ("-.00002182", -0.00002182), ("+.00001000", 0.00001), (" 51.6443", 51.6443), ("7", 7.0)],
)
def test_float(raw: str, expected: float) -> None:
    assert to_float(raw, NDOT) == expected


@pytest.mark.parametrize("raw", ["", "   ", "1e-5", " .0000095-", "inf", "nan", "1_0.5", "1,5", "٣.5"])
def test_float_rejects(raw: str) -> None:
    with pytest.raises(InvalidFieldValueError):
        to_float(raw, NDOT)


def test_int_blank_handling() -> None:
    assert to_int("    ", ELNUM, allow_blank=True) == 0
    assert to_int(" 999", ELNUM, allow_blank=True) == 999
    with pytest.raises(InvalidFieldValueError):
        to_int("     ", REVNUM)


def test_int_rejects_signs_and_separators() -> None:
    for raw in ("-12", "+12", "1_000", "1 2"):
        with pytest.raises(InvalidFieldValueError):
            to_int(raw, REVNUM)


def test_checksum_digit() -> None:
    spec = field("checksum", 2)
    assert to_digit("7", spec) == 7
    for raw in (" ", "x", "-"):
        with pytest.raises(InvalidFieldValueError) as info:
            to_digit(raw, spec)
        assert info.value.field == "checksum"


def test_separator() -> None:
    spec = FieldSpec("separator_9", 1, 9, 1)
    assert to_separator(" ", spec) == " "
    with pytest.raises(InvalidFieldValueError) as info:
        to_separator("#", spec)
    assert (info.value.field, info.value.raw) == ("separator_9", "#")


@pytest.mark.parametrize(
    "raw, expected",
    [("25544", 25544), ("00005", 5), ("A0000", 100000), ("H9999", 179999), ("J0000", 180000), ("Z9999", 339999)],
)
def test_catalog_number(raw: str, expected: int) -> None:
    assert to_catalog_number(raw, SATNUM) == expected


@pytest.mark.parametrize("raw", ["I0000", "O1234", "a0001", "AB001", "     "])
def test_catalog_number_rejects(raw: str) -> None:
    with pytest.raises(InvalidFieldValueError):
        to_catalog_number(raw, SATNUM)


def test_classification() -> None:
    spec = field("classification", 1)
    assert to_classification("U", spec) == "U"
    with pytest.raises(InvalidFieldValueError):
        to_classification(" ", spec)
