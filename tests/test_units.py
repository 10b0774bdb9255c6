from __future__ import annotations

import pytest

from chktiles.errors import DimensionError
from chktiles.units import (
    PX_PER_CM,
    PX_PER_FT,
    PX_PER_IN,
    PX_PER_M,
    PX_PER_MM,
    PX_PER_PC,
    PX_PER_PT,
    magnitude,
    unit_multiplier,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("8in", PX_PER_IN),
        ("80mm", PX_PER_MM),
        ("12pt", PX_PER_PT),
        ("3pc", PX_PER_PC),
        ("1ft", PX_PER_FT),
        ("2.5cm", PX_PER_CM),
        ("1m", PX_PER_M),
    ],
)
def test_recognized_suffixes(value: str, expected: float) -> None:
    assert unit_multiplier(value) == expected


@pytest.mark.parametrize("value", ["80", "80px", "80ex", "", "80%", "80MM"])
def test_other_suffixes_are_pixels(value: str) -> None:
    assert unit_multiplier(value) == 1.0


def test_mm_and_cm_are_not_read_as_metres() -> None:
    assert unit_multiplier("10mm") != PX_PER_M
    assert unit_multiplier("10cm") != PX_PER_M


def test_inch_constant() -> None:
    assert PX_PER_IN == 96.0
    assert PX_PER_FT == 96.0 * 12


def test_magnitude_strips_units() -> None:
    assert magnitude("80.5mm") == 80.5
    assert magnitude("100") == 100.0
    assert magnitude(" 64 px ") == 64.0


def test_magnitude_drops_sign() -> None:
    assert magnitude("-20") == 20.0


@pytest.mark.parametrize("value", ["", "px", "1.2.3", "."])
def test_magnitude_rejects_non_numeric(value: str) -> None:
    with pytest.raises(DimensionError) as excinfo:
        magnitude(value)
    assert excinfo.value.value == value


def test_em_is_read_as_metres() -> None:
    # Suffix matching is plain string matching, so "em" ends in "m".
    assert unit_multiplier("2em") == PX_PER_M
