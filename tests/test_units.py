import pytest

from BakeryOPS.domain.types import Unit
from BakeryOPS.rules.units import convert, is_convertible


@pytest.mark.parametrize("unit", list(Unit))
def test_same_unit_is_identity(unit):
    assert convert(3.7, unit, unit) == 3.7


@pytest.mark.parametrize(
    "quantity, src, dst, expected",
    [
        (1, "kg", "g", 1000),
        (1000, "g", "kg", 1),
        (1, "l", "ml", 1000),
        (250, "ml", "l", 0.25),
        (1, "tbsp", "ml", 15),
        (1, "tsp", "ml", 5),
        (1, "cup", "ml", 240),
        (1, "cup", "l", 0.24),
        (2, "tbsp", "l", 0.03),
    ],
)
def test_supported_conversions(quantity, src, dst, expected):
    assert convert(quantity, src, dst) == pytest.approx(expected)


def test_cup_to_liters_is_exact():
    assert convert(1, Unit.CUP, Unit.L) == 0.24


@pytest.mark.parametrize(
    "src, dst",
    [("ml", "tbsp"), ("ml", "cup"), ("kg", "l"), ("g", "ml"), ("unit", "g"), ("tsp", "tbsp")],
)
def test_unsupported_pairs_fall_back_to_identity(src, dst):
    assert convert(1, src, dst) == 1
    assert convert(42.5, src, dst) == 42.5
    assert not is_convertible(src, dst)


def test_enum_and_string_units_are_interchangeable():
    assert convert(2, Unit.KG, "g") == convert(2, "kg", Unit.G) == 2000
