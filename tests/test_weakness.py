"""Tests for type effectiveness against resolved typings."""

from __future__ import annotations

from randbats_validator.analysis import WeaknessCalculator
from randbats_validator.data import StaticDex


class FakeDex:
    def __init__(self, types):
        self._types = types

    def get_species(self, name: str):
        return None

    def get_type(self, type_name: str):
        return self._types.get(type_name)


def test_immunity_wins_over_weakness_in_either_order() -> None:
    calc = WeaknessCalculator(StaticDex())

    assert calc.multiplier("Electric", ["Water", "Ground"]) == 0
    assert calc.multiplier("Electric", ["Ground", "Water"]) == 0
    assert not calc.is_weak("Electric", ["Water", "Ground"])


def test_double_weakness_and_resistances() -> None:
    calc = WeaknessCalculator(StaticDex())

    assert calc.multiplier("Fire", ["Grass", "Ice"]) == 4
    assert calc.is_double_weak("Fire", ["Bug", "Steel"])
    assert calc.multiplier("Fire", ["Water", "Dragon"]) == 0.25
    assert calc.multiplier("Ground", ["Fire"]) == 2
    assert calc.multiplier("Normal", ["Fire"]) == 1


def test_unknown_types_and_codes_are_neutral() -> None:
    dex = FakeDex({"Odd": {"Fire": "sideways"}, "Grass": {"Fire": "weak"}})
    calc = WeaknessCalculator(dex)

    assert calc.multiplier("Fire", []) == 1
    assert calc.multiplier("Fire", ["Stellar"]) == 1
    assert calc.multiplier("Fire", ["Odd"]) == 1
    assert calc.multiplier("Fire", ["Grass", "Stellar"]) == 2
    assert calc.multiplier("Water", ["Grass"]) == 1
