"""Type effectiveness against a defender's resolved typing."""

from __future__ import annotations

from typing import Iterable

from ..data.dex import TypeChartProvider
from ..data.type_chart import MODIFIER_FACTORS, NEUTRAL


class WeaknessCalculator:
    def __init__(self, dex: TypeChartProvider) -> None:
        self.dex = dex

    def multiplier(self, attack_type: str, defender_types: Iterable[str]) -> float:
        """Compute the damage multiplier for ``attack_type`` hitting ``defender_types``.

        An immunity on either type pins the result at 0; the remaining types
        are still multiplied in, which cannot lift it back above 0.
        """

        multiplier = 1.0
        for defender in defender_types:
            if not defender:
                continue
            damage_taken = self.dex.get_type(defender) or {}
            code = damage_taken.get(attack_type, NEUTRAL)
            multiplier *= MODIFIER_FACTORS.get(code, 1.0)
        return multiplier

    def is_weak(self, attack_type: str, defender_types: Iterable[str]) -> bool:
        return self.multiplier(attack_type, defender_types) > 1

    def is_double_weak(self, attack_type: str, defender_types: Iterable[str]) -> bool:
        return self.multiplier(attack_type, defender_types) >= 4
