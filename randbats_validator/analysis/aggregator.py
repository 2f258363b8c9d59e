"""Folds resolved roster members into per-clause counters."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from ..data import rules
from ..data.type_chart import ATTACK_TYPES
from ..models import ResolvedMember
from .weakness import WeaknessCalculator


@dataclass(slots=True)
class TeamCounters:
    """Counters for one validation call; thrown away once checks are built."""

    species: Counter = field(default_factory=Counter)
    tera_blast_users: int = 0
    type_counts: Counter = field(default_factory=Counter)
    weak_counts: Counter = field(default_factory=Counter)
    double_weak_counts: Counter = field(default_factory=Counter)
    freeze_dry_weak: int = 0

    @property
    def max_species_count(self) -> int:
        return max(self.species.values(), default=0)


class TeamAggregator:
    def __init__(self, calculator: WeaknessCalculator) -> None:
        self.calculator = calculator

    def aggregate(self, members: Iterable[ResolvedMember], *, is_monotype: bool) -> TeamCounters:
        counters = TeamCounters()
        for member in members:
            self._count_species(counters, member)
            if self._uses_tera_blast(member):
                counters.tera_blast_users += 1
            if not is_monotype and member.types:
                self._count_typing(counters, member)
        return counters

    @staticmethod
    def _count_species(counters: TeamCounters, member: ResolvedMember) -> None:
        key = member.base_species_id or member.species_id
        if key:
            counters.species[key] += 1

    @staticmethod
    def _uses_tera_blast(member: ResolvedMember) -> bool:
        return (
            member.species_id in rules.TERA_BLAST_SPECIES_IDS
            or member.base_species_id in rules.TERA_BLAST_SPECIES_IDS
            or rules.TERA_BLAST_MOVE_ID in member.move_ids
        )

    def _count_typing(self, counters: TeamCounters, member: ResolvedMember) -> None:
        types = member.types
        for type_name in set(types):
            counters.type_counts[type_name] += 1

        multipliers = {
            attack_type: self.calculator.multiplier(attack_type, types)
            for attack_type in ATTACK_TYPES
        }
        for attack_type, multiplier in multipliers.items():
            if multiplier > 1:
                counters.weak_counts[attack_type] += 1
            if multiplier >= 4:
                counters.double_weak_counts[attack_type] += 1

        fire_weak_ability = member.ability_id in rules.FIRE_WEAK_ABILITY_IDS
        # Typing that is already Fire-weak was counted above.
        if fire_weak_ability and multipliers["Fire"] <= 1:
            counters.weak_counts["Fire"] += 1

        if multipliers["Ice"] > 1 or rules.FREEZE_DRY_TYPE in types or fire_weak_ability:
            counters.freeze_dry_weak += 1
