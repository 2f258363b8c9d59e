"""Builds ordered pass/fail checks from aggregated counters."""

from __future__ import annotations

from typing import List

from ..data import rules
from ..data.type_chart import ATTACK_TYPES
from ..models import ValidationCheck
from ..utils import to_id
from .aggregator import TeamCounters


def team_size_for(max_team_size: int | None, roster_length: int) -> int:
    return max(max_team_size or 0, roster_length, rules.BASE_TEAM_SIZE)


def limit_factor_for(team_size: int) -> int:
    # Round half up: 9 Pokemon scale limits by 2, 15 by 3.
    return max(1, int(team_size / rules.BASE_TEAM_SIZE + 0.5))


class CheckEvaluator:
    def evaluate(
        self,
        counters: TeamCounters,
        *,
        limit_factor: int,
        is_monotype: bool,
    ) -> List[ValidationCheck]:
        checks = [
            ValidationCheck.build(
                id="species-clause",
                label="Species Clause",
                count=counters.max_species_count,
                limit=rules.SPECIES_LIMIT,
                group=rules.GROUP_SPECIES,
            ),
            ValidationCheck.build(
                id="tera-blast-users",
                label="Tera Blast Users",
                count=counters.tera_blast_users,
                limit=rules.TERA_BLAST_LIMIT,
                group=rules.GROUP_TERA_BLAST,
            ),
        ]
        if is_monotype:
            return checks

        type_limit = rules.TYPE_COUNT_BASE_LIMIT * limit_factor
        weak_limit = rules.WEAKNESS_BASE_LIMIT * limit_factor
        double_weak_limit = rules.DOUBLE_WEAKNESS_BASE_LIMIT * limit_factor
        freeze_dry_limit = rules.FREEZE_DRY_BASE_LIMIT * limit_factor

        for type_name in ATTACK_TYPES:
            count = counters.type_counts[type_name]
            if count > 0:
                checks.append(
                    ValidationCheck.build(
                        id=f"type-count-{to_id(type_name)}",
                        label=f"{type_name} Type",
                        count=count,
                        limit=type_limit,
                        group=rules.GROUP_TYPE_COUNT,
                    )
                )

        for type_name in ATTACK_TYPES:
            checks.append(
                ValidationCheck.build(
                    id=f"type-weak-{to_id(type_name)}",
                    label=f"Weak to {type_name}",
                    count=counters.weak_counts[type_name],
                    limit=weak_limit,
                    group=rules.GROUP_TYPE_WEAKNESS,
                )
            )

        for type_name in ATTACK_TYPES:
            count = counters.double_weak_counts[type_name]
            if count > 0:
                checks.append(
                    ValidationCheck.build(
                        id=f"type-double-weak-{to_id(type_name)}",
                        label=f"Double weak to {type_name}",
                        count=count,
                        limit=double_weak_limit,
                        group=rules.GROUP_TYPE_DOUBLE_WEAKNESS,
                    )
                )

        checks.append(
            ValidationCheck.build(
                id="freeze-dry-weakness",
                label="Weak to Freeze-Dry",
                count=counters.freeze_dry_weak,
                limit=freeze_dry_limit,
                group=rules.GROUP_FREEZE_DRY,
            )
        )
        return checks
