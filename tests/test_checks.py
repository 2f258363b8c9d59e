"""Tests for size scaling and check emission."""

from __future__ import annotations

from collections import Counter

import pytest

from randbats_validator.analysis import CheckEvaluator, TeamCounters, limit_factor_for, team_size_for
from randbats_validator.data import ATTACK_TYPES


@pytest.mark.parametrize(
    ("team_size", "factor"),
    [(1, 1), (6, 1), (8, 1), (9, 2), (11, 2), (12, 2), (15, 3), (24, 4)],
)
def test_limit_factor_rounds_half_up(team_size: int, factor: int) -> None:
    assert limit_factor_for(team_size) == factor


def test_team_size_never_drops_below_six() -> None:
    assert team_size_for(None, 3) == 6
    assert team_size_for(0, 0) == 6
    assert team_size_for(8, 3) == 8
    assert team_size_for(None, 12) == 12


def test_empty_counters_emit_dense_weakness_checks_only() -> None:
    checks = CheckEvaluator().evaluate(TeamCounters(), limit_factor=1, is_monotype=False)

    ids = [check.id for check in checks]
    assert ids[:2] == ["species-clause", "tera-blast-users"]
    assert ids[2:-1] == [f"type-weak-{t.lower()}" for t in ATTACK_TYPES]
    assert ids[-1] == "freeze-dry-weakness"
    assert all(check.ok for check in checks)


def test_emission_order_and_scaled_limits() -> None:
    counters = TeamCounters(
        species=Counter({"rotom": 2}),
        tera_blast_users=1,
        type_counts=Counter({"Water": 1, "Fire": 5}),
        weak_counts=Counter({"Ground": 7}),
        double_weak_counts=Counter({"Ground": 1}),
        freeze_dry_weak=8,
    )

    checks = CheckEvaluator().evaluate(counters, limit_factor=2, is_monotype=False)
    by_id = {check.id: check for check in checks}
    ids = [check.id for check in checks]

    assert ids[:4] == ["species-clause", "tera-blast-users", "type-count-fire", "type-count-water"]
    assert ids[-2:] == ["type-double-weak-ground", "freeze-dry-weakness"]
    assert len(checks) == 2 + 2 + 18 + 1 + 1

    assert (by_id["species-clause"].limit, by_id["species-clause"].ok) == (1, False)
    assert by_id["tera-blast-users"].limit == 1
    assert (by_id["type-count-fire"].limit, by_id["type-count-fire"].ok) == (4, False)
    assert by_id["type-count-fire"].label == "Fire Type"
    assert (by_id["type-weak-ground"].limit, by_id["type-weak-ground"].ok) == (6, False)
    assert by_id["type-weak-ground"].label == "Weak to Ground"
    assert by_id["type-double-weak-ground"].limit == 2
    assert by_id["type-double-weak-ground"].label == "Double weak to Ground"
    assert (by_id["freeze-dry-weakness"].limit, by_id["freeze-dry-weakness"].ok) == (8, True)
    assert all(check.ok == (check.count <= check.limit) for check in checks)


def test_monotype_emits_identity_checks_only() -> None:
    counters = TeamCounters(type_counts=Counter({"Fire": 6}), freeze_dry_weak=6)

    checks = CheckEvaluator().evaluate(counters, limit_factor=1, is_monotype=True)

    assert [check.group for check in checks] == ["species", "tera-blast"]
