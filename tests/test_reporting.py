"""Tests for check grouping and text rendering."""

from __future__ import annotations

from randbats_validator import validate_team
from randbats_validator.models import PokemonRecord, ValidationCheck
from randbats_validator.reporting import cap_label, group_checks, humanize_result, type_from_check_id


def _check(check_id: str, label: str) -> ValidationCheck:
    return ValidationCheck.build(id=check_id, label=label, count=0, limit=1, group="other")


def test_group_checks_splits_caps_from_type_windows() -> None:
    result = validate_team(
        "gen9randombattle",
        pokemon=[PokemonRecord(name="Abomasnow"), PokemonRecord(name="Dondozo")],
    )

    grouped = group_checks(result)

    assert [check.id for check in grouped["caps"]] == [
        "species-clause",
        "tera-blast-users",
        "freeze-dry-weakness",
    ]
    assert [check.id for check in grouped["types"]] == [
        "type-count-water",
        "type-count-grass",
        "type-count-ice",
    ]
    assert len(grouped["weaknesses"]) == 18
    assert [check.id for check in grouped["double_weaknesses"]] == ["type-double-weak-fire"]


def test_cap_labels() -> None:
    assert cap_label(_check("species-clause", "Species Clause")) == "SC"
    assert cap_label(_check("freeze-dry-weakness", "Weak to Freeze-Dry")) == "FD"
    assert cap_label(_check("level-cap", "Level 100 Cap")) == "L100"
    assert cap_label(_check("tera-cap", "Tera Captains")) == "Tera"
    assert cap_label(_check("legends", "Max 2 restricted legends")) == "M2RL"


def test_type_from_check_id() -> None:
    assert type_from_check_id("type-double-weak-fire") == "Fire"
    assert type_from_check_id("type-count-fairy") == "Fairy"
    assert type_from_check_id("type-weak-shadow") is None
    assert type_from_check_id("species-clause") is None


def test_humanize_result_marks_failures() -> None:
    fire = [PokemonRecord(name=f"Mon{i}", types=("Fire",)) for i in range(3)]

    text = humanize_result(validate_team("gen9randombattle", pokemon=fire))
    inactive = humanize_result(validate_team("gen9ou", pokemon=fire))

    assert "[FAIL] Fire Type: 3/2" in text
    assert "Weak to Water: 3/3" in text
    assert "inactive" in inactive
