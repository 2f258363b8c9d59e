"""Tests for roster record resolution."""

from __future__ import annotations

from randbats_validator.analysis import PokemonRecordResolver
from randbats_validator.data import StaticDex
from randbats_validator.models import PokemonRecord


def _resolve(record: PokemonRecord):
    return PokemonRecordResolver(StaticDex()).resolve(record)


def test_transformed_forme_takes_precedence_and_collapses_to_base_species() -> None:
    member = _resolve(
        PokemonRecord(name="Rotom", species_forme="Rotom-Wash", transformed_forme="Rotom-Heat")
    )

    assert member.species_id == "rotomheat"
    assert member.base_species_id == "rotom"
    assert member.types == ("Electric", "Fire")


def test_unknown_species_falls_back_to_its_own_id() -> None:
    member = _resolve(PokemonRecord(name="Not A Mon"))

    assert member.species_id == "notamon"
    assert member.base_species_id == "notamon"
    assert member.types == ()


def test_type_precedence_and_cleanup() -> None:
    overridden = _resolve(
        PokemonRecord(name="Charizard", override_types=("water",), types=("Fire",))
    )
    known = _resolve(PokemonRecord(name="Charizard", override_types=("",), types=("fire",)))
    looked_up = _resolve(PokemonRecord(name="Charizard"))
    messy = _resolve(PokemonRecord(name="Mew", types=("Fire", "fire", "Water", "Grass")))

    assert overridden.types == ("Water",)
    assert known.types == ("Fire",)
    assert looked_up.types == ("Fire", "Flying")
    assert messy.types == ("Fire", "Water")


def test_ability_precedence() -> None:
    assert _resolve(
        PokemonRecord(name="Heliolisk", override_ability="Dry Skin", ability="Sand Veil")
    ).ability_id == "dryskin"
    assert _resolve(PokemonRecord(name="Bewear", base_ability="Fluffy")).ability_id == "fluffy"
    assert _resolve(PokemonRecord(name="Bewear")).ability_id == ""


def test_moves_are_merged_from_every_source() -> None:
    member = _resolve(
        PokemonRecord(
            name="Pikachu",
            moves=("Tera Blast",),
            revealed_moves=("Swords Dance", "Tera Blast"),
            server_moves=("U-turn", ""),
        )
    )

    assert member.move_ids == {"terablast", "swordsdance", "uturn"}
