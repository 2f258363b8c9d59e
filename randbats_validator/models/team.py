"""Roster dataclasses consumed by the random battles validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class PokemonRecord:
    """Raw, possibly partial view of one revealed roster member.

    Every field is optional; a usable record carries at least one of the
    name fields. Types, ability and moves are whatever has been observed so
    far, with the ``override_*`` fields holding values a user set by hand.
    """

    name: Optional[str] = None
    species: Optional[str] = None
    species_forme: Optional[str] = None
    transformed_forme: Optional[str] = None
    override_types: Tuple[str, ...] = ()
    types: Tuple[str, ...] = ()
    override_ability: Optional[str] = None
    ability: Optional[str] = None
    base_ability: Optional[str] = None
    moves: Tuple[str, ...] = ()
    revealed_moves: Tuple[str, ...] = ()
    server_moves: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ResolvedMember:
    """Normalized identity, typing, ability and moves of a roster member."""

    species_id: str
    base_species_id: str
    types: Tuple[str, ...] = ()
    ability_id: str = ""
    move_ids: frozenset[str] = frozenset()


@dataclass(slots=True)
class PokemonSet:
    """Represents a single Smogon/Showdown export set."""

    name: str
    species: Optional[str] = None
    item: Optional[str] = None
    ability: Optional[str] = None
    tera_type: Optional[str] = None
    nature: Optional[str] = None
    evs: Dict[str, int] = field(default_factory=dict)
    ivs: Dict[str, int] = field(default_factory=dict)
    moves: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def to_record(self) -> PokemonRecord:
        return PokemonRecord(
            name=self.name,
            species=self.species,
            ability=self.ability,
            moves=tuple(self.moves),
        )


@dataclass(slots=True)
class Team:
    """Collection of Pokemon sets forming a team."""

    format: str = "gen9randombattle"
    name: Optional[str] = None
    pokemon: List[PokemonSet] = field(default_factory=list)

    def add_pokemon(self, pokemon: PokemonSet) -> None:
        self.pokemon.append(pokemon)

    def is_empty(self) -> bool:
        return not self.pokemon

    def to_records(self) -> List[PokemonRecord]:
        return [pokemon.to_record() for pokemon in self.pokemon]
