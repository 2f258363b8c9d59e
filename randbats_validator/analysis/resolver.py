"""Turns raw roster records into normalized members."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..data.dex import SpeciesEntry, TypeChartProvider
from ..models import PokemonRecord, ResolvedMember
from ..utils import normalize_type_name, to_id

logger = logging.getLogger(__name__)


class PokemonRecordResolver:
    """Resolves identity, typing, ability and moves for one roster member."""

    def __init__(self, dex: TypeChartProvider) -> None:
        self.dex = dex

    def resolve(self, record: PokemonRecord) -> ResolvedMember:
        species_name = self.species_name(record)
        species = self._lookup(species_name)
        species_id, base_species_id = self.species_ids(species_name, species)
        types = self.resolve_types(record, species)
        if species is None and not types:
            logger.warning("Unknown species %r has no typing; skipped by type checks", species_name)
        return ResolvedMember(
            species_id=species_id,
            base_species_id=base_species_id,
            types=types,
            ability_id=self.ability_id(record),
            move_ids=self.move_ids(record),
        )

    @staticmethod
    def species_name(record: PokemonRecord) -> str:
        return (
            record.transformed_forme
            or record.species_forme
            or record.species
            or record.name
            or ""
        )

    @staticmethod
    def species_ids(species_name: str, species: Optional[SpeciesEntry]) -> Tuple[str, str]:
        if species is None:
            species_id = to_id(species_name)
            return species_id, species_id
        species_id = to_id(species.name or species_name)
        base_species_id = to_id(species.base_species or species.name or species_name)
        return species_id, base_species_id or species_id

    @staticmethod
    def resolve_types(record: PokemonRecord, species: Optional[SpeciesEntry]) -> Tuple[str, ...]:
        for candidate in (record.override_types, record.types):
            types = _clean_types(candidate)
            if types:
                return types
        if species is None:
            return ()
        return _clean_types(species.types)

    @staticmethod
    def ability_id(record: PokemonRecord) -> str:
        return to_id(record.override_ability or record.ability or record.base_ability or "")

    @staticmethod
    def move_ids(record: PokemonRecord) -> frozenset[str]:
        moves = (*record.moves, *record.revealed_moves, *record.server_moves)
        return frozenset(move_id for move_id in (to_id(move) for move in moves) if move_id)

    def _lookup(self, species_name: str) -> Optional[SpeciesEntry]:
        if not species_name:
            return None
        return self.dex.get_species(species_name)


def _clean_types(types: Optional[Iterable[str]]) -> Tuple[str, ...]:
    cleaned: List[str] = []
    for type_name in types or ():
        normalized = normalize_type_name(type_name)
        if normalized and normalized not in cleaned:
            cleaned.append(normalized)
    return tuple(cleaned[:2])
