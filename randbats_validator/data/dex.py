"""Species and type lookups used by the validator."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple

from poke_env.data import GenData

from ..config import Settings
from ..utils import normalize_type_name, to_id
from .type_chart import damage_taken

DEFAULT_GEN = 9

_FORMAT_GEN = re.compile(r"^gen(\d+)")


@dataclass(frozen=True, slots=True)
class SpeciesEntry:
    name: str
    base_species: str
    types: Tuple[str, ...] = ()


class TypeChartProvider(Protocol):
    """Anything that can answer species and type questions for a format."""

    def get_species(self, name: str) -> Optional[SpeciesEntry]:
        ...

    def get_type(self, type_name: str) -> Optional[Mapping[str, str]]:
        ...


def _index_species(species: Mapping[str, Mapping[str, Any]]) -> Dict[str, SpeciesEntry]:
    index: Dict[str, SpeciesEntry] = {}
    for key, data in species.items():
        name = str(data.get("name") or key)
        types = tuple(normalize_type_name(t) for t in data.get("types", ()) if t)
        base = str(data.get("baseSpecies") or name)
        index[to_id(key)] = SpeciesEntry(name=name, base_species=base, types=types)
    return index


@lru_cache(maxsize=None)
def showdown_species(gen: int = DEFAULT_GEN) -> Dict[str, SpeciesEntry]:
    """Showdown's pokedex for ``gen`` (as shipped with poke-env), keyed by species id.

    Cosmetic formes are keyed by their own id but resolve to the base entry.
    """

    return _index_species(GenData.from_gen(gen).pokedex)


def gen_for_format(format_id: str) -> int:
    match = _FORMAT_GEN.match(to_id(format_id))
    return int(match.group(1)) if match else DEFAULT_GEN


class StaticDex:
    """Offline provider backed by the bundled type chart and a species table.

    Without an explicit ``species`` mapping the table is Showdown's pokedex for
    ``gen``. Mappings follow the pokedex shape: ``name``, ``types`` and
    ``baseSpecies`` per entry. Species missing from the table are forwarded to
    ``fallback`` when one is configured.
    """

    def __init__(
        self,
        *,
        species: Optional[Mapping[str, Mapping[str, Any]]] = None,
        gen: int = DEFAULT_GEN,
        fallback: Optional[TypeChartProvider] = None,
    ) -> None:
        self.gen = gen
        self.fallback = fallback
        self._species = showdown_species(gen) if species is None else _index_species(species)

    def get_species(self, name: str) -> Optional[SpeciesEntry]:
        entry = self._species.get(to_id(name))
        if entry is None and self.fallback is not None:
            return self.fallback.get_species(name)
        return entry

    def get_type(self, type_name: str) -> Optional[Mapping[str, str]]:
        return damage_taken(type_name)


def get_dex_for_format(
    format: Optional[str],
    *,
    settings: Optional[Settings] = None,
) -> Optional[TypeChartProvider]:
    """Return the provider for ``format``, or ``None`` when no format is given.

    Providers are shared between calls with the same generation and settings,
    so the PokeAPI fallback keeps its session and caches.
    """

    format_id = to_id(format)
    if not format_id:
        return None
    return _build_dex(gen_for_format(format_id), settings or Settings.from_env())


@lru_cache(maxsize=32)
def _build_dex(gen: int, settings: Settings) -> StaticDex:
    fallback: Optional[TypeChartProvider] = None
    if settings.pokeapi_fallback:
        from ..clients.pokeapi import PokeAPIClient, PokeAPIDex

        fallback = PokeAPIDex(
            PokeAPIClient(
                base_url=settings.pokeapi_url,
                cache_ttl=settings.cache_ttl,
                timeout=settings.http_timeout,
            )
        )
    return StaticDex(gen=gen, fallback=fallback)
