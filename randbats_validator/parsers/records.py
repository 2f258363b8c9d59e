"""Builds PokemonRecord objects from loosely-shaped mappings (JSON, client state)."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple

from ..models import PokemonRecord

# Record field -> accepted keys, snake_case first, then Showdown client names.
FIELD_ALIASES = {
    "name": ("name",),
    "species": ("species",),
    "species_forme": ("species_forme", "speciesForme"),
    "transformed_forme": ("transformed_forme", "transformedForme"),
    "override_types": ("override_types", "dirty_types", "dirtyTypes"),
    "types": ("types",),
    "override_ability": ("override_ability", "dirty_ability", "dirtyAbility"),
    "ability": ("ability",),
    "base_ability": ("base_ability", "baseAbility"),
    "moves": ("moves",),
    "revealed_moves": ("revealed_moves", "revealedMoves"),
    "server_moves": ("server_moves", "serverMoves"),
}

SEQUENCE_FIELDS = {
    "override_types",
    "types",
    "moves",
    "revealed_moves",
    "server_moves",
}


def record_from_mapping(data: Mapping[str, Any]) -> PokemonRecord:
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a mapping for a Pokemon record, got {type(data).__name__}")

    values = {}
    for field_name, aliases in FIELD_ALIASES.items():
        raw = _first_present(data, aliases)
        if field_name in SEQUENCE_FIELDS:
            values[field_name] = _names(raw)
        else:
            values[field_name] = str(raw).strip() if raw else None
    return PokemonRecord(**values)


def records_from_list(entries: Iterable[Optional[Mapping[str, Any]]]) -> List[Optional[PokemonRecord]]:
    return [None if entry is None else record_from_mapping(entry) for entry in entries]


def _first_present(data: Mapping[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        value = data.get(key)
        if value:
            return value
    return None


def _names(raw: Any) -> Tuple[str, ...]:
    if not raw:
        return ()
    if isinstance(raw, str):
        raw = raw.split("/")
    names: List[str] = []
    for entry in raw:
        if isinstance(entry, Mapping):
            entry = entry.get("name") or entry.get("move")
        if entry and str(entry).strip():
            names.append(str(entry).strip())
    return tuple(names)
