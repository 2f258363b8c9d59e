"""Parser for Smogon/Showdown team export text."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from ..models import PokemonSet, Team

_GENDER_SUFFIX = re.compile(r"\s*\((?:M|F)\)\s*$")
_NICKNAMED = re.compile(r"^(?P<nickname>.+?)\s*\((?P<species>[^()]+)\)$")
_STAT_NAMES = {
    "HP": "HP",
    "ATK": "Atk",
    "DEF": "Def",
    "SPA": "SpA",
    "SPD": "SpD",
    "SPE": "Spe",
}


def parse_team(
    raw_text: str, *, name: str | None = None, format_hint: str = "gen9randombattle"
) -> Team:
    """Parse a Showdown team export into a Team object.

    Random battle exports add ``Level:`` lines and usually omit EVs; both
    shapes parse the same way so pasted teambuilder text works too.
    """

    cleaned = raw_text.strip()
    if not cleaned:
        raise ValueError("Team text is empty")

    team = Team(format=format_hint, name=name)
    for chunk in re.split(r"\n\s*\n", cleaned):
        if chunk.strip():
            team.add_pokemon(_parse_entry(chunk))
    return team


def _parse_entry(chunk: str) -> PokemonSet:
    lines = [line.strip() for line in chunk.splitlines() if line.strip()]
    name, species, item = _parse_header(lines[0])
    pokemon = PokemonSet(name=name, species=species, item=item)

    for line in lines[1:]:
        key, _, value = line.partition(":")
        value = value.strip()
        if line.startswith("-"):
            move = line.lstrip("-~ ").strip()
            if move:
                pokemon.moves.append(move)
        elif key == "Ability":
            pokemon.ability = value
        elif key == "Tera Type":
            pokemon.tera_type = value
        elif key == "EVs":
            pokemon.evs = _parse_stat_spread(value)
        elif key == "IVs":
            pokemon.ivs = _parse_stat_spread(value)
        elif line.endswith(" Nature"):
            pokemon.nature = line[: -len(" Nature")].strip()
        else:
            pokemon.notes.append(line)

    return pokemon


def _parse_header(line: str) -> tuple[str, str, Optional[str]]:
    label, _, item = line.partition("@")
    label = _GENDER_SUFFIX.sub("", label.strip())
    match = _NICKNAMED.match(label)
    if match:
        return match.group("nickname"), match.group("species").strip(), item.strip() or None
    return label, label, item.strip() or None


def _parse_stat_spread(spread: str) -> Dict[str, int]:
    stats: Dict[str, int] = {}
    for raw in spread.split("/"):
        parts: List[str] = raw.split()
        if len(parts) < 2 or not parts[0].isdigit():
            continue
        stat = _STAT_NAMES.get(parts[1].upper().replace(".", ""))
        if stat:
            stats[stat] = int(parts[0])
    return stats
