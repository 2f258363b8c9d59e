"""Static defensive type chart (Gen 6 onward)."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..utils import normalize_type_name

NEUTRAL = "neutral"
WEAK = "weak"
RESIST = "resist"
IMMUNE = "immune"

MODIFIER_FACTORS: Dict[str, float] = {
    NEUTRAL: 1.0,
    WEAK: 2.0,
    RESIST: 0.5,
    IMMUNE: 0.0,
}

# Catalog order used for every per-type check.
ATTACK_TYPES: Tuple[str, ...] = (
    "Normal",
    "Fighting",
    "Flying",
    "Poison",
    "Ground",
    "Rock",
    "Bug",
    "Ghost",
    "Steel",
    "Fire",
    "Water",
    "Grass",
    "Electric",
    "Psychic",
    "Ice",
    "Dragon",
    "Dark",
    "Fairy",
)

# Keyed by defending type: which attack types it is weak to, resists, or is immune to.
DAMAGE_TAKEN: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "Normal": {WEAK: ("Fighting",), RESIST: (), IMMUNE: ("Ghost",)},
    "Fire": {
        WEAK: ("Water", "Ground", "Rock"),
        RESIST: ("Fire", "Grass", "Ice", "Bug", "Steel", "Fairy"),
        IMMUNE: (),
    },
    "Water": {
        WEAK: ("Electric", "Grass"),
        RESIST: ("Fire", "Water", "Ice", "Steel"),
        IMMUNE: (),
    },
    "Electric": {
        WEAK: ("Ground",),
        RESIST: ("Electric", "Flying", "Steel"),
        IMMUNE: (),
    },
    "Grass": {
        WEAK: ("Fire", "Ice", "Poison", "Flying", "Bug"),
        RESIST: ("Water", "Electric", "Grass", "Ground"),
        IMMUNE: (),
    },
    "Ice": {
        WEAK: ("Fire", "Fighting", "Rock", "Steel"),
        RESIST: ("Ice",),
        IMMUNE: (),
    },
    "Fighting": {
        WEAK: ("Flying", "Psychic", "Fairy"),
        RESIST: ("Bug", "Rock", "Dark"),
        IMMUNE: (),
    },
    "Poison": {
        WEAK: ("Ground", "Psychic"),
        RESIST: ("Fighting", "Poison", "Bug", "Grass", "Fairy"),
        IMMUNE: (),
    },
    "Ground": {
        WEAK: ("Water", "Grass", "Ice"),
        RESIST: ("Poison", "Rock"),
        IMMUNE: ("Electric",),
    },
    "Flying": {
        WEAK: ("Electric", "Ice", "Rock"),
        RESIST: ("Grass", "Fighting", "Bug"),
        IMMUNE: ("Ground",),
    },
    "Psychic": {
        WEAK: ("Bug", "Ghost", "Dark"),
        RESIST: ("Fighting", "Psychic"),
        IMMUNE: (),
    },
    "Bug": {
        WEAK: ("Fire", "Flying", "Rock"),
        RESIST: ("Grass", "Fighting", "Ground"),
        IMMUNE: (),
    },
    "Rock": {
        WEAK: ("Water", "Grass", "Fighting", "Ground", "Steel"),
        RESIST: ("Normal", "Fire", "Poison", "Flying"),
        IMMUNE: (),
    },
    "Ghost": {
        WEAK: ("Ghost", "Dark"),
        RESIST: ("Poison", "Bug"),
        IMMUNE: ("Normal", "Fighting"),
    },
    "Dragon": {
        WEAK: ("Ice", "Dragon", "Fairy"),
        RESIST: ("Fire", "Water", "Electric", "Grass"),
        IMMUNE: (),
    },
    "Dark": {
        WEAK: ("Fighting", "Bug", "Fairy"),
        RESIST: ("Ghost", "Dark"),
        IMMUNE: ("Psychic",),
    },
    "Steel": {
        WEAK: ("Fire", "Fighting", "Ground"),
        RESIST: (
            "Normal",
            "Grass",
            "Ice",
            "Flying",
            "Psychic",
            "Bug",
            "Rock",
            "Dragon",
            "Steel",
            "Fairy",
        ),
        IMMUNE: ("Poison",),
    },
    "Fairy": {
        WEAK: ("Poison", "Steel"),
        RESIST: ("Fighting", "Bug", "Dark"),
        IMMUNE: ("Dragon",),
    },
}


def damage_taken(defender_type: str) -> Optional[Dict[str, str]]:
    """Modifier code for every attack type hitting ``defender_type``.

    Returns ``None`` for unknown types. Attack types the defender has no
    special relation to map to ``"neutral"``.
    """

    relations = DAMAGE_TAKEN.get(normalize_type_name(defender_type))
    if relations is None:
        return None
    codes = {attack: NEUTRAL for attack in ATTACK_TYPES}
    for code in (WEAK, RESIST, IMMUNE):
        for attack in relations[code]:
            codes[attack] = code
    return codes
