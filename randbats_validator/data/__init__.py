"""Bundled type chart, Showdown species data and clause constants."""

from .dex import (
    SpeciesEntry,
    StaticDex,
    TypeChartProvider,
    gen_for_format,
    get_dex_for_format,
    showdown_species,
)
from .type_chart import ATTACK_TYPES, damage_taken

__all__ = [
    "ATTACK_TYPES",
    "SpeciesEntry",
    "StaticDex",
    "TypeChartProvider",
    "damage_taken",
    "gen_for_format",
    "get_dex_for_format",
    "showdown_species",
]
