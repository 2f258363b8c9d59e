"""Random battle clause evaluation."""

from .aggregator import TeamAggregator, TeamCounters
from .checks import CheckEvaluator, limit_factor_for, team_size_for
from .resolver import PokemonRecordResolver
from .validator import RandomBattlesValidator, validate_team
from .weakness import WeaknessCalculator

__all__ = [
    "CheckEvaluator",
    "PokemonRecordResolver",
    "RandomBattlesValidator",
    "TeamAggregator",
    "TeamCounters",
    "WeaknessCalculator",
    "limit_factor_for",
    "team_size_for",
    "validate_team",
]
