"""Random battles team clause validation."""

from .analysis.validator import RandomBattlesValidator, validate_team
from .parsers import parse_team

__all__ = [
    "RandomBattlesValidator",
    "parse_team",
    "validate_team",
]
