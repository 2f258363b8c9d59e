"""Shared dataclasses for random battle team validation."""

from .team import PokemonRecord, PokemonSet, ResolvedMember, Team
from .validation import ValidationCheck, ValidationResult, ValidationSummary

__all__ = [
    "PokemonRecord",
    "PokemonSet",
    "ResolvedMember",
    "Team",
    "ValidationCheck",
    "ValidationResult",
    "ValidationSummary",
]
