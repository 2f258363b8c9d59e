"""Keeps a session's validation in step with the opponent's revealed roster."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from ..analysis import RandomBattlesValidator
from ..data import rules
from ..models import PokemonRecord, ValidationResult
from .session_store import ValidationSessionStore

_InputKey = Tuple[Optional[str], Optional[int], Tuple[Optional[PokemonRecord], ...], int]


class LiveValidationService:
    """Re-validates on roster changes and mirrors active results into the store."""

    def __init__(
        self,
        *,
        validator: Optional[RandomBattlesValidator] = None,
        store: Optional[ValidationSessionStore] = None,
        debug_logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.validator = validator if validator is not None else RandomBattlesValidator()
        self.store = store if store is not None else ValidationSessionStore()
        self._debug_logger = debug_logger
        self._last_inputs: Optional[_InputKey] = None
        self._last_result: Optional[ValidationResult] = None

    def _debug(self, message: str) -> None:
        if self._debug_logger:
            self._debug_logger(message)

    def refresh(
        self,
        session_id: Optional[str],
        *,
        format: Optional[str],
        gen: Optional[int] = None,
        pokemon: Sequence[Optional[PokemonRecord]] = (),
        max_pokemon: Optional[int] = None,
    ) -> ValidationResult:
        roster = list(pokemon or ())
        max_team_size = max(max_pokemon or 0, len(roster), rules.BASE_TEAM_SIZE)
        result = self._evaluate(format, gen, roster, max_team_size)

        if not session_id:
            return result

        if not result.active:
            self._debug(f"Clearing validation for session {session_id}")
            self.store.clear(session_id)
            return result

        self.store.set(session_id, result)
        self._debug(
            f"Stored validation for session {session_id}: "
            f"{result.summary.passed}/{result.summary.total} checks passing"
        )
        stored = self.store.get(session_id)
        return stored.result if stored else result

    def _evaluate(
        self,
        format: Optional[str],
        gen: Optional[int],
        roster: List[Optional[PokemonRecord]],
        max_team_size: int,
    ) -> ValidationResult:
        inputs: _InputKey = (format, gen, tuple(roster), max_team_size)
        if self._last_result is not None and inputs == self._last_inputs:
            self._debug("Roster unchanged; reusing previous validation")
            return self._last_result
        result = self.validator.validate(
            format,
            gen=gen,
            pokemon=roster,
            max_team_size=max_team_size,
        )
        self._last_inputs = inputs
        self._last_result = result
        return result
