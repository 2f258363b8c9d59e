"""Latest validation result per battle session."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Union

from ..models import ValidationResult


@dataclass(frozen=True, slots=True)
class StoredValidation:
    result: ValidationResult
    updated_at: float


class ValidationSessionStore:
    """In-memory map of session id -> last stored validation."""

    def __init__(self, *, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._entries: Dict[str, StoredValidation] = {}

    def set(self, session_id: Optional[str], result: ValidationResult) -> Optional[StoredValidation]:
        if not session_id:
            return None
        entry = StoredValidation(result=result, updated_at=self._clock())
        self._entries[session_id] = entry
        return entry

    def clear(self, session_ids: Union[str, Iterable[Optional[str]], None]) -> None:
        if session_ids is None:
            return
        if isinstance(session_ids, str):
            session_ids = [session_ids]
        for session_id in session_ids:
            if session_id:
                self._entries.pop(session_id, None)

    def get(self, session_id: Optional[str]) -> Optional[StoredValidation]:
        if not session_id:
            return None
        return self._entries.get(session_id)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
