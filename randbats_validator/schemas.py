"""Pydantic request/response models for the HTTP and MCP surfaces."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .models import PokemonRecord
from .parsers import records_from_list


class ValidateTeamRequest(BaseModel):
    """Roster of partially revealed records to validate."""

    format: str = Field(..., description="Format id, e.g. gen9randombattle")
    gen: Optional[int] = Field(None, description="Generation number")
    max_team_size: Optional[int] = Field(None, ge=0, description="Declared team size")
    session_id: Optional[str] = Field(None, description="Battle/session id to store the result under")
    pokemon: List[Optional[Dict[str, Any]]] = Field(default_factory=list)

    def to_records(self) -> List[Optional[PokemonRecord]]:
        return records_from_list(self.pokemon)


class SmogonTeamRequest(BaseModel):
    """Showdown export text to validate."""

    team_text: str
    format: str = "gen9randombattle"
    gen: Optional[int] = None
    max_team_size: Optional[int] = Field(None, ge=0)
    session_id: Optional[str] = None


class ValidationResponse(BaseModel):
    result: Dict[str, Any]
    updated_at: Optional[float] = None


class TypeMatchupResponse(BaseModel):
    result: str
    multiplier: float
