"""FastAPI web server exposing random battles validation via REST API."""

from __future__ import annotations

from dataclasses import asdict
from typing import Dict

from fastapi import FastAPI, HTTPException, Query

from .analysis import WeaknessCalculator
from .data import StaticDex
from .parsers import parse_team
from .schemas import (
    SmogonTeamRequest,
    TypeMatchupResponse,
    ValidateTeamRequest,
    ValidationResponse,
)
from .services import LiveValidationService
from .utils import normalize_type_name

app = FastAPI(
    title="Random Battles Validator API",
    description="Live random battle team clause checks",
    version="0.1.0",
)

_service = LiveValidationService()
_calculator = WeaknessCalculator(StaticDex())


def _respond(session_id, result) -> ValidationResponse:
    stored = _service.store.get(session_id)
    return ValidationResponse(
        result=asdict(result),
        updated_at=stored.updated_at if stored else None,
    )


@app.post("/api/validate", response_model=ValidationResponse)
async def validate_team(request: ValidateTeamRequest) -> ValidationResponse:
    """Validate a roster of (possibly partial) Pokemon records."""
    try:
        records = request.to_records()
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=f"Invalid roster: {exc}")
    result = _service.refresh(
        request.session_id,
        format=request.format,
        gen=request.gen,
        pokemon=records,
        max_pokemon=request.max_team_size,
    )
    return _respond(request.session_id, result)


@app.post("/api/validate_smogon_team", response_model=ValidationResponse)
async def validate_smogon_team(request: SmogonTeamRequest) -> ValidationResponse:
    """Validate a pasted Showdown export."""
    try:
        team = parse_team(request.team_text, format_hint=request.format)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Failed to parse team: {exc}")
    result = _service.refresh(
        request.session_id,
        format=request.format,
        gen=request.gen,
        pokemon=team.to_records(),
        max_pokemon=request.max_team_size,
    )
    return _respond(request.session_id, result)


@app.get("/api/sessions/{session_id}", response_model=ValidationResponse)
async def get_session(session_id: str) -> ValidationResponse:
    stored = _service.store.get(session_id)
    if stored is None:
        raise HTTPException(status_code=404, detail=f"No validation stored for {session_id}")
    return ValidationResponse(result=asdict(stored.result), updated_at=stored.updated_at)


@app.delete("/api/sessions/{session_id}")
async def clear_session(session_id: str) -> Dict[str, bool]:
    existed = session_id in _service.store
    _service.store.clear(session_id)
    return {"cleared": existed}


@app.get("/api/calculate_type_matchup", response_model=TypeMatchupResponse)
async def calculate_type_matchup(
    attacker_type: str = Query(..., description="Attacking type"),
    defender_types: str = Query(..., description="One or two defending types, e.g. Water/Ground"),
) -> TypeMatchupResponse:
    """Return the effectiveness multiplier of an attacking type against a typing."""
    attack = normalize_type_name(attacker_type)
    defenders = [normalize_type_name(t) for t in defender_types.split("/") if t.strip()][:2]
    if not defenders:
        raise HTTPException(status_code=400, detail="At least one defending type is required")
    multiplier = _calculator.multiplier(attack, defenders)
    return TypeMatchupResponse(
        result=f"{attack} vs {'/'.join(defenders)} -> {multiplier}x",
        multiplier=multiplier,
    )


def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Entry point for running the web server."""
    import uvicorn

    from .config import Settings
    from .utils.logging_setup import setup_logging

    setup_logging(Settings.from_env().log_level)
    print(f"[randbats-web] Starting web server at http://{host}:{port}")
    print("[randbats-web] Press Ctrl+C to stop.")
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
