"""FastMCP server exposing random battles validation tools."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated, Any, Dict, List, Optional

from fastmcp import FastMCP

from .analysis import RandomBattlesValidator, WeaknessCalculator
from .data import StaticDex
from .parsers import parse_team, records_from_list
from .utils import normalize_type_name

app = FastMCP("randbats-validator", version="0.1.0")
_validator = RandomBattlesValidator()
_calculator = WeaknessCalculator(StaticDex())


@app.tool()
def validate_random_battle_team(
    format: Annotated[str, "Format id (e.g. 'gen9randombattle')"],
    pokemon: Annotated[List[Optional[Dict[str, Any]]], "Revealed Pokemon records"],
    gen: Annotated[Optional[int], "Generation number"] = None,
    max_team_size: Annotated[Optional[int], "Declared team size"] = None,
) -> Dict[str, Any]:
    """Check a revealed roster against the random battle team clauses."""

    try:
        records = records_from_list(pokemon)
    except TypeError as exc:
        return {"error": f"Invalid roster: {exc}"}
    result = _validator.validate(format, gen=gen, pokemon=records, max_team_size=max_team_size)
    return asdict(result)


@app.tool()
def validate_smogon_team(
    team_text: Annotated[str, "Smogon/Showdown export text"],
    format: Annotated[str, "Format id"] = "gen9randombattle",
) -> Dict[str, Any]:
    """Parse a Showdown export and check it against the random battle clauses."""

    try:
        team = parse_team(team_text, format_hint=format)
    except ValueError as exc:
        return {"error": f"Failed to parse team: {exc}"}
    result = _validator.validate(format, pokemon=team.to_records())
    return asdict(result)


@app.tool()
def calculate_type_matchup(
    attacker_type: Annotated[str, "Attacking type"],
    defender_types: Annotated[str, "One or two defending types, e.g. 'Water/Ground'"],
) -> str:
    """Return the effectiveness multiplier of an attacking type against a typing."""

    attack = normalize_type_name(attacker_type)
    defenders = [normalize_type_name(t) for t in defender_types.split("/") if t.strip()][:2]
    if not defenders:
        return "Error: at least one defending type is required"
    multiplier = _calculator.multiplier(attack, defenders)
    return f"{attack} vs {'/'.join(defenders)} -> {multiplier}x"


def run() -> None:
    """Entry point for `python -m randbats_validator.server` or console script."""

    from .config import Settings
    from .utils.logging_setup import setup_logging

    setup_logging(Settings.from_env().log_level)
    print("[randbats-validator] Starting MCP server. Press Ctrl+C to stop.")
    app.run()


if __name__ == "__main__":
    run()
