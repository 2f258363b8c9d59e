"""Command-line interface for validating random battle teams."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, List, Optional, Tuple

from randbats_validator.analysis import RandomBattlesValidator
from randbats_validator.config import Settings
from randbats_validator.models import PokemonRecord
from randbats_validator.parsers import parse_team, records_from_list
from randbats_validator.reporting import humanize_result
from randbats_validator.utils.logging_setup import setup_logging


def _read_team_text(path: str) -> str:
    if path == "-":
        data = sys.stdin.read()
        if not data.strip():
            raise SystemExit("No team text provided on stdin.")
        return data
    file_path = Path(path)
    if not file_path.exists():
        raise SystemExit(f"File not found: {file_path}")
    return file_path.read_text(encoding="utf-8")


def _load_roster(
    text: str, args: argparse.Namespace
) -> Tuple[str, Optional[int], Optional[int], List[Optional[PokemonRecord]]]:
    """Return (format, gen, max_team_size, records) from JSON or export text."""

    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError:
        try:
            team = parse_team(text, format_hint=args.format)
        except ValueError as exc:
            raise SystemExit(f"Could not parse team: {exc}")
        return args.format, args.gen, args.max_team_size, team.to_records()

    if isinstance(payload, dict):
        entries = payload.get("pokemon") or []
        format_id = args.format_override or payload.get("format") or args.format
        gen = args.gen if args.gen is not None else payload.get("gen")
        max_team_size = args.max_team_size or payload.get("max_team_size") or payload.get("maxPokemon")
    else:
        entries, format_id, gen, max_team_size = payload, args.format, args.gen, args.max_team_size

    if not isinstance(entries, list):
        raise SystemExit("Roster JSON must be a list of Pokemon records")
    try:
        records = records_from_list(entries)
    except TypeError as exc:
        raise SystemExit(f"Invalid roster: {exc}")
    return format_id, gen, max_team_size, records


def _debug_print(enabled: bool, message: str) -> None:
    if enabled:
        sys.stderr.write(f"[debug] {message}\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check random battle team clauses")
    parser.add_argument(
        "team_file",
        help="Roster JSON, Showdown export text, or '-' to read from stdin",
    )
    parser.add_argument(
        "--format",
        dest="format_override",
        help="Format id (default: the roster file's format, else gen9randombattle)",
    )
    parser.add_argument("--gen", type=int, help="Generation number")
    parser.add_argument(
        "--max-team-size",
        type=int,
        help="Declared team size when more Pokemon are hidden than revealed",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the validation result as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug progress information to stderr",
    )
    args = parser.parse_args(argv)
    args.format = args.format_override or "gen9randombattle"

    settings = Settings.from_env()
    setup_logging("DEBUG" if args.debug else settings.log_level)
    _debug_print(args.debug, f"Arguments parsed: {args}")

    text = _read_team_text(args.team_file)
    _debug_print(args.debug, f"Loaded roster text ({len(text)} chars)")
    format_id, gen, max_team_size, records = _load_roster(text, args)
    _debug_print(args.debug, f"Parsed {len(records)} Pokemon for {format_id}")

    result = RandomBattlesValidator().validate(
        format_id,
        gen=gen,
        pokemon=records,
        max_team_size=max_team_size,
    )
    _debug_print(args.debug, f"Validation active: {result.active}")

    if args.json:
        json.dump(asdict(result), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        print(humanize_result(result))
    return 1 if result.failed_checks else 0


if __name__ == "__main__":
    raise SystemExit(main())
