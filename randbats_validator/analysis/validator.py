"""Random battle team validation: gating, orchestration and fault containment."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..data import rules
from ..data.dex import TypeChartProvider, get_dex_for_format
from ..models import PokemonRecord, ValidationResult, ValidationSummary
from ..utils import to_id
from .aggregator import TeamAggregator
from .checks import CheckEvaluator, limit_factor_for, team_size_for
from .resolver import PokemonRecordResolver
from .weakness import WeaknessCalculator

logger = logging.getLogger(__name__)

DexResolver = Callable[[str], Optional[TypeChartProvider]]


class RandomBattlesValidator:
    """Checks a (possibly partially revealed) random battle team against its clauses.

    ``validate`` never raises: formats outside the random family, empty
    rosters, formats without a dex and any fault while evaluating all come
    back as an inactive result with no checks.
    """

    def __init__(
        self,
        *,
        dex_resolver: Optional[DexResolver] = None,
        evaluator: Optional[CheckEvaluator] = None,
    ) -> None:
        self.dex_resolver = dex_resolver or get_dex_for_format
        self.evaluator = evaluator or CheckEvaluator()

    def validate(
        self,
        format: Optional[str],
        *,
        gen: Optional[int] = None,
        pokemon: Optional[Iterable[Optional[PokemonRecord]]] = None,
        max_team_size: Optional[int] = None,
    ) -> ValidationResult:
        try:
            return self._validate(format, gen, pokemon, max_team_size)
        except Exception:
            logger.exception("Random battles validation failed for format %r", format)
            return ValidationResult.inactive(
                format,
                team_size=max_team_size if isinstance(max_team_size, int) else 0,
                limit_factor=1,
                is_monotype=False,
            )

    def _validate(
        self,
        format: Optional[str],
        gen: Optional[int],
        pokemon: Optional[Iterable[Optional[PokemonRecord]]],
        max_team_size: Optional[int],
    ) -> ValidationResult:
        format_key = to_id(format)
        is_random = bool(rules.RANDOM_FORMAT_PATTERN.search(format_key))
        is_monotype = bool(rules.MONOTYPE_FORMAT_PATTERN.search(format_key))

        roster = [record for record in (pokemon or ()) if record is not None]
        team_size = team_size_for(max_team_size, len(roster))
        limit_factor = limit_factor_for(team_size)

        dex = self.dex_resolver(format or "") if is_random and roster else None
        if dex is None:
            logger.debug(
                "Validation inactive for %r (random=%s, roster=%d)",
                format,
                is_random,
                len(roster),
            )
            return ValidationResult.inactive(
                format,
                team_size=team_size,
                limit_factor=limit_factor,
                is_monotype=is_monotype,
            )

        logger.debug("Validating %d Pokemon for %s (gen %s)", len(roster), format_key, gen)
        resolver = PokemonRecordResolver(dex)
        aggregator = TeamAggregator(WeaknessCalculator(dex))
        members = [resolver.resolve(record) for record in roster]
        counters = aggregator.aggregate(members, is_monotype=is_monotype)
        checks = self.evaluator.evaluate(
            counters,
            limit_factor=limit_factor,
            is_monotype=is_monotype,
        )
        return ValidationResult(
            active=True,
            format=format,
            team_size=team_size,
            limit_factor=limit_factor,
            is_monotype=is_monotype,
            checks=checks,
            summary=ValidationSummary(
                passed=sum(1 for check in checks if check.ok),
                total=len(checks),
            ),
        )


def validate_team(
    format: Optional[str],
    *,
    gen: Optional[int] = None,
    pokemon: Optional[Iterable[Optional[PokemonRecord]]] = None,
    max_team_size: Optional[int] = None,
) -> ValidationResult:
    """Validate with the default dex for ``format``."""

    return RandomBattlesValidator().validate(
        format,
        gen=gen,
        pokemon=pokemon,
        max_team_size=max_team_size,
    )
