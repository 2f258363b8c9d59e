"""Result dataclasses produced by the random battles validator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class ValidationCheck:
    """One rule's count against its limit.

    ``ok`` is always derived from ``count <= limit``; build checks through
    :meth:`build` rather than passing ``ok`` by hand.
    """

    id: str
    label: str
    count: int
    limit: int
    ok: bool
    group: str

    @classmethod
    def build(cls, *, id: str, label: str, count: int, limit: int, group: str) -> "ValidationCheck":
        return cls(id=id, label=label, count=count, limit=limit, ok=count <= limit, group=group)


@dataclass(frozen=True, slots=True)
class ValidationSummary:
    passed: int = 0
    total: int = 0


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one roster against the random battle clauses."""

    active: bool
    format: Optional[str]
    team_size: int
    limit_factor: int
    is_monotype: bool
    checks: List[ValidationCheck] = field(default_factory=list)
    summary: ValidationSummary = field(default_factory=ValidationSummary)

    @classmethod
    def inactive(
        cls,
        format: Optional[str],
        *,
        team_size: int,
        limit_factor: int,
        is_monotype: bool,
    ) -> "ValidationResult":
        return cls(
            active=False,
            format=format,
            team_size=team_size,
            limit_factor=limit_factor,
            is_monotype=is_monotype,
        )

    @property
    def failed_checks(self) -> List[ValidationCheck]:
        return [check for check in self.checks if not check.ok]
