"""Groups and renders validation checks for display."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from .data import rules
from .data.type_chart import ATTACK_TYPES
from .models import ValidationCheck, ValidationResult
from .utils import to_id

CAP_LABELS = {
    "species-clause": "SC",
    "tera-blast-users": "TB",
    "freeze-dry-weakness": "FD",
}

_TYPE_CHECK_ID = re.compile(r"(?:type-count|type-weak|type-double-weak)-(.+)$")
_TYPES_BY_ID = {to_id(type_name): type_name for type_name in ATTACK_TYPES}


def group_checks(result: ValidationResult) -> Dict[str, List[ValidationCheck]]:
    """Split checks into caps, types, double weaknesses and weaknesses."""

    grouped: Dict[str, List[ValidationCheck]] = {
        "caps": [],
        "types": [],
        "double_weaknesses": [],
        "weaknesses": [],
    }
    for check in result.checks:
        if check.group == rules.GROUP_TYPE_COUNT:
            grouped["types"].append(check)
        elif check.group == rules.GROUP_TYPE_WEAKNESS:
            grouped["weaknesses"].append(check)
        elif check.group == rules.GROUP_TYPE_DOUBLE_WEAKNESS:
            grouped["double_weaknesses"].append(check)
        else:
            grouped["caps"].append(check)
    return grouped


def cap_label(check: ValidationCheck) -> str:
    """Short badge text for a non-type check."""

    known = CAP_LABELS.get(check.id)
    if known:
        return known
    if re.search(r"level\s*100", check.label, re.IGNORECASE):
        return "L100"
    if re.search(r"tera", check.label, re.IGNORECASE):
        return "Tera"
    if re.search(r"species", check.label, re.IGNORECASE):
        return "SC"
    parts = check.label.split()
    abbreviation = "".join(part if part.isdigit() else part[0] for part in parts)
    return abbreviation.upper()[:5] or check.label[:5]


def type_from_check_id(check_id: str) -> Optional[str]:
    match = _TYPE_CHECK_ID.search(check_id)
    if not match:
        return None
    return _TYPES_BY_ID.get(match.group(1))


def humanize_result(result: ValidationResult) -> str:
    if not result.active:
        return f"Random battles validation inactive for format {result.format or '(none)'}."

    lines: List[str] = [
        f"{result.format}: {result.summary.passed}/{result.summary.total} checks passing "
        f"(team size {result.team_size}, limits x{result.limit_factor}"
        f"{', monotype' if result.is_monotype else ''})",
        "",
    ]
    grouped = group_checks(result)

    sections = (
        ("Caps", grouped["caps"], lambda check: f"{cap_label(check)} {check.label}"),
        ("Types", grouped["types"], lambda check: check.label),
        ("Double weaknesses", grouped["double_weaknesses"], lambda check: f"2x {check.label}"),
        ("Weaknesses", [c for c in grouped["weaknesses"] if c.count or not c.ok], lambda check: check.label),
    )
    for title, checks, describe in sections:
        if not checks:
            continue
        lines.append(f"{title}:")
        for check in checks:
            status = "ok" if check.ok else "FAIL"
            lines.append(f"  - [{status}] {describe(check)}: {check.count}/{check.limit}")
        lines.append("")

    return "\n".join(lines).strip()
