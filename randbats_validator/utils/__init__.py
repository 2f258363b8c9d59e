"""Small helpers shared across the validator."""

from __future__ import annotations

import re
from typing import Optional

_NON_ID = re.compile(r"[^a-z0-9]+")


def to_id(text: Optional[str]) -> str:
    """Showdown-style identifier: lowercase with everything but ``[a-z0-9]`` removed."""

    if not text:
        return ""
    return _NON_ID.sub("", str(text).lower())


def normalize_type_name(type_name: Optional[str]) -> str:
    """``"fire"``/``" FIRE "`` -> ``"Fire"``; empty input gives ``""``."""

    if not type_name:
        return ""
    return str(type_name).strip().capitalize()


__all__ = ["normalize_type_name", "to_id"]
