"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load default .env first, then overlay .env.local so user-specific values win.
load_dotenv()
load_dotenv(".env.local", override=True)

DEFAULT_POKEAPI_URL = "https://pokeapi.co/api/v2"
DEFAULT_CACHE_TTL = 600
DEFAULT_HTTP_TIMEOUT = 10
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True, slots=True)
class Settings:
    pokeapi_url: str = DEFAULT_POKEAPI_URL
    cache_ttl: int = DEFAULT_CACHE_TTL
    http_timeout: int = DEFAULT_HTTP_TIMEOUT
    pokeapi_fallback: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            pokeapi_url=os.getenv("RANDBATS_POKEAPI_URL") or DEFAULT_POKEAPI_URL,
            cache_ttl=_env_int("RANDBATS_CACHE_TTL", DEFAULT_CACHE_TTL),
            http_timeout=_env_int("RANDBATS_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            pokeapi_fallback=_env_flag("RANDBATS_POKEAPI_FALLBACK"),
            log_level=(os.getenv("RANDBATS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )
