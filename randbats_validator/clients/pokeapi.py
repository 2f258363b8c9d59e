"""Lightweight wrapper around PokeAPI for species and type data."""

from __future__ import annotations

import logging
import re
import time
from typing import Any, Dict, Mapping, Optional

import requests

from ..config import DEFAULT_POKEAPI_URL
from ..data.dex import SpeciesEntry
from ..data.type_chart import ATTACK_TYPES, IMMUNE, NEUTRAL, RESIST, WEAK
from ..utils import normalize_type_name

logger = logging.getLogger(__name__)

# PokeAPI relation name -> modifier code, applied in this order so immunity wins.
DAMAGE_RELATION_CODES = (
    ("double_damage_from", WEAK),
    ("half_damage_from", RESIST),
    ("no_damage_from", IMMUNE),
)


class PokeAPIClientError(RuntimeError):
    """Raised when the PokeAPI request fails."""


class PokeAPIClient:
    """Small helper client with naive in-memory caching."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        base_url: str = DEFAULT_POKEAPI_URL,
        cache_ttl: int = 600,
        timeout: int = 10,
        user_agent: str = "randbats-validator/0.1",
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.cache_ttl = cache_ttl
        self.timeout = timeout
        self.user_agent = user_agent
        self._cache: Dict[str, tuple[float, Any]] = {}
        self._type_cache: Dict[str, Dict[str, Any]] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_pokemon(self, name: str, *, allow_404: bool = False) -> Optional[Dict[str, Any]]:
        slug = self._slugify_name(name)
        return self._get_json(f"pokemon/{slug}", allow_404=allow_404)

    def get_type(self, type_name: str, *, allow_404: bool = False) -> Optional[Dict[str, Any]]:
        slug = self._slugify_type(type_name)
        return self._get_json(f"type/{slug}", allow_404=allow_404)

    def get_type_damage_relations(self, type_name: str) -> Optional[Dict[str, Any]]:
        slug = self._slugify_type(type_name)
        cached = self._type_cache.get(slug)
        if cached:
            return cached
        payload = self.get_type(slug, allow_404=True)
        if payload is None:
            return None
        relations = payload.get("damage_relations", {})
        self._type_cache[slug] = relations
        return relations

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _get_json(self, endpoint: str, *, allow_404: bool = False) -> Optional[Dict[str, Any]]:
        url = self._build_url(endpoint)
        now = time.time()
        cached = self._cache.get(url)
        if cached and now - cached[0] < self.cache_ttl:
            return cached[1]

        logger.debug("GET %s", url)
        try:
            response = self.session.get(
                url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
            )
            if response.status_code == 404 and allow_404:
                return None
            response.raise_for_status()
        except requests.RequestException as exc:  # pragma: no cover - network
            raise PokeAPIClientError(str(exc)) from exc

        payload = response.json()
        self._cache[url] = (now, payload)
        return payload

    def _build_url(self, endpoint: str) -> str:
        endpoint = endpoint.lstrip("/")
        return f"{self.base_url}/{endpoint}"

    @staticmethod
    def _slugify_name(name: str) -> str:
        slug = name.strip().lower()
        slug = re.sub(r"[\s\.]+", "-", slug)
        slug = slug.replace("'", "")
        slug = slug.replace(":", "")
        slug = slug.replace("%", "")
        slug = re.sub(r"[^a-z0-9\-]", "", slug)
        return slug

    @staticmethod
    def _slugify_type(type_name: str) -> str:
        return type_name.strip().lower().replace(" ", "-")


class PokeAPIDex:
    """Species/type provider answered from PokeAPI payloads."""

    def __init__(self, client: Optional[PokeAPIClient] = None) -> None:
        self.client = client or PokeAPIClient()

    def get_species(self, name: str) -> Optional[SpeciesEntry]:
        if not name or not name.strip():
            return None
        payload = self.client.get_pokemon(name, allow_404=True)
        if payload is None:
            return None
        canonical = self._display_name(payload.get("name") or name)
        base = self._display_name((payload.get("species") or {}).get("name") or "") or canonical
        slots = sorted(payload.get("types", []), key=lambda slot: slot.get("slot", 0))
        types = tuple(
            normalize_type_name((slot.get("type") or {}).get("name"))
            for slot in slots
            if (slot.get("type") or {}).get("name")
        )
        return SpeciesEntry(name=canonical, base_species=base, types=types)

    def get_type(self, type_name: str) -> Optional[Mapping[str, str]]:
        relations = self.client.get_type_damage_relations(type_name)
        if relations is None:
            return None
        codes = {attack: NEUTRAL for attack in ATTACK_TYPES}
        for relation, code in DAMAGE_RELATION_CODES:
            for entry in relations.get(relation, []):
                attack = normalize_type_name(entry.get("name"))
                if attack:
                    codes[attack] = code
        return codes

    @staticmethod
    def _display_name(slug: str) -> str:
        return "-".join(part.capitalize() for part in slug.split("-") if part)
