"""Tests for the PokeAPI-backed species/type provider."""

from __future__ import annotations

import pytest
import requests

from randbats_validator.analysis import RandomBattlesValidator
from randbats_validator.clients import PokeAPIClient, PokeAPIClientError, PokeAPIDex
from randbats_validator.config import Settings
from randbats_validator.data import SpeciesEntry, StaticDex, get_dex_for_format
from randbats_validator.models import PokemonRecord

BASE_URL = "https://pokeapi.test/api/v2"


class FakeResponse:
    def __init__(self, status_code: int, payload=None) -> None:
        self.status_code = status_code
        self._payload = payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


class FakeSession:
    def __init__(self, routes) -> None:
        self.routes = routes
        self.requested = []

    def get(self, url, timeout=None, headers=None):
        self.requested.append(url)
        return self.routes.get(url, FakeResponse(404))


ROTOM_WASH = {
    "name": "rotom-wash",
    "species": {"name": "rotom"},
    "types": [
        {"slot": 2, "type": {"name": "water"}},
        {"slot": 1, "type": {"name": "electric"}},
    ],
}

GROUND_TYPE = {
    "name": "ground",
    "damage_relations": {
        "double_damage_from": [{"name": "water"}, {"name": "grass"}, {"name": "ice"}],
        "half_damage_from": [{"name": "poison"}, {"name": "rock"}],
        "no_damage_from": [{"name": "electric"}],
    },
}


def _dex(routes):
    session = FakeSession(routes)
    client = PokeAPIClient(session=session, base_url=BASE_URL)
    return PokeAPIDex(client), session


def test_species_lookup_maps_name_base_species_and_slot_ordered_types() -> None:
    dex, session = _dex({f"{BASE_URL}/pokemon/rotom-wash": FakeResponse(200, ROTOM_WASH)})

    entry = dex.get_species("Rotom Wash")

    assert entry == SpeciesEntry(name="Rotom-Wash", base_species="Rotom", types=("Electric", "Water"))
    assert session.requested == [f"{BASE_URL}/pokemon/rotom-wash"]


def test_missing_species_is_not_found() -> None:
    dex, _ = _dex({})

    assert dex.get_species("Fakemon") is None
    assert dex.get_species("  ") is None


def test_server_errors_raise_client_error() -> None:
    dex, _ = _dex({f"{BASE_URL}/pokemon/dondozo": FakeResponse(500)})

    with pytest.raises(PokeAPIClientError):
        dex.get_species("Dondozo")


def test_type_lookup_maps_damage_relations_and_caches() -> None:
    dex, session = _dex({f"{BASE_URL}/type/ground": FakeResponse(200, GROUND_TYPE)})

    codes = dex.get_type("Ground")
    dex.get_type("ground")

    assert codes["Water"] == "weak"
    assert codes["Rock"] == "resist"
    assert codes["Electric"] == "immune"
    assert codes["Fire"] == "neutral"
    assert len(codes) == 18
    assert len(session.requested) == 1
    assert dex.get_type("Shadow") is None


def test_static_dex_falls_back_for_unknown_species_only() -> None:
    pokeapi, session = _dex({f"{BASE_URL}/pokemon/rotom-wash": FakeResponse(200, ROTOM_WASH)})
    dex = StaticDex(species={"Dondozo": {"types": ("Water",)}}, fallback=pokeapi)

    assert dex.get_species("Dondozo").types == ("Water",)
    assert session.requested == []
    assert dex.get_species("Rotom-Wash").base_species == "Rotom"


def test_lookup_failures_during_validation_give_inactive_result() -> None:
    pokeapi, _ = _dex({f"{BASE_URL}/pokemon/fakemon": FakeResponse(503)})
    dex = StaticDex(species={}, fallback=pokeapi)
    validator = RandomBattlesValidator(dex_resolver=lambda format_id: dex)

    result = validator.validate("gen9randombattle", pokemon=[PokemonRecord(name="Fakemon")])

    assert not result.active
    assert result.checks == []


def test_get_dex_for_format_wires_fallback_from_settings() -> None:
    assert get_dex_for_format("", settings=Settings()) is None

    offline = get_dex_for_format("gen9randombattle", settings=Settings())
    online = get_dex_for_format(
        "gen9randombattle",
        settings=Settings(pokeapi_url=BASE_URL, pokeapi_fallback=True),
    )

    assert isinstance(offline, StaticDex) and offline.fallback is None
    assert isinstance(online.fallback, PokeAPIDex)
    assert online.fallback.client.base_url == BASE_URL


def test_get_dex_for_format_reuses_providers_per_gen_and_settings() -> None:
    settings = Settings(pokeapi_url=BASE_URL, pokeapi_fallback=True)

    first = get_dex_for_format("gen9randombattle", settings=settings)
    second = get_dex_for_format(
        "gen9randombattlemonotype",
        settings=Settings(pokeapi_url=BASE_URL, pokeapi_fallback=True),
    )
    older = get_dex_for_format("gen8randombattle", settings=settings)

    assert second is first
    assert second.fallback.client.session is first.fallback.client.session
    assert older is not first
    assert (first.gen, older.gen) == (9, 8)
    assert get_dex_for_format("randombattle", settings=settings) is first
