"""External data clients used by the validator."""

from .pokeapi import PokeAPIClient, PokeAPIClientError, PokeAPIDex

__all__ = [
    "PokeAPIClient",
    "PokeAPIClientError",
    "PokeAPIDex",
]
