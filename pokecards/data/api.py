"""Thin read-only client for the PokeAPI REST endpoints the catalog uses."""
from __future__ import annotations
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import requests

from pokecards.core.errors import EntityNotFound, FetchError, PayloadError
from pokecards.core.logging import logger
from pokecards.data.models import ListedEntity

POKEAPI_BASE = "https://pokeapi.co/api/v2/"

class PokeAPIClient:
    def __init__(self, base_url: str = POKEAPI_BASE, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = urljoin(self.base_url, path)
        logger.debug("ApiRequest", url=url)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warn("ApiRequestFailed", url=url, error=str(e))
            raise FetchError(url, str(e)) from e
        if response.status_code == 404:
            logger.warn("ApiNotFound", url=url)
            raise EntityNotFound(url)
        if not 200 <= response.status_code < 300:
            logger.warn("ApiBadStatus", url=url, status=response.status_code)
            raise FetchError(url, f"HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            logger.warn("ApiBadJson", url=url, error=str(e))
            raise FetchError(url, "invalid JSON body") from e

    def list_entities(self, offset: int, limit: int) -> List[ListedEntity]:
        """One page of name/reference pairs, in listing order."""
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        data = self._get("pokemon", params={"offset": offset, "limit": limit})
        try:
            return [ListedEntity(name=r["name"], url=r.get("url", "")) for r in data.get("results") or []]
        except (KeyError, TypeError, AttributeError) as e:
            raise PayloadError("listing", str(e)) from e

    def get_entity_by_name(self, name: str) -> Dict[str, Any]:
        return self._get(f"pokemon/{name.strip().lower()}")

    def get_entity_by_id(self, entity_id: int) -> Dict[str, Any]:
        _check_id(entity_id)
        return self._get(f"pokemon/{entity_id}")

    def get_species_by_id(self, entity_id: int) -> Dict[str, Any]:
        _check_id(entity_id)
        return self._get(f"pokemon-species/{entity_id}")

    def close(self):
        self.session.close()

def _check_id(entity_id: int):
    if entity_id < 1:
        raise ValueError(f"id must be a positive integer, got {entity_id}")

__all__ = ["PokeAPIClient", "POKEAPI_BASE"]
