"""Catalog and detail loading on top of PokeAPIClient.

fetch_collection lists one page and fetches every entry in parallel; the
result keeps listing order and is all-or-nothing. load_collection and
load_detail are the boundary to the UI: every PokecardsError is caught there
and turned into an UNAVAILABLE LoadResult. Nothing is retried.
"""
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pokecards.core.errors import EntityNotFound, PokecardsError
from pokecards.core.logging import logger
from pokecards.data.api import PokeAPIClient
from pokecards.data.models import Entity, EntityDetail, entity_from_payload, detail_from_payloads

T = TypeVar("T")

class LoadStatus(str, Enum):
    READY = "ready"
    UNAVAILABLE = "unavailable"

REASON_NOT_FOUND = "not_found"
REASON_FETCH_FAILED = "fetch_failed"

@dataclass(frozen=True)
class LoadResult(Generic[T]):
    status: LoadStatus
    value: Optional[T] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.READY

    @classmethod
    def ready(cls, value: T) -> "LoadResult[T]":
        return cls(LoadStatus.READY, value=value)

    @classmethod
    def unavailable(cls, error: PokecardsError) -> "LoadResult[T]":
        reason = REASON_NOT_FOUND if isinstance(error, EntityNotFound) else REASON_FETCH_FAILED
        return cls(LoadStatus.UNAVAILABLE, reason=reason)


def fetch_collection(client: PokeAPIClient, offset: int = 0, limit: int = 10,
                     max_workers: int = 8) -> List[Entity]:
    listing = client.list_entities(offset, limit)
    if not listing:
        return []

    def fetch_one(name: str) -> Entity:
        return entity_from_payload(client.get_entity_by_name(name))

    workers = max(1, min(max_workers, len(listing)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        # map() yields in submission order and re-raises the first failure
        entities = list(pool.map(fetch_one, [item.name for item in listing]))
    logger.info("CollectionFetched", offset=offset, count=len(entities))
    return entities

def load_collection(client: PokeAPIClient, offset: int = 0, limit: int = 10,
                    max_workers: int = 8) -> LoadResult[List[Entity]]:
    try:
        entities = fetch_collection(client, offset, limit, max_workers)
    except PokecardsError as e:
        logger.error("CollectionUnavailable", offset=offset, limit=limit, error=str(e))
        return LoadResult.unavailable(e)
    return LoadResult.ready(entities)

def load_detail(client: PokeAPIClient, entity_id: int) -> LoadResult[EntityDetail]:
    if entity_id < 1:
        logger.warn("DetailUnavailable", id=entity_id, error="id out of range")
        return LoadResult.unavailable(EntityNotFound(f"pokemon/{entity_id}"))
    try:
        with ThreadPoolExecutor(max_workers=2) as pool:
            raw_f = pool.submit(client.get_entity_by_id, entity_id)
            species_f = pool.submit(client.get_species_by_id, entity_id)
            raw = raw_f.result()
            species = species_f.result()
        if not raw:
            raise EntityNotFound(f"pokemon/{entity_id}")
        detail = detail_from_payloads(raw, species)
    except PokecardsError as e:
        logger.error("DetailUnavailable", id=entity_id, error=str(e))
        return LoadResult.unavailable(e)
    logger.info("DetailLoaded", id=entity_id, name=detail.entity.name)
    return LoadResult.ready(detail)

__all__ = [
    "LoadStatus","LoadResult","REASON_NOT_FOUND","REASON_FETCH_FAILED",
    "fetch_collection","load_collection","load_detail",
]
