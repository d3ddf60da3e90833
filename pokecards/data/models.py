"""Catalog records built from raw PokeAPI payloads.

Raw `pokemon` payloads (the `/pokemon/{id or name}` endpoint) are reduced to
the fields the catalog, detail view and battle need:

  Entity        id, name, image, types, height (dm), weight (hg)
  BaseStats     six base stats, read positionally from `stats`
  EntityDetail  Entity + abilities + base stats + species description

Records are frozen; a fetched entry never changes during a session.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from pokecards.core.errors import PayloadError

NO_DESCRIPTION = "No description available."

# Positional order of the API `stats` array
STAT_ORDER = ("hp", "attack", "defense", "special_attack", "special_defense", "speed")

@dataclass(frozen=True)
class ListedEntity:
    name: str
    url: str

@dataclass(frozen=True)
class Entity:
    id: int
    name: str
    image: str
    types: Tuple[str, ...]
    height: int
    weight: int

    @property
    def dex_number(self) -> str:
        return f"#{self.id:03}"

    @property
    def height_m(self) -> float:
        return self.height / 10

    @property
    def weight_kg(self) -> float:
        return self.weight / 10

@dataclass(frozen=True)
class BaseStats:
    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int

@dataclass(frozen=True)
class EntityDetail:
    entity: Entity
    abilities: Tuple[str, ...]
    base_stats: BaseStats
    description: str

    @property
    def ability_labels(self) -> Tuple[str, ...]:
        return tuple(a.replace("-", " ") for a in self.abilities)


def pick_image(sprites: Optional[Mapping[str, Any]]) -> str:
    """Official artwork first, then the default front sprite, else empty."""
    if not sprites:
        return ""
    other = sprites.get("other") or {}
    artwork = (other.get("official-artwork") or {}).get("front_default")
    return artwork or sprites.get("front_default") or ""

def entity_from_payload(raw: Mapping[str, Any]) -> Entity:
    try:
        types = sorted(raw.get("types", []), key=lambda t: t.get("slot", 0))
        return Entity(
            id=int(raw["id"]),
            name=str(raw["name"]),
            image=pick_image(raw.get("sprites")),
            types=tuple(t["type"]["name"] for t in types),
            height=int(raw.get("height") or 0),
            weight=int(raw.get("weight") or 0),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise PayloadError("pokemon", str(e)) from e

def base_stats_from_payload(raw: Mapping[str, Any]) -> BaseStats:
    try:
        stats = raw.get("stats") or []
        if len(stats) < len(STAT_ORDER):
            raise PayloadError("pokemon", f"expected {len(STAT_ORDER)} stats, got {len(stats)}")
        values = [int(s["base_stat"]) for s in stats[:len(STAT_ORDER)]]
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise PayloadError("pokemon", str(e)) from e
    return BaseStats(*values)

def description_from_species(species: Optional[Mapping[str, Any]]) -> str:
    if species is None:
        return NO_DESCRIPTION
    if not isinstance(species, Mapping):
        raise PayloadError("pokemon-species", f"expected an object, got {type(species).__name__}")
    try:
        entries = species.get("flavor_text_entries") or []
        if not entries:
            return NO_DESCRIPTION
        text = (entries[0] or {}).get("flavor_text") or ""
        text = text.replace("\f", " ")
    except (AttributeError, KeyError, TypeError) as e:
        raise PayloadError("pokemon-species", str(e)) from e
    return text or NO_DESCRIPTION

def detail_from_payloads(raw: Mapping[str, Any], species: Optional[Mapping[str, Any]]) -> EntityDetail:
    entity = entity_from_payload(raw)
    try:
        abilities = tuple(a["ability"]["name"] for a in raw.get("abilities", []))
    except (AttributeError, KeyError, TypeError) as e:
        raise PayloadError("pokemon", str(e)) from e
    return EntityDetail(
        entity=entity,
        abilities=abilities,
        base_stats=base_stats_from_payload(raw),
        description=description_from_species(species),
    )

__all__ = [
    "ListedEntity","Entity","BaseStats","EntityDetail","NO_DESCRIPTION","STAT_ORDER",
    "pick_image","entity_from_payload","base_stats_from_payload",
    "description_from_species","detail_from_payloads",
]
