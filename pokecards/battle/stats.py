"""Identifier-derived stats.

Two related derivations live here and are deliberately kept apart:

* badge stats (hp, power) shown on catalog cards, used by the hp/attack sort
  keys and the comparison view;
* battle stats (hp, attack, defense, speed) used to resolve a battle round.

Both are pure functions of the entry id, so the same id always yields the
same numbers.
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

BATTLE_STAT_ORDER: Tuple[str, ...] = ("hp", "attack", "defense", "speed")
BATTLE_STAT_LABELS: Dict[str, str] = {
    "hp": "HP",
    "attack": "Attack",
    "defense": "Defense",
    "speed": "Speed",
}

@dataclass(frozen=True)
class BattleStats:
    hp: int
    attack: int
    defense: int
    speed: int

    def get(self, stat: str) -> int:
        return getattr(self, stat)

@dataclass(frozen=True)
class BadgeStats:
    hp: int
    power: int

@lru_cache(maxsize=1024)
def derive_stats(entity_id: int) -> BattleStats:
    return BattleStats(
        hp=50 + entity_id % 100,
        attack=20 + entity_id % 80,
        defense=30 + entity_id % 60,
        speed=15 + entity_id % 70,
    )

@lru_cache(maxsize=1024)
def derive_badge_stats(entity_id: int) -> BadgeStats:
    return BadgeStats(hp=50 + entity_id % 100, power=20 + entity_id % 80)

__all__ = [
    "BATTLE_STAT_ORDER","BATTLE_STAT_LABELS","BattleStats","BadgeStats",
    "derive_stats","derive_badge_stats",
]
