"""Two-player local battle: round resolution and the session state machine.

A round pits one catalog entry per player against each other on the four
identifier-derived battle stats. Each stat goes to the strictly higher value;
the player winning more stats takes the round and one session point. A player
holding 3 or more points fights with every stat scaled by 0.85 (floored).

Session phases:

  NAMING_PLAYERS -> SELECTING -> ROUND_RESOLVED -> SELECTING -> ...
  exit() from any phase -> NAMING_PLAYERS with everything cleared
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from pokecards.battle.stats import BATTLE_STAT_ORDER, BATTLE_STAT_LABELS, derive_stats
from pokecards.catalog.pipeline import filter_entities
from pokecards.core.errors import BattleStateError
from pokecards.core.logging import logger
from pokecards.data.models import Entity

NERF_THRESHOLD = 3
NERF_MULTIPLIER = 0.85
PLAYERS = (1, 2)

class Winner(str, Enum):
    PLAYER1 = "PLAYER1"
    PLAYER2 = "PLAYER2"
    DRAW = "DRAW"

class Phase(str, Enum):
    NAMING_PLAYERS = "NAMING_PLAYERS"
    SELECTING = "SELECTING"
    ROUND_RESOLVED = "ROUND_RESOLVED"

@dataclass(frozen=True)
class StatComparison:
    stat: str
    player1_value: int
    player2_value: int
    winner: Winner

    @property
    def label(self) -> str:
        return BATTLE_STAT_LABELS[self.stat]

@dataclass(frozen=True)
class RoundResult:
    winner: Winner
    deciding_stat: str
    player1_value: int
    player2_value: int
    comparisons: Tuple[StatComparison, ...] = ()
    player1_stat_wins: int = 0
    player2_stat_wins: int = 0

    @property
    def deciding_stat_name(self) -> str:
        return BATTLE_STAT_LABELS[self.deciding_stat]


def nerf_multiplier(points: int) -> float:
    # Flat plateau: no further scaling past the threshold
    return NERF_MULTIPLIER if points >= NERF_THRESHOLD else 1.0

def resolve_round(p1: Entity, p2: Entity, p1_points: int = 0, p2_points: int = 0) -> RoundResult:
    m1 = nerf_multiplier(p1_points)
    m2 = nerf_multiplier(p2_points)
    s1 = derive_stats(p1.id)
    s2 = derive_stats(p2.id)
    comparisons: List[StatComparison] = []
    wins1 = wins2 = 0
    deciding_index = 0
    for i, stat in enumerate(BATTLE_STAT_ORDER):
        v1 = math.floor(s1.get(stat) * m1)
        v2 = math.floor(s2.get(stat) * m2)
        if v1 > v2:
            wins1 += 1
            w = Winner.PLAYER1
        elif v2 > v1:
            wins2 += 1
            w = Winner.PLAYER2
        else:
            w = Winner.DRAW
        if v1 != v2:
            deciding_index = i
        comparisons.append(StatComparison(stat, v1, v2, w))
    if wins1 > wins2:
        winner = Winner.PLAYER1
    elif wins2 > wins1:
        winner = Winner.PLAYER2
    else:
        winner = Winner.DRAW
    deciding = comparisons[deciding_index]
    return RoundResult(
        winner=winner,
        deciding_stat=deciding.stat,
        player1_value=deciding.player1_value,
        player2_value=deciding.player2_value,
        comparisons=tuple(comparisons),
        player1_stat_wins=wins1,
        player2_stat_wins=wins2,
    )


def _check_player(player: int):
    if player not in PLAYERS:
        raise ValueError(f"player must be 1 or 2, got {player}")

class BattleSession:
    def __init__(self):
        self._reset()

    def _reset(self):
        self.phase = Phase.NAMING_PLAYERS
        self.player1_name = ""
        self.player2_name = ""
        self.player1_points = 0
        self.player2_points = 0
        self.rounds_played = 0
        self.queries: Dict[int, str] = {1: "", 2: ""}
        self.selections: Dict[int, Optional[Entity]] = {1: None, 2: None}
        self.last_result: Optional[RoundResult] = None

    # --- Naming ---
    def set_names(self, player1: str, player2: str) -> bool:
        """Store both names and start selecting; blank names keep us in NAMING_PLAYERS."""
        if self.phase is not Phase.NAMING_PLAYERS:
            raise BattleStateError(f"Names are set only while naming players (phase={self.phase.value})")
        p1 = (player1 or "").strip()
        p2 = (player2 or "").strip()
        if not p1 or not p2:
            return False
        self.player1_name = p1
        self.player2_name = p2
        self.phase = Phase.SELECTING
        logger.info("BattleStarted", player1=p1, player2=p2)
        return True

    def name_of(self, player: int) -> str:
        _check_player(player)
        return self.player1_name if player == 1 else self.player2_name

    def points_of(self, player: int) -> int:
        _check_player(player)
        return self.player1_points if player == 1 else self.player2_points

    # --- Selection ---
    def set_query(self, player: int, query: str):
        _check_player(player)
        self.queries[player] = query or ""

    def candidates(self, player: int, entities: Iterable[Entity]) -> List[Entity]:
        _check_player(player)
        return filter_entities(entities, self.queries[player])

    def select(self, player: int, entity: Entity):
        _check_player(player)
        if self.phase is not Phase.SELECTING:
            raise BattleStateError(f"Cannot select outside SELECTING (phase={self.phase.value})")
        self.selections[player] = entity

    @property
    def can_resolve(self) -> bool:
        return (self.phase is Phase.SELECTING
                and self.selections[1] is not None
                and self.selections[2] is not None)

    # --- Rounds ---
    def resolve(self) -> RoundResult:
        if not self.can_resolve:
            raise BattleStateError("Both players must pick a creature before the round is resolved")
        p1, p2 = self.selections[1], self.selections[2]
        result = resolve_round(p1, p2, self.player1_points, self.player2_points)
        if result.winner is Winner.PLAYER1:
            self.player1_points += 1
        elif result.winner is Winner.PLAYER2:
            self.player2_points += 1
        self.rounds_played += 1
        self.last_result = result
        self.phase = Phase.ROUND_RESOLVED
        logger.info("RoundResolved", round=self.rounds_played, winner=result.winner.value,
                    stat=result.deciding_stat, p1=p1.name, p2=p2.name,
                    score=f"{self.player1_points}-{self.player2_points}")
        return result

    def next_round(self):
        if self.phase is not Phase.ROUND_RESOLVED:
            raise BattleStateError(f"No resolved round to move past (phase={self.phase.value})")
        self.selections = {1: None, 2: None}
        self.queries = {1: "", 2: ""}
        self.last_result = None
        self.phase = Phase.SELECTING

    def exit(self):
        """Leave battle mode; nothing of the session survives."""
        logger.debug("BattleExited", rounds=self.rounds_played)
        self._reset()

    # --- Display helpers ---
    def is_nerfed(self, player: int) -> bool:
        return nerf_multiplier(self.points_of(player)) < 1.0

    @property
    def leader(self) -> Optional[int]:
        if self.player1_points > self.player2_points:
            return 1
        if self.player2_points > self.player1_points:
            return 2
        return None

    def winner_name(self, result: RoundResult) -> Optional[str]:
        if result.winner is Winner.PLAYER1:
            return self.player1_name
        if result.winner is Winner.PLAYER2:
            return self.player2_name
        return None

__all__ = [
    "NERF_THRESHOLD","NERF_MULTIPLIER","Winner","Phase","StatComparison","RoundResult",
    "nerf_multiplier","resolve_round","BattleSession",
]
