"""Bounded multi-select backing the side-by-side comparison view."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple, Union

from pokecards.battle.stats import derive_badge_stats
from pokecards.core.logging import logger
from pokecards.core.types import format_types
from pokecards.data.models import Entity

MAX_COMPARE = 4

class ComparisonSet:
    def __init__(self, capacity: int = MAX_COMPARE):
        self.capacity = capacity
        self._members: List[Entity] = []

    @property
    def members(self) -> Tuple[Entity, ...]:
        return tuple(self._members)

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(e.id for e in self._members)

    @property
    def is_full(self) -> bool:
        return len(self._members) >= self.capacity

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, item: Union[Entity, int]) -> bool:
        entity_id = item.id if isinstance(item, Entity) else item
        return entity_id in self.ids

    def toggle(self, entity: Entity) -> bool:
        """Remove if present, else add when there is room.

        Returns True if membership changed. A full set ignores new entries.
        """
        if entity.id in self:
            self.remove(entity.id)
            return True
        if self.is_full:
            logger.debug("CompareSetFull", id=entity.id, capacity=self.capacity)
            return False
        self._members.append(entity)
        return True

    def remove(self, entity_id: int):
        self._members = [e for e in self._members if e.id != entity_id]

    def clear(self):
        self._members.clear()


@dataclass(frozen=True)
class ComparisonRow:
    label: str
    cells: Tuple[str, ...]
    best: Tuple[int, ...] = ()   # column indexes holding the highest value

def _best(values: Sequence[float]) -> Tuple[int, ...]:
    if len(values) < 2:
        return ()
    top = max(values)
    if all(v == top for v in values):
        return ()
    return tuple(i for i, v in enumerate(values) if v == top)

def comparison_rows(members: Sequence[Entity]) -> List[ComparisonRow]:
    numeric: List[Tuple[str, Callable[[Entity], float], Callable[[Entity], str]]] = [
        ("Height", lambda e: e.height, lambda e: f"{e.height_m:.1f} m"),
        ("Weight", lambda e: e.weight, lambda e: f"{e.weight_kg:.1f} kg"),
        ("HP", lambda e: derive_badge_stats(e.id).hp, lambda e: str(derive_badge_stats(e.id).hp)),
        ("Power", lambda e: derive_badge_stats(e.id).power, lambda e: str(derive_badge_stats(e.id).power)),
    ]
    rows = [ComparisonRow("Types", tuple(format_types(e.types) for e in members))]
    for label, value_fn, text_fn in numeric:
        rows.append(ComparisonRow(
            label,
            tuple(text_fn(e) for e in members),
            _best([value_fn(e) for e in members]),
        ))
    return rows

__all__ = ["MAX_COMPARE", "ComparisonSet", "ComparisonRow", "comparison_rows"]
