"""Filter + sort pipeline turning the fetched page into the displayed list."""
from __future__ import annotations
import locale
from enum import Enum
from typing import Callable, Dict, Iterable, List, Sequence, Tuple, Union, Any

from pokecards.battle.stats import derive_badge_stats
from pokecards.data.models import Entity

class SortKey(str, Enum):
    DEFAULT = "default"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    HEIGHT_ASC = "height_asc"
    HEIGHT_DESC = "height_desc"
    WEIGHT_ASC = "weight_asc"
    WEIGHT_DESC = "weight_desc"
    ATTACK_ASC = "attack_asc"
    ATTACK_DESC = "attack_desc"
    HP_ASC = "hp_asc"
    HP_DESC = "hp_desc"

    @classmethod
    def parse(cls, value: Union["SortKey", str, None]) -> "SortKey":
        """Unrecognized values map to DEFAULT (input order)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DEFAULT

SORT_LABELS: Dict[SortKey, str] = {
    SortKey.DEFAULT: "Default order",
    SortKey.NAME_ASC: "Name A-Z",
    SortKey.NAME_DESC: "Name Z-A",
    SortKey.HEIGHT_ASC: "Height (low to high)",
    SortKey.HEIGHT_DESC: "Height (high to low)",
    SortKey.WEIGHT_ASC: "Weight (low to high)",
    SortKey.WEIGHT_DESC: "Weight (high to low)",
    SortKey.ATTACK_ASC: "Attack (low to high)",
    SortKey.ATTACK_DESC: "Attack (high to low)",
    SortKey.HP_ASC: "HP (low to high)",
    SortKey.HP_DESC: "HP (high to low)",
}

def _name_key(e: Entity) -> str:
    # Collates by the active LC_COLLATE; under the C locale this is plain casefold order
    return locale.strxfrm(e.name.casefold())

# key -> (sort key function, descending)
_SORTS: Dict[SortKey, Tuple[Callable[[Entity], Any], bool]] = {
    SortKey.NAME_ASC: (_name_key, False),
    SortKey.NAME_DESC: (_name_key, True),
    SortKey.HEIGHT_ASC: (lambda e: e.height, False),
    SortKey.HEIGHT_DESC: (lambda e: e.height, True),
    SortKey.WEIGHT_ASC: (lambda e: e.weight, False),
    SortKey.WEIGHT_DESC: (lambda e: e.weight, True),
    SortKey.ATTACK_ASC: (lambda e: derive_badge_stats(e.id).power, False),
    SortKey.ATTACK_DESC: (lambda e: derive_badge_stats(e.id).power, True),
    SortKey.HP_ASC: (lambda e: derive_badge_stats(e.id).hp, False),
    SortKey.HP_DESC: (lambda e: derive_badge_stats(e.id).hp, True),
}

def filter_entities(entities: Iterable[Entity], query: str = "") -> List[Entity]:
    q = (query or "").strip().casefold()
    if not q:
        return list(entities)
    return [e for e in entities if q in e.name.casefold()]

def present(entities: Sequence[Entity], query: str = "",
            sort_key: Union[SortKey, str, None] = SortKey.DEFAULT) -> List[Entity]:
    """Filtered, sorted copy of `entities`; the input is left untouched.

    Python's sort is stable in both directions, so equal keys keep input order.
    """
    shown = filter_entities(entities, query)
    spec = _SORTS.get(SortKey.parse(sort_key))
    if spec is None:
        return shown
    key_fn, descending = spec
    return sorted(shown, key=key_fn, reverse=descending)

__all__ = ["SortKey", "SORT_LABELS", "filter_entities", "present"]
