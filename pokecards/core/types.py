"""Global type metadata: colors & abbreviations.

Provides:
  TYPE_COLORS_HEX: read-only mapping type -> hex color string (#RRGGBB)
  TYPE_ABBREVIATIONS: read-only mapping type -> 3-letter abbreviation (upper)
  helpers turning a type tag into a rich style or a compact label.
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Mapping

TYPE_COLORS_HEX: Mapping[str, str] = MappingProxyType({
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
})

TYPE_ABBREVIATIONS: Mapping[str, str] = MappingProxyType({
    "normal": "NRM",
    "fire": "FIR",
    "water": "WTR",
    "grass": "GRS",
    "electric": "ELE",
    "ice": "ICE",
    "fighting": "FGT",
    "poison": "PSN",
    "ground": "GRN",
    "flying": "FLY",
    "psychic": "PSY",
    "bug": "BUG",
    "rock": "RCK",
    "ghost": "GHO",
    "dragon": "DRA",
    "dark": "DRK",
    "steel": "STL",
    "fairy": "FAI",
})

FALLBACK_TYPE = "normal"

# Types whose badge reads better with dark text
_LIGHT_BACKGROUNDS = frozenset({"electric", "ice", "ground", "steel", "normal"})

def type_color(type_name: str) -> str:
    """Hex color for a type; unknown types use the normal grey."""
    return TYPE_COLORS_HEX.get(type_name.lower(), TYPE_COLORS_HEX[FALLBACK_TYPE])

def type_style(type_name: str) -> str:
    t = type_name.lower()
    fg = "black" if (t in _LIGHT_BACKGROUNDS or t not in TYPE_COLORS_HEX) else "white"
    return f"bold {fg} on {type_color(t)}"

def type_abbreviation(type_name: str) -> str:
    return TYPE_ABBREVIATIONS.get(type_name.lower(), type_name[:3].upper())

def format_types(types: Iterable[str]) -> str:
    return '/'.join(type_abbreviation(t) for t in types)

__all__ = [
    'TYPE_COLORS_HEX','TYPE_ABBREVIATIONS','FALLBACK_TYPE',
    'type_color','type_style','type_abbreviation','format_types'
]
