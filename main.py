#!/usr/bin/env python3
"""
PokéCards - terminal Pokédex, comparison and two-player battle

Thin wrapper around the pokecards package:
- catalog page fetched from PokeAPI (search, sort, detail)
- side-by-side comparison of up to four Pokémon
- local two-player battle on identifier-derived stats

To run: python main.py
"""

from pokecards.cli import run

if __name__ == "__main__":
    run()
