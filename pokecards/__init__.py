"""
Terminal catalog and two-player battle game over PokeAPI.
"""
__version__ = "0.1.0"
