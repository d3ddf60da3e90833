"""
Battle package.
- stats.py (identifier-derived badge and battle stats)
- engine.py (round resolution, session state machine)
"""
