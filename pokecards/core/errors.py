"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class PokecardsError(Exception):
    pass

class FetchError(PokecardsError):
    def __init__(self, url: str, detail: str):
        super().__init__(f"Failed to fetch {url}: {detail}")
        self.url = url
        self.detail = detail

class EntityNotFound(FetchError):
    def __init__(self, url: str):
        super().__init__(url, "not found")

class PayloadError(PokecardsError):
    def __init__(self, what: str, detail: str):
        super().__init__(f"Malformed {what} record: {detail}")
        self.what = what
        self.detail = detail

class BattleStateError(PokecardsError):
    pass
