# Project root on sys.path plus shared fakes for the PokeAPI client
import sys, pathlib, threading, time
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

import pytest

from pokecards.core.logging import logger
from pokecards.data.api import PokeAPIClient
from pokecards.data.models import Entity

BASE = "https://pokeapi.test/api/v2/"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, bad_json=False):
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1")
        return self._payload


class FakeSession:
    """Routes 'pokemon/1'-style paths to payloads, responses or exceptions.

    Unknown paths answer 404. `delays` maps a path to seconds slept before answering.
    """
    def __init__(self, routes=None, delays=None):
        self.routes = dict(routes or {})
        self.delays = dict(delays or {})
        self.calls = []
        self._lock = threading.Lock()
        self.closed = False

    def get(self, url, params=None, timeout=None):
        path = url[len(BASE):] if url.startswith(BASE) else url
        with self._lock:
            self.calls.append((path, params))
        if path in self.delays:
            time.sleep(self.delays[path])
        route = self.routes.get(path)
        if route is None:
            return FakeResponse(404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(200, route)

    def close(self):
        self.closed = True


def pokemon_payload(pid, name, types=("normal",), height=7, weight=69,
                    stats=(45, 49, 49, 65, 65, 45), abilities=("overgrow",), artwork=True):
    sprites = {"front_default": f"https://img.test/{pid}.png", "other": {"official-artwork": {
        "front_default": f"https://img.test/art/{pid}.png" if artwork else None}}}
    return {
        "id": pid,
        "name": name,
        "height": height,
        "weight": weight,
        "sprites": sprites,
        "types": [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types)],
        "abilities": [{"ability": {"name": a}, "slot": i + 1, "is_hidden": False} for i, a in enumerate(abilities)],
        "stats": [{"base_stat": v, "stat": {"name": n}} for v, n in zip(
            stats, ("hp", "attack", "defense", "special-attack", "special-defense", "speed"))],
    }


def listing_payload(names):
    return {"results": [{"name": n, "url": f"{BASE}pokemon/{n}/"} for n in names]}


def make_entity(pid, name=None, types=("normal",), height=10, weight=100):
    return Entity(id=pid, name=name or f"mon{pid}", image="", types=tuple(types), height=height, weight=weight)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def client(fake_session):
    return PokeAPIClient(BASE, timeout=1.0, session=fake_session)


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    # Settings never read or write the real home directory during tests
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.delenv("POKECARDS_API_URL", raising=False)
    monkeypatch.delenv("POKECARDS_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _quiet_logger():
    prev = logger.threshold
    logger.set_level("ERROR")
    yield
    logger.threshold = prev
