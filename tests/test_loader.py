import requests

from conftest import FakeResponse, listing_payload, pokemon_payload
from pokecards.data.loader import (
    LoadStatus, REASON_FETCH_FAILED, REASON_NOT_FOUND, fetch_collection, load_collection, load_detail,
)

NAMES = ["bulbasaur", "ivysaur", "venusaur", "charmander"]


def _route_page(session, names=NAMES):
    session.routes["pokemon"] = listing_payload(names)
    for i, n in enumerate(names, 1):
        session.routes[f"pokemon/{n}"] = pokemon_payload(i, n)


def test_collection_keeps_listing_order_despite_completion_order(client, fake_session):
    _route_page(fake_session)
    # First entries answer last
    fake_session.delays = {"pokemon/bulbasaur": 0.15, "pokemon/ivysaur": 0.1}
    entities = fetch_collection(client, 0, 4, max_workers=4)
    assert [e.name for e in entities] == NAMES
    assert [e.id for e in entities] == [1, 2, 3, 4]


def test_collection_fetches_every_listed_entry(client, fake_session):
    _route_page(fake_session)
    fetch_collection(client, 0, 4, max_workers=2)
    fetched = {path for path, _ in fake_session.calls if path != "pokemon"}
    assert fetched == {f"pokemon/{n}" for n in NAMES}


def test_empty_listing_gives_empty_collection(client, fake_session):
    fake_session.routes["pokemon"] = {"results": []}
    result = load_collection(client, 2000, 10)
    assert result.ok and result.value == []


def test_one_failure_makes_whole_collection_unavailable(client, fake_session):
    _route_page(fake_session)
    fake_session.routes["pokemon/venusaur"] = requests.Timeout("slow")
    result = load_collection(client, 0, 4)
    assert result.status is LoadStatus.UNAVAILABLE
    assert result.value is None
    assert result.reason == REASON_FETCH_FAILED


def test_listing_failure_is_unavailable(client, fake_session):
    fake_session.routes["pokemon"] = FakeResponse(500)
    assert not load_collection(client, 0, 4).ok


def test_load_detail_ready(client, fake_session):
    fake_session.routes["pokemon/25"] = pokemon_payload(25, "pikachu")
    fake_session.routes["pokemon-species/25"] = {"flavor_text_entries": [{"flavor_text": "Electric\fmouse"}]}
    result = load_detail(client, 25)
    assert result.ok
    assert result.value.entity.name == "pikachu"
    assert result.value.description == "Electric mouse"


def test_load_detail_unknown_id_is_not_found(client):
    result = load_detail(client, 99999)
    assert result.status is LoadStatus.UNAVAILABLE
    assert result.reason == REASON_NOT_FOUND


def test_load_detail_empty_record_is_not_found(client, fake_session):
    fake_session.routes["pokemon/5"] = {}
    fake_session.routes["pokemon-species/5"] = {}
    assert load_detail(client, 5).reason == REASON_NOT_FOUND


def test_load_detail_species_failure_is_unavailable(client, fake_session):
    fake_session.routes["pokemon/5"] = pokemon_payload(5, "charmeleon")
    fake_session.routes["pokemon-species/5"] = requests.ConnectionError("down")
    result = load_detail(client, 5)
    assert not result.ok
    assert result.reason == REASON_FETCH_FAILED


def test_non_object_entry_makes_collection_unavailable(client, fake_session):
    _route_page(fake_session)
    fake_session.routes["pokemon/ivysaur"] = ["not", "a", "record"]
    result = load_collection(client, 0, 4)
    assert result.status is LoadStatus.UNAVAILABLE
    assert result.reason == REASON_FETCH_FAILED


def test_load_detail_non_object_species_is_unavailable(client, fake_session):
    fake_session.routes["pokemon/5"] = pokemon_payload(5, "charmeleon")
    fake_session.routes["pokemon-species/5"] = ["oops"]
    result = load_detail(client, 5)
    assert not result.ok
    assert result.reason == REASON_FETCH_FAILED


def test_load_detail_id_below_one_is_not_found(client, fake_session):
    result = load_detail(client, 0)
    assert result.reason == REASON_NOT_FOUND
    assert fake_session.calls == []
