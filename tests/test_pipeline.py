from conftest import make_entity
from pokecards.catalog.pipeline import SortKey, present, filter_entities


def _names(entities):
    return [e.name for e in entities]


def _sample():
    return [
        make_entity(25, "pikachu", height=4, weight=60),
        make_entity(1, "bulbasaur", height=7, weight=69),
        make_entity(4, "Charmander", height=6, weight=85),
        make_entity(7, "squirtle", height=5, weight=90),
        make_entity(26, "raichu", height=8, weight=300),
    ]


def test_filter_is_case_insensitive():
    out = present(_sample(), "PIKA", SortKey.NAME_ASC)
    assert _names(out) == ["pikachu"]
    assert _names(filter_entities(_sample(), "chu")) == ["pikachu", "raichu"]


def test_empty_or_blank_query_matches_all():
    assert len(present(_sample(), "")) == 5
    assert len(present(_sample(), "   ")) == 5


def test_default_and_unknown_keys_keep_input_order():
    sample = _sample()
    assert present(sample, "", SortKey.DEFAULT) == sample
    assert present(sample, "", "not-a-key") == sample
    assert present(sample, "", None) == sample


def test_name_sort_ignores_case():
    assert _names(present(_sample(), "", SortKey.NAME_ASC)) == [
        "bulbasaur", "Charmander", "pikachu", "raichu", "squirtle"]
    assert _names(present(_sample(), "", "name_desc")) == [
        "squirtle", "raichu", "pikachu", "Charmander", "bulbasaur"]


def test_height_and_weight_sorts():
    assert _names(present(_sample(), "", SortKey.HEIGHT_ASC))[0] == "pikachu"
    assert _names(present(_sample(), "", SortKey.HEIGHT_DESC))[0] == "raichu"
    assert _names(present(_sample(), "", SortKey.WEIGHT_ASC))[0] == "pikachu"
    assert _names(present(_sample(), "", SortKey.WEIGHT_DESC))[-1] == "pikachu"


def test_derived_attack_and_hp_sorts():
    # badge power = 20 + id % 80 ; hp = 50 + id % 100
    assert [e.id for e in present(_sample(), "", SortKey.ATTACK_ASC)] == [1, 4, 7, 25, 26]
    assert [e.id for e in present(_sample(), "", SortKey.HP_DESC)] == [26, 25, 7, 4, 1]


def test_sort_is_stable_on_ties_both_directions():
    tied = [make_entity(i, f"m{i}", height=5) for i in (3, 1, 2)]
    assert [e.id for e in present(tied, "", SortKey.HEIGHT_ASC)] == [3, 1, 2]
    assert [e.id for e in present(tied, "", SortKey.HEIGHT_DESC)] == [3, 1, 2]
    # ids 1 and 81 share badge power 21
    pair = [make_entity(81, "late"), make_entity(1, "early")]
    assert [e.id for e in present(pair, "", SortKey.ATTACK_ASC)] == [81, 1]


def test_present_is_a_permutation_and_does_not_mutate():
    sample = _sample()
    snapshot = list(sample)
    for key in SortKey:
        out = present(sample, "", key)
        assert sorted(e.id for e in out) == sorted(e.id for e in sample)
        assert out is not sample
    assert sample == snapshot


def test_name_sort_uses_locale_collation(monkeypatch):
    from pokecards.catalog import pipeline
    # A collation that ranks "raichu" ahead of everything else
    monkeypatch.setattr(pipeline.locale, "strxfrm", lambda s: "" if s == "raichu" else s)
    assert _names(present(_sample(), "", SortKey.NAME_ASC))[0] == "raichu"
