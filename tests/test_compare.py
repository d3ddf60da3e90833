from conftest import make_entity
from pokecards.catalog.compare import ComparisonSet, comparison_rows, MAX_COMPARE


def test_toggle_adds_then_removes():
    cs = ComparisonSet()
    a = make_entity(1)
    assert cs.toggle(a) is True
    assert a in cs and 1 in cs
    assert cs.toggle(a) is True
    assert len(cs) == 0


def test_full_set_ignores_new_members():
    cs = ComparisonSet()
    for i in range(1, MAX_COMPARE + 1):
        cs.toggle(make_entity(i))
    assert cs.is_full
    assert cs.toggle(make_entity(99)) is False
    assert cs.ids == (1, 2, 3, 4)


def test_toggle_present_member_removes_even_when_full():
    cs = ComparisonSet()
    for i in range(1, 5):
        cs.toggle(make_entity(i))
    cs.toggle(make_entity(2))
    assert cs.ids == (1, 3, 4)


def test_no_duplicate_ids_with_distinct_objects():
    cs = ComparisonSet()
    cs.toggle(make_entity(7, "squirtle"))
    cs.toggle(make_entity(7, "squirtle"))
    assert len(cs) == 0


def test_members_keep_insertion_order():
    cs = ComparisonSet()
    for i in (9, 3, 5):
        cs.toggle(make_entity(i))
    assert [e.id for e in cs.members] == [9, 3, 5]


def test_remove_and_clear():
    cs = ComparisonSet()
    cs.toggle(make_entity(1))
    cs.toggle(make_entity(2))
    cs.remove(42)
    assert len(cs) == 2
    cs.remove(1)
    assert cs.ids == (2,)
    cs.clear()
    assert len(cs) == 0


def test_comparison_rows_mark_best_values():
    rows = {r.label: r for r in comparison_rows([
        make_entity(1, height=7, weight=69), make_entity(4, height=6, weight=85)])}
    assert rows["Height"].cells == ("0.7 m", "0.6 m")
    assert rows["Height"].best == (0,)
    assert rows["Weight"].best == (1,)
    assert rows["HP"].cells == ("51", "54")
    assert rows["Power"].best == (1,)


def test_comparison_rows_no_best_when_all_equal():
    rows = {r.label: r for r in comparison_rows([make_entity(1), make_entity(2)])}
    assert rows["Height"].best == ()
