import io

from rich.console import Console

from pokecards.ui import menu


def _console():
    return Console(record=True, width=100, color_system=None, file=io.StringIO())


def _answers(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr(menu.Prompt, "ask", lambda *a, **k: next(it))


def test_select_menu_returns_chosen_value(monkeypatch):
    _answers(monkeypatch, "2")
    assert menu.select_menu("T", [("One", "one"), ("Two", "two")], console=_console()) == "two"


def test_out_of_range_choice_reprompts(monkeypatch):
    con = _console()
    _answers(monkeypatch, "9", "abc", "1")
    assert menu.select_menu("T", [("One", "one")], console=con) == "one"
    assert "Pick one of the listed numbers." in con.export_text()


def test_blank_input_cancels(monkeypatch):
    _answers(monkeypatch, "  ")
    assert menu.select_menu("T", [("One", "one")], console=_console()) is None


def test_labels_are_not_parsed_as_markup(monkeypatch):
    con = _console()
    _answers(monkeypatch, "")
    menu.select_menu("T", [("[bold]Ash[/bold]", "ash")], console=con)
    assert "[bold]Ash[/bold]" in con.export_text()
