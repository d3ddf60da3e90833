"""
Numbered menus and prompts rendered with Rich.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence

from rich.align import Align
from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt, IntPrompt
from rich.table import Table

from pokecards.ui.render import console as default_console

@dataclass
class MenuItem:
    label: str
    value: str

class Menu:
    def __init__(self, title: str, items: Sequence[MenuItem], footer: str | None = None,
                 console: Optional[Console] = None):
        self.title = title
        self.items = list(items)
        self.footer = footer
        self.console = console or default_console

    def _render(self):
        table = Table(
            title=f"[bold bright_white]{self.title}[/bold bright_white]",
            box=ROUNDED,
            show_header=False,
            width=60,
        )
        table.add_column("Key", justify="right", style="bright_cyan", width=4)
        table.add_column("Option")
        for i, item in enumerate(self.items, 1):
            table.add_row(str(i), escape(item.label))
        self.console.print(Align.center(table))
        if self.footer:
            self.console.print(Panel(self.footer, style="dim bright_white", box=ROUNDED))

    def run(self) -> Optional[str]:
        """Return the chosen value; blank input cancels with None."""
        self._render()
        while True:
            raw = Prompt.ask("Select", default="", show_default=False, console=self.console).strip()
            if not raw:
                return None
            if raw.isdigit() and 1 <= int(raw) <= len(self.items):
                return self.items[int(raw) - 1].value
            self.console.print("[yellow]Pick one of the listed numbers.[/yellow]")

def select_menu(
    title: str,
    options: list[tuple[str, str]],
    footer: str | None = None,
    console: Optional[Console] = None,
) -> str | None:
    items = [MenuItem(label=o[0], value=o[1]) for o in options]
    if footer is None:
        footer = "Type a number and press Enter • Enter alone to go back"
    return Menu(title, items, footer=footer, console=console).run()

def ask_text(label: str, default: str = "", console: Optional[Console] = None) -> str:
    return Prompt.ask(label, default=default, show_default=bool(default),
                      console=console or default_console).strip()

def ask_index(label: str, count: int, console: Optional[Console] = None) -> Optional[int]:
    """0-based index into a list of `count` rows, or None when cancelled."""
    con = console or default_console
    while True:
        raw = Prompt.ask(label, default="", show_default=False, console=con).strip()
        if not raw:
            return None
        if raw.isdigit() and 1 <= int(raw) <= count:
            return int(raw) - 1
        con.print(f"[yellow]Enter a number between 1 and {count}.[/yellow]")

def ask_int(label: str, default: int, console: Optional[Console] = None) -> int:
    return IntPrompt.ask(label, default=default, console=console or default_console)

def pause(console: Optional[Console] = None):
    Prompt.ask("[dim]Press Enter to continue[/dim]", default="", show_default=False,
               console=console or default_console)
