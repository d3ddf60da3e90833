from __future__ import annotations
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from pokecards.battle.engine import BattleSession, Phase
from pokecards.catalog.compare import ComparisonSet
from pokecards.catalog.pipeline import SortKey, SORT_LABELS, present
from pokecards.core.logging import logger
from pokecards.data.api import PokeAPIClient
from pokecards.data.loader import LoadResult, LoadStatus, load_collection, load_detail
from pokecards.data.models import Entity
from pokecards.system.settings import Settings
from pokecards.ui import render
from pokecards.ui.menu import select_menu, ask_text, ask_index, ask_int, pause

class AppContext:
    def __init__(self, settings: Settings, client: Optional[PokeAPIClient] = None,
                 console: Optional[Console] = None):
        self.settings = settings
        self.client = client or PokeAPIClient(
            settings.data.api_base_url, timeout=settings.data.request_timeout
        )
        self.console = console or render.console
        self.collection: LoadResult[List[Entity]] = LoadResult(LoadStatus.UNAVAILABLE)
        self.query = ""
        self.sort_key = SortKey.DEFAULT
        self.comparison = ComparisonSet()
        self.battle = BattleSession()
        settings.on_change(self._on_settings_changed)

    def _on_settings_changed(self, data):
        configure_logging(self.settings)

    # --- Collection ---
    def load_catalog(self) -> bool:
        d = self.settings.data
        self.collection = load_collection(self.client, d.page_offset, d.page_limit, d.fetch_workers)
        # Entries from another page cannot stay selected
        self.comparison.clear()
        return self.collection.ok

    @property
    def entities(self) -> List[Entity]:
        return list(self.collection.value or [])

    def visible(self) -> List[Entity]:
        return present(self.entities, self.query, self.sort_key)

    def set_query(self, query: str):
        self.query = query.strip()

    def set_sort(self, key):
        self.sort_key = SortKey.parse(key)

    # --- Battle ---
    def enter_battle(self):
        self.battle = BattleSession()

    def exit_battle(self):
        self.battle.exit()


def _pick_entity(ctx: AppContext, entities: List[Entity], label: str) -> Optional[Entity]:
    if not entities:
        ctx.console.print(render.catalog_grid(entities))
        return None
    ctx.console.print(render.catalog_table(entities, ctx.comparison.ids))
    idx = ask_index(label, len(entities), console=ctx.console)
    return None if idx is None else entities[idx]

def show_catalog(ctx: AppContext):
    if not ctx.collection.ok:
        ctx.console.print(render.unavailable_panel(ctx.collection.reason))
        return
    ctx.console.print(render.catalog_grid(ctx.visible(), ctx.comparison.ids))
    ctx.console.print(
        f"[dim]Search: '{escape(ctx.query) or '*'}' • Sort: {SORT_LABELS[ctx.sort_key]} • "
        f"Comparing {len(ctx.comparison)}/{ctx.comparison.capacity}[/dim]"
    )

def choose_sort(ctx: AppContext):
    choice = select_menu("SORT BY", [(label, key.value) for key, label in SORT_LABELS.items()],
                         console=ctx.console)
    if choice:
        ctx.set_sort(choice)

def show_detail(ctx: AppContext):
    entity = _pick_entity(ctx, ctx.visible(), "Detail for #")
    if entity is None:
        return
    with ctx.console.status("Loading details..."):
        result = load_detail(ctx.client, entity.id)
    if result.ok:
        ctx.console.print(render.detail_panel(result.value))
    else:
        ctx.console.print(render.unavailable_panel(result.reason))
    pause(ctx.console)

def compare_menu(ctx: AppContext):
    while True:
        ctx.console.print(render.comparison_table(ctx.comparison.members))
        choice = select_menu(
            "COMPARE",
            [("Add / remove Pokémon", "toggle"), ("Clear all", "clear"), ("Back", "back")],
            console=ctx.console,
        )
        if choice in (None, "back"):
            return
        if choice == "clear":
            ctx.comparison.clear()
        elif choice == "toggle":
            entity = _pick_entity(ctx, ctx.visible(), "Toggle #")
            if entity is not None and not ctx.comparison.toggle(entity):
                ctx.console.print(
                    f"[yellow]Already comparing {ctx.comparison.capacity}; remove one first.[/yellow]"
                )

def _name_players(ctx: AppContext) -> bool:
    session = ctx.battle
    while session.phase is Phase.NAMING_PLAYERS:
        p1 = ask_text("Player 1 name", console=ctx.console)
        p2 = ask_text("Player 2 name", console=ctx.console)
        if session.set_names(p1, p2):
            return True
        ctx.console.print("[yellow]Both players need a name.[/yellow]")
        if select_menu("BATTLE", [("Try again", "retry"), ("Leave battle", "leave")],
                       console=ctx.console) != "retry":
            return False
    return True

def _select_for(ctx: AppContext, player: int):
    session = ctx.battle
    session.set_query(player, ask_text(f"{session.name_of(player)}, search", console=ctx.console))
    entity = _pick_entity(ctx, session.candidates(player, ctx.entities),
                          f"{session.name_of(player)} picks #")
    if entity is not None:
        session.select(player, entity)

def battle_mode(ctx: AppContext):
    ctx.enter_battle()
    session = ctx.battle
    try:
        if not _name_players(ctx):
            return
        while True:
            ctx.console.print(render.battle_hud(session))
            if session.phase is Phase.ROUND_RESOLVED:
                options = [("Next round", "next"), ("Leave battle", "leave")]
            else:
                options = [
                    (f"{session.player1_name}: choose Pokémon", "p1"),
                    (f"{session.player2_name}: choose Pokémon", "p2"),
                ]
                if session.can_resolve:
                    options.append(("Fight!", "fight"))
                options.append(("Leave battle", "leave"))
            choice = select_menu("BATTLE", options, console=ctx.console)
            if choice in (None, "leave"):
                return
            if choice == "p1":
                _select_for(ctx, 1)
            elif choice == "p2":
                _select_for(ctx, 2)
            elif choice == "fight":
                result = session.resolve()
                ctx.console.print(render.round_result_panel(result, session))
            elif choice == "next":
                session.next_round()
    finally:
        ctx.exit_battle()

def options_menu(ctx: AppContext):
    d = ctx.settings.data
    choice = select_menu(
        "OPTIONS",
        [
            (f"Page offset [{d.page_offset}]", "offset"),
            (f"Page size [{d.page_limit}]", "limit"),
            (f"Log level [{d.log_level}]", "log_level"),
            ("Return", "return"),
        ],
        console=ctx.console,
    )
    if choice == "offset":
        ctx.settings.update(page_offset=ask_int("Offset", d.page_offset, console=ctx.console))
        ctx.load_catalog()
    elif choice == "limit":
        ctx.settings.update(page_limit=ask_int("Page size (1-100)", d.page_limit, console=ctx.console))
        ctx.load_catalog()
    elif choice == "log_level":
        lvl = select_menu("LOG LEVEL", [(l, l) for l in ("DEBUG", "INFO", "WARN", "ERROR")],
                          console=ctx.console)
        if lvl:
            ctx.settings.update(log_level=lvl)

def configure_logging(settings: Settings):
    log_level = settings.data.log_level
    # Without debug, INFO lines would interleave with the UI; raise to WARN
    if not settings.data.debug and log_level in {"INFO","DEBUG"}:
        logger.set_level("WARN")
    else:
        logger.set_level(log_level)  # type: ignore[arg-type]

def run():
    settings = Settings.load()
    settings.data.apply_env()
    configure_logging(settings)
    ctx = AppContext(settings)
    with ctx.console.status("Loading Pokémon..."):
        ctx.load_catalog()
    try:
        while True:
            show_catalog(ctx)
            choice = select_menu(
                "POKÉCARDS",
                [
                    ("Search by name", "search"),
                    ("Sort", "sort"),
                    ("View details", "detail"),
                    ("Compare", "compare"),
                    ("Battle", "battle"),
                    ("Reload", "reload"),
                    ("Options", "options"),
                    ("Quit", "quit"),
                ],
                console=ctx.console,
            )
            if choice in (None, "quit"):
                ctx.console.print("Goodbye!")
                break
            if choice == "search":
                ctx.set_query(ask_text("Name contains (blank shows all)", console=ctx.console))
            elif choice == "sort":
                choose_sort(ctx)
            elif choice == "detail":
                show_detail(ctx)
            elif choice == "compare":
                compare_menu(ctx)
            elif choice == "battle":
                battle_mode(ctx)
            elif choice == "reload":
                with ctx.console.status("Loading Pokémon..."):
                    ctx.load_catalog()
            elif choice == "options":
                options_menu(ctx)
    finally:
        ctx.client.close()

if __name__ == "__main__":
    run()
