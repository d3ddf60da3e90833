"""Rich renderables for the catalog, detail, comparison and battle screens.

Every function returns a renderable and prints nothing, so callers decide
which Console gets it (the shared `console` below, or a recording one in tests).
"""
from __future__ import annotations
from typing import Iterable, Optional, Sequence

from rich.align import Align
from rich.box import ROUNDED, HEAVY
from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pokecards.battle.engine import BattleSession, Phase, RoundResult, Winner, NERF_MULTIPLIER
from pokecards.battle.stats import derive_badge_stats
from pokecards.catalog.compare import comparison_rows
from pokecards.core.types import type_style
from pokecards.data.loader import REASON_NOT_FOUND
from pokecards.data.models import Entity, EntityDetail

console = Console()

STAT_BAR_MAX = 150
STAT_BAR_WIDTH = 24

_DETAIL_STATS = (
    ("HP", "hp", "red"),
    ("Attack", "attack", "dark_orange"),
    ("Defense", "defense", "blue"),
    ("Sp. Attack", "special_attack", "purple"),
    ("Sp. Defense", "special_defense", "green"),
    ("Speed", "speed", "yellow"),
)

def type_badges(types: Iterable[str]) -> Text:
    text = Text()
    for i, t in enumerate(types):
        if i:
            text.append(" ")
        text.append(f" {t.capitalize()} ", style=type_style(t))
    return text

def stat_bar(value: int, color: str, width: int = STAT_BAR_WIDTH) -> Text:
    """Bar scaled so STAT_BAR_MAX fills the whole width."""
    filled = max(0, min(width, int(value / STAT_BAR_MAX * width)))
    bar = Text("█" * filled, style=color)
    bar.append("░" * (width - filled), style="dim")
    return bar

def card_panel(entity: Entity, *, selected: bool = False) -> Panel:
    badge = derive_badge_stats(entity.id)
    body = Text(justify="center")
    body.append(entity.name.capitalize(), style="bold bright_white")
    body.append(f"\n{entity.dex_number}\n", style="dim")
    body.append_text(type_badges(entity.types))
    body.append(f"\nHP {badge.hp}  ATK {badge.power}", style="bright_white")
    return Panel(
        body,
        box=HEAVY if selected else ROUNDED,
        border_style="bright_cyan" if selected else "bright_white",
        width=26,
        padding=(0, 1),
    )

def catalog_grid(entities: Sequence[Entity], compare_ids: Sequence[int] = ()) -> RenderableType:
    if not entities:
        return Panel(Text("No Pokémon match the current search.", style="dim"), box=ROUNDED)
    cards = [card_panel(e, selected=e.id in compare_ids) for e in entities]
    return Columns(cards, equal=True, expand=False)

def catalog_table(entities: Sequence[Entity], compare_ids: Sequence[int] = ()) -> Table:
    """Numbered list used for picking an entry."""
    table = Table(box=ROUNDED, show_header=True, header_style="bold bright_white")
    table.add_column("#", justify="right")
    table.add_column("Dex", style="dim")
    table.add_column("Name", style="bright_white")
    table.add_column("Types")
    table.add_column("HP", justify="right")
    table.add_column("ATK", justify="right")
    table.add_column("Cmp", justify="center")
    for i, e in enumerate(entities, 1):
        badge = derive_badge_stats(e.id)
        table.add_row(
            str(i), e.dex_number, e.name.capitalize(), type_badges(e.types),
            str(badge.hp), str(badge.power), "✓" if e.id in compare_ids else "",
        )
    return table

def detail_panel(detail: EntityDetail) -> Panel:
    e = detail.entity
    header = Text()
    header.append(e.name.capitalize(), style="bold bright_white")
    header.append(f"  {e.dex_number}", style="dim")

    facts = Table.grid(padding=(0, 2))
    facts.add_column(style="dim")
    facts.add_column(style="bright_white")
    facts.add_row("Types", type_badges(e.types))
    facts.add_row("Height", f"{e.height_m:.1f} m")
    facts.add_row("Weight", f"{e.weight_kg:.1f} kg")
    facts.add_row("Abilities", ", ".join(a.title() for a in detail.ability_labels) or "-")
    if e.image:
        facts.add_row("Artwork", Text(e.image, style="link " + e.image))

    stats = Table.grid(padding=(0, 1))
    stats.add_column(style="dim", width=12)
    stats.add_column(justify="right", width=4)
    stats.add_column()
    base = detail.base_stats
    for label, key, color in _DETAIL_STATS:
        value = getattr(base, key)
        stats.add_row(label, str(value), stat_bar(value, color))

    body = Group(
        header,
        Text(detail.description, style="italic"),
        Text(),
        facts,
        Text(),
        Text("Base Stats", style="bold"),
        stats,
    )
    return Panel(body, box=ROUNDED, border_style="bright_white", title="[bold]DETAIL[/bold]")

def comparison_table(members: Sequence[Entity]) -> RenderableType:
    if not members:
        return Panel(Text("Pick up to 4 Pokémon to compare.", style="dim"), box=ROUNDED)
    table = Table(box=ROUNDED, title="[bold]COMPARE[/bold]", header_style="bold bright_white")
    table.add_column("", style="dim")
    for e in members:
        table.add_column(f"{e.name.capitalize()} {e.dex_number}", justify="center")
    for row in comparison_rows(members):
        cells = [
            Text(c, style="bold green" if i in row.best else "")
            for i, c in enumerate(row.cells)
        ]
        table.add_row(row.label, *cells)
    return table

def _player_panel(session: BattleSession, player: int) -> Panel:
    name = session.name_of(player)
    pick = session.selections[player]
    lines = Text()
    lines.append(f"Points: {session.points_of(player)}", style="bright_white")
    leading = session.leader == player
    if leading:
        lines.append("  Leading", style="bold bright_green")
    if session.is_nerfed(player):
        lines.append(f"  (stats x{NERF_MULTIPLIER})", style="yellow")
    lines.append("\n")
    if pick is None:
        lines.append("No Pokémon chosen", style="dim")
    else:
        lines.append(f"{pick.name.capitalize()} {pick.dex_number}\n", style="bold")
        lines.append_text(type_badges(pick.types))
    return Panel(lines, title=Text(name, style="bold"), box=ROUNDED, width=36, padding=(0, 1),
                 border_style="bright_green" if leading else "none")

def battle_hud(session: BattleSession) -> RenderableType:
    if session.phase is Phase.NAMING_PLAYERS:
        return Panel(Text("Enter both player names to start.", style="dim"), box=ROUNDED,
                     title="[bold]BATTLE[/bold]")
    columns = Columns([_player_panel(session, 1), _player_panel(session, 2)], padding=(0, 4))
    return Align.center(columns)

def round_result_panel(result: RoundResult, session: BattleSession) -> Panel:
    table = Table(box=ROUNDED, header_style="bold bright_white")
    table.add_column("Stat", style="dim")
    table.add_column(Text(session.player1_name), justify="right")
    table.add_column(Text(session.player2_name), justify="right")
    for c in result.comparisons:
        s1 = "bold green" if c.winner is Winner.PLAYER1 else ""
        s2 = "bold green" if c.winner is Winner.PLAYER2 else ""
        table.add_row(c.label, Text(str(c.player1_value), style=s1), Text(str(c.player2_value), style=s2))
    winner = session.winner_name(result)
    headline = (
        Text(f"{winner} wins the round!", style="bold bright_green") if winner
        else Text("It's a draw!", style="bold yellow")
    )
    deciding = Text(
        f"Deciding stat: {result.deciding_stat_name} "
        f"({result.player1_value} vs {result.player2_value})",
        style="bright_white",
    )
    score = Text(
        f"Score: {session.player1_name} {session.player1_points} - "
        f"{session.player2_points} {session.player2_name}",
        style="dim",
    )
    return Panel(Group(headline, deciding, table, score), box=ROUNDED, title="[bold]ROUND RESULT[/bold]")

def unavailable_panel(reason: Optional[str] = None) -> Panel:
    msg = "Pokémon not found." if reason == REASON_NOT_FOUND else "Data unavailable. Try reloading."
    return Panel(Text(msg, style="bold red"), box=ROUNDED, border_style="red")

__all__ = [
    "console","type_badges","stat_bar","card_panel","catalog_grid","catalog_table",
    "detail_panel","comparison_table","battle_hud","round_result_panel","unavailable_panel",
]
