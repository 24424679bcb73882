"""Textové vykreslenie dosky a stojana cez Rich.

Vstupom sú iba read-only pohľady z `scrabtiles.core.state`.
"""
from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .core.state import BoardView, SessionView

_PREMIUM_STYLES = {
    "TW": "bold white on red",
    "DW": "black on magenta",
    "TL": "bold white on blue",
    "DL": "black on cyan",
    "ST": "black on yellow",
}


def render_board(view: BoardView) -> Table:
    table = Table(show_header=True, show_lines=False, box=None, pad_edge=False)
    table.add_column("", justify="right", style="dim")
    for c in range(len(view["grid"])):
        table.add_column(f"{c:>2}", justify="center")
    for r, row in enumerate(view["grid"]):
        cells: list[Text] = []
        for c, ch in enumerate(row):
            if ch != ".":
                cells.append(Text(f" {ch}", style="bold black on wheat1"))
                continue
            tag = view["premiums"][r][c]
            if tag:
                # Stred sa kreslí hviezdičkou
                label = " *" if tag == "ST" else tag
                cells.append(Text(label, style=_PREMIUM_STYLES[tag]))
            else:
                cells.append(Text(" ."))
        table.add_row(str(r), *cells)
    return table


def render_hand(letters: str, points: list[int] | None = None) -> Text:
    """Stojan: písmeno s bodmi v dolnom indexe, blank ako prázdny kameň."""
    tray = Text()
    for i, ch in enumerate(letters):
        face = " " if ch == "?" else ch
        value = points[i] if points and i < len(points) else None
        tray.append(f"[{face}", style="bold")
        tray.append(f"{value}" if value is not None else "", style="dim")
        tray.append("] ")
    return tray


def print_session(view: SessionView, console: Console | None = None) -> None:
    console = console or Console()
    console.print(render_board(view["board"]))
    for player in view["players"]:
        marker = "▶" if player["name"] == view["current_player"] else " "
        console.print(
            Text(f"{marker} {player['name']} ({player['score']}): "),
            render_hand(player["hand"], player["points"]),
        )
    console.print(f"Taška: {view['bag_remaining']} kameňov")
