"""Read-only pohľady na stav partie pre vykresľovanie.

Pozn.: Modul je bez UI zalezitosti; výsledky sú obyčajné slovníky a
reťazce, takže ich volajúci nemôže použiť na zmenu stavu.
"""

from __future__ import annotations

from typing import TypedDict

from .board import BOARD_SIZE, Board
from .game import GameSession


class Pos(TypedDict):
    row: int
    col: int


class BoardView(TypedDict):
    grid: list[str]
    blanks: list[Pos]
    premiums: list[list[str]]


class PlayerView(TypedDict):
    name: str
    hand: str
    points: list[int]
    score: int


class SessionView(TypedDict):
    board: BoardView
    players: list[PlayerView]
    current_player: str
    bag_remaining: int


def build_board_view(board: Board) -> BoardView:
    """Vytvori kompaktny pohlad na dosku.

    - grid: 15 retazcov po 15 znakov, '.' pre prazdne, inak pismeno
    - blanks: pozicie, kde lezi blank ('?' je aj v gride)
    - premiums: 15x15 tagov ('DL', 'TL', 'DW', 'TW', 'ST' alebo '')
    """
    blanks: list[Pos] = []
    premiums: list[list[str]] = []
    for r in range(BOARD_SIZE):
        row_tags: list[str] = []
        for c in range(BOARD_SIZE):
            cell = board.cells[r][c]
            row_tags.append(cell.premium.name if cell.premium else "")
            if cell.tile is not None and cell.tile.is_blank:
                blanks.append({"row": r, "col": c})
        premiums.append(row_tags)
    return BoardView(grid=board.grid(), blanks=blanks, premiums=premiums)


def build_session_view(session: GameSession) -> SessionView:
    """Snapshot celej partie po poslednej zmene."""
    players: list[PlayerView] = [
        PlayerView(
            name=player.name,
            hand=player.hand.letters(),
            points=[tile.points for tile in player.hand],
            score=player.score,
        )
        for player in session.players
    ]
    return SessionView(
        board=build_board_view(session.board),
        players=players,
        current_player=session.current_player().name,
        bag_remaining=session.bag.remaining(),
    )
