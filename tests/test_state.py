from __future__ import annotations

from scrabtiles.core.board import Board
from scrabtiles.core.game import GameSession
from scrabtiles.core.state import build_board_view
from scrabtiles.core.types import Tile


def test_board_view_format() -> None:
    b = Board()
    b.place_tile(7, 7, Tile("C", 3, 0))
    b.place_tile(7, 8, Tile("?", 0, 1))
    b.place_tile(7, 9, Tile("T", 1, 2))
    view = build_board_view(b)
    assert len(view["grid"]) == 15
    assert all(len(row) == 15 for row in view["grid"])
    assert view["grid"][7][7:10] == "C?T"
    assert view["blanks"] == [{"row": 7, "col": 8}]
    assert view["premiums"][0][0] == "TW"
    assert view["premiums"][7][7] == "ST"
    assert view["premiums"][0][1] == ""


def test_session_snapshot(session: GameSession) -> None:
    session.place_from_hand(0, 7, 7)
    view = session.snapshot()
    assert view["bag_remaining"] == 86
    assert view["current_player"] == "Player 1"
    p1, p2 = view["players"]
    assert len(p1["hand"]) == 6 and len(p1["points"]) == 6
    assert len(p2["hand"]) == 7
    assert view["board"]["grid"][7][7] != "."


def test_snapshot_is_detached(session: GameSession) -> None:
    view = session.snapshot()
    view["board"]["grid"][0] = "X" * 15
    view["players"][0]["points"].clear()
    assert session.board.grid()[0] == "." * 15
    assert len(session.current_player().hand) == 7
