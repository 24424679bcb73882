from __future__ import annotations

from scrabtiles.core.board import BOARD_SIZE, Board
from scrabtiles.core.types import Premium, Tile


def test_place_on_empty_cell_changes_only_that_cell() -> None:
    b = Board()
    before = b.grid()
    assert b.place_tile(3, 4, Tile("Q", 10, 0)) is True
    after = b.grid()
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if (r, c) == (3, 4):
                assert after[r][c] == "Q"
            else:
                assert after[r][c] == before[r][c]
    assert b.tile_count() == 1


def test_place_on_occupied_cell_rejected() -> None:
    b = Board()
    first = Tile("A", 1, 0)
    assert b.place_tile(7, 7, first)
    grid = b.grid()
    assert b.place_tile(7, 7, Tile("B", 3, 1)) is False
    assert b.grid() == grid
    assert b.get_tile(7, 7) == first


def test_out_of_bounds_rejected() -> None:
    b = Board()
    for r, c in [(-1, 0), (0, -1), (15, 0), (0, 15), (99, 99)]:
        assert b.is_empty(r, c) is False
        assert b.place_tile(r, c, Tile("A", 1, 0)) is False
        assert b.get_tile(r, c) is None
        assert b.premium_at(r, c) is None
    assert b.tile_count() == 0


def test_placement_does_not_touch_premium() -> None:
    b = Board()
    assert b.premium_at(0, 0) == Premium.TW
    b.place_tile(0, 0, Tile("Z", 10, 0))
    assert b.premium_at(0, 0) == Premium.TW


def test_no_adjacency_rules() -> None:
    # Doska uklada iba obsadenost, izolovane kamene su povolene
    b = Board()
    assert b.place_tile(0, 0, Tile("A", 1, 0))
    assert b.place_tile(14, 14, Tile("B", 3, 1))
    assert [(r, c) for r, c, _ in b.occupied()] == [(0, 0), (14, 14)]
