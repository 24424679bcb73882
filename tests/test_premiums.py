from scrabtiles.core.board import BOARD_SIZE, CENTER, Board
from scrabtiles.core.types import Premium


def test_premium_counts():
    b = Board()
    counts = {"DL": 0, "TL": 0, "DW": 0, "TW": 0, "ST": 0, "": 0}
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            tag = b.cells[r][c].premium.name if b.cells[r][c].premium else ""
            counts[tag] += 1
    assert counts["TW"] == 8
    assert counts["DW"] == 16
    assert counts["TL"] == 12
    assert counts["DL"] == 24
    assert counts["ST"] == 1
    assert counts[""] == 225 - (8 + 16 + 12 + 24 + 1)


def test_start_square_is_center():
    b = Board()
    assert b.premium_at(*CENTER) == Premium.ST


def test_dw_spotchecks():
    b = Board()
    checks = [(1, 1), (2, 2), (3, 3), (4, 4), (10, 10), (11, 11), (12, 12), (13, 13),
              (1, 13), (2, 12), (3, 11), (4, 10), (10, 4), (11, 3), (12, 2), (13, 1)]
    for r, c in checks:
        assert b.premium_at(r, c) == Premium.DW


def test_layout_is_symmetric():
    b = Board()
    n = BOARD_SIZE - 1
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            p = b.premium_at(r, c)
            assert p == b.premium_at(c, r) == b.premium_at(n - r, c) == b.premium_at(r, n - c)
