from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .assets import get_premiums_path
from .types import Premium, Tile

log = logging.getLogger("scrabtiles.board")

BOARD_SIZE = 15
CENTER = (7, 7)  # H8 (0-index)

_PREMIUM_TAGS = {
    "DL": Premium.DL,
    "TL": Premium.TL,
    "DW": Premium.DW,
    "TW": Premium.TW,
    "ST": Premium.ST,
}


@dataclass
class Cell:
    """Bunka na doske."""
    tile: Tile | None = None
    premium: Premium | None = None  # DL/TL/DW/TW/ST, nastavene len pri vytvoreni


class Board:
    """Model dosky 15x15 s premiami. Uklada iba obsadenost buniek."""
    def __init__(self, premiums_path: str | None = None) -> None:
        self.cells: list[list[Cell]] = [
            [Cell() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)
        ]
        self._load_premiums(premiums_path or get_premiums_path())

    def _load_premiums(self, path: str) -> None:
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                self.cells[r][c].premium = _PREMIUM_TAGS.get(data[r][c])

    def inside(self, row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def is_empty(self, row: int, col: int) -> bool:
        """Ci je bunka volna; suradnice mimo dosky nie su nikdy volne."""
        if not self.inside(row, col):
            return False
        return self.cells[row][col].tile is None

    def get_tile(self, row: int, col: int) -> Tile | None:
        if not self.inside(row, col):
            return None
        return self.cells[row][col].tile

    def premium_at(self, row: int, col: int) -> Premium | None:
        if not self.inside(row, col):
            return None
        return self.cells[row][col].premium

    def place_tile(self, row: int, col: int, tile: Tile) -> bool:
        """Polozi kamen na volnu bunku (bez validacii pravidiel hry).

        Vrati False a nic nezmeni, ak je bunka mimo dosky alebo obsadena.
        """
        if not self.is_empty(row, col):
            log.debug("place_rejected row=%s col=%s inside=%s", row, col, self.inside(row, col))
            return False
        self.cells[row][col].tile = tile
        return True

    def occupied(self) -> list[tuple[int, int, Tile]]:
        return [
            (r, c, cell.tile)
            for r, row in enumerate(self.cells)
            for c, cell in enumerate(row)
            if cell.tile is not None
        ]

    def tile_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.tile is not None)

    def grid(self) -> list[str]:
        """15 retazcov po 15 znakov: '.' pre prazdne, inak pismeno kamena."""
        return [
            "".join(cell.tile.letter if cell.tile else "." for cell in row)
            for row in self.cells
        ]
