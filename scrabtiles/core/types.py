from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

BLANK = "?"


@dataclass(frozen=True)
class Tile:
    """Jedna dlazdica: pismeno 'A'..'Z' alebo '?' pre blank a jej body.

    `tile_id` je jedinecne v ramci jednej tasky; dlazdice s rovnakym
    pismenom su inak zamenitelne.
    """
    letter: str
    points: int
    tile_id: int = 0

    @property
    def is_blank(self) -> bool:
        return self.letter == BLANK


class Premium(Enum):
    """Premiove polia na doske."""
    DL = auto()  # Double Letter
    TL = auto()  # Triple Letter
    DW = auto()  # Double Word
    TW = auto()  # Triple Word
    ST = auto()  # Start (stred dosky)

TileCounts = dict[str, int]
