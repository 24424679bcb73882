"""Ruka (rack) hráča: usporiadaný zoznam kameňov s obmedzenou veľkosťou.

Ruka nevie nič o doske ani o vykresľovaní. Kameň z ruky odoberá iba
`GameSession.place_from_hand`, spolu s položením na dosku.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator

from .tiles import TileBag
from .types import Tile

log = logging.getLogger("scrabtiles.hand")

MAX_HAND_SIZE = 7


@dataclass
class Hand:
    """Kamene jedného hráča v poradí, v akom ich vidí na stojane."""

    max_size: int = MAX_HAND_SIZE
    tiles: list[Tile] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_size < 1:
            raise ValueError("Ruka musí mať kapacitu aspoň 1")
        if len(self.tiles) > self.max_size:
            raise ValueError("Ruka má viac kameňov ako je jej kapacita")

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def is_full(self) -> bool:
        return len(self.tiles) >= self.max_size

    def refill(self, bag: TileBag) -> list[Tile]:
        """Doplní ruku z tašky do `max_size` a vráti potiahnuté kamene.

        Plná ruka alebo prázdna taška -> nič sa nedeje (nie je to chyba).
        """
        if self.is_full() or bag.is_empty():
            return []
        deficit = self.max_size - len(self.tiles)
        drawn = bag.draw(deficit)
        self.tiles.extend(drawn)
        log.debug("hand_refilled drawn=%s size=%s", len(drawn), len(self.tiles))
        return drawn

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Premieša iba poradie kameňov v ruke."""
        (rng or random).shuffle(self.tiles)

    def peek(self, index: int) -> Tile | None:
        if 0 <= index < len(self.tiles):
            return self.tiles[index]
        return None

    def take(self, index: int) -> Tile | None:
        """Odoberie kameň na pozícii `index`; mimo rozsahu vráti None."""
        if not 0 <= index < len(self.tiles):
            return None
        return self.tiles.pop(index)

    def letters(self) -> str:
        return "".join(tile.letter for tile in self.tiles)

    def snapshot(self) -> tuple[Tile, ...]:
        return tuple(self.tiles)
