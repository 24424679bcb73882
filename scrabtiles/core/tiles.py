from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .types import Tile, TileCounts
from .variant_store import VariantDefinition, get_active_variant, load_variant

log = logging.getLogger("scrabtiles.tiles")


def _resolve_variant(variant: VariantDefinition | str | None) -> VariantDefinition:
    if isinstance(variant, VariantDefinition):
        return variant
    if isinstance(variant, str) and variant:
        return load_variant(variant)
    return get_active_variant()


def get_tile_points(variant: VariantDefinition | str | None = None) -> TileCounts:
    """Vráti bodové hodnoty písmen pre daný (alebo aktívny) variant."""

    resolved = _resolve_variant(variant)
    return dict(resolved.tile_points)


def get_tile_distribution(variant: VariantDefinition | str | None = None) -> TileCounts:
    """Vráti distribúciu písmen pre daný (alebo aktívny) variant."""

    resolved = _resolve_variant(variant)
    return dict(resolved.distribution)


def build_tiles(variant: VariantDefinition) -> list[Tile]:
    """Zostaví neusporiadaný zoznam dlaždíc podľa distribúcie, id od 0."""
    tiles: list[Tile] = []
    for entry in variant.letters:
        for _ in range(entry.count):
            tiles.append(Tile(entry.letter, entry.points, tile_id=len(tiles)))
    return tiles


def count_letters(tiles: list[Tile] | tuple[Tile, ...]) -> TileCounts:
    """Multiset písmen v zozname dlaždíc."""
    counts: TileCounts = {}
    for tile in tiles:
        counts[tile.letter] = counts.get(tile.letter, 0) + 1
    return counts


@dataclass
class TileBag:
    """Taška s kameňmi: naplní sa podľa variantu, premieša a len sa z nej ťahá."""

    seed: int | None = None
    tiles: list[Tile] | None = None
    variant: VariantDefinition | str | None = None

    def __post_init__(self) -> None:
        self._variant = _resolve_variant(self.variant)
        self.variant = self._variant
        self.variant_slug = self._variant.slug
        self._rng = random.Random(self.seed)
        # Pozn.: Ak sú poskytnuté `tiles` (aj prázdny zoznam), zachovaj ich presne
        # v danom poradí. Inak naplň podľa distribúcie a premiešaj (Fisher–Yates).
        if self.tiles is None:
            self.tiles = build_tiles(self._variant)
            self._rng.shuffle(self.tiles)
            log.debug(
                "bag_initialized variant=%s tiles=%s seed=%s",
                self.variant_slug,
                len(self.tiles),
                self.seed,
            )

    def draw(self, n: int) -> list[Tile]:
        """Potiahne n kociek (alebo menej, ak taška je prazdna)."""
        if n <= 0:
            return []
        out, self.tiles = self.tiles[:n], self.tiles[n:]
        if len(out) < n:
            log.debug("bag_partial_draw requested=%s drawn=%s", n, len(out))
        return out

    def remaining(self) -> int:
        return len(self.tiles)

    def is_empty(self) -> bool:
        return not self.tiles

    def snapshot(self) -> tuple[Tile, ...]:
        return tuple(self.tiles)
