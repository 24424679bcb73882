from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

from ..config import get_hand_size, get_seed
from ..logging_setup import SESSION_ID_VAR
from .board import Board
from .hand import Hand
from .tiles import TileBag
from .variant_store import VariantDefinition

if TYPE_CHECKING:
    from .state import SessionView

log = logging.getLogger("scrabtiles.game")

DEFAULT_PLAYERS = ("Player 1", "Player 2")


@dataclass
class PlayerState:
    """Lokálny stav hráča v partii."""

    name: str
    hand: Hand = field(default_factory=Hand)
    score: int = 0


class GameSession:
    """Jeden vlastnený stav partie: taška, doska a ruky hráčov.

    Všetky operácie sú synchrónne a buď prebehnú celé, alebo sa odmietnu
    bez zmeny stavu. Relácia nevie nič o vykresľovaní; volajúci si po
    každej zmene vyžiada `snapshot()`.
    """

    def __init__(
        self,
        player_names: Sequence[str] = DEFAULT_PLAYERS,
        *,
        seed: int | None = None,
        variant: VariantDefinition | str | None = None,
        hand_size: int | None = None,
        premiums_path: str | None = None,
    ) -> None:
        if not player_names:
            raise ValueError("GameSession vyžaduje aspoň jedného hráča")
        self.player_names = list(player_names)
        self.seed = seed if seed is not None else get_seed()
        self.variant = variant
        self.hand_size = hand_size if hand_size is not None else get_hand_size()
        self.premiums_path = premiums_path
        self.session_id = "-"
        self.board: Board
        self.bag: TileBag
        self.players: list[PlayerState] = []
        self.current_index = 0
        self._rng = random.Random(self.seed)
        self.reset()

    def reset(self) -> None:
        """Nová doska, nová premiešaná taška, prázdne a doplnené ruky."""

        self.session_id = uuid.uuid4().hex[:8]
        SESSION_ID_VAR.set(self.session_id)
        bag_seed = self._rng.randrange(2**32) if self.seed is not None else None
        self.board = Board(self.premiums_path)
        self.bag = TileBag(seed=bag_seed, variant=self.variant)
        self.players = [
            PlayerState(name=name, hand=Hand(max_size=self.hand_size))
            for name in self.player_names
        ]
        self.current_index = 0
        for player in self.players:
            player.hand.refill(self.bag)
        log.info(
            "session_reset players=%s bag_remaining=%s variant=%s",
            len(self.players),
            self.bag.remaining(),
            self.bag.variant_slug,
        )

    def _player(self, player: int | None) -> PlayerState | None:
        index = self.current_index if player is None else player
        if 0 <= index < len(self.players):
            return self.players[index]
        log.debug("unknown_player index=%s", index)
        return None

    def current_player(self) -> PlayerState:
        return self.players[self.current_index]

    def advance_turn(self) -> PlayerState:
        """Posunie ukazovateľ na ďalšieho hráča (bez pravidiel ťahu)."""
        self.current_index = (self.current_index + 1) % len(self.players)
        return self.current_player()

    def refill_hand(self, player: int | None = None) -> int:
        """Doplní ruku hráča (predvolene aktuálneho) a vráti počet potiahnutých."""
        state = self._player(player)
        if state is None:
            return 0
        return len(state.hand.refill(self.bag))

    def shuffle_hand(self, player: int | None = None) -> None:
        state = self._player(player)
        if state is None:
            return
        state.hand.shuffle(self._rng)

    def place_from_hand(
        self,
        hand_index: int,
        row: int,
        col: int,
        player: int | None = None,
    ) -> bool:
        """Presunie kameň z ruky na voľnú bunku dosky ako jednu operáciu.

        Najprv sa overí index v ruke aj cieľová bunka, až potom sa mení
        stav. Pri odmietnutí (zlý hráč, zlý index, bunka mimo dosky alebo
        obsadená) sa nezmení nič a vráti sa False.
        """
        state = self._player(player)
        if state is None:
            return False
        tile = state.hand.peek(hand_index)
        if tile is None:
            log.debug("place_rejected reason=bad_hand_index index=%s", hand_index)
            return False
        if not self.board.is_empty(row, col):
            log.debug("place_rejected reason=cell_unavailable row=%s col=%s", row, col)
            return False
        self.board.place_tile(row, col, tile)
        state.hand.take(hand_index)
        log.debug(
            "tile_placed player=%s letter=%s row=%s col=%s",
            state.name,
            tile.letter,
            row,
            col,
        )
        return True

    def scores(self) -> dict[str, int]:
        return {player.name: player.score for player in self.players}

    def snapshot(self) -> SessionView:
        """Read-only pohľad na partiu pre vykresľovanie."""
        from .state import build_session_view

        return build_session_view(self)
