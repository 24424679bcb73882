from __future__ import annotations

import random

import pytest

from scrabtiles.core.hand import MAX_HAND_SIZE, Hand
from scrabtiles.core.tiles import TileBag, count_letters
from scrabtiles.core.types import Tile


def test_refill_empty_hand_to_max(bag: TileBag) -> None:
    hand = Hand()
    drawn = hand.refill(bag)
    assert len(drawn) == MAX_HAND_SIZE == 7
    assert len(hand) == 7
    assert bag.remaining() == 93


def test_refill_full_hand_is_noop(bag: TileBag) -> None:
    hand = Hand()
    hand.refill(bag)
    before = hand.snapshot()
    assert hand.refill(bag) == []
    assert hand.snapshot() == before
    assert bag.remaining() == 93


def test_refill_only_tops_up_deficit(bag: TileBag) -> None:
    hand = Hand()
    hand.refill(bag)
    kept = hand.snapshot()
    hand.take(0)
    hand.take(0)
    drawn = hand.refill(bag)
    assert len(drawn) == 2
    assert len(hand) == 7
    # preživšie kamene zostávajú vpredu v pôvodnom poradí
    assert hand.snapshot()[:5] == kept[2:]


def test_refill_never_exceeds_or_shrinks(bag: TileBag) -> None:
    hand = Hand(max_size=3)
    for _ in range(5):
        size_before = len(hand)
        hand.refill(bag)
        assert size_before <= len(hand) <= 3


def test_refill_with_nearly_empty_bag(bag: TileBag) -> None:
    bag.draw(98)
    hand = Hand()
    assert len(hand.refill(bag)) == 2
    assert len(hand) == 2
    assert hand.refill(bag) == []


def test_shuffle_preserves_multiset(bag: TileBag) -> None:
    hand = Hand()
    hand.refill(bag)
    before = hand.snapshot()
    hand.shuffle(random.Random(3))
    assert sorted(hand.snapshot(), key=lambda t: t.tile_id) == sorted(before, key=lambda t: t.tile_id)
    assert count_letters(hand.snapshot()) == count_letters(before)
    assert bag.remaining() == 93


def test_take_by_index() -> None:
    tiles = [Tile("A", 1, 0), Tile("A", 1, 1), Tile("B", 3, 2)]
    hand = Hand(tiles=list(tiles))
    assert hand.take(5) is None
    assert hand.take(-1) is None
    assert len(hand) == 3
    assert hand.take(1) == Tile("A", 1, 1)
    assert hand.letters() == "AB"
    assert hand.take(0) == Tile("A", 1, 0)
    assert hand.letters() == "B"


def test_is_full_tracks_capacity(bag: TileBag) -> None:
    hand = Hand(max_size=2)
    assert hand.is_full() is False
    hand.refill(bag)
    assert hand.is_full() is True
    hand.take(0)
    assert hand.is_full() is False


def test_invalid_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        Hand(max_size=0)
    with pytest.raises(ValueError):
        Hand(max_size=1, tiles=[Tile("A", 1, 0), Tile("B", 3, 1)])
