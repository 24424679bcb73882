"""Pytest configuration and fixtures.

- Izoluje testy od `SCRABTILES_*` premenných z prostredia a `.env`
- Poskytuje zdieľané fixtures (taška, partia)
"""

from __future__ import annotations

import os

import pytest

from scrabtiles.core.game import GameSession
from scrabtiles.core.tiles import TileBag


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    """Testy nesmú závisieť od lokálnej konfigurácie."""
    for key in list(os.environ):
        if key.startswith("SCRABTILES_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def bag() -> TileBag:
    return TileBag(seed=42, variant="english")


@pytest.fixture
def session() -> GameSession:
    return GameSession(seed=7, variant="english", hand_size=7)
