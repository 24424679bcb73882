"""Pomocné funkcie pre prístup k assetom (premiums.json, varianty).

Komentár (SK): Používame Path pre robustné zostavenie ciest nezávislé od cwd.
"""

from __future__ import annotations

from pathlib import Path


def get_assets_path() -> Path:
    """Vráti cestu k priečinku `assets/` v balíku.

    Nájde sa relatívne k tomuto modulu (`scrabtiles/core/assets.py`).
    """

    return Path(__file__).resolve().parent.parent / "assets"


def get_premiums_path() -> str:
    """Úplná cesta k súboru `premiums.json` (ako textová cesta)."""

    return str(get_assets_path() / "premiums.json")


def get_variants_path() -> Path:
    return get_assets_path() / "variants"
