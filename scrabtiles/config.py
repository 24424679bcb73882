"""Konfigurácia ScrabTiles z prostredia a `.env` súboru.

Pravidlá:
- `.env` sa načíta raz pri importe, no nikdy neprepíše existujúce OS premenné.
- Počas pytestu sa `.env` nenačítava (testy nastavujú prostredie samy).
- Neplatné hodnoty sa ignorujú a použije sa predvolená hodnota.
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

log = logging.getLogger("scrabtiles.config")

DEFAULT_VARIANT = "english"
DEFAULT_HAND_SIZE = 7
DEFAULT_APP_ID = "default-app-id"

# Načítaj .env veľmi skoro, ale nenahrádzaj už existujúce OS premenne
if os.getenv("PYTEST_CURRENT_TEST") is None:
    load_dotenv(override=False)

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def _parse_bool(val: str | None) -> bool | None:
    """Bezpečné parsovanie boolean reťazcov; None ak neznáme."""
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    return None


def _parse_int(val: str | None) -> int | None:
    """Parsuje celé číslo z reťazca; None pri chýbajúcej alebo zlej hodnote."""
    if val is None:
        return None
    v = val.strip()
    if not v:
        return None
    try:
        return int(v)
    except ValueError:
        log.warning("config_bad_int value=%r", val)
        return None


def get_variant_slug() -> str:
    """Slug aktívneho variantu distribúcie písmen (`SCRABTILES_VARIANT`)."""
    return (os.getenv("SCRABTILES_VARIANT") or DEFAULT_VARIANT).strip() or DEFAULT_VARIANT


def get_seed() -> int | None:
    """Seed pre reprodukovateľné miešanie tašky (`SCRABTILES_SEED`)."""
    return _parse_int(os.getenv("SCRABTILES_SEED"))


def get_hand_size() -> int:
    """Veľkosť ruky hráča (`SCRABTILES_HAND_SIZE`), minimálne 1.

    Komentár (SK): Nezmyselná hodnota (0, záporná, nečíselná) sa zahodí
    s varovaním a vráti sa štandardných 7 kameňov.
    """
    size = _parse_int(os.getenv("SCRABTILES_HAND_SIZE"))
    if size is None:
        return DEFAULT_HAND_SIZE
    if size < 1:
        log.warning("config_bad_hand_size value=%s -> fallback=%s", size, DEFAULT_HAND_SIZE)
        return DEFAULT_HAND_SIZE
    return size


def get_app_id() -> str:
    """Menný priestor pre počítadlá prihlásení (`SCRABTILES_APP_ID`)."""
    return (os.getenv("SCRABTILES_APP_ID") or DEFAULT_APP_ID).strip() or DEFAULT_APP_ID


def get_auth_token() -> str | None:
    """Voliteľný vlastný token pre prihlásenie (`SCRABTILES_AUTH_TOKEN`)."""
    token = os.getenv("SCRABTILES_AUTH_TOKEN")
    if token is None or not token.strip():
        return None
    return token.strip()


def debug_enabled() -> bool:
    """Či má konzola logovať aj DEBUG záznamy (`SCRABTILES_DEBUG`)."""
    return bool(_parse_bool(os.getenv("SCRABTILES_DEBUG")))
