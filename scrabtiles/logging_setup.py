"""Centralizovaná inicializácia logovania pre ScrabTiles.

- Konfiguruje Rich konzolový handler a rotujúci súborový handler.
- Zabráni duplicitným handlerom pri opakovaných volaniach.
- Poskytuje `SESSION_ID_VAR` pre propagáciu id partie cez ContextVar.
"""
from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

from .config import debug_enabled

# Kontextové ID partie, nastavuje ho GameSession
SESSION_ID_VAR: ContextVar[str] = ContextVar("session_id", default="-")


class _SessionIdFilter(logging.Filter):
    """Filter doplní `session_id` do každého záznamu z ContextVar."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = SESSION_ID_VAR.get()
        return True


def default_log_path() -> str:
    """Určí predvolenú cestu k log súboru.

    Predvolene koreň repozitára (`scrabtiles.log`), prepísateľné premennou
    prostredia `SCRABTILES_LOG_PATH`.
    """

    env = os.getenv("SCRABTILES_LOG_PATH")
    if env:
        return env
    root_dir = Path(__file__).resolve().parents[1]
    return str(root_dir / "scrabtiles.log")


def configure_logging(*, log_path: str | None = None) -> logging.Logger:
    """Inicializuje logging iba raz a vráti projektový logger.

    - Rich na konzolu (prehľadné tracebacky)
    - Rotujúci súborový handler (≈1 MB, 5 záloh)
    - Formát zahŕňa `session_id` zo `SESSION_ID_VAR`
    """

    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger("scrabtiles")

    root.setLevel(logging.DEBUG)
    session_filter = _SessionIdFilter()

    # Konzola
    ch = RichHandler(rich_tracebacks=True)
    ch.setLevel(logging.DEBUG if debug_enabled() else logging.INFO)
    ch.addFilter(session_filter)
    ch.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(ch)

    # Súbor s rotáciou
    path = log_path or default_log_path()
    try:
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    except OSError as exc:
        # Bez súboru pokračuj aspoň s konzolou
        logging.getLogger("scrabtiles").warning("log_file_unavailable path=%s error=%s", path, exc)
    else:
        fh.setLevel(logging.DEBUG)
        fh.addFilter(session_filter)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s [session=%(session_id)s] %(message)s"
            )
        )
        root.addHandler(fh)

    return logging.getLogger("scrabtiles")
