"""Identita používateľa a počítadlo prihlásení (leaderboard).

Herné jadro od tohto modulu nezávisí. Úložisko je abstraktné rozhranie
„zvýš počítadlo pre kľúč“, konkrétny backend sa dá vymeniť:

- `InMemoryCounterStore` – pre testy a jednorazové relácie
- `JsonFileCounterStore` – jeden JSON dokument na kolekciu, záznamy
  validované cez Pydantic (`LoginRecord`)
"""
from __future__ import annotations

import json
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .config import get_app_id, get_auth_token

log = logging.getLogger("scrabtiles.identity")


class IdentityError(RuntimeError):
    """Chyba backendu počítadiel (I/O alebo poškodené dáta)."""


class LoginRecord(BaseModel):
    """Jeden záznam v kolekcii prihlásení."""

    user_id: str = Field(..., min_length=1)
    login_count: int = Field(0, ge=0)


@dataclass(frozen=True)
class LeaderboardEntry:
    user_id: str
    login_count: int


def collection_path(app_id: str | None = None) -> str:
    """Cesta ku kolekcii počítadiel v rámci aplikácie."""
    return f"artifacts/{app_id or get_app_id()}/public/data/highScores"


class CounterStore(ABC):
    """Abstraktné úložisko celočíselných počítadiel podľa kľúča."""

    @abstractmethod
    def get(self, key: str) -> int:
        """Aktuálna hodnota; neznámy kľúč má hodnotu 0."""

    @abstractmethod
    def increment(self, key: str, amount: int = 1) -> int:
        """Zvýši počítadlo a vráti novú hodnotu."""

    @abstractmethod
    def items(self) -> list[tuple[str, int]]:
        """Všetky dvojice (kľúč, hodnota)."""


class InMemoryCounterStore(CounterStore):
    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def get(self, key: str) -> int:
        return self._counts.get(key, 0)

    def increment(self, key: str, amount: int = 1) -> int:
        if amount < 0:
            raise ValueError("amount musí byť nezáporný")
        self._counts[key] = self._counts.get(key, 0) + amount
        return self._counts[key]

    def items(self) -> list[tuple[str, int]]:
        return list(self._counts.items())


class JsonFileCounterStore(CounterStore):
    """Počítadlá uložené v JSON súbore (jedna kolekcia na súbor).

    Formát: `{"collection": "...", "records": [{"user_id": ..., "login_count": ...}]}`.
    """

    def __init__(self, path: Path | str, collection: str | None = None) -> None:
        self.path = Path(path)
        self._explicit_collection = collection is not None
        self.collection = collection or collection_path()

    def _load(self) -> dict[str, LoginRecord]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            records = [LoginRecord.model_validate(raw) for raw in data.get("records", [])]
        except (OSError, json.JSONDecodeError, AttributeError, ValidationError) as exc:
            raise IdentityError(f"Nepodarilo sa načítať {self.path}: {exc}") from exc
        stored = data.get("collection")
        # Bez explicitnej kolekcie platí tá, ktorá je uložená v súbore
        if not self._explicit_collection and isinstance(stored, str) and stored:
            self.collection = stored
        return {record.user_id: record for record in records}

    def _save(self, records: dict[str, LoginRecord]) -> None:
        payload = {
            "collection": self.collection,
            "records": [record.model_dump() for record in records.values()],
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise IdentityError(f"Nepodarilo sa uložiť {self.path}: {exc}") from exc

    def get(self, key: str) -> int:
        record = self._load().get(key)
        return record.login_count if record else 0

    def increment(self, key: str, amount: int = 1) -> int:
        if amount < 0:
            raise ValueError("amount musí byť nezáporný")
        records = self._load()
        current = records.get(key)
        count = (current.login_count if current else 0) + amount
        records[key] = LoginRecord(user_id=key, login_count=count)
        self._save(records)
        return count

    def items(self) -> list[tuple[str, int]]:
        return [(key, record.login_count) for key, record in self._load().items()]


class LoginTracker:
    """Prihlásenie (anonymné alebo vlastným tokenom) s počítaním prihlásení."""

    def __init__(self, store: CounterStore, *, token: str | None = None) -> None:
        self.store = store
        self.token = token if token is not None else get_auth_token()
        self.current_user: str | None = None

    def sign_in(self, token: str | None = None) -> str:
        """Prihlási používateľa a zvýši jeho počítadlo prihlásení.

        S novým tokenom je identitou samotný token. Bez neho zostáva
        prihlásený používateľ rovnaký (aj anonymný); nové anonymné id
        vznikne až po `sign_out()`.
        """
        if token:
            user_id = token
        elif self.current_user is not None:
            user_id = self.current_user
        elif self.token:
            user_id = self.token
        else:
            user_id = f"anon-{uuid.uuid4().hex}"
        count = self.store.increment(user_id)
        self.current_user = user_id
        log.info("user_signed_in user=%s login_count=%s", user_id, count)
        return user_id

    def sign_out(self) -> None:
        if self.current_user is None:
            return
        log.info("user_signed_out user=%s", self.current_user)
        self.current_user = None

    def leaderboard(self, limit: int | None = None) -> list[LeaderboardEntry]:
        """Používatelia zoradení podľa počtu prihlásení (zostupne)."""
        entries = sorted(
            (LeaderboardEntry(user_id=key, login_count=value) for key, value in self.store.items()),
            key=lambda entry: (-entry.login_count, entry.user_id),
        )
        return entries if limit is None else entries[:limit]
