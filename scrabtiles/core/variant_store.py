from __future__ import annotations

import json
import logging
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ..config import DEFAULT_VARIANT, get_variant_slug
from .assets import get_variants_path
from .types import BLANK

log = logging.getLogger("scrabtiles.variants")


@dataclass(frozen=True)
class VariantLetter:
    """Jedna trieda dlaždíc (písmeno alebo blank) v distribúcii."""

    letter: str
    count: int
    points: int


@dataclass(frozen=True)
class VariantDefinition:
    """Definícia variantu: počty a body pre každé písmeno."""

    slug: str
    language: str
    letters: tuple[VariantLetter, ...]
    source: str = "builtin"

    @property
    def distribution(self) -> dict[str, int]:
        return {letter.letter: letter.count for letter in self.letters}

    @property
    def tile_points(self) -> dict[str, int]:
        return {letter.letter: letter.points for letter in self.letters}

    @property
    def total_tiles(self) -> int:
        return sum(letter.count for letter in self.letters)


# --- Interné helpery -----------------------------------------------------


def _variant_path(slug: str, directory: Path | None = None) -> Path:
    return (directory or get_variants_path()) / f"{slugify(slug)}.json"


def slugify(text: str) -> str:
    """Vytvorí slug (lowercase, bez diakritiky) pre názov variantu."""

    normalized = unicodedata.normalize("NFKD", text)
    ascii_only = normalized.encode("ascii", "ignore").decode("ascii")
    cleaned = "".join(ch if ch.isalnum() else "-" for ch in ascii_only.lower())
    cleaned = "-".join(filter(None, cleaned.split("-")))
    return cleaned or "variant"


def normalise_letter(letter: str) -> str:
    if not letter:
        return ""
    upper = letter.strip().upper()
    if upper in {"BLANK", "JOKER", "WILDCARD", "ŽOLÍK", "_", BLANK}:
        return BLANK
    return upper.replace(" ", "")


def _coerce_count(value: object) -> int:
    """Prevedie JSON hodnotu na nezáporné celé číslo."""

    if value is None or isinstance(value, bool):
        raise TypeError("numeric value missing")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected integer, got {value}")
        value = int(value)
    if isinstance(value, str):
        value = int(value.strip())
    if not isinstance(value, int):
        raise TypeError(f"unsupported numeric value: {value!r}")
    if value < 0:
        raise ValueError(f"negative value: {value}")
    return value


def load_variant_file(path: Path) -> VariantDefinition:
    """Načíta variant z JSON súboru.

    Neplatné položky (chýbajúce písmeno, duplicita, viacznakové písmeno,
    zlé čísla) sa preskočia s varovaním. Súbor bez jedinej platnej
    dlaždice vyvolá `ValueError`.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    language = str(data.get("language") or data.get("name") or "Unknown")
    slug = slugify(str(data.get("slug") or path.stem))
    source = str(data.get("source", "file"))
    letters_raw: Iterable[object] = data.get("letters", [])

    letters: list[VariantLetter] = []
    seen: set[str] = set()
    for idx, raw in enumerate(letters_raw):
        if not isinstance(raw, dict):
            log.warning("variant_skip_invalid_letter path=%s index=%s", path, idx)
            continue
        letter = normalise_letter(str(raw.get("letter", "")))
        if not letter:
            log.warning("variant_letter_missing path=%s index=%s", path, idx)
            continue
        if letter in seen:
            log.warning("variant_letter_duplicate path=%s letter=%s", path, letter)
            continue
        if len(letter) != 1:
            log.warning("variant_letter_multichar path=%s letter=%s", path, letter)
            continue
        try:
            count = _coerce_count(raw.get("count"))
            points = _coerce_count(raw.get("points"))
        except (TypeError, ValueError):
            log.warning("variant_letter_bad_numeric path=%s letter=%s", path, letter)
            continue
        letters.append(VariantLetter(letter=letter, count=count, points=points))
        seen.add(letter)

    if not letters:
        raise ValueError(f"Variant {path} neobsahuje žiadne dlaždice")

    return VariantDefinition(
        slug=slug,
        language=language,
        letters=tuple(sorted(letters, key=lambda letter: letter.letter)),
        source=source,
    )


# --- Verejné API ----------------------------------------------------------


def list_installed_variants(directory: Path | None = None) -> list[VariantDefinition]:
    variants: list[VariantDefinition] = []
    for path in sorted((directory or get_variants_path()).glob("*.json")):
        try:
            variants.append(load_variant_file(path))
        except (OSError, ValueError) as exc:
            log.error("variant_load_failed path=%s error=%s", path, exc)
    return variants


def variant_exists(slug: str, directory: Path | None = None) -> bool:
    return _variant_path(slug, directory).exists()


def load_variant(slug: str, directory: Path | None = None) -> VariantDefinition:
    path = _variant_path(slug, directory)
    if not path.exists():
        raise FileNotFoundError(f"Variant '{slug}' neexistuje")
    return load_variant_file(path)


def get_active_variant_slug() -> str:
    candidate = get_variant_slug()
    if variant_exists(candidate):
        return slugify(candidate)
    log.warning("active_variant_missing slug=%s -> fallback=%s", candidate, DEFAULT_VARIANT)
    return DEFAULT_VARIANT


def get_active_variant() -> VariantDefinition:
    return load_variant(get_active_variant_slug())
