from __future__ import annotations

import unicodedata


def normalize(s: str) -> str:
    """Strip diacritics and lowercase ("Água Branca" -> "agua branca")."""

    decomposed = unicodedata.normalize("NFD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).lower()


def roster_sort_key(name: str) -> tuple[str, str]:
    return (normalize(name), name)
