from __future__ import annotations

from typing import Iterable

from .text import normalize


def next_allowed_chars(text: str, names: Iterable[str]) -> frozenset[str]:
    """Characters that extend `text` towards at least one name in `names`.

    Matching happens on normalized text. Leading whitespace in `text` is
    ignored; trailing whitespace is kept since a space is a typeable key.
    An empty result is returned as is.
    """

    prefix = normalize(text.lstrip())
    allowed: set[str] = set()
    for raw in names:
        name = normalize(raw)
        if len(name) > len(prefix) and name.startswith(prefix):
            allowed.add(name[len(prefix)])
    return frozenset(allowed)
