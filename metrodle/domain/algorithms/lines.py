from __future__ import annotations

import re
from typing import Iterable

from metrodle.domain.exceptions import UnknownLineLabel
from metrodle.domain.models.line import LINES

IGNORED_LINE_LABELS = frozenset({"Ramal de São Paulo"})

_DASHES = re.compile("[–—]")
_LINHA = re.compile(r"linha\s*", re.IGNORECASE)
_LEADING_NUMBER = re.compile(r"^(\d{1,2})\b")


def line_id_from_label(label: str) -> str | None:
    """Map a raw label such as "Linha 4–Amarela" to a catalog id ("4").

    Returns None for labels that are known but not part of the game.
    """

    raw = _LINHA.sub("", _DASHES.sub("-", label), count=1).strip()
    m = _LEADING_NUMBER.match(raw)
    if m is None:
        if label.strip() in IGNORED_LINE_LABELS:
            return None
        raise UnknownLineLabel(f"Unknown line: {raw!r}")

    line_id = str(int(m.group(1)))
    if line_id not in LINES:
        raise UnknownLineLabel(f"Line {line_id} is not in the catalog")
    return line_id


def sorted_line_ids(line_ids: Iterable[str]) -> tuple[str, ...]:
    """Unique ids in numeric order."""

    return tuple(sorted(set(line_ids), key=lambda lid: (int(lid), lid)))
