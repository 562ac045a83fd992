from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Line:
    """Metro/train line metadata. `color` is presentation only."""

    id: str
    name: str
    color: str  # CSS hex


LINES: dict[str, Line] = {
    line.id: line
    for line in (
        Line(id="1", name="Linha 1-Azul", color="#0033a0"),
        Line(id="2", name="Linha 2-Verde", color="#00a651"),
        Line(id="3", name="Linha 3-Vermelha", color="#ee3124"),
        Line(id="4", name="Linha 4-Amarela", color="#ffc20e"),
        Line(id="5", name="Linha 5-Lilás", color="#7f3f98"),
        Line(id="7", name="Linha 7-Rubi", color="#c21807"),
        Line(id="8", name="Linha 8-Diamante", color="#8e8e8e"),
        Line(id="9", name="Linha 9-Esmeralda", color="#0f9d58"),
        Line(id="10", name="Linha 10-Turquesa", color="#30c6d9"),
        Line(id="11", name="Linha 11-Coral", color="#ff7f50"),
        Line(id="12", name="Linha 12-Safira", color="#26619c"),
        Line(id="13", name="Linha 13-Jade", color="#00a86b"),
        Line(id="15", name="Linha 15-Prata", color="#c0c0c0"),
    )
}
