from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .station import Station

MAX_ATTEMPTS = 6


class GameStatus(str, Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True, slots=True)
class GameState:
    solution_id: str
    date_key: str
    guesses: tuple[str, ...] = ()
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_finished(self) -> bool:
        return self.status is not GameStatus.PLAYING


@dataclass(frozen=True, slots=True)
class Stats:
    """Cross-day aggregate.

    `distribution[i]` counts wins in i+1 attempts; losses are played - wins.
    """

    played: int = 0
    wins: int = 0
    streak: int = 0
    best: int = 0
    last_date: str | None = None
    distribution: tuple[int, ...] = field(
        default_factory=lambda: (0,) * MAX_ATTEMPTS
    )


@dataclass(frozen=True, slots=True)
class Knowledge:
    confirmed: frozenset[str] = frozenset()
    eliminated: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class GuessOutcome:
    state: GameState
    stats: Stats
    station: Station
    finished_now: bool = False


@dataclass(frozen=True, slots=True)
class GuessFeedback:
    station: Station
    matching_lines: tuple[str, ...]
    distance: int
    direction: str
    is_solution: bool
