from __future__ import annotations

from abc import ABC, abstractmethod

from metrodle.domain.models import GameState, Stats


class IGameRepository(ABC):
    """Port for persisting one player's game state and stats."""

    @abstractmethod
    def load_state(self, *, date_key: str, solution_id: str) -> GameState:
        """Return the stored state for this date and solution, or a fresh one."""

    @abstractmethod
    def save_state(self, state: GameState) -> None:
        raise NotImplementedError

    @abstractmethod
    def load_stats(self) -> Stats:
        raise NotImplementedError

    @abstractmethod
    def save_stats(self, stats: Stats) -> None:
        raise NotImplementedError
