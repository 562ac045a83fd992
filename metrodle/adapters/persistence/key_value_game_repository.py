from __future__ import annotations

import logging
from dataclasses import dataclass

from metrodle.app.ports.output import IGameRepository, IKeyValueStore
from metrodle.domain.algorithms.game_rules import new_game
from metrodle.domain.exceptions import PersistenceCorrupt
from metrodle.domain.models import GameState, Stats

from .game_records import decode_state, decode_stats, encode_state, encode_stats

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KeyValueGameRepository(IGameRepository):
    """Keeps GameState and Stats as two JSON records in a key-value store.

    Keys are `<namespace>:state` and `<namespace>:stats`. Unreadable or
    stale records are replaced by fresh ones rather than reported.
    """

    store: IKeyValueStore
    namespace: str = "metrodlesp"

    @property
    def state_key(self) -> str:
        return f"{self.namespace}:state"

    @property
    def stats_key(self) -> str:
        return f"{self.namespace}:stats"

    def load_state(self, *, date_key: str, solution_id: str) -> GameState:
        raw = self.store.get(self.state_key)
        if raw is not None:
            try:
                state = decode_state(raw)
            except PersistenceCorrupt as exc:
                logger.warning("Discarding stored state for %s: %s", self.namespace, exc)
            else:
                if state.date_key == date_key and state.solution_id == solution_id:
                    return state

        fresh = new_game(solution_id, date_key)
        self.save_state(fresh)
        return fresh

    def save_state(self, state: GameState) -> None:
        self.store.set(self.state_key, encode_state(state))

    def load_stats(self) -> Stats:
        raw = self.store.get(self.stats_key)
        if raw is None:
            return Stats()
        try:
            return decode_stats(raw)
        except PersistenceCorrupt as exc:
            logger.warning("Discarding stored stats for %s: %s", self.namespace, exc)
            return Stats()

    def save_stats(self, stats: Stats) -> None:
        self.store.set(self.stats_key, encode_stats(stats))
