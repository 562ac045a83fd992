from __future__ import annotations

from uuid import uuid4

import pytest

from metrodle.adapters.persistence import DynamoDbKeyValueStore, KeyValueGameRepository
from metrodle.domain.models import GameState, GameStatus, Stats


@pytest.mark.integration
def test_set_then_get(state_table: str) -> None:
    store = DynamoDbKeyValueStore(table_name=state_table)
    key = f"test:{uuid4()}"

    assert store.get(key) is None

    store.set(key, "first")
    store.set(key, "second")

    assert store.get(key) == "second"


@pytest.mark.integration
def test_game_repository_on_dynamodb(state_table: str) -> None:
    repo = KeyValueGameRepository(
        store=DynamoDbKeyValueStore(table_name=state_table),
        namespace=f"metrodlesp:{uuid4().hex}",
    )

    fresh = repo.load_state(date_key="2025-10-12", solution_id="PSE")
    assert fresh.guesses == ()

    won = GameState(
        solution_id="PSE", date_key="2025-10-12", guesses=("LUZ", "PSE"), status=GameStatus.WON
    )
    stats = Stats(
        played=1, wins=1, streak=1, best=1, last_date="2025-10-12", distribution=(0, 1, 0, 0, 0, 0)
    )
    repo.save_state(won)
    repo.save_stats(stats)

    assert repo.load_state(date_key="2025-10-12", solution_id="PSE") == won
    assert repo.load_stats() == stats
