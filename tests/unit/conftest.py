from __future__ import annotations

import asyncio

import pytest
from helpers import DATE, FIXTURE_NETWORK, FixedDateProvider

from metrodle.adapters.persistence import (
    InMemoryKeyValueStore,
    KeyValueGameRepository,
    LocalNetworkRepository,
)
from metrodle.app.services.daily_game_service import DailyGameService
from metrodle.app.services.puzzle_context import PuzzleContext
from metrodle.domain.models import NetworkData


@pytest.fixture(scope="session")
def network() -> NetworkData:
    return asyncio.run(LocalNetworkRepository(base_path=FIXTURE_NETWORK).load_network())


@pytest.fixture()
def context(network: NetworkData) -> PuzzleContext:
    # Pin the solution for DATE so scenarios don't depend on the hash.
    return PuzzleContext.from_network(network, daily_overrides={DATE: "Sé"})


@pytest.fixture()
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def service(context: PuzzleContext, store: InMemoryKeyValueStore) -> DailyGameService:
    return DailyGameService(
        context=context,
        repository=KeyValueGameRepository(store=store),
        date_provider=FixedDateProvider(),
        share_url="https://metrodle.com.br/",
    )


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"
