from __future__ import annotations

from fastapi import Header, Request

from metrodle.adapters.clock import ZoneInfoDateProvider
from metrodle.adapters.persistence import (
    DynamoDbKeyValueStore,
    HttpNetworkRepository,
    InMemoryKeyValueStore,
    KeyValueGameRepository,
    LocalNetworkRepository,
)
from metrodle.adapters.settings import GameSettings
from metrodle.app.ports.output import IKeyValueStore, INetworkRepository
from metrodle.app.services.daily_game_service import DailyGameService
from metrodle.app.services.puzzle_context import PuzzleContext


def build_network_repository(settings: GameSettings) -> INetworkRepository:
    if settings.data_url:
        return HttpNetworkRepository(base_url=settings.data_url)
    return LocalNetworkRepository(base_path=settings.data_path)


def build_key_value_store(settings: GameSettings) -> IKeyValueStore:
    if settings.state_backend == "dynamodb":
        return DynamoDbKeyValueStore(table_name=settings.ddb_table)
    return InMemoryKeyValueStore()


async def build_puzzle_context(settings: GameSettings) -> PuzzleContext:
    network = await build_network_repository(settings).load_network()
    return PuzzleContext.from_network(network, strict=settings.strict_graph)


def get_puzzle_context(request: Request) -> PuzzleContext:
    return request.app.state.puzzle


def get_game_service(
    request: Request,
    x_player_id: str = Header(
        default="anonymous", min_length=1, max_length=64, pattern=r"^[A-Za-z0-9_-]+$"
    ),
) -> DailyGameService:
    app_state = request.app.state
    settings: GameSettings = app_state.settings
    return DailyGameService(
        context=app_state.puzzle,
        repository=KeyValueGameRepository(
            store=app_state.store, namespace=f"metrodlesp:{x_player_id}"
        ),
        date_provider=ZoneInfoDateProvider(timezone=settings.timezone),
        share_url=settings.share_url,
    )
