from .date_provider import IDateProvider
from .game_repository import IGameRepository
from .key_value_store import IKeyValueStore
from .network_repository import INetworkRepository

__all__ = [
    "IDateProvider",
    "IGameRepository",
    "IKeyValueStore",
    "INetworkRepository",
]
