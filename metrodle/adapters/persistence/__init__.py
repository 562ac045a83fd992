from .dynamodb_key_value_store import DynamoDbKeyValueStore
from .http_network_repository import HttpNetworkRepository
from .key_value_game_repository import KeyValueGameRepository
from .local_network_repository import LocalNetworkRepository
from .memory_key_value_store import InMemoryKeyValueStore

__all__ = [
    "DynamoDbKeyValueStore",
    "HttpNetworkRepository",
    "InMemoryKeyValueStore",
    "KeyValueGameRepository",
    "LocalNetworkRepository",
]
