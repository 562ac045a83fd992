from __future__ import annotations

from abc import ABC, abstractmethod


class IKeyValueStore(ABC):
    """String-valued key-value storage (browser localStorage equivalent)."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
