from __future__ import annotations

from abc import ABC, abstractmethod


class IDateProvider(ABC):
    """Port supplying the current puzzle date key (YYYY-MM-DD)."""

    @abstractmethod
    def today_key(self) -> str:
        raise NotImplementedError
