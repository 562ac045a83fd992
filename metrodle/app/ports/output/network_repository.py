from __future__ import annotations

from abc import ABC, abstractmethod

from metrodle.domain.models import NetworkData


class INetworkRepository(ABC):
    """Port for loading the static station/adjacency/interchange records."""

    @abstractmethod
    async def load_network(self) -> NetworkData:
        raise NotImplementedError
