from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass

import httpx

from metrodle.app.ports.output import INetworkRepository
from metrodle.domain.models import NetworkData

from .network_csv import ADJACENCY_FILE, INTERCHANGES_FILE, STATIONS_FILE, parse_network


@dataclass(slots=True)
class HttpNetworkRepository(INetworkRepository):
    """Fetches the station network CSVs over HTTP.

    Env vars:
      - METRODLE_DATA_URL: base URL the three CSV files live under
      - METRODLE_DATA_TIMEOUT_S: request timeout (default 10)
    """

    base_url: str | None = None
    timeout_s: float = 10.0
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = os.getenv("METRODLE_DATA_URL")
        if os.getenv("METRODLE_DATA_TIMEOUT_S"):
            self.timeout_s = float(os.environ["METRODLE_DATA_TIMEOUT_S"])

    def _url(self, name: str) -> str:
        if not self.base_url:
            raise RuntimeError("Missing METRODLE_DATA_URL")
        return self.base_url.rstrip("/") + "/" + name

    async def load_network(self) -> NetworkData:
        async with httpx.AsyncClient(
            timeout=self.timeout_s, transport=self.transport
        ) as client:

            async def _fetch(name: str) -> str:
                resp = await client.get(self._url(name), headers={"Cache-Control": "no-cache"})
                resp.raise_for_status()
                return resp.text

            stations, adjacency, interchanges = await asyncio.gather(
                _fetch(STATIONS_FILE), _fetch(ADJACENCY_FILE), _fetch(INTERCHANGES_FILE)
            )

        return parse_network(
            stations_csv=stations, adjacency_csv=adjacency, interchanges_csv=interchanges
        )
