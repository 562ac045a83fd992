from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from metrodle.app.ports.output import INetworkRepository
from metrodle.domain.models import NetworkData

from .network_csv import ADJACENCY_FILE, INTERCHANGES_FILE, STATIONS_FILE, parse_network


@dataclass(slots=True)
class LocalNetworkRepository(INetworkRepository):
    """Loads the station network from a directory of CSV files.

    Env vars:
      - METRODLE_DATA_PATH: directory containing stations.csv, adjacency.csv, interchanges.csv
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("METRODLE_DATA_PATH") or "data"
        return Path(value)

    def _read(self, name: str) -> str:
        return (self._base() / name).read_text(encoding="utf-8")

    async def load_network(self) -> NetworkData:
        return parse_network(
            stations_csv=self._read(STATIONS_FILE),
            adjacency_csv=self._read(ADJACENCY_FILE),
            interchanges_csv=self._read(INTERCHANGES_FILE),
        )
