from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

StateBackend = Literal["memory", "dynamodb"]


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip() or None


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Runtime configuration.

    Env vars:
      - METRODLE_DATA_PATH: directory with stations/adjacency/interchanges CSVs (default: data)
      - METRODLE_DATA_URL: base URL to fetch the same CSVs from (wins over the path)
      - METRODLE_TIMEZONE: calendar used for the daily date key (default: America/Sao_Paulo)
      - METRODLE_STRICT_GRAPH: fail on records naming unknown stations (default: true)
      - METRODLE_STATE_BACKEND: memory | dynamodb (default: memory)
      - METRODLE_SHARE_URL: URL appended to share text
      - DDB_TABLE: DynamoDB table for the dynamodb backend
    """

    data_path: str
    data_url: str | None
    timezone: str
    strict_graph: bool
    state_backend: StateBackend
    share_url: str
    ddb_table: str | None

    @staticmethod
    def from_env() -> "GameSettings":
        backend = (_env_str("METRODLE_STATE_BACKEND") or "memory").lower()
        if backend not in {"memory", "dynamodb"}:
            raise RuntimeError(f"Unsupported METRODLE_STATE_BACKEND: {backend}")

        return GameSettings(
            data_path=_env_str("METRODLE_DATA_PATH") or "data",
            data_url=_env_str("METRODLE_DATA_URL"),
            timezone=_env_str("METRODLE_TIMEZONE") or "America/Sao_Paulo",
            strict_graph=env_bool("METRODLE_STRICT_GRAPH", True),
            state_backend=backend,  # type: ignore[arg-type]
            share_url=_env_str("METRODLE_SHARE_URL") or "https://metrodle.com.br/",
            ddb_table=_env_str("DDB_TABLE"),
        )
