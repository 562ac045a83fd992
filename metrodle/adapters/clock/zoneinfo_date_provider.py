from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from metrodle.app.ports.output import IDateProvider


@dataclass(frozen=True, slots=True)
class ZoneInfoDateProvider(IDateProvider):
    """Today's date key in a fixed region-local calendar."""

    timezone: str = "America/Sao_Paulo"

    def now(self) -> datetime:
        return datetime.now(ZoneInfo(self.timezone))

    def today_key(self) -> str:
        return self.now().date().isoformat()
