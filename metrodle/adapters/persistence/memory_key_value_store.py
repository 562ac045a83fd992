from __future__ import annotations

from dataclasses import dataclass, field

from metrodle.app.ports.output import IKeyValueStore


@dataclass(slots=True)
class InMemoryKeyValueStore(IKeyValueStore):
    """Process-local store; state is lost on restart."""

    data: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value
