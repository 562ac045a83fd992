from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from metrodle.domain.exceptions import PersistenceCorrupt
from metrodle.domain.models import MAX_ATTEMPTS, GameState, GameStatus, Stats

RECORD_VERSION = 1


class GameStateRecord(BaseModel):
    kind: Literal["game_state"]
    version: Literal[1]
    solution_id: str = Field(..., min_length=1)
    date_key: str = Field(..., pattern=r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
    guesses: list[str] = Field(default_factory=list, max_length=MAX_ATTEMPTS)
    status: Literal["playing", "won", "lost"] = "playing"

    @field_validator("guesses")
    @classmethod
    def _unique_guesses(cls, value: list[str]) -> list[str]:
        if len(set(value)) != len(value):
            raise ValueError("duplicate guesses")
        return value

    @model_validator(mode="after")
    def _status_matches_guesses(self) -> "GameStateRecord":
        solved = self.solution_id in self.guesses
        if solved and self.guesses[-1] != self.solution_id:
            raise ValueError("guesses continue after the solution")
        if solved:
            expected = "won"
        elif len(self.guesses) >= MAX_ATTEMPTS:
            expected = "lost"
        else:
            expected = "playing"
        if self.status != expected:
            raise ValueError(f"status {self.status!r} does not match guesses")
        return self

    @staticmethod
    def from_domain(state: GameState) -> "GameStateRecord":
        return GameStateRecord(
            kind="game_state",
            version=RECORD_VERSION,
            solution_id=state.solution_id,
            date_key=state.date_key,
            guesses=list(state.guesses),
            status=state.status.value,
        )

    def to_domain(self) -> GameState:
        return GameState(
            solution_id=self.solution_id,
            date_key=self.date_key,
            guesses=tuple(self.guesses),
            status=GameStatus(self.status),
        )


class StatsRecord(BaseModel):
    kind: Literal["stats"]
    version: Literal[1]
    played: int = Field(0, ge=0)
    wins: int = Field(0, ge=0)
    streak: int = Field(0, ge=0)
    best: int = Field(0, ge=0)
    last_date: str | None = None
    distribution: list[int] = Field(
        default_factory=lambda: [0] * MAX_ATTEMPTS,
        min_length=MAX_ATTEMPTS,
        max_length=MAX_ATTEMPTS,
    )

    @staticmethod
    def from_domain(stats: Stats) -> "StatsRecord":
        return StatsRecord(
            kind="stats",
            version=RECORD_VERSION,
            played=stats.played,
            wins=stats.wins,
            streak=stats.streak,
            best=stats.best,
            last_date=stats.last_date,
            distribution=list(stats.distribution),
        )

    def to_domain(self) -> Stats:
        return Stats(
            played=self.played,
            wins=self.wins,
            streak=self.streak,
            best=self.best,
            last_date=self.last_date,
            distribution=tuple(self.distribution),
        )


def encode_state(state: GameState) -> str:
    return GameStateRecord.from_domain(state).model_dump_json()


def decode_state(raw: str) -> GameState:
    try:
        return GameStateRecord.model_validate_json(raw).to_domain()
    except ValidationError as exc:
        raise PersistenceCorrupt(f"Unreadable game state: {exc}") from exc


def encode_stats(stats: Stats) -> str:
    return StatsRecord.from_domain(stats).model_dump_json()


def decode_stats(raw: str) -> Stats:
    try:
        return StatsRecord.model_validate_json(raw).to_domain()
    except ValidationError as exc:
        raise PersistenceCorrupt(f"Unreadable stats: {exc}") from exc
