from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class LineSchema(BaseModel):
    id: str
    name: str
    color: str


class StationSchema(BaseModel):
    id: str
    name: str
    lines: list[str]
    location: GeoPointSchema | None = None


class GuessFeedbackSchema(BaseModel):
    station: StationSchema
    matching_lines: list[str]
    distance: int
    direction: str
    is_solution: bool


class KnowledgeSchema(BaseModel):
    confirmed: list[str] = []
    eliminated: list[str] = []


class GameSchema(BaseModel):
    date_key: str
    status: Literal["playing", "won", "lost"]
    attempts: int
    max_attempts: int
    guesses: list[GuessFeedbackSchema] = []
    knowledge: KnowledgeSchema
    # Only revealed once the game is over.
    solution: StationSchema | None = None


class GuessRequestSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class GuessResponseSchema(BaseModel):
    game: GameSchema
    guessed: StationSchema
    finished_now: bool = False


class StatsSchema(BaseModel):
    played: int
    wins: int
    streak: int
    best: int
    last_date: str | None = None
    distribution: list[int]


class ShareSchema(BaseModel):
    text: str


class AllowedCharsSchema(BaseModel):
    text: str
    allowed: list[str]
