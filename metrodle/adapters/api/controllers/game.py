from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from metrodle.adapters.api.dependencies import get_game_service, get_puzzle_context
from metrodle.adapters.api.schemas.game import (
    AllowedCharsSchema,
    GameSchema,
    GeoPointSchema,
    GuessFeedbackSchema,
    GuessRequestSchema,
    GuessResponseSchema,
    KnowledgeSchema,
    LineSchema,
    ShareSchema,
    StationSchema,
    StatsSchema,
)
from metrodle.app.services.daily_game_service import DailyGameService
from metrodle.app.services.puzzle_context import PuzzleContext
from metrodle.domain.models import GameState, Station, Stats

router = APIRouter(tags=["game"])


def _station_to_schema(station: Station) -> StationSchema:
    return StationSchema(
        id=station.id,
        name=station.name,
        lines=list(station.lines),
        location=(
            GeoPointSchema(lat=station.location.lat, lon=station.location.lon)
            if station.location
            else None
        ),
    )


def _game_to_schema(service: DailyGameService, state: GameState) -> GameSchema:
    knowledge = service.knowledge(state)
    return GameSchema(
        date_key=state.date_key,
        status=state.status.value,
        attempts=len(state.guesses),
        max_attempts=service.max_attempts,
        guesses=[
            GuessFeedbackSchema(
                station=_station_to_schema(fb.station),
                matching_lines=list(fb.matching_lines),
                distance=fb.distance,
                direction=fb.direction,
                is_solution=fb.is_solution,
            )
            for fb in service.feedback(state)
        ],
        knowledge=KnowledgeSchema(
            confirmed=sorted(knowledge.confirmed, key=int),
            eliminated=sorted(knowledge.eliminated, key=int),
        ),
        solution=(
            _station_to_schema(service.solution(state)) if state.is_finished else None
        ),
    )


def _stats_to_schema(stats: Stats) -> StatsSchema:
    return StatsSchema(
        played=stats.played,
        wins=stats.wins,
        streak=stats.streak,
        best=stats.best,
        last_date=stats.last_date,
        distribution=list(stats.distribution),
    )


@router.get("/lines", response_model=list[LineSchema])
def list_lines(
    context: PuzzleContext = Depends(get_puzzle_context),
) -> list[LineSchema]:
    return [
        LineSchema(id=line.id, name=line.name, color=line.color)
        for line in context.lines.values()
    ]


@router.get("/stations", response_model=list[StationSchema])
def search_stations(
    query: str = Query(default="", max_length=100),
    service: DailyGameService = Depends(get_game_service),
) -> list[StationSchema]:
    return [_station_to_schema(s) for s in service.search(query)]


@router.get("/keyboard", response_model=AllowedCharsSchema)
def allowed_characters(
    text: str = Query(default="", max_length=100),
    service: DailyGameService = Depends(get_game_service),
) -> AllowedCharsSchema:
    return AllowedCharsSchema(text=text, allowed=sorted(service.allowed_characters(text)))


@router.get("/game", response_model=GameSchema)
def get_game(service: DailyGameService = Depends(get_game_service)) -> GameSchema:
    return _game_to_schema(service, service.current_state())


@router.post("/game/guesses", response_model=GuessResponseSchema)
def submit_guess(
    req: GuessRequestSchema,
    service: DailyGameService = Depends(get_game_service),
) -> GuessResponseSchema:
    outcome = service.submit_guess(req.name)
    return GuessResponseSchema(
        game=_game_to_schema(service, outcome.state),
        guessed=_station_to_schema(outcome.station),
        finished_now=outcome.finished_now,
    )


@router.get("/game/stats", response_model=StatsSchema)
def get_stats(service: DailyGameService = Depends(get_game_service)) -> StatsSchema:
    return _stats_to_schema(service.stats())


@router.get("/game/share", response_model=ShareSchema)
def get_share(service: DailyGameService = Depends(get_game_service)) -> ShareSchema:
    return ShareSchema(text=service.share_text())
