from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from metrodle.domain.exceptions import DuplicateGuess, GameAlreadyFinished
from metrodle.domain.models import (
    MAX_ATTEMPTS,
    GameState,
    GameStatus,
    GuessOutcome,
    Station,
    Stats,
)

from .search import resolve_station


def new_game(solution_id: str, date_key: str) -> GameState:
    return GameState(solution_id=solution_id, date_key=date_key)


def record_result(stats: Stats, state: GameState) -> Stats:
    """Fold a finished game into the aggregate, once per date key.

    Returns `stats` unchanged when the game is still playing or when this
    date key was already counted.
    """

    if not state.is_finished or stats.last_date == state.date_key:
        return stats

    if state.status is GameStatus.WON:
        distribution = list(stats.distribution)
        attempts = len(state.guesses)
        if 1 <= attempts <= len(distribution):
            distribution[attempts - 1] += 1
        streak = stats.streak + 1
        return replace(
            stats,
            played=stats.played + 1,
            wins=stats.wins + 1,
            streak=streak,
            best=max(stats.best, streak),
            last_date=state.date_key,
            distribution=tuple(distribution),
        )

    return replace(
        stats, played=stats.played + 1, streak=0, last_date=state.date_key
    )


def apply_guess(
    state: GameState,
    stats: Stats,
    candidate: str,
    roster: Sequence[Station],
    *,
    max_attempts: int = MAX_ATTEMPTS,
) -> GuessOutcome:
    """Evaluate one submitted guess.

    Raises a UserInputRejected subclass (StationNotFound, DuplicateGuess,
    GameAlreadyFinished) without touching state. Otherwise returns the new
    state and, if the game just ended, stats with the result folded in.
    """

    station = resolve_station(candidate, roster)
    if station.id in state.guesses:
        raise DuplicateGuess()
    if state.is_finished:
        raise GameAlreadyFinished()

    guesses = state.guesses + (station.id,)
    if station.id == state.solution_id:
        status = GameStatus.WON
    elif len(guesses) >= max_attempts:
        status = GameStatus.LOST
    else:
        status = GameStatus.PLAYING

    new_state = replace(state, guesses=guesses, status=status)
    new_stats = record_result(stats, new_state)
    return GuessOutcome(
        state=new_state,
        stats=new_stats,
        station=station,
        finished_now=new_state.is_finished,
    )
