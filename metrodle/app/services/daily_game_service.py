from __future__ import annotations

import logging
from dataclasses import dataclass

from metrodle.app.ports.output import IDateProvider, IGameRepository
from metrodle.domain.algorithms.game_rules import apply_guess, new_game
from metrodle.domain.algorithms.geo_utils import direction_arrow
from metrodle.domain.algorithms.knowledge import line_knowledge
from metrodle.domain.algorithms.predictive import next_allowed_chars
from metrodle.domain.algorithms.search import search_candidates
from metrodle.domain.algorithms.share import build_share_text
from metrodle.domain.exceptions import GameNotFinished
from metrodle.domain.models import (
    MAX_ATTEMPTS,
    GameState,
    GuessFeedback,
    GuessOutcome,
    Knowledge,
    Station,
    Stats,
)

from .puzzle_context import PuzzleContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DailyGameService:
    """Application service (use case) for one player's daily puzzle.

    Orchestrates the repository and clock ports around the pure game rules.
    """

    context: PuzzleContext
    repository: IGameRepository
    date_provider: IDateProvider
    share_url: str = "https://metrodle.com.br/"
    max_attempts: int = MAX_ATTEMPTS

    def current_state(self) -> GameState:
        date_key = self.date_provider.today_key()
        solution = self.context.solution_for(date_key)
        state = self.repository.load_state(date_key=date_key, solution_id=solution.id)
        unknown = [g for g in state.guesses if g not in self.context.stations_by_id]
        if unknown:
            # Left over from an older roster; the game cannot be replayed.
            logger.warning("Discarding state with unknown guesses %s", unknown)
            state = new_game(solution.id, date_key)
            self.repository.save_state(state)
        return state

    def stats(self) -> Stats:
        return self.repository.load_stats()

    def submit_guess(self, name: str) -> GuessOutcome:
        state = self.current_state()
        outcome = apply_guess(
            state,
            self.repository.load_stats(),
            name,
            self.context.roster,
            max_attempts=self.max_attempts,
        )
        self.repository.save_state(outcome.state)
        if outcome.finished_now:
            self.repository.save_stats(outcome.stats)
        return outcome

    def solution(self, state: GameState | None = None) -> Station:
        state = state or self.current_state()
        return self.context.station(state.solution_id)

    def knowledge(self, state: GameState | None = None) -> Knowledge:
        return line_knowledge(state or self.current_state(), self.context.stations_by_id)

    def feedback(self, state: GameState | None = None) -> list[GuessFeedback]:
        state = state or self.current_state()
        solution = self.context.station(state.solution_id)
        distances = self.context.distances_from(solution)

        out: list[GuessFeedback] = []
        for guess_id in state.guesses:
            guess = self.context.station(guess_id)
            out.append(
                GuessFeedback(
                    station=guess,
                    matching_lines=tuple(
                        lid for lid in guess.lines if lid in solution.lines
                    ),
                    distance=distances[guess.vertex_id],
                    direction=direction_arrow(guess.location, solution.location),
                    is_solution=guess.id == solution.id,
                )
            )
        return out

    def allowed_characters(self, text: str) -> frozenset[str]:
        return next_allowed_chars(text, self.context.names)

    def search(self, query: str) -> list[Station]:
        return search_candidates(query, self.context.roster, self.context.lines)

    def share_text(self) -> str:
        state = self.current_state()
        if not state.is_finished:
            raise GameNotFinished()
        solution = self.context.station(state.solution_id)
        return build_share_text(
            state,
            self.context.stations_by_id,
            self.context.distances_from(solution),
            share_url=self.share_url,
            max_attempts=self.max_attempts,
        )
