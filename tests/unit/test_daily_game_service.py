from __future__ import annotations

import json
import logging

import pytest
from helpers import DATE, FixedDateProvider

from metrodle.adapters.persistence import InMemoryKeyValueStore, KeyValueGameRepository
from metrodle.app.services.daily_game_service import DailyGameService
from metrodle.app.services.puzzle_context import PuzzleContext
from metrodle.domain.exceptions import DuplicateGuess, GameNotFinished
from metrodle.domain.models import GameStatus


def test_current_state_starts_with_the_daily_solution(service: DailyGameService) -> None:
    state = service.current_state()

    assert state.date_key == DATE
    assert state.solution_id == "PSE"
    assert state.guesses == ()
    assert state.status is GameStatus.PLAYING


def test_submit_guess_persists_state(
    service: DailyGameService, store: InMemoryKeyValueStore
) -> None:
    service.submit_guess("Luz")

    assert service.current_state().guesses == ("LUZ",)
    assert "metrodlesp:state" in store.data


def test_rejected_guess_leaves_state_alone(service: DailyGameService) -> None:
    service.submit_guess("Luz")

    with pytest.raises(DuplicateGuess):
        service.submit_guess("LUZ")

    assert service.current_state().guesses == ("LUZ",)


def test_feedback_has_lines_distance_and_direction(service: DailyGameService) -> None:
    service.submit_guess("Ana Rosa")
    service.submit_guess("República")

    ana_rosa, republica = service.feedback()

    assert ana_rosa.matching_lines == ("1",)
    assert ana_rosa.distance == 5
    assert ana_rosa.direction == "↑"
    assert not ana_rosa.is_solution
    assert republica.matching_lines == ("3",)
    assert republica.distance == 2
    assert republica.direction == "↘"


def test_knowledge_follows_guesses(service: DailyGameService) -> None:
    service.submit_guess("Ana Rosa")

    k = service.knowledge()

    assert k.confirmed == {"1"}
    assert k.eliminated == {"2"}


def test_win_updates_stats_once(service: DailyGameService) -> None:
    service.submit_guess("Luz")
    outcome = service.submit_guess("Sé")

    assert outcome.finished_now
    assert outcome.state.status is GameStatus.WON
    stats = service.stats()
    assert (stats.played, stats.wins, stats.streak, stats.best) == (1, 1, 1, 1)
    assert stats.distribution == (0, 1, 0, 0, 0, 0)

    # A reload of the same day must not count the game again.
    service.repository.save_stats(stats)
    assert service.stats() == stats


def test_stats_do_not_double_count_on_same_date(context: PuzzleContext) -> None:
    store = InMemoryKeyValueStore()

    def _service() -> DailyGameService:
        return DailyGameService(
            context=context,
            repository=KeyValueGameRepository(store=store),
            date_provider=FixedDateProvider(),
        )

    _service().submit_guess("Sé")
    # Simulate a wiped game state but surviving stats on the same day.
    store.data.pop("metrodlesp:state")
    _service().submit_guess("Sé")

    assert _service().stats().played == 1


def test_loss_after_six_guesses_resets_streak(service: DailyGameService) -> None:
    for name in ["Ana Rosa", "Luz", "Brás", "Tatuapé", "Paulista", "Consolação"]:
        outcome = service.submit_guess(name)

    assert outcome.state.status is GameStatus.LOST
    assert service.stats().streak == 0
    assert service.stats().played == 1


def test_share_text_requires_finished_game(service: DailyGameService) -> None:
    with pytest.raises(GameNotFinished):
        service.share_text()

    service.submit_guess("Sé")

    assert service.share_text().split("\n") == [
        "Metrodle SP 2025-10-12",
        "🟩 🚆",
        "1/6",
        "metrodle.com.br/",
    ]


def test_allowed_characters_and_search(service: DailyGameService) -> None:
    assert service.allowed_characters("pa") == {"r", "u"}
    assert [s.name for s in service.search("bento")] == ["São Bento"]


def test_new_day_gets_a_new_game(service: DailyGameService) -> None:
    service.submit_guess("Luz")
    service.date_provider = FixedDateProvider("2025-10-13")

    state = service.current_state()

    assert state.date_key == "2025-10-13"
    assert state.guesses == ()
    assert state.solution_id == service.context.solution_for("2025-10-13").id


def test_full_playing_state_in_store_starts_over(
    service: DailyGameService, store: InMemoryKeyValueStore
) -> None:
    store.set(
        "metrodlesp:state",
        json.dumps(
            {
                "kind": "game_state",
                "version": 1,
                "solution_id": "PSE",
                "date_key": DATE,
                "guesses": ["LUZ", "ANR", "BRA", "TAT", "PTA", "CNS"],
                "status": "playing",
            }
        ),
    )

    outcome = service.submit_guess("República")

    assert outcome.state.guesses == ("REP",)
    assert outcome.state.status is GameStatus.PLAYING


def test_guesses_outside_roster_start_over(
    service: DailyGameService,
    store: InMemoryKeyValueStore,
    caplog: pytest.LogCaptureFixture,
) -> None:
    store.set(
        "metrodlesp:state",
        json.dumps(
            {
                "kind": "game_state",
                "version": 1,
                "solution_id": "PSE",
                "date_key": DATE,
                "guesses": ["GONE"],
                "status": "playing",
            }
        ),
    )

    with caplog.at_level(logging.WARNING):
        assert service.feedback() == []

    assert "unknown guesses" in caplog.text
    assert service.knowledge().confirmed == frozenset()
    assert service.current_state().guesses == ()
