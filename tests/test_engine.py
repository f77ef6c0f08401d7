"""Tests for WorkoutEngine: the facade over generation, sessions and history."""

from __future__ import annotations

import random
from datetime import date
from unittest.mock import MagicMock

import pytest

from workout_engine import WorkoutEngine
from workout_engine.exceptions import HistoryReadError, HistoryWriteError, SessionPreconditionError
from workout_engine.models.enums import FREESTYLE_DAY_INDEX, Rating, SessionStatus
from workout_engine.models.plan import Plan
from workout_engine.progression import HistoryStore, InMemoryHistoryStore


@pytest.fixture
def engine() -> WorkoutEngine:
    return WorkoutEngine(rng=random.Random(42))


class TestGeneratePlan:
    def test_plan_matches_answers(self, engine, gym_answers) -> None:
        plan = engine.generate_plan(gym_answers)
        assert len(plan) == gym_answers.days_per_week

    def test_defaults_to_history_feedback(self, gym_answers, record_factory) -> None:
        store = InMemoryHistoryStore([
            record_factory(i % 3, id=str(i), rating=Rating.HARD) for i in range(3)
        ])
        engine = WorkoutEngine(store=store, rng=random.Random(1))
        assert engine.generate_plan(gym_answers).volume.sets == 2

    def test_explicit_ratings_win(self, gym_answers, store) -> None:
        engine = WorkoutEngine(store=store, rng=random.Random(1))
        assert engine.generate_plan(gym_answers, recent_ratings=[]).volume.sets == 3


class TestStartSession:
    def test_opens_cursor_day(self, engine, sample_plan) -> None:
        session = engine.start_session(sample_plan)
        assert session.status == SessionStatus.ACTIVE
        assert session.day_index == 0
        assert session.focus == sample_plan[0].focus

    def test_override(self, engine, sample_plan) -> None:
        assert engine.start_session(sample_plan, override=2).day_index == 2

    def test_freestyle_override(self, engine, sample_plan) -> None:
        session = engine.start_session(sample_plan, override=FREESTYLE_DAY_INDEX)
        assert session.day_index == FREESTYLE_DAY_INDEX
        assert session.focus == "Freestyle"

    def test_no_plan_is_freestyle(self, engine) -> None:
        assert engine.start_session(None).day_index == FREESTYLE_DAY_INDEX
        assert engine.start_session(Plan()).day_index == FREESTYLE_DAY_INDEX

    def test_listener_receives_open_snapshot(self, engine, sample_plan) -> None:
        listener = MagicMock()
        engine.start_session(sample_plan, listener=listener)
        listener.assert_called_once()


class TestCompleteSession:
    def test_first_workout_flag(self, engine, sample_plan) -> None:
        session = engine.start_session(sample_plan)
        session.toggle_set("d1-e1", 0)
        record, first = engine.complete_session(session, Rating.JUST_RIGHT)
        assert first is True
        assert record.day_index == 0

        session = engine.start_session(sample_plan)
        assert session.day_index == 1
        session.toggle_set("d2-e1", 0)
        _, first = engine.complete_session(session, Rating.HARD)
        assert first is False

    def test_zero_sets_records_nothing(self, engine, sample_plan) -> None:
        session = engine.start_session(sample_plan)
        with pytest.raises(SessionPreconditionError):
            engine.complete_session(session, Rating.JUST_RIGHT)
        assert engine.history() == []

    def test_store_failure_exposes_record_for_retry(self, sample_plan) -> None:
        store = MagicMock(spec=HistoryStore)
        store.list_records.return_value = []
        store.append.side_effect = [ConnectionError("offline"), None]
        engine = WorkoutEngine(store=store, rng=random.Random(0))

        session = engine.start_session(sample_plan)
        session.toggle_set("d1-e1", 0)
        with pytest.raises(HistoryWriteError) as info:
            engine.complete_session(session, Rating.JUST_RIGHT, on_date=date(2026, 3, 9))

        assert info.value.record.date == date(2026, 3, 9)
        engine.tracker.record(info.value.record)
        assert store.append.call_count == 2
        assert store.append.call_args[0][0] == info.value.record

    def test_store_read_failure_keeps_session_open(self, sample_plan) -> None:
        store = MagicMock(spec=HistoryStore)
        store.list_records.return_value = []
        engine = WorkoutEngine(store=store, rng=random.Random(0))
        session = engine.start_session(sample_plan)
        session.toggle_set("d1-e1", 0)

        store.list_records.side_effect = TimeoutError("slow")
        with pytest.raises(HistoryReadError):
            engine.complete_session(session, Rating.JUST_RIGHT)
        assert session.status == SessionStatus.ACTIVE
        store.append.assert_not_called()


class TestHistory:
    def test_history_is_newest_first(self, store) -> None:
        engine = WorkoutEngine(store=store)
        assert [r.id for r in engine.history()] == ["rec-3", "rec-2", "rec-1", "rec-0"]

    def test_update_and_delete(self, store) -> None:
        engine = WorkoutEngine(store=store)
        assert engine.update_rating("rec-0", Rating.HARD) is True
        assert engine.delete_record("rec-1") is True
        assert engine.delete_record("rec-1") is False
        assert len(engine.history()) == 3

    def test_consistency_summary(self, store) -> None:
        summary = WorkoutEngine(store=store).consistency_summary(today=date(2026, 3, 5))
        assert summary["total_sessions"] == 4
        assert summary["current_streak"] == 4
        assert summary["sessions_per_week"] == {"2026-W10": 4}
        assert summary["rating_distribution"][Rating.JUST_RIGHT] == pytest.approx(0.5)
