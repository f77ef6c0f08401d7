"""Tests for the tick-driven rest countdown."""

from __future__ import annotations

from workout_engine.runtime.rest_timer import RestTimer


class TestRestTimer:
    def test_starts_stopped(self) -> None:
        timer = RestTimer()
        assert timer.remaining is None
        assert not timer.is_running

    def test_ticks_down_and_clears_at_zero(self) -> None:
        timer = RestTimer()
        timer.start(3)
        assert timer.tick() == 2
        assert timer.tick() == 1
        assert timer.tick() is None
        assert not timer.is_running

    def test_large_tick_clears(self) -> None:
        timer = RestTimer()
        timer.start(5)
        assert timer.tick(10) is None

    def test_restart_replaces_remaining(self) -> None:
        timer = RestTimer()
        timer.start(60)
        timer.tick(30)
        timer.start(90)
        assert timer.remaining == 90

    def test_zero_start_does_not_run(self) -> None:
        timer = RestTimer()
        timer.start(0)
        assert not timer.is_running

    def test_extend_running(self) -> None:
        timer = RestTimer()
        timer.start(20)
        timer.extend(10)
        assert timer.remaining == 30

    def test_extend_stopped_is_noop(self) -> None:
        timer = RestTimer()
        timer.extend(10)
        assert timer.remaining is None

    def test_tick_when_stopped(self) -> None:
        assert RestTimer().tick() is None

    def test_cancel(self) -> None:
        timer = RestTimer()
        timer.start(45)
        timer.cancel()
        assert timer.remaining is None
