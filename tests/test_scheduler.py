"""Tests for RecomputeScheduler."""

from datetime import date
from decimal import Decimal

import pytest

from loan_ledger.models import AccrualResult
from loan_ledger.scheduler import RecomputeScheduler
from loan_ledger.tracker import LoanTracker


class TestRecomputeScheduler:
    """Tests for periodic recomputation."""

    def test_defaults(self, tracker: LoanTracker) -> None:
        scheduler = RecomputeScheduler(tracker)

        assert scheduler.interval_seconds == 3600.0
        assert scheduler.clock is tracker.clock
        assert scheduler.runs == 0

    def test_negative_interval_rejected(self, tracker: LoanTracker) -> None:
        with pytest.raises(ValueError):
            RecomputeScheduler(tracker, interval_seconds=-1)

    def test_tick(self, tracker: LoanTracker) -> None:
        tracker.create_loan("Asha", "50000", "12", "2024-08-01")
        seen: list[list[AccrualResult]] = []
        scheduler = RecomputeScheduler(tracker, on_refresh=seen.append)

        results = scheduler.tick()

        assert scheduler.runs == 1
        assert seen == [results]
        assert results[0].interest_due == Decimal("1000.00")

    def test_tick_reads_clock_each_time(self, tracker: LoanTracker) -> None:
        tracker.create_loan("Asha", "50000", "12", "2024-08-01")
        dates = iter([date(2024, 10, 19), date(2024, 11, 3)])
        scheduler = RecomputeScheduler(tracker, clock=lambda: next(dates))

        first = scheduler.tick()
        second = scheduler.tick()

        assert first[0].interest_due == Decimal("1000.00")
        assert second[0].interest_due == Decimal("1500.00")

    def test_repeated_ticks_same_month_identical(self, tracker: LoanTracker) -> None:
        tracker.create_loan("Asha", "50000", "12", "2024-08-01")
        tracker.record_payment(0, "120", "2024-09-01")
        scheduler = RecomputeScheduler(tracker)

        assert scheduler.tick() == scheduler.tick()

    def test_run_stops_after_max_runs(self, tracker: LoanTracker) -> None:
        scheduler = RecomputeScheduler(tracker, interval_seconds=0)

        scheduler.run(max_runs=3)

        assert scheduler.runs == 3

    def test_stop_from_callback(self, tracker: LoanTracker) -> None:
        def on_refresh(_results: list[AccrualResult]) -> None:
            scheduler.stop()

        scheduler = RecomputeScheduler(tracker, interval_seconds=0, on_refresh=on_refresh)

        scheduler.run()

        assert scheduler.runs == 1
