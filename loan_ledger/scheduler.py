"""Periodic recomputation of interest due."""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Callable

from loan_ledger.models import AccrualResult
from loan_ledger.tracker import LoanTracker

logger = logging.getLogger(__name__)


class RecomputeScheduler:
    """Re-derive every loan's interest due on a fixed interval.

    Each run reads the clock afresh and recomputes from the ledger, so
    repeated or missed runs leave the same results behind.

    Parameters
    ----------
    tracker : LoanTracker
        Tracker whose loans are refreshed.
    interval_seconds : float
        Wait between runs (hourly by default).
    clock : Callable[[], date] | None
        Source of the reference date; defaults to the tracker's clock.
    on_refresh : Callable[[list[AccrualResult]], None] | None
        Called with the fresh results after every run.
    """

    def __init__(
        self,
        tracker: LoanTracker,
        interval_seconds: float = 3600.0,
        clock: Callable[[], date] | None = None,
        on_refresh: Callable[[list[AccrualResult]], None] | None = None,
    ) -> None:
        if interval_seconds < 0:
            raise ValueError("interval_seconds must not be negative")
        self.tracker = tracker
        self.interval_seconds = interval_seconds
        self.clock = clock or tracker.clock
        self.on_refresh = on_refresh
        self.runs = 0
        self._stop = threading.Event()

    def tick(self) -> list[AccrualResult]:
        """Run one recomputation now."""
        results = self.tracker.recompute_all(self.clock())
        self.runs += 1
        if self.on_refresh is not None:
            self.on_refresh(results)
        return results

    def run(self, max_runs: int | None = None) -> None:
        """Tick repeatedly until :meth:`stop` is called or ``max_runs`` is reached."""
        self._stop.clear()
        completed = 0
        logger.info("Scheduler started (interval=%ss, max_runs=%s)", self.interval_seconds, max_runs)
        while not self._stop.is_set():
            self.tick()
            completed += 1
            if max_runs is not None and completed >= max_runs:
                break
            if self._stop.wait(self.interval_seconds):
                break
        logger.info("Scheduler stopped after %d runs", completed)

    def stop(self) -> None:
        """Ask a running :meth:`run` loop to exit."""
        self._stop.set()
