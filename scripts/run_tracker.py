#!/usr/bin/env python3
"""Seed a loan ledger with sample borrowers and print the interest due.

With --watch the ledger stays up and is refreshed on the configured
interval (hourly by default), reprinting the loans table each time.
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loan_ledger.config import TrackerConfig
from loan_ledger.generators import LoanGenerator
from loan_ledger.logging import setup_logging
from loan_ledger.scheduler import RecomputeScheduler
from loan_ledger.sinks import ConsoleSink
from loan_ledger.tracker import LoanTracker

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--loans", type=int, default=5, help="Number of sample loans")
    parser.add_argument("--max-payments", type=int, default=3, help="Max payments per loan")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Reference date (YYYY-MM-DD); defaults to today",
    )
    parser.add_argument("--json", action="store_true", help="Dump views as JSON records")
    parser.add_argument("--watch", action="store_true", help="Keep refreshing on the interval")
    return parser.parse_args()


def seed_ledger(
    tracker: LoanTracker,
    generator: LoanGenerator,
    num_loans: int,
    max_payments: int,
    today: date,
) -> None:
    """Create sample loans and record their payments."""
    for terms in generator.generate_batch(num_loans, today):
        loan_id = tracker.create_loan(
            terms.borrower_name,
            terms.principal,
            terms.annual_interest_rate_percent,
            terms.loan_date,
        )
        for payment in generator.generate_payments(terms, max_payments, today):
            tracker.record_payment(loan_id, payment.amount, payment.payment_date)
    logger.info("Seeded ledger: %s", tracker.store.summary())


def main() -> None:
    """Seed a ledger and render it."""
    args = parse_args()
    config = TrackerConfig.from_env()
    if args.seed is not None:
        config.seed = args.seed
    setup_logging(config)

    as_of = args.as_of
    tracker = LoanTracker(config=config, clock=(lambda: as_of) if as_of else None)
    today = tracker.clock()
    sink = ConsoleSink(display=config.display)

    seed_ledger(
        tracker,
        LoanGenerator(seed=config.seed, locale=config.locale),
        args.loans,
        args.max_payments,
        today,
    )

    def render(_results: list) -> None:
        when = tracker.clock()
        if args.json:
            sink.write_batch("loans", tracker.loan_views(when))
            sink.write_batch("payments", tracker.payment_history())
        else:
            sink.write_loans(tracker.loan_views(when), when)
            sink.write_payments(tracker.payment_history())

    scheduler = RecomputeScheduler(
        tracker,
        interval_seconds=config.scheduler.interval_seconds,
        on_refresh=render,
    )
    try:
        scheduler.run(max_runs=config.scheduler.max_runs if args.watch else 1)
    except KeyboardInterrupt:
        scheduler.stop()
    sink.close()


if __name__ == "__main__":
    main()
