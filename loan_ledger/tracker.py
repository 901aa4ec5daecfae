"""Loan tracker: the interface the presentation layer talks to."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from loan_ledger.accrual import compute_interest_due, monthly_interest
from loan_ledger.config import TrackerConfig
from loan_ledger.models import AccrualResult, LoanView, PaymentRecord
from loan_ledger.store.ledger import LedgerStore

logger = logging.getLogger(__name__)


class LoanTracker:
    """Owns the ledger and answers the presentation layer's requests.

    The tracker holds no timer. A scheduler calls :meth:`recompute_all`
    with the current date whenever it fires.

    Parameters
    ----------
    store : LedgerStore | None
        Ledger to operate on; a new empty one is created when omitted.
    config : TrackerConfig | None
        Tracker configuration.
    clock : Callable[[], date] | None
        Source of the current date. Defaults to the supplied store's
        clock, or ``date.today`` for a new store.
    """

    def __init__(
        self,
        store: LedgerStore | None = None,
        config: TrackerConfig | None = None,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self.config = config or TrackerConfig()
        if store is None:
            self.clock = clock or date.today
            self.store = LedgerStore(today=self.clock)
        else:
            self.clock = clock or store.today
            self.store = store

    def create_loan(
        self,
        borrower_name: object,
        principal: object,
        annual_interest_rate_percent: object,
        loan_date: object,
    ) -> int:
        """Create a loan and return its reference.

        Raises
        ------
        ValidationError
            If a field is missing or invalid.
        """
        return self.store.add_loan(
            borrower_name,
            principal,
            annual_interest_rate_percent,
            loan_date,
            reference_date=self.clock(),
        )

    def record_payment(self, loan_id: int, amount: object, payment_date: object) -> None:
        """Record a payment; blank or malformed amount/date is a no-op.

        Raises
        ------
        LoanNotFoundError
            If ``loan_id`` does not identify an existing loan.
        """
        self.store.record_payment(loan_id, amount, payment_date, reference_date=self.clock())

    def get_loan_view(self, loan_id: int, reference_date: date | None = None) -> LoanView:
        """Project one loan for display as of ``reference_date``."""
        loan, payments = self.store.loan_with_payments(loan_id)
        when = reference_date or self.clock()
        return LoanView(
            loan_id=loan.loan_id,
            borrower=loan.borrower_name,
            principal=loan.principal,
            annual_interest_rate_percent=loan.annual_interest_rate_percent,
            loan_date=loan.loan_date,
            monthly_interest=monthly_interest(loan),
            interest_due=compute_interest_due(loan, payments, when),
        )

    def loan_views(self, reference_date: date | None = None) -> list[LoanView]:
        """Project every loan, in creation order."""
        when = reference_date or self.clock()
        return [self.get_loan_view(loan.loan_id, when) for loan in self.store.loans]

    def payment_history(self) -> list[PaymentRecord]:
        """Every recorded payment, in the order it was recorded."""
        return [
            PaymentRecord(
                loan_id=p.loan_id,
                borrower=p.borrower_name,
                amount=p.amount,
                payment_date=p.payment_date,
            )
            for p in self.store.payments
        ]

    def recompute_all(self, reference_date: date | None = None) -> list[AccrualResult]:
        """Refresh the cached interest due of every loan."""
        when = reference_date or self.clock()
        results = self.store.recompute_all(when)
        logger.info("Refreshed interest due for %d loans as of %s", len(results), when.isoformat())
        return results
