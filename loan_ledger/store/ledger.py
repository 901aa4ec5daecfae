"""Ledger store: append-only loans and payments with cached accrual results."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Callable

from loan_ledger.accrual import compute_interest_due, freeze_date
from loan_ledger.exceptions import LoanNotFoundError, ValidationError
from loan_ledger.models import AccrualResult, Loan, Payment
from loan_ledger.parsing import parse_amount, parse_date

logger = logging.getLogger(__name__)

# Largest accepted principal or rate: fewer than 16 digits before the point
MAX_WHOLE_DIGITS = 15


@dataclass
class LedgerStore:
    """Single source of truth for loans and the payments made against them.

    Loans are identified by their position in ``loans``; identities are
    never reused because nothing is ever removed. Mutations and
    recomputation are serialized by one lock.
    """

    loans: list[Loan] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)
    today: Callable[[], date] = date.today

    # Relationship index: loan_id -> positions in ``payments``
    _loan_payments: dict[int, list[int]] = field(default_factory=dict)
    _results: dict[int, AccrualResult] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def add_loan(
        self,
        borrower_name: object,
        principal: object,
        annual_interest_rate_percent: object,
        loan_date: object,
        reference_date: date | None = None,
    ) -> int:
        """Validate and append a loan.

        Parameters
        ----------
        borrower_name : object
            Non-empty borrower label.
        principal : object
            Positive amount, as a number or numeric string.
        annual_interest_rate_percent : object
            Non-negative yearly rate in percent.
        loan_date : object
            Disbursement date (``date`` or ISO string).
        reference_date : date | None
            Date used for the initial accrual (defaults to today).

        Returns
        -------
        int
            Stable reference of the new loan.

        Raises
        ------
        ValidationError
            If any field is missing or invalid; nothing is appended.
        """
        name = borrower_name.strip() if isinstance(borrower_name, str) else ""
        if not name:
            raise ValidationError("borrower_name", "must be a non-empty string")

        amount = parse_amount(principal)
        if amount is None:
            raise ValidationError("principal", "must be a number")
        if amount <= 0:
            raise ValidationError("principal", "must be positive")
        if amount.adjusted() >= MAX_WHOLE_DIGITS:
            raise ValidationError("principal", "is too large")

        rate = parse_amount(annual_interest_rate_percent)
        if rate is None:
            raise ValidationError("annual_interest_rate_percent", "must be a number")
        if rate < 0:
            raise ValidationError("annual_interest_rate_percent", "must not be negative")
        if rate > 0 and rate.adjusted() >= MAX_WHOLE_DIGITS:
            raise ValidationError("annual_interest_rate_percent", "is too large")

        start = parse_date(loan_date)
        if start is None:
            raise ValidationError("loan_date", "must be a valid calendar date")

        with self._lock:
            loan = Loan(
                loan_id=len(self.loans),
                borrower_name=name,
                principal=amount,
                annual_interest_rate_percent=rate,
                loan_date=start,
            )
            result = self._accrue(loan, [], reference_date or self.today())
            self.loans.append(loan)
            self._loan_payments[loan.loan_id] = []
            self._results[loan.loan_id] = result

        logger.info(
            "Added loan %d for %s: principal=%s rate=%s%% date=%s due=%s",
            loan.loan_id, name, amount, rate, start.isoformat(), result.interest_due,
            extra={"extra": {"loan_id": loan.loan_id, "interest_due": str(result.interest_due)}},
        )
        return loan.loan_id

    def record_payment(
        self,
        loan_id: int,
        amount: object,
        payment_date: object,
        reference_date: date | None = None,
    ) -> None:
        """Append a payment and refresh the loan's accrual result.

        Missing, unparseable or non-positive amounts and unparseable dates
        are ignored without error.

        Raises
        ------
        LoanNotFoundError
            If ``loan_id`` does not identify an existing loan.
        """
        paid = parse_amount(amount)
        paid_on = parse_date(payment_date)
        if paid is None or paid <= 0 or paid_on is None:
            logger.warning(
                "Ignoring payment for loan %s: amount=%r date=%r", loan_id, amount, payment_date
            )
            return

        with self._lock:
            loan = self.get_loan(loan_id)
            payment = Payment(
                loan_id=loan.loan_id,
                borrower_name=loan.borrower_name,
                amount=paid,
                payment_date=paid_on,
            )
            result = self._accrue(
                loan, self.payments_for(loan.loan_id) + [payment], reference_date or self.today()
            )
            self._loan_payments[loan.loan_id].append(len(self.payments))
            self.payments.append(payment)
            self._results[loan.loan_id] = result

        logger.info(
            "Recorded payment of %s on %s for loan %d; due now %s",
            paid, paid_on.isoformat(), loan.loan_id, result.interest_due,
            extra={"extra": {"loan_id": loan.loan_id, "interest_due": str(result.interest_due)}},
        )

    # Query methods
    def get_loan(self, loan_id: int) -> Loan:
        """Get a loan by reference."""
        if isinstance(loan_id, bool) or not isinstance(loan_id, int):
            raise LoanNotFoundError(loan_id)
        with self._lock:
            if not 0 <= loan_id < len(self.loans):
                raise LoanNotFoundError(loan_id)
            return self.loans[loan_id]

    def payments_for(self, loan_id: int) -> list[Payment]:
        """Get all payments for a loan, in the order they were recorded."""
        with self._lock:
            indices = self._loan_payments.get(loan_id, [])
            return [self.payments[i] for i in indices]

    def loan_with_payments(self, loan_id: int) -> tuple[Loan, list[Payment]]:
        """Get a loan together with its payments as one consistent read."""
        with self._lock:
            return self.get_loan(loan_id), self.payments_for(loan_id)

    def accrual_result(self, loan_id: int) -> AccrualResult:
        """Get the last computed accrual result for a loan."""
        with self._lock:
            self.get_loan(loan_id)
            return self._results[loan_id]

    def recompute_all(self, reference_date: date) -> list[AccrualResult]:
        """Re-derive the accrual result of every loan as of ``reference_date``."""
        with self._lock:
            results = [
                self._accrue(loan, self.payments_for(loan.loan_id), reference_date)
                for loan in self.loans
            ]
            for result in results:
                self._results[result.loan_id] = result
        logger.debug(
            "Recomputed %d loans as of %s", len(results), freeze_date(reference_date).isoformat()
        )
        return results

    def total_paid(self, loan_id: int) -> Decimal:
        """Sum of all payments recorded against a loan."""
        return sum((p.amount for p in self.payments_for(loan_id)), Decimal(0))

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        with self._lock:
            return {
                "loans": len(self.loans),
                "payments": len(self.payments),
            }

    def _accrue(self, loan: Loan, payments: list[Payment], reference_date: date) -> AccrualResult:
        return AccrualResult(
            loan_id=loan.loan_id,
            reference_date=reference_date,
            freeze_date=freeze_date(reference_date),
            interest_due=compute_interest_due(loan, payments, reference_date),
        )
