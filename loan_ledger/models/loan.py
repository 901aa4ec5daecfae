"""Loan and payment models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Loan:
    """Informal loan handed to one borrower.

    ``loan_id`` is the loan's position in the ledger and never changes
    once assigned.
    """

    loan_id: int
    borrower_name: str
    principal: Decimal
    annual_interest_rate_percent: Decimal  # 12 means 12% per year
    loan_date: date


@dataclass(frozen=True)
class Payment:
    """Payment received against a loan."""

    loan_id: int
    borrower_name: str
    amount: Decimal
    payment_date: date  # kept for history, not used by accrual


@dataclass(frozen=True)
class AccrualResult:
    """Interest due on one loan as of one reference date."""

    loan_id: int
    reference_date: date
    freeze_date: date
    interest_due: Decimal


@dataclass(frozen=True)
class LoanView:
    """Read-only projection of a loan for display."""

    loan_id: int
    borrower: str
    principal: Decimal
    annual_interest_rate_percent: Decimal
    loan_date: date
    monthly_interest: Decimal
    interest_due: Decimal


@dataclass(frozen=True)
class PaymentRecord:
    """Row of the payment history."""

    loan_id: int
    borrower: str
    amount: Decimal
    payment_date: date
