"""Month-end interest accrual engine.

Interest is simple (non-compounding) and billed only up to the freeze
date, the first day of the month containing the reference date. The
origination month is pro-rated by days; every later whole month before
the freeze date adds one full month of interest. All payments recorded
against the loan are subtracted from the total, which never drops
below zero.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable

from loan_ledger.models import Loan, Payment

CENT = Decimal("0.01")
MONTHS_PER_YEAR = 12


def freeze_date(reference_date: date) -> date:
    """Return the first day of the month containing ``reference_date``."""
    return reference_date.replace(day=1)


def next_month_start(day: date) -> date:
    """Return the first day of the month after the one containing ``day``."""
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def days_in_month(day: date) -> int:
    """Number of calendar days in the month containing ``day``."""
    return (next_month_start(day) - freeze_date(day)).days


def monthly_interest(loan: Loan) -> Decimal:
    """Flat interest for one full month, unrounded."""
    return loan.principal * (loan.annual_interest_rate_percent / 100) / MONTHS_PER_YEAR


def accrued_interest(loan: Loan, reference_date: date) -> Decimal:
    """Gross interest accrued up to the freeze date, before payments.

    Parameters
    ----------
    loan : Loan
        Loan whose terms drive the accrual.
    reference_date : date
        Evaluation date; accrual stops at the first of its month.

    Returns
    -------
    Decimal
        Unrounded accrued interest (zero when the loan starts on or
        after the freeze date).
    """
    freeze = freeze_date(reference_date)
    if loan.loan_date >= freeze:
        return Decimal(0)

    per_month = monthly_interest(loan)
    month_days = days_in_month(loan.loan_date)
    first_boundary = next_month_start(loan.loan_date)

    if freeze <= first_boundary:
        days_accrued = (freeze - loan.loan_date).days
        return per_month * days_accrued / month_days

    days_accrued = (first_boundary - loan.loan_date).days
    total = per_month * days_accrued / month_days

    current = first_boundary
    while current < freeze:
        total += per_month
        current = next_month_start(current)
    return total


def compute_interest_due(
    loan: Loan,
    payments: Iterable[Payment],
    reference_date: date,
) -> Decimal:
    """Interest currently due on ``loan``, net of every recorded payment.

    Payment dates are ignored: all payments offset the accrued total.
    The result is floored at zero and rounded half-up to cents.
    """
    total_paid = sum((p.amount for p in payments), Decimal(0))
    due = accrued_interest(loan, reference_date) - total_paid
    if due < 0:
        due = Decimal(0)
    with localcontext() as ctx:
        # room for every whole digit plus the two cents
        ctx.prec = max(ctx.prec, due.adjusted() + 3)
        return due.quantize(CENT, rounding=ROUND_HALF_UP)
