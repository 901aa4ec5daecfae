"""Display helpers for rupee amounts and freeze-date captions."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, localcontext

from loan_ledger.accrual import CENT, freeze_date

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def group_digits(digits: str, indian: bool = True) -> str:
    """Insert thousands separators into a string of digits.

    Indian grouping keeps the last three digits together and groups the
    rest in pairs (``12,34,567``); otherwise groups of three are used.
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    size = 2 if indian else 3
    groups = []
    while head:
        groups.insert(0, head[-size:])
        head = head[:-size]
    return ",".join(groups + [tail])


def format_rupees(amount: Decimal, symbol: str = "₹", indian_grouping: bool = True) -> str:
    """Render an amount as currency with two decimal places."""
    value = Decimal(amount)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, fraction = f"{abs(value):.2f}".split(".")
    return f"{sign}{symbol}{group_digits(whole, indian_grouping)}.{fraction}"


def freeze_caption(reference_date: date) -> str:
    """Caption naming the freeze date, e.g. ``Till 1st October 2026``."""
    freeze = freeze_date(reference_date)
    return f"Till 1st {MONTH_NAMES[freeze.month - 1]} {freeze.year}"
