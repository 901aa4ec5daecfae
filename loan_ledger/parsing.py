"""Lenient parsing of raw form values into amounts and calendar dates."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation


def parse_amount(value: object) -> Decimal | None:
    """Parse a numeric form value.

    Parameters
    ----------
    value : object
        ``Decimal``, ``int``, ``float`` or numeric string.

    Returns
    -------
    Decimal | None
        Parsed amount, or ``None`` when the value is empty, unparseable
        or not finite.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None
    if not amount.is_finite():
        return None
    return amount


def parse_date(value: object) -> date | None:
    """Parse a calendar date from a ``date``, ``datetime`` or ISO string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return None
    return None
