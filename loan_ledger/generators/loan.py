"""Loan and payment generator for demo ledgers."""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from loan_ledger.generators.base import BaseGenerator


@dataclass
class LoanTerms:
    """Raw loan-creation request, as a form would submit it."""

    borrower_name: str
    principal: Decimal
    annual_interest_rate_percent: Decimal
    loan_date: date


@dataclass
class PaymentTerms:
    """Raw payment-recording request."""

    amount: Decimal
    payment_date: date


class LoanGenerator(BaseGenerator):
    """Generate plausible informal loans and repayments."""

    PRINCIPAL_THOUSANDS = (5, 500)
    RATE_PERCENT = (6, 36)
    MAX_AGE_DAYS = 730

    def generate(self, today: date | None = None) -> LoanTerms:
        """Generate one loan disbursed within the last two years.

        Parameters
        ----------
        today : date | None
            Upper bound for the loan date (defaults to ``date.today()``).

        Returns
        -------
        LoanTerms
            Generated loan request.
        """
        today = today or date.today()
        return LoanTerms(
            borrower_name=self.fake.name(),
            principal=Decimal(self.rng.randint(*self.PRINCIPAL_THOUSANDS) * 1000),
            annual_interest_rate_percent=Decimal(self.rng.randint(*self.RATE_PERCENT)),
            loan_date=today - timedelta(days=self.rng.randint(0, self.MAX_AGE_DAYS)),
        )

    def generate_batch(self, count: int, today: date | None = None) -> Iterator[LoanTerms]:
        """Generate ``count`` loans."""
        for _ in range(count):
            yield self.generate(today)

    def generate_payments(
        self,
        terms: LoanTerms,
        max_payments: int = 3,
        today: date | None = None,
    ) -> list[PaymentTerms]:
        """Generate up to ``max_payments`` repayments dated after the loan.

        Each payment is between one and three months of interest.
        """
        today = today or date.today()
        span = (today - terms.loan_date).days
        if span <= 0:
            return []
        monthly = terms.principal * terms.annual_interest_rate_percent / 100 / 12
        payments = []
        for _ in range(self.rng.randint(0, max_payments)):
            amount = (monthly * self.rng.randint(1, 3)).quantize(Decimal("1"))
            if amount <= 0:
                continue
            payments.append(
                PaymentTerms(
                    amount=amount,
                    payment_date=terms.loan_date + timedelta(days=self.rng.randint(1, span)),
                )
            )
        payments.sort(key=lambda p: p.payment_date)
        return payments
