"""Tests for sample-data generators."""

from datetime import date, timedelta
from decimal import Decimal

from loan_ledger.generators import LoanGenerator
from loan_ledger.tracker import LoanTracker


class TestLoanGenerator:
    """Tests for LoanGenerator."""

    def test_generate_loan(self, seed: int, today: date) -> None:
        terms = LoanGenerator(seed=seed).generate(today)

        assert terms.borrower_name
        assert terms.principal > 0
        assert terms.principal % 1000 == 0
        assert Decimal(6) <= terms.annual_interest_rate_percent <= Decimal(36)
        assert today - timedelta(days=730) <= terms.loan_date <= today

    def test_seed_is_reproducible(self, seed: int, today: date) -> None:
        first = list(LoanGenerator(seed=seed).generate_batch(3, today))
        second = list(LoanGenerator(seed=seed).generate_batch(3, today))

        assert first == second

    def test_generate_payments(self, seed: int, today: date) -> None:
        gen = LoanGenerator(seed=seed)

        for terms in gen.generate_batch(10, today):
            payments = gen.generate_payments(terms, max_payments=3, today=today)
            assert len(payments) <= 3
            assert [p.payment_date for p in payments] == sorted(p.payment_date for p in payments)
            for p in payments:
                assert p.amount > 0
                assert terms.loan_date < p.payment_date <= today

    def test_no_payments_for_loan_made_today(self, seed: int, today: date) -> None:
        gen = LoanGenerator(seed=seed)
        terms = gen.generate(today)
        terms.loan_date = today

        assert gen.generate_payments(terms, today=today) == []

    def test_generated_terms_are_accepted(self, seed: int, tracker: LoanTracker, today: date) -> None:
        gen = LoanGenerator(seed=seed)

        for terms in gen.generate_batch(5, today):
            loan_id = tracker.create_loan(
                terms.borrower_name,
                terms.principal,
                terms.annual_interest_rate_percent,
                terms.loan_date,
            )
            for p in gen.generate_payments(terms, today=today):
                tracker.record_payment(loan_id, p.amount, p.payment_date)

        assert tracker.store.summary()["loans"] == 5
        assert all(v.interest_due >= 0 for v in tracker.loan_views())
