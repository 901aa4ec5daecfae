"""Domain models for loan tracking."""

from loan_ledger.models.loan import AccrualResult, Loan, LoanView, Payment, PaymentRecord

__all__ = ["AccrualResult", "Loan", "LoanView", "Payment", "PaymentRecord"]
