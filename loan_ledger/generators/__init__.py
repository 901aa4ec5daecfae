"""Sample-data generators for demo ledgers."""

from loan_ledger.generators.base import BaseGenerator
from loan_ledger.generators.loan import LoanGenerator, LoanTerms, PaymentTerms

__all__ = ["BaseGenerator", "LoanGenerator", "LoanTerms", "PaymentTerms"]
