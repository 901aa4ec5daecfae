"""Custom exception hierarchy for loan-ledger."""


class LoanLedgerError(Exception):
    """Base exception for all loan-ledger errors."""


class ValidationError(LoanLedgerError, ValueError):
    """Raised when a loan-creation field is missing or invalid."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class LoanNotFoundError(LoanLedgerError, LookupError):
    """Raised when a loan reference does not identify an existing loan."""

    def __init__(self, loan_id: object) -> None:
        super().__init__(f"Loan {loan_id} not found")
        self.loan_id = loan_id


class ConfigurationError(LoanLedgerError):
    """Raised when configuration is invalid or missing."""
