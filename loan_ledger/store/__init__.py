"""In-memory ledger of loans and payments."""

from loan_ledger.store.ledger import LedgerStore

__all__ = ["LedgerStore"]
