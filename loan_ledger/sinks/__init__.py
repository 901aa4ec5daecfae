"""Output sinks for rendering ledger views."""

from loan_ledger.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
