"""Console sink for rendering loans and payment history."""

import json
from datetime import date
from decimal import Decimal
from typing import Any

from loan_ledger.config import DisplayConfig
from loan_ledger.formatting import format_rupees, freeze_caption
from loan_ledger.models import LoanView, PaymentRecord
from loan_ledger.sinks.serialization import to_dict


class ConsoleSink:
    """Output ledger views to console (stdout)."""

    def __init__(
        self,
        display: DisplayConfig | None = None,
        max_records: int | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        display : DisplayConfig | None
            Currency and JSON rendering options.
        max_records : int | None
            Maximum records to print per batch (None for all).
        """
        self.display = display or DisplayConfig()
        self.max_records = max_records
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records to console as JSON."""
        self._header(f"Entity: {entity_type} ({len(records)} records)")

        for record in self._limit(records):
            data = to_dict(record)
            if self.display.pretty_json:
                print(json.dumps(data, indent=2, ensure_ascii=False))
            else:
                print(json.dumps(data, ensure_ascii=False))

        self._more(records)
        self._count(entity_type, len(records))

    def write_loans(self, views: list[LoanView], reference_date: date) -> None:
        """Print the loans table with interest due as of the freeze date."""
        self._header(f"Loans ({len(views)}) - Interest Due {freeze_caption(reference_date)}")
        rows = [
            [
                v.borrower,
                self._money(v.principal),
                str(v.annual_interest_rate_percent),
                v.loan_date.isoformat(),
                self._money(v.monthly_interest),
                self._money(v.interest_due),
            ]
            for v in self._limit(views)
        ]
        self._table(
            ["Borrower", "Amount", "Interest (%)", "Loan Date", "Monthly Interest", "Interest Due"],
            rows,
        )
        self._more(views)
        self._count("loans", len(views))

    def write_payments(self, records: list[PaymentRecord]) -> None:
        """Print the payment history table."""
        self._header(f"Payment History ({len(records)})")
        rows = [
            [r.borrower, self._money(r.amount), r.payment_date.isoformat()]
            for r in self._limit(records)
        ]
        self._table(["Borrower", "Payment Amount", "Payment Date"], rows)
        self._more(records)
        self._count("payments", len(records))

    def close(self) -> None:
        """Print summary and close."""
        self._header("Console Sink Summary")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")

    def _money(self, amount: Decimal) -> str:
        return format_rupees(
            amount,
            symbol=self.display.currency_symbol,
            indian_grouping=self.display.indian_grouping,
        )

    def _table(self, headers: list[str], rows: list[list[str]]) -> None:
        widths = [len(h) for h in headers]
        for row in rows:
            widths = [max(w, len(cell)) for w, cell in zip(widths, row)]
        print("  ".join(h.ljust(w) for h, w in zip(headers, widths)))
        print("  ".join("-" * w for w in widths))
        for row in rows:
            print("  ".join(cell.ljust(w) for cell, w in zip(row, widths)))

    def _header(self, title: str) -> None:
        print(f"\n{'='*60}")
        print(title)
        print("=" * 60)

    def _limit(self, records: list) -> list:
        return records[: self.max_records] if self.max_records else records

    def _more(self, records: list) -> None:
        if self.max_records and len(records) > self.max_records:
            print(f"... and {len(records) - self.max_records} more records")

    def _count(self, entity_type: str, n: int) -> None:
        self._counts[entity_type] = self._counts.get(entity_type, 0) + n
