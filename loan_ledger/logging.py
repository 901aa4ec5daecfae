"""Logging setup for loan-ledger driven by ``TrackerConfig``."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from loan_ledger.config import TrackerConfig

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(config: TrackerConfig | None = None, stream: TextIO | None = None) -> None:
    """Route all log records to one console handler.

    Parameters
    ----------
    config : TrackerConfig | None
        Supplies ``log_level`` (unknown names fall back to INFO) and
        ``log_format`` ("standard" or "json").
    stream : TextIO | None
        Destination (defaults to stdout).
    """
    config = config or TrackerConfig()
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stdout)
    if config.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger = logging.getLogger()
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the ledger's structured fields inlined."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        # store calls pass extra={"extra": {"loan_id": ..., "interest_due": ...}}
        log_data.update(getattr(record, "extra", {}))
        return json.dumps(log_data, default=str)
