"""Configuration management for loan-ledger."""

import os
from dataclasses import dataclass, field

from loan_ledger.exceptions import ConfigurationError


@dataclass
class DisplayConfig:
    """How amounts are rendered for the presentation layer."""

    currency_symbol: str = "₹"
    indian_grouping: bool = True
    pretty_json: bool = False


@dataclass
class SchedulerConfig:
    """Periodic recomputation settings."""

    interval_seconds: float = 3600.0
    max_runs: int | None = None


@dataclass
class TrackerConfig:
    """Main configuration for loan-ledger."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    locale: str = "en_IN"

    @classmethod
    def from_env(cls) -> "TrackerConfig":
        """Create config from environment variables."""
        display = DisplayConfig(
            currency_symbol=os.getenv("LOAN_LEDGER_CURRENCY_SYMBOL", "₹"),
            indian_grouping=os.getenv("LOAN_LEDGER_INDIAN_GROUPING", "true").lower() == "true",
            pretty_json=os.getenv("LOAN_LEDGER_PRETTY_JSON", "false").lower() == "true",
        )

        scheduler = SchedulerConfig(
            interval_seconds=_env_number("LOAN_LEDGER_REFRESH_SECONDS", float, 3600.0),
            max_runs=_env_number("LOAN_LEDGER_MAX_RUNS", int, None),
        )

        return cls(
            display=display,
            scheduler=scheduler,
            seed=_env_number("SEED", int, None, positive=False),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            locale=os.getenv("LOAN_LEDGER_LOCALE", "en_IN"),
        )


def _env_number(name, kind, default, positive=True):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = kind(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if positive and value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value
