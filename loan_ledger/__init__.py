"""Informal loan tracking with month-end interest accrual."""

__version__ = "0.1.0"
