"""Structural validation for HTML markup."""

from .base import (
    MISMATCHED_TAG,
    UNCLOSED_TAG,
    UNEXPECTED_CLOSING,
    ValidationIssue,
    ValidationReport,
    Validator,
)
from .structure import TagBalanceValidator, validate

__all__ = [
    "MISMATCHED_TAG",
    "UNCLOSED_TAG",
    "UNEXPECTED_CLOSING",
    "TagBalanceValidator",
    "ValidationIssue",
    "ValidationReport",
    "Validator",
    "validate",
]
