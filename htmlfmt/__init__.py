"""Pretty-print, minify and structurally validate HTML markup."""

from .constants import VOID_ELEMENTS
from .formatters import minify, prettify
from .validators import ValidationIssue, ValidationReport, validate

__version__ = "0.1.0"

__all__ = [
    "VOID_ELEMENTS",
    "ValidationIssue",
    "ValidationReport",
    "minify",
    "prettify",
    "validate",
]
