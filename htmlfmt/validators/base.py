"""Core validation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

UNEXPECTED_CLOSING = "unexpected_closing"
MISMATCHED_TAG = "mismatched_tag"
UNCLOSED_TAG = "unclosed_tag"


@dataclass
class ValidationIssue:
    """A single structural problem located in the input markup."""

    code: str
    tag: str
    message: str
    offset: int
    line: int
    expected: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "tag": self.tag,
            "expected": self.expected,
            "message": self.message,
            "offset": self.offset,
            "line": self.line,
        }


@dataclass
class ValidationReport:
    """Outcome of a validation run; ``valid`` holds iff no errors were found."""

    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[str]:
        return [issue.message for issue in self.issues]

    @property
    def valid(self) -> bool:
        return not self.issues

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": self.errors,
            "issues": [issue.to_dict() for issue in self.issues],
        }


class Validator(Protocol):
    """Protocol implemented by markup validators."""

    name: str

    def validate(self, html: str) -> ValidationReport:
        """Run validation over ``html`` and return the report."""


def line_number(text: str, offset: int) -> int:
    """Return the 1-based line containing ``offset``."""
    return text.count("\n", 0, offset) + 1
