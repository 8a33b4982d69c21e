"""Validator that checks tags are balanced and properly nested."""

from __future__ import annotations

from typing import List, Tuple

from ..logging import get_logger
from ..scanner import CLOSE, OPEN, iter_tags
from .base import (
    MISMATCHED_TAG,
    UNCLOSED_TAG,
    UNEXPECTED_CLOSING,
    ValidationIssue,
    ValidationReport,
    Validator,
    line_number,
)

_logger = get_logger("validate")


class TagBalanceValidator(Validator):
    """Walks every tag with a stack and reports structural errors.

    Void elements and tags written as ``<x/>`` never touch the stack. Only
    element-tag syntax is scanned, so tags written inside comments count. A mismatched closing tag still consumes the entry it was
    compared against; no recovery is attempted.
    """

    name = "tag_balance"

    def validate(self, html: str) -> ValidationReport:
        report = ValidationReport()
        stack: List[Tuple[str, int]] = []
        scanned = 0

        for token in iter_tags(html):
            scanned += 1
            if token.kind == OPEN:
                stack.append((token.name, token.start))
                continue
            if token.kind != CLOSE:
                continue
            if not stack:
                report.issues.append(
                    ValidationIssue(
                        code=UNEXPECTED_CLOSING,
                        tag=token.name,
                        message=f"Unexpected closing tag </{token.name}> with no matching opening tag",
                        offset=token.start,
                        line=line_number(html, token.start),
                    )
                )
                continue
            expected, _ = stack.pop()
            if expected != token.name:
                report.issues.append(
                    ValidationIssue(
                        code=MISMATCHED_TAG,
                        tag=token.name,
                        expected=expected,
                        message=f"Mismatched tags: expected </{expected}> but found </{token.name}>",
                        offset=token.start,
                        line=line_number(html, token.start),
                    )
                )

        for tag, offset in reversed(stack):
            report.issues.append(
                ValidationIssue(
                    code=UNCLOSED_TAG,
                    tag=tag,
                    message=f"Unclosed tag: <{tag}>",
                    offset=offset,
                    line=line_number(html, offset),
                )
            )

        _logger.debug("Validated %d tags, %d issue(s)", scanned, len(report.issues))
        return report


def validate(html: str) -> ValidationReport:
    """Check that every tag in ``html`` is balanced and correctly nested."""
    return TagBalanceValidator().validate(html)


__all__ = ["TagBalanceValidator", "validate"]
