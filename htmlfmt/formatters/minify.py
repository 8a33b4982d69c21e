"""Whitespace and comment stripping for HTML markup."""

from __future__ import annotations

import re

from ..logging import get_logger

_COMMENT_PATTERN = re.compile(r"<!--[\s\S]*?-->")
_INTER_TAG_WHITESPACE = re.compile(r">\s+<")
_WHITESPACE_RUN = re.compile(r"\s{2,}")

_logger = get_logger("minify")


class HtmlMinifier:
    """Strips comments and collapses insignificant whitespace.

    The collapse is content-unaware: runs inside ``<pre>`` blocks and
    attribute values are shortened like any other text.
    """

    def __init__(self, remove_comments: bool = True) -> None:
        self.remove_comments = remove_comments

    def minify(self, html: str) -> str:
        result = self._minify_once(html)
        # Deleting comments or inter-tag whitespace can splice a new comment
        # together; each extra pass removes at least one, so this terminates.
        while self.remove_comments and _COMMENT_PATTERN.search(result):
            result = self._minify_once(result)
        _logger.debug("Minified %d characters down to %d", len(html), len(result))
        return result

    def _minify_once(self, html: str) -> str:
        result = html
        if self.remove_comments:
            result = _COMMENT_PATTERN.sub("", result)
        result = _INTER_TAG_WHITESPACE.sub("><", result)
        result = result.strip()
        return _WHITESPACE_RUN.sub(" ", result)


def minify(html: str, remove_comments: bool = True) -> str:
    """Return ``html`` without comments (optionally) and redundant whitespace."""
    return HtmlMinifier(remove_comments=remove_comments).minify(html)


__all__ = ["HtmlMinifier", "minify"]
