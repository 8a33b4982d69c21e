"""Whitespace formatters for HTML markup."""

from .minify import HtmlMinifier, minify
from .prettify import HtmlPrettifier, prettify

__all__ = ["HtmlMinifier", "HtmlPrettifier", "minify", "prettify"]
