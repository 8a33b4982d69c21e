"""Constants shared by the formatter and validator."""

from __future__ import annotations

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

CONFIG_FILENAME = ".htmlfmt.yml"

DEFAULT_INDENT_SIZE = 2

__all__ = ["CONFIG_FILENAME", "DEFAULT_INDENT_SIZE", "VOID_ELEMENTS"]
