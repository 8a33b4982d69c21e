"""Indentation-based pretty printing for HTML markup."""

from __future__ import annotations

from typing import List

from ..constants import DEFAULT_INDENT_SIZE, VOID_ELEMENTS
from ..logging import get_logger
from ..scanner import CLOSE, OPEN, TagToken, iter_tags, read_tag, split_segments

_logger = get_logger("prettify")


class HtmlPrettifier:
    """Re-emits markup one tag-delimited segment per line, indented by depth.

    Segments are produced by splitting at tag/tag boundaries, so text stays
    attached to the tag next to it. The depth drops before a line that starts
    with a closing tag or a tag written as ``<x/>`` and rises after a line
    that starts with a plain opening tag, unless the same line also ends
    that element (``<li>text</li>``). An opening tag whose text mentions a
    void element name anywhere, as in ``<div class="hr">``, is treated like
    the void element and keeps the depth.
    """

    def __init__(self, indent_size: int = DEFAULT_INDENT_SIZE, use_tabs: bool = False) -> None:
        self.indent_size = max(0, indent_size)
        self.use_tabs = use_tabs

    @property
    def indent_unit(self) -> str:
        return "\t" if self.use_tabs else " " * self.indent_size

    def format(self, html: str) -> str:
        segments = list(split_segments(html))
        last_index = len(segments) - 1
        unit = self.indent_unit
        lines: List[str] = []
        level = 0

        for index, segment in enumerate(segments):
            stripped = segment.strip()
            if not stripped:
                continue
            line = stripped if index == 0 else "<" + stripped
            if index < last_index:
                line += ">"

            leading = read_tag(line, 0)
            if line.startswith("</") or (leading is not None and leading.written_self_closing):
                level = max(0, level - 1)

            lines.append(unit * level + line)

            if (
                leading is not None
                and leading.kind == OPEN
                and not _mentions_void_element(leading)
                and not _closes_own_tag(line, leading)
            ):
                level += 1

        _logger.debug("Prettified %d segments into %d lines", len(segments), len(lines))
        return "\n".join(lines)


def _mentions_void_element(tag: TagToken) -> bool:
    lowered = tag.raw.lower()
    return any(name in lowered for name in VOID_ELEMENTS)


def _closes_own_tag(line: str, leading: TagToken) -> bool:
    last = None
    for token in iter_tags(line[leading.end :]):
        last = token
    return last is not None and last.kind == CLOSE and last.name == leading.name


def prettify(html: str, indent_size: int = DEFAULT_INDENT_SIZE, use_tabs: bool = False) -> str:
    """Return ``html`` reformatted with depth-proportional indentation."""
    return HtmlPrettifier(indent_size=indent_size, use_tabs=use_tabs).format(html)


__all__ = ["HtmlPrettifier", "prettify"]
