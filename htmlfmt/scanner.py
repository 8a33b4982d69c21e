"""Forward scanner that recognises tag boundaries in raw markup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .constants import VOID_ELEMENTS

OPEN = "open"
CLOSE = "close"
SELF_CLOSING = "self_closing"
COMMENT = "comment"
DECLARATION = "declaration"

_COMMENT_OPEN = "<!--"
_COMMENT_CLOSE = "-->"


@dataclass(frozen=True)
class TagToken:
    """A single tag discovered in the input, with its classification."""

    name: str
    kind: str
    raw: str
    start: int
    end: int

    @property
    def is_markup(self) -> bool:
        """True for element tags, False for comments and declarations."""
        return self.kind in (OPEN, CLOSE, SELF_CLOSING)

    @property
    def written_self_closing(self) -> bool:
        return self.is_markup and self.raw.endswith("/>")


def read_tag(text: str, pos: int) -> Optional[TagToken]:
    """Return the tag starting at ``pos`` or ``None`` when ``pos`` does not open one.

    Comments extend to the nearest ``-->`` (or the end of the input when
    unterminated) and declarations to the next ``>``. Element tags need a
    ``<``, an optional ``/``, an ASCII identifier starting with a letter and a
    terminating ``>``; everything between the name and that ``>`` belongs to
    the tag verbatim.
    """
    if not text.startswith("<", pos):
        return None

    if text.startswith(_COMMENT_OPEN, pos):
        close = text.find(_COMMENT_CLOSE, pos + len(_COMMENT_OPEN))
        end = len(text) if close == -1 else close + len(_COMMENT_CLOSE)
        return TagToken(name="", kind=COMMENT, raw=text[pos:end], start=pos, end=end)

    if text.startswith("<!", pos):
        close = text.find(">", pos + 2)
        if close == -1:
            return None
        return TagToken(
            name="", kind=DECLARATION, raw=text[pos : close + 1], start=pos, end=close + 1
        )

    index = pos + 1
    if text.startswith("/", index):
        index += 1
    name_start = index
    if index >= len(text) or not _is_name_start(text[index]):
        return None
    while index < len(text) and _is_name_char(text[index]):
        index += 1
    name = text[name_start:index].lower()

    close = text.find(">", index)
    if close == -1:
        return None
    raw = text[pos : close + 1]
    return TagToken(name=name, kind=_classify(raw, name), raw=raw, start=pos, end=close + 1)


def iter_tags(text: str) -> Iterator[TagToken]:
    """Yield every element tag in document order; matches never overlap.

    A ``<!`` never starts an element tag, so comments and declarations are
    stepped over one character at a time and any tags written inside them
    are still yielded.
    """
    pos = text.find("<")
    while pos != -1:
        if text.startswith("<!", pos):
            pos = text.find("<", pos + 1)
            continue
        token = read_tag(text, pos)
        if token is None:
            pos = text.find("<", pos + 1)
            continue
        yield token
        pos = text.find("<", token.end)


def split_segments(text: str) -> Iterator[str]:
    """Split ``text`` at every ``>``, optional whitespace, ``<`` boundary.

    The delimiting ``>`` and ``<`` are consumed, so every segment but the
    first lacks its leading ``<`` and every segment but the last lacks its
    trailing ``>``.
    """
    start = 0
    pos = text.find(">")
    while pos != -1:
        cursor = pos + 1
        while cursor < len(text) and text[cursor].isspace():
            cursor += 1
        if cursor < len(text) and text[cursor] == "<":
            yield text[start:pos]
            start = cursor + 1
            pos = text.find(">", start)
        else:
            pos = text.find(">", pos + 1)
    yield text[start:]


def _classify(raw: str, name: str) -> str:
    # Self-closing wins over closing syntax: ``</br>`` never touches the stack.
    if raw.endswith("/>") or name in VOID_ELEMENTS:
        return SELF_CLOSING
    if raw.startswith("</"):
        return CLOSE
    return OPEN


def _is_name_start(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_name_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


__all__ = [
    "CLOSE",
    "COMMENT",
    "DECLARATION",
    "OPEN",
    "SELF_CLOSING",
    "TagToken",
    "iter_tags",
    "read_tag",
    "split_segments",
]
