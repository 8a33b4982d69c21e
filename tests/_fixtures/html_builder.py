"""Helper utilities for writing HTML files and configs in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path


class HtmlWorkspace:
    """Utility for writing markup and configuration into a throwaway directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "site"
        self.root.mkdir()

    def write(self, relative: str, content: str) -> Path:
        """Write ``content`` to ``relative`` and return the absolute path."""
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def write_config(self, content: str, relative_dir: str = ".") -> Path:
        """Write a dedented .htmlfmt.yml into ``relative_dir``."""
        directory = self.root / relative_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / ".htmlfmt.yml"
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")


__all__ = ["HtmlWorkspace"]
