"""File-level runs for the prettify, minify and validate commands."""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .config import HtmlFmtConfig, load_config
from .formatters import HtmlMinifier, HtmlPrettifier
from .logging import get_logger
from .validators import TagBalanceValidator, ValidationReport, Validator


@dataclass
class FormatOutcome:
    """Result of formatting a single file."""

    path: Path
    output: str
    changed: bool
    diff: str
    written: bool


@dataclass
class ValidationOutcome:
    """Result of validating a single file."""

    path: Path
    report: ValidationReport

    @property
    def valid(self) -> bool:
        return self.report.valid


class Orchestrator:
    """Reads markup from disk, runs one operation over it and optionally writes it back.

    Options come from the ``.htmlfmt.yml`` found beside each file unless an
    explicit configuration is supplied; per-call keyword arguments win over both.
    """

    def __init__(
        self,
        config: HtmlFmtConfig | None = None,
        validator: Validator | None = None,
    ) -> None:
        self._config = config
        self.validator = validator or TagBalanceValidator()
        self.logger = get_logger("orchestrator")

    def run_prettify(
        self,
        path: str | Path,
        *,
        write: bool = False,
        indent_size: Optional[int] = None,
        use_tabs: Optional[bool] = None,
    ) -> FormatOutcome:
        """Pretty-print ``path``, rewriting it when ``write`` is set."""
        target = self._resolve_path(path)
        config = self._config_for(target).with_overrides(
            indent_size=indent_size, use_tabs=use_tabs
        )
        prettifier = HtmlPrettifier(
            indent_size=config.prettify.indent_size,
            use_tabs=config.prettify.use_tabs,
        )
        self.logger.info("Prettifying %s", target)
        return self._format(target, prettifier.format, write=write)

    def run_minify(
        self,
        path: str | Path,
        *,
        write: bool = False,
        remove_comments: Optional[bool] = None,
    ) -> FormatOutcome:
        """Minify ``path``, rewriting it when ``write`` is set."""
        target = self._resolve_path(path)
        config = self._config_for(target).with_overrides(remove_comments=remove_comments)
        minifier = HtmlMinifier(remove_comments=config.minify.remove_comments)
        self.logger.info("Minifying %s", target)
        return self._format(target, minifier.minify, write=write)

    def run_validate(self, path: str | Path) -> ValidationOutcome:
        """Validate the tag structure of ``path``."""
        target = self._resolve_path(path)
        self.logger.info("Validating %s", target)
        report = self.validator.validate(target.read_text(encoding="utf-8"))
        if report.valid:
            self.logger.info("%s is structurally valid", target)
        else:
            self.logger.info("%s has %d structural error(s)", target, len(report.errors))
        return ValidationOutcome(path=target, report=report)

    def _format(
        self, target: Path, transform: Callable[[str], str], *, write: bool
    ) -> FormatOutcome:
        original = target.read_text(encoding="utf-8")
        output = transform(original)
        changed = output != original
        diff = self._render_diff(original, output, target.name) if changed else ""

        written = False
        if not changed:
            self.logger.info("%s already formatted; nothing to do", target)
        elif write:
            target.write_text(output, encoding="utf-8")
            written = True
            self.logger.info("Rewrote %s", target)
        else:
            self.logger.debug("%s would change; not writing", target)

        return FormatOutcome(path=target, output=output, changed=changed, diff=diff, written=written)

    def _config_for(self, target: Path) -> HtmlFmtConfig:
        if self._config is not None:
            return self._config
        return load_config(target)

    @staticmethod
    def _resolve_path(path: str | Path) -> Path:
        target = Path(path).expanduser().resolve()
        if not target.is_file():
            raise FileNotFoundError(f"No HTML file found at {target}")
        return target

    @staticmethod
    def _render_diff(original: str, updated: str, name: str) -> str:
        diff = difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (original)",
            tofile=f"{name} (formatted)",
        )
        return "".join(diff)


__all__ = ["FormatOutcome", "Orchestrator", "ValidationOutcome"]
