"""Tests for htmlfmt.orchestrator."""

from __future__ import annotations

from pathlib import Path

import pytest

from htmlfmt.config import HtmlFmtConfig, PrettifyConfig
from htmlfmt.orchestrator import Orchestrator
from htmlfmt.validators import ValidationReport


def test_run_prettify_returns_output_without_writing(workspace) -> None:
    page = workspace.write("index.html", "<div><p>a</p></div>")

    outcome = Orchestrator().run_prettify(page)

    assert outcome.output == "<div>\n  <p>a</p>\n</div>"
    assert outcome.changed is True
    assert outcome.written is False
    assert "+  <p>a</p>" in outcome.diff
    assert workspace.read("index.html") == "<div><p>a</p></div>"


def test_run_prettify_writes_when_requested(workspace) -> None:
    page = workspace.write("index.html", "<div><p>a</p></div>")

    outcome = Orchestrator().run_prettify(page, write=True, use_tabs=True)

    assert outcome.written is True
    assert workspace.read("index.html") == "<div>\n\t<p>a</p>\n</div>"


def test_run_prettify_reads_options_from_config_beside_file(workspace) -> None:
    workspace.write_config("prettify:\n  indent_size: 4\n", "pages")
    page = workspace.write("pages/index.html", "<div><p>a</p></div>")

    outcome = Orchestrator().run_prettify(page)
    assert outcome.output == "<div>\n    <p>a</p>\n</div>"

    overridden = Orchestrator().run_prettify(page, indent_size=1)
    assert overridden.output == "<div>\n <p>a</p>\n</div>"


def test_explicit_config_wins_over_file(workspace, tmp_path: Path) -> None:
    workspace.write_config("prettify:\n  indent_size: 4\n")
    page = workspace.write("index.html", "<div><p>a</p></div>")
    config = HtmlFmtConfig(root=tmp_path, prettify=PrettifyConfig(indent_size=0))

    outcome = Orchestrator(config=config).run_prettify(page)

    assert outcome.output == "<div>\n<p>a</p>\n</div>"


def test_run_minify_reports_unchanged_content(workspace) -> None:
    page = workspace.write("min.html", "<p>a</p>")

    outcome = Orchestrator().run_minify(page, write=True)

    assert outcome.changed is False
    assert outcome.written is False
    assert outcome.diff == ""


def test_run_minify_honours_keep_comments(workspace) -> None:
    page = workspace.write("index.html", "<div>\n  <!-- c -->\n</div>\n")

    assert Orchestrator().run_minify(page).output == "<div></div>"
    kept = Orchestrator().run_minify(page, remove_comments=False)
    assert kept.output == "<div><!-- c --></div>"


def test_run_validate_returns_report(workspace) -> None:
    page = workspace.write("broken.html", "<div>\n<span>\n</div>")

    outcome = Orchestrator().run_validate(page)

    assert outcome.path == page.resolve()
    assert outcome.valid is False
    assert outcome.report.errors == [
        "Mismatched tags: expected </span> but found </div>",
        "Unclosed tag: <div>",
    ]


def test_run_validate_uses_injected_validator(workspace) -> None:
    class RecordingValidator:
        name = "recording"

        def __init__(self) -> None:
            self.seen: list[str] = []

        def validate(self, html: str) -> ValidationReport:
            self.seen.append(html)
            return ValidationReport()

    validator = RecordingValidator()
    page = workspace.write("index.html", "<p>")

    outcome = Orchestrator(validator=validator).run_validate(page)

    assert outcome.valid is True
    assert validator.seen == ["<p>"]


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Orchestrator().run_prettify(tmp_path / "missing.html")
    with pytest.raises(FileNotFoundError):
        Orchestrator().run_validate(tmp_path)
