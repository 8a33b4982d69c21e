"""Tests for htmlfmt.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from htmlfmt.config import ConfigError, HtmlFmtConfig, MinifyConfig, PrettifyConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, HtmlFmtConfig)
    assert config.root == tmp_path.resolve()
    assert config.prettify == PrettifyConfig(indent_size=2, use_tabs=False)
    assert config.minify == MinifyConfig(remove_comments=True)


def test_load_config_parses_expected_fields(workspace) -> None:
    config_file = workspace.write_config(
        """
        prettify:
          indent_size: 4
          use_tabs: true
        minify:
          remove_comments: false
        """
    )

    config = load_config(config_file)

    assert config.root == workspace.root.resolve()
    assert config.prettify.indent_size == 4
    assert config.prettify.use_tabs is True
    assert config.minify.remove_comments is False


def test_load_config_finds_file_beside_html(workspace) -> None:
    workspace.write_config("prettify:\n  indent_size: 8\n")
    page = workspace.write("index.html", "<p></p>")

    assert load_config(page).prettify.indent_size == 8


def test_load_config_accepts_partial_and_empty_files(workspace) -> None:
    workspace.write_config("minify:\n  remove_comments: 'no'\n")
    config = load_config(workspace.root)
    assert config.minify.remove_comments is False
    assert config.prettify.indent_size == 2

    workspace.write_config("\n")
    assert load_config(workspace.root).minify.remove_comments is True


@pytest.mark.parametrize(
    "content, message",
    [
        ("- just\n- a list\n", "mapping at the root"),
        ("prettify: [1, 2]\n", "prettify must be a mapping"),
        ("prettify:\n  indent_size: -1\n", "zero or positive"),
        ("prettify:\n  indent_size: wide\n", "must be an integer"),
        ("prettify:\n  use_tabs: maybe\n", "use_tabs must be a boolean"),
        ("minify:\n  remove_comments: 3\n", "remove_comments must be a boolean"),
        ("prettify: {indent_size: 2\n", "Failed to parse"),
    ],
)
def test_load_config_rejects_invalid_content(workspace, content: str, message: str) -> None:
    workspace.write_config(content)
    with pytest.raises(ConfigError, match=message):
        load_config(workspace.root)


def test_with_overrides_applies_only_given_values(tmp_path: Path) -> None:
    config = HtmlFmtConfig(root=tmp_path)

    updated = config.with_overrides(indent_size=3, remove_comments=False)

    assert updated.prettify == PrettifyConfig(indent_size=3, use_tabs=False)
    assert updated.minify.remove_comments is False
    assert config.prettify.indent_size == 2
    assert config.minify.remove_comments is True


def test_with_overrides_rejects_negative_indent(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        HtmlFmtConfig(root=tmp_path).with_overrides(indent_size=-2)
