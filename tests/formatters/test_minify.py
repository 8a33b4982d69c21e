"""Tests for the minifier."""

from __future__ import annotations

import pytest

from htmlfmt.formatters import HtmlMinifier, minify


def test_minify_strips_comment_and_surrounding_whitespace() -> None:
    assert minify("<!-- c -->  <p> x </p>", True) == "<p> x </p>"


def test_minify_removes_whitespace_between_tags() -> None:
    html = "<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>\n"
    assert minify(html) == "<ul><li>a</li><li>b</li></ul>"


def test_minify_can_keep_comments() -> None:
    assert minify("<div>  <!-- c -->  </div>", False) == "<div><!-- c --></div>"


def test_minify_comment_removal_is_non_greedy() -> None:
    html = "<p>a</p><!-- one --><p>b</p><!-- two -->"
    assert minify(html) == "<p>a</p><p>b</p>"


def test_minify_collapses_whitespace_runs_in_text() -> None:
    assert minify("<p>hello    world\n\n again</p>") == "<p>hello world again</p>"


def test_minify_leaves_single_whitespace_characters() -> None:
    assert minify("<p>a\nb</p>") == "<p>a\nb</p>"


def test_minify_does_not_protect_preformatted_or_attribute_whitespace() -> None:
    assert minify("<pre>a   b</pre>") == "<pre>a b</pre>"
    assert minify('<div class="a  b"></div>') == '<div class="a b"></div>'


def test_minify_removes_comments_spliced_together_by_a_deletion() -> None:
    assert minify("<!<!-- x -->-- y -->") == ""


@pytest.mark.parametrize(
    "html",
    [
        "",
        "   ",
        "<!-- c -->  <p> x </p>",
        "<div>\n\t<span>  a  </span>\n</div>",
        "<!<!-- x -->-- y -->",
        "<!-->  <-->",
        "text  with\t\tspaces <b> bold </b>  ",
    ],
)
def test_minify_is_idempotent(html: str) -> None:
    once = minify(html, True)
    assert minify(once, True) == once


def test_minifier_class_matches_function() -> None:
    html = "<div> <!-- c --> <p>a</p> </div>"
    assert HtmlMinifier(remove_comments=True).minify(html) == minify(html, True)
    assert HtmlMinifier(remove_comments=False).minify(html) == "<div><!-- c --><p>a</p></div>"
