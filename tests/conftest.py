from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.html_builder import HtmlWorkspace


@pytest.fixture
def workspace(tmp_path: Path) -> HtmlWorkspace:
    """Provide a scratch directory for HTML files and .htmlfmt.yml configs."""
    return HtmlWorkspace(tmp_path)


@pytest.fixture(autouse=True)
def _reset_htmlfmt_logger():
    """Drop handlers installed by CLI runs so they never outlive captured streams."""
    yield
    logger = logging.getLogger("htmlfmt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
