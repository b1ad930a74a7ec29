"""Pytest configuration and shared fixtures for the mdadf test suite.

This module registers the test markers and provides fixtures shared by
the unit tests.
"""

import json
from pathlib import Path

import pytest

from mdadf import to_document, to_json
from mdadf.logging_utils import reset_logging


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def convert():
    """Convert markdown and return the top-level ADF blocks."""

    def _convert(markdown, **kwargs):
        doc = to_document(markdown, **kwargs)
        assert doc is not None
        return list(doc.content)

    return _convert


@pytest.fixture
def convert_json():
    """Convert markdown and return the decoded ADF JSON dictionary."""

    def _convert(markdown, **kwargs):
        return json.loads(to_json(markdown, **kwargs))

    return _convert


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    """Provide a small markdown document on disk."""
    path = tmp_path / "page.md"
    path.write_text("# Release notes\n\n- **fixed** login\n- added `--dry-run`\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Remove handlers installed by ``configure_logging`` during CLI tests."""
    yield
    reset_logging()
