#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the markdown tokenizer and its dependency checks."""

import logging
from unittest.mock import patch

import pytest

from mdadf.exceptions import DependencyError, InvalidOptionsError
from mdadf.options import AdfOptions, MarkdownParserOptions
from mdadf.parsers.markdown import MarkdownParser, _build_markdown, parse_markdown
from mdadf.utils.decorators import debug_timer, requires_dependencies
from mdadf.utils.packages import check_version_requirement, get_package_version


def _types(tokens):
    return [token["type"] for token in tokens if token["type"] != "blank_line"]


@pytest.mark.unit
class TestMarkdownParser:
    """Test MarkdownParser."""

    def test_block_tokens(self):
        """Test the top-level token kinds."""
        tokens = MarkdownParser().parse("# Hello\n\nThis is **bold**.\n\n- item")

        assert _types(tokens) == ["heading", "paragraph", "list"]

    def test_bytes_are_decoded(self):
        """Test that bytes input is decoded as UTF-8."""
        tokens = parse_markdown("café".encode("utf-8"))

        assert tokens[0]["children"][0]["raw"] == "café"

    def test_invalid_utf8_is_replaced(self):
        """Test that undecodable bytes do not fail the parse."""
        tokens = parse_markdown(b"abc\xff")

        assert tokens[0]["type"] == "paragraph"

    def test_table_plugin(self):
        """Test that tables are only recognised when enabled."""
        source = "| A |\n|---|\n| 1 |"

        assert _types(parse_markdown(source)) == ["table"]
        assert _types(parse_markdown(source, MarkdownParserOptions(parse_tables=False))) == ["paragraph"]

    def test_parser_is_shared_per_options(self):
        """Test that one mistune instance is built per distinct configuration."""
        assert _build_markdown(MarkdownParserOptions()) is _build_markdown(MarkdownParserOptions())
        assert _build_markdown(MarkdownParserOptions()) is not _build_markdown(MarkdownParserOptions(hard_wrap=True))

    def test_wrong_options_type(self):
        """Test that a wrong options class is rejected."""
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(AdfOptions())  # type: ignore[arg-type]

    def test_missing_mistune(self):
        """Test that a missing parser library raises DependencyError."""
        with patch("mdadf.utils.decorators.importlib.import_module", side_effect=ImportError("no mistune")):
            with pytest.raises(DependencyError) as exc_info:
                MarkdownParser().parse("text")

        assert exc_info.value.missing_packages == [("mistune", ">=3.0.0")]

    def test_outdated_mistune(self):
        """Test that an old parser library raises DependencyError."""
        with patch("mdadf.utils.decorators.check_version_requirement", return_value=(False, "2.0.5")):
            with pytest.raises(DependencyError) as exc_info:
                MarkdownParser().parse("text")

        assert exc_info.value.version_mismatches == [("mistune", ">=3.0.0", "2.0.5")]


@pytest.mark.unit
class TestUtilities:
    """Test package and timing helpers."""

    def test_installed_package_version(self):
        """Test reading the version of an installed distribution."""
        assert get_package_version("mistune") is not None
        assert get_package_version("surely-not-an-installed-package") is None

    def test_check_version_requirement(self):
        """Test specifier checks against installed packages."""
        assert check_version_requirement("mistune", ">=3.0.0")[0] is True
        assert check_version_requirement("mistune", ">=999")[0] is False
        assert check_version_requirement("surely-not-an-installed-package", ">=1") == (False, None)

    def test_invalid_specifier_is_accepted(self):
        """Test that an unparsable specifier does not block use."""
        meets, installed = check_version_requirement("mistune", "not a spec")

        assert meets is True
        assert installed is not None

    def test_requires_dependencies_passes_through(self):
        """Test that the decorated function runs when requirements are met."""

        @requires_dependencies("json", [("json", "json", "")])
        def load():
            return "ok"

        assert load() == "ok"

    def test_debug_timer_logs(self, caplog):
        """Test that elapsed time is logged at DEBUG level."""
        logger = logging.getLogger("mdadf.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="mdadf.tests.timer"):
            with debug_timer(logger, "Doing work"):
                pass

        assert "Doing work completed in" in caplog.text
