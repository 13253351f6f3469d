"""Unit tests for converter.models and cli.models modules."""

from dataclasses import FrozenInstanceError

import pytest
from lxml import etree

from src.cli.models import (
    DEFAULT_BUNDLE_NAME,
    MAX_FILE_SIZE,
    ConversionSummary,
    ConverterConfig,
    ExitCode,
    FileOutcome,
)
from src.converter.errors import XmlParseError
from src.converter.models import (
    DEFAULT_FORMAT_OPTIONS,
    ConversionResult,
    FormatOptions,
    ParseResult,
    Shape,
)


class TestShape:
    """Test cases for Shape enum."""

    def test_values(self):
        """Shape values are stable lowercase names."""
        assert [shape.value for shape in Shape] == [
            "table", "feed", "svg_passthrough", "tabular_generic", "semantic_generic",
        ]


class TestParseResult:
    """Test cases for ParseResult."""

    def test_success(self):
        """A result with a root is ok."""
        result = ParseResult(root=etree.fromstring("<a/>"))

        assert result.ok is True

    def test_failure(self):
        """A result with an error is not ok."""
        result = ParseResult(error=XmlParseError("bad"))

        assert result.ok is False

    def test_requires_exactly_one_field(self):
        """Neither or both fields set is rejected."""
        with pytest.raises(ValueError):
            ParseResult()
        with pytest.raises(ValueError):
            ParseResult(root=etree.fromstring("<a/>"), error=XmlParseError("bad"))


class TestFormatOptions:
    """Test cases for FormatOptions."""

    def test_defaults(self):
        """Default options match the fixed formatting configuration."""
        options = DEFAULT_FORMAT_OPTIONS

        assert options.indent_size == 2
        assert options.indent_with_tabs is False
        assert options.max_blank_lines == 2
        assert options.wrap_line_length == 120
        assert options.end_with_newline is True
        assert options.indent_inner_html is True

    def test_indent_unit(self):
        """indent_unit is spaces by default and a tab when requested."""
        assert FormatOptions().indent_unit == "  "
        assert FormatOptions(indent_size=4).indent_unit == "    "
        assert FormatOptions(indent_with_tabs=True).indent_unit == "\t"

    def test_frozen(self):
        """Options cannot be changed after creation."""
        with pytest.raises(FrozenInstanceError):
            DEFAULT_FORMAT_OPTIONS.indent_size = 4


class TestConversionResult:
    """Test cases for ConversionResult."""

    def test_fields(self):
        """ConversionResult stores html, shape and root tag."""
        result = ConversionResult(html="<p/>", shape=Shape.FEED, root_tag="rss")

        assert result.html == "<p/>"
        assert result.shape is Shape.FEED
        assert result.root_tag == "rss"


class TestExitCode:
    """Test cases for ExitCode enum."""

    def test_values(self):
        """Exit codes have fixed integer values."""
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.CONVERSION_ERROR == 2
        assert ExitCode.INPUT_ERROR == 3


class TestConverterConfig:
    """Test cases for ConverterConfig."""

    def test_defaults(self):
        """Defaults write next to inputs, pretty-printed, without bundles."""
        config = ConverterConfig()

        assert config.output_dir is None
        assert config.max_file_size == MAX_FILE_SIZE == 10 * 1024 * 1024
        assert config.pretty_output is True
        assert config.bundle is False
        assert config.bundle_name == DEFAULT_BUNDLE_NAME


class TestConversionSummary:
    """Test cases for ConversionSummary exit code."""

    def test_empty_is_success(self):
        """Nothing to do is a success."""
        assert ConversionSummary().exit_code == ExitCode.SUCCESS

    def test_all_converted_is_success(self):
        """Only conversions means success."""
        summary = ConversionSummary(converted=[FileOutcome("a.xml")])

        assert summary.exit_code == ExitCode.SUCCESS

    def test_conversion_failure(self):
        """A parse or render failure gives CONVERSION_ERROR."""
        summary = ConversionSummary(
            converted=[FileOutcome("a.xml")],
            conversion_failures=[FileOutcome("b.xml")],
        )

        assert summary.exit_code == ExitCode.CONVERSION_ERROR

    def test_export_failure(self):
        """An unwritable output gives GENERAL_ERROR."""
        summary = ConversionSummary(export_failures=[FileOutcome("a.xml")])

        assert summary.exit_code == ExitCode.GENERAL_ERROR

    def test_rejection_takes_priority(self):
        """Rejected inputs outrank every other failure."""
        summary = ConversionSummary(
            conversion_failures=[FileOutcome("b.xml")],
            rejected=[FileOutcome("c.txt")],
            export_failures=[FileOutcome("d.xml")],
        )

        assert summary.exit_code == ExitCode.INPUT_ERROR
