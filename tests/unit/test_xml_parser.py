"""Unit tests for converter.xml_parser module."""

import pytest
from lxml import etree

from src.converter.element_utils import text_content
from src.converter.errors import XmlParseError
from src.converter.xml_parser import parse
from tests.fixtures.sample_documents import (
    ENTITY_EXPANSION_XML,
    MALFORMED_XML,
    SAMPLE_RSS_XML,
    XXE_XML,
)


class TestParseSuccess:
    """Test cases for well-formed input."""

    def test_returns_root_element(self):
        """Well-formed XML yields a root and no error."""
        result = parse("<list><item>One</item></list>")

        assert result.ok is True
        assert result.error is None
        assert result.root.tag == "list"

    def test_accepts_xml_declaration(self):
        """Documents starting with an XML declaration parse."""
        result = parse(SAMPLE_RSS_XML)

        assert result.ok
        assert result.root.tag == "rss"

    def test_declared_encoding_does_not_break_decoded_text(self):
        """Text is already decoded, so a non-UTF-8 declaration is ignored."""
        result = parse('<?xml version="1.0" encoding="ISO-8859-1"?><name>Zoë</name>')

        assert result.ok
        assert result.root.text == "Zoë"

    def test_comments_are_kept_in_tree(self):
        """Comments survive parsing but are not elements."""
        result = parse("<root><!-- note --><a>1</a></root>")

        assert result.ok
        assert isinstance(result.root[0], etree._Comment)

    def test_cdata_text_is_readable(self):
        """CDATA content reads as plain text and serializes back as CDATA."""
        result = parse("<note><![CDATA[a < b]]></note>")

        assert result.root.text == "a < b"
        assert etree.tostring(result.root, encoding="unicode") == "<note><![CDATA[a < b]]></note>"


class TestParseFailure:
    """Test cases for malformed and empty input."""

    def test_mismatched_tags_return_error(self):
        """Mismatched tags produce an XmlParseError instead of raising."""
        result = parse(MALFORMED_XML)

        assert result.ok is False
        assert result.root is None
        assert isinstance(result.error, XmlParseError)
        assert "Invalid XML" in str(result.error)

    def test_error_reports_position(self):
        """Parser diagnostics carry the failing line."""
        result = parse("<a>\n<b></a>")

        assert result.error.line == 2
        assert result.error.column is not None
        assert result.error.diagnostic

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
    def test_blank_input_is_error(self, text):
        """Empty or whitespace-only input is reported, not parsed."""
        result = parse(text)

        assert result.ok is False
        assert result.error.diagnostic == "Document is empty"

    def test_plain_text_is_error(self):
        """Text that is not XML at all is reported as a parse error."""
        result = parse("hello world")

        assert result.ok is False

    def test_truncated_document_is_error(self):
        """A document cut off mid-element is reported."""
        result = parse("<root><child>text</chi")

        assert result.ok is False

    def test_multiple_roots_is_error(self):
        """Two top-level elements are not a well-formed document."""
        result = parse("<a/><b/>")

        assert result.ok is False


class TestParserSecurity:
    """Test cases for entity handling."""

    def test_external_entity_is_not_resolved(self):
        """External entities are never loaded from disk."""
        result = parse(XXE_XML)

        assert result.ok
        serialized = etree.tostring(result.root, encoding="unicode")
        assert "root:" not in serialized
        assert text_content(result.root) == ""

    def test_internal_entities_are_not_expanded(self):
        """Entity expansion payloads stay as unexpanded references."""
        result = parse(ENTITY_EXPANSION_XML)

        assert result.ok
        assert "lollol" not in text_content(result.root)
