"""Data models for the conversion engine.

This module defines the data structures passed between the parser adapter,
the shape classifier, the renderers and the pretty-printer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lxml import etree

from .errors import XmlParseError


class Shape(Enum):
    """Rendering strategies a parsed document can be classified into."""

    TABLE = "table"
    FEED = "feed"
    SVG_PASSTHROUGH = "svg_passthrough"
    TABULAR_GENERIC = "tabular_generic"
    SEMANTIC_GENERIC = "semantic_generic"


@dataclass
class ParseResult:
    """Outcome of parsing XML text.

    Exactly one of ``root`` and ``error`` is populated.

    Attributes:
        root: Root element of the parsed document (on success)
        error: Parse failure with diagnostic message (on failure)

    Example:
        >>> result = parse("<list><item>One</item></list>")
        >>> result.ok
        True
    """
    root: Optional[etree._Element] = None
    error: Optional[XmlParseError] = None

    def __post_init__(self):
        if (self.root is None) == (self.error is None):
            raise ValueError("ParseResult requires exactly one of root or error")

    @property
    def ok(self) -> bool:
        """True when the document parsed successfully."""
        return self.root is not None


@dataclass(frozen=True)
class FormatOptions:
    """Fixed pretty-printer configuration.

    Attributes:
        indent_size: Spaces per indentation level
        indent_with_tabs: Indent with tabs instead of spaces
        max_blank_lines: Longest run of blank lines kept between siblings
        wrap_line_length: Column at which long text is wrapped
        end_with_newline: Terminate output with exactly one newline
        indent_inner_html: Indent the content of html/head/body too
    """
    indent_size: int = 2
    indent_with_tabs: bool = False
    max_blank_lines: int = 2
    wrap_line_length: int = 120
    end_with_newline: bool = True
    indent_inner_html: bool = True

    @property
    def indent_unit(self) -> str:
        """String emitted for one level of indentation."""
        return "\t" if self.indent_with_tabs else " " * self.indent_size


DEFAULT_FORMAT_OPTIONS = FormatOptions()


@dataclass
class ConversionResult:
    """Result of converting an XML document to HTML.

    Attributes:
        html: Rendered HTML fragment
        shape: Shape the document was classified as
        root_tag: Tag name of the document root, as written in the source
    """
    html: str
    shape: Shape
    root_tag: str
