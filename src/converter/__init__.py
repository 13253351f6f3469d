"""XML to HTML conversion engine.

This package turns an XML document into a human-readable HTML fragment.
The document root decides the rendering strategy: explicit tables, RSS/Atom
feeds, SVG passthrough, record-style tables or a generic semantic mapping.
It also provides best-effort pretty-printing for XML and HTML.
"""

from .classifier import classify, is_tabular
from .errors import (
    ConversionError,
    FormatError,
    RenderError,
    XmlParseError,
    XmlToHtmlError,
)
from .models import ConversionResult, FormatOptions, ParseResult, Shape
from .pretty_printer import PrettyPrinter, format_html, format_markup, format_xml
from .transformer import convert, transform
from .xml_parser import parse

__all__ = [
    'convert',
    'transform',
    'parse',
    'classify',
    'is_tabular',
    'format_xml',
    'format_html',
    'format_markup',
    'PrettyPrinter',
    'ConversionResult',
    'FormatOptions',
    'ParseResult',
    'Shape',
    'XmlToHtmlError',
    'ConversionError',
    'XmlParseError',
    'RenderError',
    'FormatError',
]
