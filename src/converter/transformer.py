"""XML to HTML conversion pipeline.

Parses the input, classifies the root and hands it to the renderer
registered for that shape. Conversion is all-or-nothing: callers get either
a complete HTML fragment or a ConversionError.
"""

import logging
from typing import Callable, Dict

from lxml import etree

from .classifier import classify
from .element_utils import tag_name
from .errors import RenderError
from .feed_renderer import render_feed
from .models import ConversionResult, Shape
from .semantic_renderer import render_semantic
from .svg_renderer import render_svg
from .table_renderer import render_table
from .tabular_renderer import render_tabular
from .xml_parser import parse

logger = logging.getLogger(__name__)

Renderer = Callable[[etree._Element], str]

RENDERERS: Dict[Shape, Renderer] = {
    Shape.TABLE: render_table,
    Shape.FEED: render_feed,
    Shape.SVG_PASSTHROUGH: render_svg,
    Shape.TABULAR_GENERIC: render_tabular,
    Shape.SEMANTIC_GENERIC: render_semantic,
}


def transform(xml_text: str) -> ConversionResult:
    """Convert XML text to HTML and report how it was rendered.

    Args:
        xml_text: XML document text

    Returns:
        ConversionResult with the HTML fragment and the detected shape

    Raises:
        XmlParseError: If the text is not well-formed XML
        RenderError: If the renderer fails on the parsed document
    """
    parsed = parse(xml_text)
    if not parsed.ok:
        logger.info(f"Conversion rejected: {parsed.error}")
        raise parsed.error

    root = parsed.root
    shape = classify(root)

    try:
        html = RENDERERS[shape](root)
    except Exception as e:
        logger.exception(f"Renderer for {shape.value} failed")
        raise RenderError(shape.value, str(e)) from e

    logger.info(f"Converted <{tag_name(root)}> document as {shape.value} ({len(html)} chars)")
    return ConversionResult(html=html, shape=shape, root_tag=tag_name(root))


def convert(xml_text: str) -> str:
    """Convert XML text to an HTML fragment.

    Raises:
        XmlParseError: If the text is not well-formed XML
        RenderError: If rendering fails
    """
    return transform(xml_text).html
