"""Renderer mapping arbitrary XML trees onto semantic HTML.

Each XML element becomes one HTML element chosen from TAG_MAPPING (``div``
for unknown tags). The source tag name survives as an ``xml-<tag>`` class
and source attributes survive as ``data-*`` attributes, so the original
structure stays visible and styleable.

Rendering is split in two: render_semantic() is the document entry point
and adds the styled wrapper once; render_node() handles any subtree and
never wraps.
"""

from typing import Dict

from bs4 import Tag
from lxml import etree

from .element_utils import attribute_items, child_elements, tag_name, text_content
from .html_builder import HtmlBuilder
from .styles import SEMANTIC_CONTAINER_CLASS, SEMANTIC_STYLE

# Lowercased XML tag -> HTML tag
TAG_MAPPING: Dict[str, str] = {
    "title": "h1",
    "subtitle": "h2",
    "header": "header",
    "footer": "footer",
    "section": "section",
    "paragraph": "p",
    "p": "p",
    "list": "ul",
    "item": "li",
    "link": "a",
    "image": "img",
    "img": "img",
    "table": "table",
    "row": "tr",
    "cell": "td",
    "heading": "h3",
    "content": "div",
    "div": "div",
    "span": "span",
    "article": "article",
    "nav": "nav",
    "button": "button",
    "input": "input",
}

DEFAULT_HTML_TAG = "div"
CLASS_PREFIX = "xml-"
DATA_ATTRIBUTE_PREFIX = "data-"

# HTML elements that cannot hold text
VOID_TAGS = frozenset({"img", "input"})

# Source attributes that are translated instead of copied to data-*
TRANSLATED_ATTRIBUTES = frozenset({"href", "src"})


def html_tag_for(xml_tag: str) -> str:
    """Return the HTML tag used for an XML tag name (case-insensitive)."""
    return TAG_MAPPING.get(xml_tag.lower(), DEFAULT_HTML_TAG)


def _build_attributes(element: etree._Element, source_tag: str, html_tag: str) -> Dict[str, str]:
    attrs = {"class": f"{CLASS_PREFIX}{source_tag}"}

    if html_tag == "a" and element.get("href") is not None:
        attrs["href"] = element.get("href")
    elif html_tag == "img" and element.get("src") is not None:
        attrs["src"] = element.get("src")
        attrs["alt"] = element.get("alt", "")

    for name, value in attribute_items(element):
        if name in TRANSLATED_ATTRIBUTES:
            continue
        attrs[f"{DATA_ATTRIBUTE_PREFIX}{name}"] = value
    return attrs


def _build_node(element: etree._Element, builder: HtmlBuilder) -> Tag:
    source_tag = tag_name(element).lower()
    html_tag = html_tag_for(source_tag)
    node = builder.tag(html_tag, _build_attributes(element, source_tag, html_tag))

    children = child_elements(element)
    if children:
        # Mixed content: direct text of a parent element is dropped
        for child in children:
            node.append(_build_node(child, builder))
    elif html_tag not in VOID_TAGS:
        text = text_content(element).strip()
        if text:
            node.string = text
    return node


def render_node(element: etree._Element) -> str:
    """Render an element subtree as semantic HTML, without the wrapper."""
    builder = HtmlBuilder()
    return builder.render(_build_node(element, builder))


def render_semantic(root: etree._Element) -> str:
    """Render a document root as semantic HTML inside the styled wrapper.

    Args:
        root: Root element of the document

    Returns:
        HTML string wrapped exactly once in ``div.semantic-xml-content``
    """
    builder = HtmlBuilder()
    container = builder.container(SEMANTIC_CONTAINER_CLASS, SEMANTIC_STYLE)
    container.append(_build_node(root, builder))
    return builder.render(container)
