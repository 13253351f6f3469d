"""Shape classification for parsed XML documents.

Classification only reads the tree, so running it twice on the same root
always gives the same Shape.
"""

import logging

from lxml import etree

from .element_utils import child_elements, tag_matches, tag_name
from .models import Shape

logger = logging.getLogger(__name__)

TABLE_TAGS = ("table",)
FEED_TAGS = ("rss", "feed", "channel")
SVG_TAGS = ("svg",)
TABULAR_TAGS = ("table", "grid", "dataset", "records", "rows")


def is_tabular(element: etree._Element) -> bool:
    """Check whether an element looks like repeated rows of multi-field records.

    True when the tag itself names a tabular container, or when the element
    has several children that all share one tag name and the first of them
    has several children of its own.
    """
    if tag_matches(element, *TABULAR_TAGS):
        return True

    children = child_elements(element)
    if len(children) <= 1:
        return False

    first_tag = tag_name(children[0])
    if any(tag_name(child) != first_tag for child in children):
        return False

    return len(child_elements(children[0])) > 1


def classify(root: etree._Element) -> Shape:
    """Pick the rendering strategy for a document root.

    Args:
        root: Root element of a parsed document

    Returns:
        The first matching Shape, in order: table, feed, SVG, tabular,
        semantic
    """
    if tag_matches(root, *TABLE_TAGS):
        shape = Shape.TABLE
    elif tag_matches(root, *FEED_TAGS):
        shape = Shape.FEED
    elif tag_matches(root, *SVG_TAGS):
        shape = Shape.SVG_PASSTHROUGH
    elif is_tabular(root):
        shape = Shape.TABULAR_GENERIC
    else:
        shape = Shape.SEMANTIC_GENERIC

    logger.debug(f"Classified <{tag_name(root)}> as {shape.value}")
    return shape
