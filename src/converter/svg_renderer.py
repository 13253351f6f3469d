"""Passthrough renderer for SVG documents.

SVG is already valid HTML5 content, so the root is re-serialized as-is.
"""

from lxml import etree


def render_svg(root: etree._Element) -> str:
    """Serialize the ``svg`` root and its subtree without any transformation."""
    return etree.tostring(root, encoding="unicode", with_tail=False)
