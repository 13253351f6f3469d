"""Renderer for RSS and Atom feeds."""

from typing import Optional

from lxml import etree

from .element_utils import find_first, iter_descendants, text_content
from .html_builder import HtmlBuilder

DEFAULT_FEED_TITLE = "XML Feed"
DEFAULT_ITEM_TITLE = "Untitled"
DEFAULT_ITEM_LINK = "#"


def _first_text(element: etree._Element, *names: str) -> Optional[str]:
    """Text of the first descendant named any of ``names``; None if empty or absent."""
    match = find_first(element, *names)
    if match is None:
        return None
    return text_content(match).strip() or None


def render_feed(root: etree._Element) -> str:
    """Render an ``rss``, ``feed`` or ``channel`` root.

    Output order is fixed: feed title, feed description (when present),
    then every ``item``/``entry`` in document order.

    Args:
        root: The feed root element

    Returns:
        HTML string wrapped in ``div.xml-feed``
    """
    builder = HtmlBuilder()
    container = builder.tag("div", {"class": "xml-feed"})

    container.append(builder.tag("h1", text=_first_text(root, "title") or DEFAULT_FEED_TITLE))

    description = _first_text(root, "description", "subtitle")
    if description:
        container.append(builder.tag("p", {"class": "feed-description"}, description))

    items = list(iter_descendants(root, "item", "entry"))
    if items:
        items_block = builder.tag("div", {"class": "feed-items"})
        for item in items:
            link = builder.tag(
                "a",
                {"href": _first_text(item, "link") or DEFAULT_ITEM_LINK},
                _first_text(item, "title") or DEFAULT_ITEM_TITLE,
            )
            heading = builder.tag("h2")
            heading.append(link)

            entry = builder.tag("div", {"class": "feed-item"})
            entry.append(heading)
            entry.append(builder.tag(
                "div",
                {"class": "feed-content"},
                _first_text(item, "description", "summary", "content") or "",
            ))
            items_block.append(entry)
        container.append(items_block)

    return builder.render(container)
