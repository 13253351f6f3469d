"""Helpers for reading lxml element trees.

Renderers only ever look at elements (comments, processing instructions and
entity references are skipped) and compare tag names case-insensitively on
the qualified name as written in the source (``prefix:local``).
"""

from typing import Iterator, List, Optional, Tuple

from lxml import etree

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def is_element(node) -> bool:
    """Return True for real elements (not comments, PIs or entities)."""
    return isinstance(node.tag, str)


def _qualify(clark_name: str, prefix_lookup) -> str:
    if not clark_name.startswith("{"):
        return clark_name
    namespace, local = clark_name[1:].split("}", 1)
    prefix = prefix_lookup(namespace)
    return f"{prefix}:{local}" if prefix else local


def tag_name(element: etree._Element) -> str:
    """Return the element's tag name as written in the source document."""
    if element.prefix:
        return f"{element.prefix}:{etree.QName(element).localname}"
    return etree.QName(element).localname


def tag_matches(element: etree._Element, *names: str) -> bool:
    """Check whether the element's tag is one of ``names`` (case-insensitive)."""
    if not is_element(element):
        return False
    return tag_name(element).lower() in {name.lower() for name in names}


def child_elements(element: etree._Element) -> List[etree._Element]:
    """Return the direct child elements in document order."""
    return [child for child in element if is_element(child)]


def iter_descendants(element: etree._Element, *names: str) -> Iterator[etree._Element]:
    """Yield descendant elements in document order, optionally filtered by tag."""
    for node in element.iterdescendants():
        if not is_element(node):
            continue
        if names and not tag_matches(node, *names):
            continue
        yield node


def find_first(element: etree._Element, *names: str) -> Optional[etree._Element]:
    """Return the first descendant whose tag is any of ``names``, or None."""
    return next(iter_descendants(element, *names), None)


def text_content(element: etree._Element) -> str:
    """Concatenate all descendant text, like the DOM ``textContent``."""
    parts = [element.text or ""]
    for child in element:
        if is_element(child):
            parts.append(text_content(child))
        parts.append(child.tail or "")
    return "".join(parts)


def attribute_items(element: etree._Element) -> List[Tuple[str, str]]:
    """Return ``(name, value)`` attribute pairs with source-style names.

    Namespaced attributes come back from lxml in Clark notation; they are
    turned back into ``prefix:local`` using the element's namespace map.
    """
    def prefix_for(namespace: str) -> Optional[str]:
        if namespace == XML_NAMESPACE:
            return "xml"
        for prefix, uri in element.nsmap.items():
            if uri == namespace and prefix:
                return prefix
        return None

    return [(_qualify(key, prefix_for), value) for key, value in element.attrib.items()]
