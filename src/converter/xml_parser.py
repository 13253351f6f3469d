"""Parser adapter turning raw XML text into an lxml element tree.

This module is the only entry point from text into the engine. Malformed
input is reported as a ParseResult carrying an XmlParseError; no parser
exception crosses this boundary.
"""

import logging

from lxml import etree

from .errors import XmlParseError
from .models import ParseResult

logger = logging.getLogger(__name__)


def _build_parser() -> etree.XMLParser:
    """Create a hardened lxml parser.

    External and internal entities are left unresolved and the network is
    never touched, so XXE and entity-expansion payloads stay inert.
    CDATA sections are kept so passthrough and formatting can write them back.
    The text handed to the parser is already decoded; encoding="utf-8"
    overrides any ``encoding`` pseudo-attribute in the XML declaration.
    """
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
        load_dtd=False,
        strip_cdata=False,
    )


def parse(xml_text: str) -> ParseResult:
    """Parse XML text into a document tree.

    Args:
        xml_text: Arbitrary text (may be empty, truncated or not XML at all)

    Returns:
        ParseResult with ``root`` set on success, ``error`` set otherwise
    """
    if xml_text is None or not xml_text.strip():
        return ParseResult(error=XmlParseError("Document is empty"))

    try:
        root = etree.fromstring(xml_text.encode("utf-8"), parser=_build_parser())
    except etree.XMLSyntaxError as e:
        line, column = e.position if e.position else (None, None)
        logger.debug(f"XML syntax error: {e}")
        return ParseResult(error=XmlParseError(e.msg or str(e), line, column))
    except ValueError as e:
        # Raised for text that cannot be encoded, e.g. lone surrogates
        logger.debug(f"XML input rejected: {e}")
        return ParseResult(error=XmlParseError(str(e)))

    if root is None:
        return ParseResult(error=XmlParseError("Document has no root element"))

    logger.debug(f"Parsed XML document with root <{root.tag}>")
    return ParseResult(root=root)
