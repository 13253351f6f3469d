"""Test fixtures for XML to HTML conversion tests.

This module provides sample XML documents for:
- Each rendering strategy (table, feed, SVG, records, semantic)
- Malformed input handling
- Parser security (external entities, entity expansion)
"""

from .sample_documents import (
    ENTITY_EXPANSION_XML,
    MALFORMED_XML,
    SAMPLE_ARTICLE_XML,
    SAMPLE_ATOM_XML,
    SAMPLE_LIST_XML,
    SAMPLE_RECORDS_XML,
    SAMPLE_RSS_XML,
    SAMPLE_SVG_XML,
    SAMPLE_TABLE_XML,
    XXE_XML,
)

__all__ = [
    "ENTITY_EXPANSION_XML",
    "MALFORMED_XML",
    "SAMPLE_ARTICLE_XML",
    "SAMPLE_ATOM_XML",
    "SAMPLE_LIST_XML",
    "SAMPLE_RECORDS_XML",
    "SAMPLE_RSS_XML",
    "SAMPLE_SVG_XML",
    "SAMPLE_TABLE_XML",
    "XXE_XML",
]
