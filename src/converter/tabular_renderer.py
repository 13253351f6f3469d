"""Renderer for record-style documents.

Used for roots such as::

    <people>
      <person><name>Ada</name><born>1815</born></person>
      <person><name>Alan</name><died>1954</died></person>
    </people>

Unlike the explicit table renderer, cells are matched by field name: the
column set is the union of field tags over all rows (first-seen order), and
a row without a given field gets an empty cell.
"""

from typing import Dict, List

from lxml import etree

from .element_utils import child_elements, is_element, tag_name, text_content
from .html_builder import HtmlBuilder
from .styles import TABLE_CONTAINER_CLASS, TABULAR_STYLE


def collect_columns(rows: List[etree._Element]) -> List[str]:
    """Return the distinct field tag names across all rows, in first-seen order."""
    columns: Dict[str, None] = {}
    for row in rows:
        for field in child_elements(row):
            columns.setdefault(tag_name(field), None)
    return list(columns)


def _field_text(row: etree._Element, column: str) -> str:
    for node in row.iterdescendants():
        if is_element(node) and tag_name(node) == column:
            return text_content(node).strip()
    return ""


def render_tabular(root: etree._Element) -> str:
    """Render the root's children as the rows of an HTML table.

    Args:
        root: Element whose child elements are the records

    Returns:
        HTML string, or an empty string when the root has no child elements
    """
    rows = child_elements(root)
    if not rows:
        return ""

    columns = collect_columns(rows)
    builder = HtmlBuilder()
    table = builder.tag("table", {
        "class": "table",
        "border": "1",
        "cellpadding": "8",
        "cellspacing": "0",
    })

    thead = builder.tag("thead")
    header_row = builder.tag("tr")
    for column in columns:
        header_row.append(builder.tag("th", text=column))
    thead.append(header_row)
    table.append(thead)

    tbody = builder.tag("tbody")
    for row in rows:
        tr = builder.tag("tr")
        for column in columns:
            tr.append(builder.tag("td", text=_field_text(row, column)))
        tbody.append(tr)
    table.append(tbody)

    responsive = builder.tag("div", {"class": "table-responsive"})
    responsive.append(table)

    container = builder.container(TABLE_CONTAINER_CLASS, TABULAR_STYLE)
    container.append(responsive)
    return builder.render(container)
