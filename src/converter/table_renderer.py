"""Renderer for documents that describe a table explicitly.

Expected vocabulary::

    <table>
      <header><column>Name</column><column>Age</column></header>
      <row><cell>Ada</cell><cell>36</cell></row>
    </table>

Cells are placed by position: the n-th ``cell`` of a row lands under the
n-th ``column``, whatever the tags are called otherwise.
"""

from lxml import etree

from .element_utils import find_first, iter_descendants, text_content
from .html_builder import HtmlBuilder
from .styles import TABLE_CONTAINER_CLASS, TABLE_STYLE


def render_table(root: etree._Element) -> str:
    """Render a ``table`` root as a styled HTML table.

    Args:
        root: The ``table`` element

    Returns:
        HTML string with the table inside a scrollable, styled container
    """
    builder = HtmlBuilder()
    table = builder.tag("table", {"class": "table"})

    header = find_first(root, "header")
    if header is not None:
        thead = builder.tag("thead")
        header_row = builder.tag("tr")
        for column in iter_descendants(header, "column"):
            header_row.append(builder.tag("th", text=text_content(column).strip()))
        thead.append(header_row)
        table.append(thead)

    tbody = builder.tag("tbody")
    for row in iter_descendants(root, "row"):
        tr = builder.tag("tr")
        for cell in iter_descendants(row, "cell"):
            tr.append(builder.tag("td", text=text_content(cell).strip()))
        tbody.append(tr)
    table.append(tbody)

    responsive = builder.tag("div", {"class": "table-responsive"})
    responsive.append(table)

    container = builder.container(TABLE_CONTAINER_CLASS, TABLE_STYLE)
    container.append(responsive)
    return builder.render(container)
