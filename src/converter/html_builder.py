"""Small wrapper for building HTML fragments with BeautifulSoup.

Renderers construct their output as a tag tree instead of concatenating
strings, so text and attribute values are always escaped by the serializer.
"""

from typing import Dict, Optional

from bs4 import BeautifulSoup, Tag


class HtmlBuilder:
    """Creates tags on a private BeautifulSoup document.

    Example:
        >>> builder = HtmlBuilder()
        >>> cell = builder.tag("td", text="42")
        >>> builder.render(cell)
        '<td>42</td>'
    """

    def __init__(self):
        """Initialize HtmlBuilder with an empty html.parser document."""
        self.parser = "html.parser"
        self.soup = BeautifulSoup("", self.parser)

    def tag(
        self,
        name: str,
        attrs: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
    ) -> Tag:
        """Create a tag, optionally with attributes and text content.

        Args:
            name: HTML tag name
            attrs: Attributes in output order
            text: Text content (escaped on output); empty text adds nothing

        Returns:
            New detached Tag
        """
        element = self.soup.new_tag(name, attrs=dict(attrs or {}))
        if text:
            element.string = text
        return element

    def style(self, css: str) -> Tag:
        """Create a ``<style>`` block; CSS text is emitted unescaped."""
        element = self.soup.new_tag("style")
        element.string = css
        return element

    def container(self, css_class: str, css: str) -> Tag:
        """Create a ``div`` with the given class and an embedded style block."""
        wrapper = self.tag("div", {"class": css_class})
        wrapper.append(self.style(css))
        return wrapper

    @staticmethod
    def render(element: Tag) -> str:
        """Serialize a tag tree to an HTML string."""
        return element.decode()
