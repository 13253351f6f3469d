"""Best-effort reformatting of XML and HTML markup.

HTML is parsed with BeautifulSoup's html.parser into a small layout tree and
written back out. XML is parsed with the hardened lxml parser adapter,
re-indented in place and serialized by lxml. Both follow FormatOptions:
two-space indentation, text wrapped near 120 columns, at most two blank
lines kept between siblings, one trailing newline.

Lines are only broken where the source already has whitespace or next to
block-level content, so the rendered text does not change. An HTML element
whose content is only text and inline markup stays on one line when it
fits. XML elements with mixed content are written out as they are.

Formatting never fails: any error leaves the input untouched.
"""

import logging
import re
import textwrap
from dataclasses import dataclass, field
from typing import Iterator, List, Literal, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PreformattedString
from lxml import etree

from .element_utils import is_element
from .errors import FormatError
from .models import DEFAULT_FORMAT_OPTIONS, FormatOptions
from .xml_parser import parse

logger = logging.getLogger(__name__)

MarkupKind = Literal["xml", "html"]

INLINE_HTML_TAGS = frozenset({
    "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "dfn", "em",
    "i", "img", "kbd", "label", "mark", "q", "s", "samp", "small", "span",
    "strong", "sub", "sup", "time", "u", "var", "wbr",
})
RAW_TEXT_TAGS = frozenset({"script", "style"})
PREFORMATTED_TAGS = frozenset({"pre", "textarea"})
# Content of these is only indented when indent_inner_html is set
DOCUMENT_TAGS = frozenset({"html", "head", "body"})

# Narrowest column budget for wrapped text in deeply nested content
MIN_WRAP_WIDTH = 40

HTML_SPACE = " \t\n\r\f"
XML_SPACE = " \t\n\r"

_WHITESPACE = re.compile(r"[ \t\n\r\f]+")
_WHITESPACE_SPLIT = re.compile(r"([ \t\n\r\f]+)")
_XML_DECLARATION = re.compile(r"^\s*(<\?xml\s[^>]*\?>)")


def _collapse(text: str) -> str:
    """Collapse runs of ASCII whitespace to one space (non-breaking spaces survive)."""
    return _WHITESPACE.sub(" ", text)


def _blank_lines(whitespace: str, limit: int) -> int:
    """Number of blank lines a whitespace run stands for, capped at ``limit``."""
    return min(max(whitespace.count("\n") - 1, 0), limit)


def _serialize(node) -> str:
    return etree.tostring(node, encoding="unicode", with_tail=False)


def _has_mixed_content(element: etree._Element) -> bool:
    """True when text or entity references sit among the element's children."""
    if element.text and element.text.strip(XML_SPACE):
        return True
    return any(
        isinstance(child, etree._Entity) or (child.tail and child.tail.strip(XML_SPACE))
        for child in element
    )


@dataclass
class _Node:
    """Node of the HTML layout tree.

    ``kind`` is "text" (``text`` holds unescaped character data), "markup"
    (``text`` holds literal markup such as a comment) or "element".
    """
    kind: str
    text: str = ""
    name: str = ""
    attrs: List[Tuple[str, str]] = field(default_factory=list)
    children: List["_Node"] = field(default_factory=list)
    void: bool = False
    raw: bool = False
    inline: bool = False


class _SoupReader:
    """Builds layout nodes from a BeautifulSoup tree.

    html.parser reports whitespace-only strings between tags as a single
    newline, so the exact run is read back from the source text, ending at
    the position of the tag that follows it.
    """

    def __init__(self, source: str, inline_tags: frozenset):
        self.source = source
        self.inline_tags = inline_tags
        self.line_offsets = [0] + [match.end() for match in re.finditer("\n", source)]

    def _whitespace_before(self, string: NavigableString, following) -> str:
        if isinstance(following, Tag) and following.sourceline is not None and following.sourcepos is not None:
            end = self.line_offsets[following.sourceline - 1] + following.sourcepos
            start = end
            while start > 0 and self.source[start - 1] in HTML_SPACE:
                start -= 1
            return self.source[start:end]
        return str(string)

    def children(self, parent) -> List[_Node]:
        contents = parent.contents
        nodes = []
        for index, child in enumerate(contents):
            if (
                isinstance(child, NavigableString)
                and not isinstance(child, PreformattedString)
                and not str(child).strip(HTML_SPACE)
            ):
                following = contents[index + 1] if index + 1 < len(contents) else None
                nodes.append(_Node("text", text=self._whitespace_before(child, following)))
            else:
                nodes.append(self.node(child))
        return nodes

    def node(self, node) -> _Node:
        if isinstance(node, PreformattedString):
            # Doctypes come back with a trailing newline
            return _Node("markup", text=node.output_ready().strip())
        if not isinstance(node, Tag):
            return _Node("text", text=str(node))

        name = f"{node.prefix}:{node.name}" if node.prefix else node.name
        if name.lower() in PREFORMATTED_TAGS:
            return _Node("markup", text=node.decode())

        attrs = []
        for key, value in node.attrs.items():
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            attrs.append((str(key), "" if value is None else str(value)))

        if name.lower() in RAW_TEXT_TAGS:
            content = "".join(str(child) for child in node.contents)
            return _Node("element", text=content, name=name, attrs=attrs, raw=True)

        return _Node(
            "element",
            name=name,
            attrs=attrs,
            children=self.children(node),
            void=node.is_empty_element,
            inline=name.lower() in self.inline_tags,
        )


class PrettyPrinter:
    """Re-indents XML or HTML markup.

    Example:
        >>> PrettyPrinter("html").format("<ul><li>One</li></ul>")
        '<ul>\\n  <li>One</li>\\n</ul>\\n'
    """

    def __init__(self, kind: MarkupKind, options: FormatOptions = DEFAULT_FORMAT_OPTIONS):
        """Initialize PrettyPrinter.

        Args:
            kind: "xml" or "html"
            options: Formatting constants

        Raises:
            ValueError: If kind is not "xml" or "html"
        """
        if kind not in ("xml", "html"):
            raise ValueError(f"Unsupported markup kind: {kind!r}")
        self.kind = kind
        self.options = options
        self.inline_tags = INLINE_HTML_TAGS if kind == "html" else frozenset()

    def format(self, text: str) -> str:
        """Reformat markup, returning the input unchanged if that fails.

        Args:
            text: XML or HTML markup

        Returns:
            Reformatted markup, ``""`` for blank input, or ``text`` itself
            when it cannot be formatted
        """
        if not text or not text.strip():
            return ""
        try:
            return self._format(text)
        except Exception as e:
            logger.warning(f"Could not format {self.kind}, keeping original: {e}")
            return text

    def _format(self, text: str) -> str:
        if self.kind == "html":
            lines = self._format_html(text)
        else:
            lines = self._format_xml(text)
        if not lines:
            raise FormatError(self.kind, "nothing to format")

        output = "\n".join(lines)
        return output + "\n" if self.options.end_with_newline else output

    def _indent(self, depth: int) -> str:
        return self.options.indent_unit * depth

    # XML

    def _format_xml(self, text: str) -> List[str]:
        parsed = parse(text)
        if not parsed.ok:
            raise FormatError("xml", str(parsed.error))

        root = parsed.root
        docinfo = root.getroottree().docinfo
        if docinfo.internalDTD is not None:
            raise FormatError("xml", "documents with an internal DTD subset are left as-is")

        lines = []
        declaration = _XML_DECLARATION.match(text)
        if declaration:
            lines.append(declaration.group(1))
        if docinfo.doctype:
            lines.append(docinfo.doctype)

        lines.extend(_serialize(sibling) for sibling in reversed(list(root.itersiblings(preceding=True))))
        self._indent_xml(root, 0)
        lines.append(_serialize(root))
        lines.extend(_serialize(sibling) for sibling in root.itersiblings())
        return lines

    def _indent_xml(self, element: etree._Element, depth: int) -> None:
        """Rewrite whitespace-only text and tails so each child sits on its own line."""
        children = list(element)
        if not children:
            self._wrap_xml_text(element, depth)
            return
        if _has_mixed_content(element):
            return

        child_indent = "\n" + self._indent(depth + 1)
        element.text = child_indent
        for index, child in enumerate(children):
            if is_element(child):
                self._indent_xml(child, depth + 1)
            if index == len(children) - 1:
                child.tail = "\n" + self._indent(depth)
            else:
                blank = _blank_lines(child.tail or "", self.options.max_blank_lines)
                child.tail = "\n" * blank + child_indent

    def _wrap_xml_text(self, element: etree._Element, depth: int) -> None:
        if element.text is None:
            return
        if not element.text.strip(XML_SPACE):
            element.text = None
            return
        if "<![CDATA[" in _serialize(element):
            return

        content = _collapse(element.text).strip(" ")
        element.text = content
        indent = self._indent(depth)
        if len(indent) + len(_serialize(element)) <= self.options.wrap_line_length:
            return

        inner_indent = self._indent(depth + 1)
        width = max(self.options.wrap_line_length - len(inner_indent), MIN_WRAP_WIDTH)
        wrapped = textwrap.wrap(content, width=width, break_long_words=False, break_on_hyphens=False)
        element.text = "".join(f"\n{inner_indent}{line}" for line in wrapped) + "\n" + indent

    # HTML

    def _format_html(self, text: str) -> List[str]:
        soup = BeautifulSoup(text, "html.parser", multi_valued_attributes=None)
        lines: List[str] = []
        self._format_children(_SoupReader(text, self.inline_tags).children(soup), 0, lines)
        return lines

    @staticmethod
    def _open_tag(node: _Node, self_closing: bool = False) -> str:
        parts = [node.name]
        for name, value in node.attrs:
            quoted = EntitySubstitution.quoted_attribute_value(EntitySubstitution.substitute_xml(value))
            parts.append(f"{name}={quoted}")
        return f"<{' '.join(parts)}{'/' if self_closing else ''}>"

    def _inline(self, node: _Node) -> Optional[str]:
        """Single-line markup for a node, or None if it is block-level."""
        if node.kind == "text":
            return EntitySubstitution.substitute_xml(_collapse(node.text))
        if node.kind == "markup" or node.raw or not node.inline:
            return None
        if node.void:
            return self._open_tag(node, self_closing=True)
        parts = [self._inline(child) for child in node.children]
        if any(part is None for part in parts):
            return None
        return f"{self._open_tag(node)}{''.join(parts)}</{node.name}>"

    def _runs(self, children: List[_Node]) -> Iterator[Union[List[_Node], _Node]]:
        """Group children into runs of inline content and single block nodes."""
        run: List[_Node] = []
        for child in children:
            if self._inline(child) is not None:
                run.append(child)
                continue
            if run:
                yield run
                run = []
            yield child
        if run:
            yield run

    def _flow(self, run: List[_Node]) -> Tuple[str, List[str], str]:
        """Split inline content into words that must not be broken apart.

        Pieces with no whitespace between them in the source (text and
        inline elements alike) are joined into a single word.

        Returns:
            Whitespace before the first word, the words, whitespace after the last
        """
        leading = trailing = ""
        words: List[str] = []
        attached = False
        for node in run:
            if node.kind == "text":
                pieces = [piece for piece in _WHITESPACE_SPLIT.split(node.text) if piece]
            else:
                pieces = [self._inline(node)]

            for piece in pieces:
                if node.kind == "text" and not piece.strip(HTML_SPACE):
                    if words:
                        trailing += piece
                    else:
                        leading += piece
                    attached = False
                    continue
                if node.kind == "text":
                    piece = EntitySubstitution.substitute_xml(piece)
                if attached:
                    words[-1] += piece
                else:
                    words.append(piece)
                attached = True
                trailing = ""
        return leading, words, trailing

    def _wrap_words(self, words: List[str], depth: int, lines: List[str]) -> None:
        indent = self._indent(depth)
        width = max(self.options.wrap_line_length - len(indent), MIN_WRAP_WIDTH)
        line = ""
        for word in words:
            if line and len(line) + 1 + len(word) > width:
                lines.append(indent + line)
                line = word
            else:
                line = f"{line} {word}" if line else word
        if line:
            lines.append(indent + line)

    def _format_children(self, children: List[_Node], depth: int, lines: List[str]) -> None:
        limit = self.options.max_blank_lines
        pending_blank = 0
        emitted = False
        for item in self._runs(children):
            if isinstance(item, list):
                leading, words, trailing = self._flow(item)
                if emitted:
                    pending_blank = max(pending_blank, _blank_lines(leading, limit))
                if not words:
                    continue
                if emitted:
                    lines.extend([""] * pending_blank)
                self._wrap_words(words, depth, lines)
                pending_blank = _blank_lines(trailing, limit)
            else:
                if emitted:
                    lines.extend([""] * pending_blank)
                if item.kind == "markup":
                    lines.append(self._indent(depth) + item.text)
                else:
                    self._format_element(item, depth, lines)
                pending_blank = 0
            emitted = True

    def _format_element(self, node: _Node, depth: int, lines: List[str]) -> None:
        indent = self._indent(depth)
        open_tag = self._open_tag(node)
        close = f"</{node.name}>"

        if node.raw:
            content = [line.strip() for line in node.text.splitlines() if line.strip()]
            if not content:
                lines.append(f"{indent}{open_tag}{close}")
                return
            lines.append(indent + open_tag)
            inner_indent = self._indent(depth + 1)
            lines.extend(inner_indent + line for line in content)
            lines.append(indent + close)
            return

        if node.void:
            lines.append(indent + self._open_tag(node, self_closing=True))
            return

        if all(self._inline(child) is not None for child in node.children):
            _, words, _ = self._flow(node.children)
            inner = " ".join(words)
            if len(indent) + len(open_tag) + len(inner) + len(close) <= self.options.wrap_line_length:
                lines.append(f"{indent}{open_tag}{inner}{close}")
                return

        child_depth = depth + 1
        if not self.options.indent_inner_html and node.name.lower() in DOCUMENT_TAGS:
            child_depth = depth

        lines.append(indent + open_tag)
        self._format_children(node.children, child_depth, lines)
        lines.append(indent + close)


def format_markup(text: str, kind: MarkupKind) -> str:
    """Reformat XML or HTML; returns ``text`` unchanged if formatting fails."""
    return PrettyPrinter(kind).format(text)


def format_xml(xml_text: str) -> str:
    """Reformat XML; malformed XML is returned unchanged."""
    return format_markup(xml_text, "xml")


def format_html(html_text: str) -> str:
    """Reformat HTML; returns the input unchanged if formatting fails."""
    return format_markup(html_text, "html")
