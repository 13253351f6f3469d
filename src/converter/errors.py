"""Typed exception hierarchy for XML to HTML conversion errors.

This module defines all custom exceptions raised by the conversion engine.
All exceptions inherit from XmlToHtmlError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional


class XmlToHtmlError(Exception):
    """Base exception for all xml-to-html errors.

    Use this to catch any application-level error from the converter.
    """
    pass


class ConversionError(XmlToHtmlError):
    """Raised when an XML document cannot be converted to HTML."""

    def __init__(self, message: str):
        super().__init__(message)


class XmlParseError(ConversionError):
    """Raised when the input text is not well-formed XML.

    Carries the parser diagnostic plus the position of the failure when
    the parser reports one.
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        if line is not None:
            full_message = f"Invalid XML (line {line}, column {column}): {message}"
        else:
            full_message = f"Invalid XML: {message}"
        super().__init__(full_message)
        self.diagnostic = message
        self.line = line
        self.column = column


class RenderError(ConversionError):
    """Raised when a renderer fails unexpectedly on a parsed document."""

    def __init__(self, shape: str, reason: str):
        super().__init__(f"Failed to render {shape} document: {reason}")
        self.shape = shape
        self.reason = reason


class FormatError(XmlToHtmlError):
    """Raised when markup cannot be reformatted.

    The pretty-printer catches this itself and falls back to the
    unformatted input; it never reaches callers.
    """

    def __init__(self, kind: str, reason: str):
        super().__init__(f"Cannot format {kind}: {reason}")
        self.kind = kind
        self.reason = reason
