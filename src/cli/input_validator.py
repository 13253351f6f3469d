"""Validation and loading of XML input files.

Checks happen before any bytes are read into memory: the file must look
like XML (``.xml`` extension or an XML MIME type) and stay under the size
ceiling.
"""

import logging
import mimetypes
import os

from bs4.dammit import EncodingDetector

from .errors import InputValidationError
from .models import MAX_FILE_SIZE

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = ('.xml',)
ALLOWED_MIME_TYPES = ('text/xml', 'application/xml')


def _format_size(size: int) -> str:
    """Format a byte count in MB, e.g. ``10 MB`` or ``10.50 MB``."""
    size_mb = size / (1024 * 1024)
    return f"{size_mb:.0f} MB" if size_mb.is_integer() else f"{size_mb:.2f} MB"


class InputValidator:
    """Validates input files and decodes them to text.

    Attributes:
        max_file_size: Largest accepted input in bytes

    Example:
        >>> validator = InputValidator()
        >>> xml_text = validator.read("feed.xml")
    """

    def __init__(self, max_file_size: int = MAX_FILE_SIZE):
        """Initialize InputValidator.

        Args:
            max_file_size: Maximum allowed input size in bytes (default: 10 MB)
        """
        self.max_file_size = max_file_size

    def validate_type(self, file_path: str) -> None:
        """Reject files that are neither ``.xml`` nor an XML MIME type.

        Raises:
            InputValidationError: If the file does not look like XML
        """
        if file_path.lower().endswith(ALLOWED_EXTENSIONS):
            return
        mime_type, _ = mimetypes.guess_type(file_path)
        if mime_type in ALLOWED_MIME_TYPES:
            return
        raise InputValidationError(
            file_path,
            f"Please select an XML file (.xml or text/xml), got {mime_type or 'unknown type'}"
        )

    def validate_size(self, size: int, source: str) -> None:
        """Reject inputs over the size ceiling.

        Raises:
            InputValidationError: If size exceeds max_file_size
        """
        if size > self.max_file_size:
            raise InputValidationError(
                source,
                f"File size ({_format_size(size)}) exceeds maximum allowed size "
                f"({_format_size(self.max_file_size)})"
            )

    def validate(self, file_path: str) -> None:
        """Run all checks on a file without reading it.

        Raises:
            InputValidationError: If the file is missing, not XML, or too large
        """
        if not os.path.isfile(file_path):
            raise InputValidationError(file_path, "File not found")

        self.validate_type(file_path)

        try:
            size = os.path.getsize(file_path)
        except OSError as e:
            raise InputValidationError(file_path, f"Failed to check file size: {e}")
        self.validate_size(size, file_path)

    def read(self, file_path: str) -> str:
        """Validate a file and return its decoded text.

        Raises:
            InputValidationError: If validation, reading or decoding fails
        """
        self.validate(file_path)
        try:
            with open(file_path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise InputValidationError(file_path, f"Failed to read file: {e}")

        logger.debug(f"Read {len(data)} bytes from {file_path}")
        return self.decode(data, file_path)

    def check_text(self, text: str, source: str = "<stdin>") -> str:
        """Apply the size ceiling to text that did not come from a file.

        Returns:
            The text, unchanged

        Raises:
            InputValidationError: If the UTF-8 encoded text is too large
        """
        self.validate_size(len(text.encode('utf-8', errors='replace')), source)
        return text

    @staticmethod
    def decode(data: bytes, source: str) -> str:
        """Decode XML bytes using the byte order mark, the declared encoding or UTF-8.

        A byte order mark wins over the XML declaration, so UTF-16 and
        UTF-32 files with a BOM decode whatever they declare.

        Raises:
            InputValidationError: If the bytes cannot be decoded
        """
        data, encoding = EncodingDetector.strip_byte_order_mark(data)
        if encoding is None:
            encoding = EncodingDetector.find_declared_encoding(data, is_html=False) or 'utf-8'

        try:
            return data.decode(encoding)
        except LookupError:
            raise InputValidationError(source, f"Unknown encoding '{encoding}'")
        except UnicodeDecodeError as e:
            raise InputValidationError(source, f"Cannot decode file as {encoding}: {e.reason}")
