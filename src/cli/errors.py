"""Errors raised by the xml2html command line.

CLIError extends the converter's XmlToHtmlError, so callers embedding both
layers can catch a single base class.
"""

from typing import Optional

from src.converter.errors import XmlToHtmlError


class CLIError(XmlToHtmlError):
    """Root of the CLI error types."""


class InputValidationError(CLIError):
    """Raised when an input file is rejected before conversion."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(f"Input rejected for {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason


class ExportError(CLIError):
    """Raised when writing converted output fails."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Export operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class ConfigError(CLIError):
    """Raised when configuration loading or validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message
