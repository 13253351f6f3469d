"""Command-line interface for XML to HTML conversion.

This package provides the `xml2html` CLI tool that validates XML input
files, converts them with the conversion engine and exports the result as
HTML files, zip bundles or standard output, with optional side-by-side
previews of source and output.
"""

from .convert_command import ConvertCommand
from .config_loader import ConfigLoader
from .models import ExitCode, ConverterConfig, ConversionSummary, FileOutcome
from .errors import (
    CLIError,
    ConfigError,
    ExportError,
    InputValidationError,
)

__all__ = [
    'ConvertCommand',
    'ConfigLoader',
    'ExitCode',
    'ConverterConfig',
    'ConversionSummary',
    'FileOutcome',
    'CLIError',
    'ConfigError',
    'ExportError',
    'InputValidationError',
]
