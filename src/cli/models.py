"""Data models for CLI operations.

This module defines all data models used by the CLI module.
All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB in bytes
DEFAULT_BUNDLE_NAME = "{stem}-xml-html-conversion.zip"
DEFAULT_CONFIG_PATH = ".xml2html.yaml"


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Every input converted
    - GENERAL_ERROR (1): Configuration, export or unexpected failure
    - CONVERSION_ERROR (2): At least one input was not well-formed XML
      or could not be rendered
    - INPUT_ERROR (3): At least one input was rejected (type, size, encoding)

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONVERSION_ERROR = 2
    INPUT_ERROR = 3


@dataclass
class ConverterConfig:
    """User configuration loaded from .xml2html.yaml.

    Attributes:
        output_dir: Directory for generated files (None writes next to each input)
        max_file_size: Largest accepted input in bytes
        pretty_output: Pretty-print generated HTML before writing it
        bundle: Also write a zip archive of original XML and converted HTML
        bundle_name: Archive file name; ``{stem}`` is replaced by the input name

    Example:
        >>> config = ConverterConfig(output_dir="./html", bundle=True)
    """
    output_dir: Optional[str] = None
    max_file_size: int = MAX_FILE_SIZE
    pretty_output: bool = True
    bundle: bool = False
    bundle_name: str = DEFAULT_BUNDLE_NAME


@dataclass
class FileOutcome:
    """Result of converting one input.

    Attributes:
        source: Input path ("-" for standard input)
        shape: Detected document shape (None if conversion did not happen)
        html_path: Written HTML file (None when printed to stdout or failed)
        bundle_path: Written zip archive, if requested
        error: Failure message, if any
    """
    source: str
    shape: Optional[str] = None
    html_path: Optional[str] = None
    bundle_path: Optional[str] = None
    error: Optional[str] = None


@dataclass
class ConversionSummary:
    """Outcome of a CLI run, grouped by result.

    Attributes:
        converted: Inputs converted and exported
        conversion_failures: Inputs that were not well-formed XML or failed to render
        rejected: Inputs refused before conversion
        export_failures: Inputs converted but not written
    """
    converted: List[FileOutcome] = field(default_factory=list)
    conversion_failures: List[FileOutcome] = field(default_factory=list)
    rejected: List[FileOutcome] = field(default_factory=list)
    export_failures: List[FileOutcome] = field(default_factory=list)

    @property
    def exit_code(self) -> ExitCode:
        """Most significant exit code for the run."""
        if self.rejected:
            return ExitCode.INPUT_ERROR
        if self.conversion_failures:
            return ExitCode.CONVERSION_ERROR
        if self.export_failures:
            return ExitCode.GENERAL_ERROR
        return ExitCode.SUCCESS
