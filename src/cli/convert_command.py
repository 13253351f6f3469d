"""Convert command orchestration for CLI.

This module provides the ConvertCommand class that runs the conversion
workflow for each input: validate and read the file, convert it, pretty-print
the result, then print it, write it, bundle it and/or preview it.
"""

import logging
import sys
from typing import List, Optional

from src.cli.errors import ExportError, InputValidationError
from src.cli.exporter import STDIN_SOURCE, Exporter
from src.cli.input_validator import InputValidator
from src.cli.models import ConversionSummary, ConverterConfig, ExitCode, FileOutcome
from src.cli.output import OutputHandler
from src.converter import ConversionError, format_html, format_xml, transform

logger = logging.getLogger(__name__)


class ConvertCommand:
    """Orchestrates XML to HTML conversion for the CLI.

    Coordinates:
    - InputValidator: extension/MIME, size ceiling and decoding
    - the conversion engine (transform, format_html, format_xml)
    - Exporter: HTML files and zip bundles
    - OutputHandler: terminal messages, previews and summary

    Each input is handled independently; one bad file does not stop the
    others. The exit code reflects the most significant failure.

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> command = ConvertCommand(output_handler=output)
        >>> exit_code = command.run(["feed.xml"])
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        output_handler: Optional[OutputHandler] = None,
        validator: Optional[InputValidator] = None,
        exporter: Optional[Exporter] = None,
    ):
        """Initialize convert command with dependencies.

        Args:
            config: Converter configuration (defaults when omitted)
            output_handler: OutputHandler for terminal output (optional)
            validator: InputValidator for input checks (optional)
            exporter: Exporter for writing results (optional)
        """
        self.config = config or ConverterConfig()
        self.output_handler = output_handler or OutputHandler()
        self.validator = validator or InputValidator(max_file_size=self.config.max_file_size)
        self.exporter = exporter or Exporter(output_dir=self.config.output_dir)

    def run(
        self,
        inputs: List[str],
        to_stdout: bool = False,
        bundle: Optional[bool] = None,
        pretty: Optional[bool] = None,
        preview: bool = False,
    ) -> ExitCode:
        """Convert every input.

        Args:
            inputs: XML file paths; "-" reads standard input
            to_stdout: Print HTML to stdout instead of writing .html files
            bundle: Write zip bundles (None uses the config value)
            pretty: Pretty-print HTML output (None uses the config value)
            preview: Show formatted source and output side by side

        Returns:
            ExitCode for the whole run
        """
        bundle = self.config.bundle if bundle is None else bundle
        pretty = self.config.pretty_output if pretty is None else pretty

        summary = ConversionSummary()
        for source in inputs:
            outcome = FileOutcome(source=source)
            try:
                xml_text = self._read(source)
            except InputValidationError as e:
                logger.warning(str(e))
                outcome.error = str(e)
                summary.rejected.append(outcome)
                self.output_handler.error(str(e))
                continue

            try:
                with self.output_handler.spinner(f"Converting {source}..."):
                    result = transform(xml_text)
            except ConversionError as e:
                logger.error(f"Conversion failed for {source}: {e}")
                outcome.error = str(e)
                summary.conversion_failures.append(outcome)
                self.output_handler.error(f"{source}: {e}")
                continue

            outcome.shape = result.shape.value
            html = format_html(result.html) if pretty else result.html
            self.output_handler.debug(f"{source}: rendered as {outcome.shape}")

            try:
                self._export(source, xml_text, html, outcome, to_stdout, bundle)
            except ExportError as e:
                logger.error(str(e))
                outcome.error = str(e)
                summary.export_failures.append(outcome)
                self.output_handler.error(str(e))
                continue

            if preview:
                self.output_handler.print_preview(source, format_xml(xml_text), html)

            summary.converted.append(outcome)

        if not to_stdout:
            self.output_handler.print_summary(summary)
        return summary.exit_code

    def _read(self, source: str) -> str:
        if source == STDIN_SOURCE:
            # At most one character past the ceiling is buffered
            text = sys.stdin.read(self.validator.max_file_size + 1)
            return self.validator.check_text(text, source)
        return self.validator.read(source)

    def _export(
        self,
        source: str,
        xml_text: str,
        html: str,
        outcome: FileOutcome,
        to_stdout: bool,
        bundle: bool,
    ) -> None:
        if to_stdout:
            self.output_handler.emit(html)
        else:
            outcome.html_path = str(self.exporter.write_html(source, html))
            self.output_handler.success(f"{source} → {outcome.html_path} ({outcome.shape})")

        if bundle:
            bundle_path = self.exporter.write_bundle(source, xml_text, html, self.config.bundle_name)
            outcome.bundle_path = str(bundle_path)
            self.output_handler.info(f"  Bundle: {bundle_path}")
