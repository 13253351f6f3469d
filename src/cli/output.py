"""Rich-based terminal output for the xml2html CLI.

Status messages, spinners, side-by-side previews and the end-of-run
summary all go through OutputHandler. Converted documents are written with
a separate console so they can be piped even when messages go to stderr.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from rich.columns import Columns
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.spinner import Spinner
from rich.syntax import Syntax

from .models import ConversionSummary

SUCCESS_MARK = "[green]✓[/green]"
ERROR_MARK = "[red]✗[/red]"
REJECTED_MARK = "[yellow]⊘[/yellow]"


def log_level_for(verbosity: int) -> int:
    """Map a -v/--verbosity value to a logging level.

    0 is WARNING, 1 is INFO and anything higher is DEBUG.
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


class OutputHandler:
    """Terminal output for a CLI run.

    Attributes:
        verbosity: 0 prints only results and errors, 1 adds info lines,
            2 adds debug lines
        console: Rich Console for status messages
        result_console: Rich Console for converted documents (always stdout)

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> with output.spinner("Converting feed.xml..."):
        ...     html = convert(xml_text)
        >>> output.success("feed.xml → feed.html")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False, stderr: bool = False):
        """Initialize OutputHandler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Plain output without colors or animation
            stderr: Print status messages to stderr so stdout carries only HTML
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
            stderr=stderr,
        )
        self.result_console = Console(no_color=no_color, highlight=False)

    # Messages

    def success(self, message: str) -> None:
        """Print a message prefixed with a green check mark."""
        self.console.print(f"{SUCCESS_MARK} {message}")

    def error(self, message: str) -> None:
        """Print a message in red, prefixed with a cross."""
        self.console.print(f"{ERROR_MARK} {message}", style="red")

    def info(self, message: str) -> None:
        """Print a message at verbosity 1 and above."""
        if self.verbosity >= 1:
            self.console.print(message)

    def debug(self, message: str) -> None:
        """Print a dimmed message at verbosity 2 and above."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{message}[/dim]")

    def emit(self, document: str) -> None:
        """Write a converted document to stdout verbatim (no markup, no wrapping).

        Args:
            document: HTML text
        """
        self.result_console.out(document, highlight=False, end="" if document.endswith("\n") else "\n")

    # Live displays

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Show a spinner while the block runs; it disappears afterwards.

        Args:
            message: Text shown next to the spinner

        Example:
            >>> with output.spinner("Converting feed.xml..."):
            ...     result = transform(xml_text)
        """
        indicator = Spinner("dots", text=message)
        with Live(indicator, console=self.console, refresh_per_second=10, transient=True):
            yield

    def print_preview(self, source: str, xml_text: str, html: str) -> None:
        """Show formatted XML source and HTML output side by side.

        Args:
            source: Input name shown in the panel title
            xml_text: Formatted XML source
            html: Formatted HTML output
        """
        panels = [
            Panel(Syntax(xml_text, "xml", word_wrap=True), title=f"XML: {source}"),
            Panel(Syntax(html, "html", word_wrap=True), title="HTML output"),
        ]
        self.console.print(Columns(panels, equal=True, expand=True))

    def print_summary(self, summary: ConversionSummary) -> None:
        """Print per-outcome counts and an overall verdict.

        Args:
            summary: Outcome of the CLI run
        """
        self.console.print("\n[bold]Conversion Summary:[/bold]")

        rows = [
            (SUCCESS_MARK, "Converted", summary.converted),
            (ERROR_MARK, "Invalid XML", summary.conversion_failures),
            (REJECTED_MARK, "Rejected", summary.rejected),
            (ERROR_MARK, "Not written", summary.export_failures),
        ]
        for mark, label, outcomes in rows:
            if outcomes:
                self.console.print(f"  {mark} {label}: {len(outcomes)} file(s)")

        total = sum(len(outcomes) for _, _, outcomes in rows)
        if total == 0:
            self.console.print("\n[yellow]No files to convert[/yellow]")
        elif total == len(summary.converted):
            self.console.print("\n[green]Conversion completed successfully[/green]")
        else:
            self.console.print("\n[red]Conversion completed with errors[/red]")
