"""xml2html command-line entry point.

A single Typer command: positional XML inputs plus options. There are no
subcommands.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from src.cli.config_loader import ConfigLoader
from src.cli.convert_command import ConvertCommand
from src.cli.errors import ConfigError
from src.cli.models import ExitCode
from src.cli.output import OutputHandler, log_level_for

VERSION = "0.1.0"

app = typer.Typer(
    name="xml2html",
    help="""Convert XML documents into readable HTML.

QUICK START:
  xml2html feed.xml                     # Writes feed.html next to feed.xml
  xml2html data/*.xml -o ./html         # Convert several files into ./html
  xml2html doc.xml --stdout             # Print HTML instead of writing a file
  xml2html doc.xml --bundle             # Also write original + converted as .zip
  cat doc.xml | xml2html - --stdout     # Read from standard input""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)

APP_LOGGER = "src"
STDERR_FORMAT = "%(asctime)s [%(levelname)8s] %(message)s"
LOGFILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Printed when the command is run with no inputs
GETTING_STARTED_MESSAGE = """xml2html <file.xml> [<file.xml> ...]          # Convert to HTML

-o, --output <dir>                             # Write results into <dir>
--stdout                                       # Print HTML to stdout
--bundle                                       # Write original.xml + converted.html as .zip
--preview                                      # Show formatted source and output side by side
--raw                                          # Do not pretty-print the HTML
--help                                         # Show all options

Example:
  xml2html feed.xml --preview"""


def _attach(target: logging.Logger, handler: logging.Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    target.addHandler(handler)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Send converter and CLI log records to stderr, and optionally a file.

    Handlers go on the ``src`` logger, replacing any left by an earlier
    call; the root logger and third-party loggers are untouched.

    Args:
        verbosity: -v value (0=WARNING, 1=INFO, 2+=DEBUG)
        logdir: If given, also log to ``xml2html_<timestamp>.log`` in it
    """
    level = log_level_for(verbosity)
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(level)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    _attach(app_logger, logging.StreamHandler(sys.stderr), level, STDERR_FORMAT)

    if not logdir:
        return

    directory = Path(logdir)
    directory.mkdir(parents=True, exist_ok=True)
    log_file = directory / f"xml2html_{datetime.now():%Y%m%d_%H%M%S}.log"
    _attach(app_logger, logging.FileHandler(log_file, encoding="utf-8"), level, LOGFILE_FORMAT)
    logger.info(f"Writing log to {log_file}")


def _run_convert(
    inputs: List[str],
    output_dir: Optional[str],
    to_stdout: bool,
    bundle: bool,
    raw: bool,
    preview: bool,
    config_path: Optional[str],
    logdir: Optional[str],
    verbosity: int,
    no_color: bool,
) -> None:
    """Load configuration, apply flag overrides and convert every input.

    Always ends by raising typer.Exit with the batch exit code.
    """
    _configure_logging(verbosity, logdir)

    # Keep stdout clean for the HTML when printing it
    output = OutputHandler(verbosity=verbosity, no_color=no_color, stderr=to_stdout)

    try:
        config = ConfigLoader.load_or_default(config_path)
    except ConfigError as e:
        logger.error(f"Failed to load config: {e}")
        output.error(f"Failed to load config: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if output_dir is not None:
        config.output_dir = output_dir

    command = ConvertCommand(config=config, output_handler=output)

    try:
        exit_code = command.run(
            inputs,
            to_stdout=to_stdout,
            bundle=True if bundle else None,
            pretty=False if raw else None,
            preview=preview,
        )
    except Exception as e:
        logger.exception("Unexpected error during conversion")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(exit_code)


@app.command()
def main_command(
    inputs: Optional[List[str]] = typer.Argument(
        None,
        help="XML file(s) to convert; use - to read standard input",
        metavar="XML_FILE...",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory for generated files (default: next to each input)",
        metavar="DIR",
    ),
    to_stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print the HTML to standard output instead of writing files",
    ),
    bundle: bool = typer.Option(
        False,
        "--bundle",
        help="Also write a .zip with original.xml and converted.html",
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Do not pretty-print the generated HTML",
    ),
    preview: bool = typer.Option(
        False,
        "--preview",
        help="Show formatted XML source and HTML output side by side",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="YAML configuration file (default: .xml2html.yaml if present)",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Also write logs to a timestamped file in DIR",
        metavar="DIR",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Convert XML documents into readable HTML.

    \b
    The document root decides the layout:
      <table> with header/row/cell   -> HTML table (cells by position)
      <rss>, <feed>, <channel>       -> feed with linked items
      <svg>                          -> passed through unchanged
      repeated multi-field records   -> HTML table (cells by field name)
      anything else                  -> semantic HTML with xml-* classes

    \b
    EXAMPLE:
      xml2html catalog.xml --output ./html --bundle
    """
    if version:
        typer.echo(f"xml2html version {VERSION}")
        raise typer.Exit()

    if not inputs:
        typer.echo(GETTING_STARTED_MESSAGE)
        raise typer.Exit()

    _run_convert(
        inputs, output_dir, to_stdout, bundle, raw, preview,
        config_path, logdir, verbosity, no_color,
    )


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
