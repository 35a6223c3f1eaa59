"""Command-line interface for html2md.

Converts one HTML file to Markdown and writes it to standard output or a file.

Environment Variable Support
----------------------------
Options default from environment variables named HTML2MD_<OPTION_NAME>, with
the option name upper-cased and hyphens replaced by underscores. Command-line
arguments always override environment variables.

Examples
--------
Basic conversion::

    $ html2md page.html

Write to a file::

    $ html2md page.html --out page.md

Use the lxml parser and show the result with Rich::

    $ html2md page.html --parser lxml --rich

Use environment variables for defaults::

    $ export HTML2MD_PARSER=html5lib
    $ export HTML2MD_LOG_LEVEL=DEBUG
    $ html2md page.html

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from html2md import __version__
from html2md.constants import DEFAULT_LOG_LEVEL, ENV_PREFIX, SUPPORTED_HTML_PARSERS
from html2md.converter import html_to_markdown
from html2md.exceptions import (
    DependencyError,
    FileError,
    Html2MdError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from html2md.logging_utils import configure_logging
from html2md.options import HtmlOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def env_default(option: str, default: str | None = None) -> str | None:
    """Return the HTML2MD_<OPTION> environment value, or ``default``."""
    env_name = ENV_PREFIX + option.upper().replace("-", "_").replace(".", "_")
    return os.environ.get(env_name, default)


def env_flag(option: str) -> bool:
    value = env_default(option)
    return value is not None and value.strip().lower() in {"1", "true", "yes", "on"}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the html2md command."""
    parser = argparse.ArgumentParser(
        prog="html2md",
        description="Convert an HTML document to Markdown.",
        epilog=f"Options also read defaults from {ENV_PREFIX}<OPTION> environment variables.",
    )
    parser.add_argument("input", help="Path to the HTML file to convert")
    parser.add_argument("-o", "--out", default=env_default("out"), help="Write Markdown to this file instead of stdout")
    parser.add_argument(
        "--parser",
        choices=list(SUPPORTED_HTML_PARSERS),
        default=env_default("parser", HtmlOptions().parser),
        help="HTML parser backend used by BeautifulSoup (default: %(default)s)",
    )
    parser.add_argument(
        "--rich",
        action="store_true",
        default=env_flag("rich"),
        help="Pretty-print the Markdown to the terminal using Rich",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=env_default("log-level", DEFAULT_LOG_LEVEL),
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", default=env_default("log-file"), help="Also write log messages to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_rich(markdown: str) -> bool:
    """Render Markdown to the terminal with Rich; return False if Rich is missing."""
    try:
        from rich.console import Console
        from rich.markdown import Markdown
    except ImportError:
        print("Warning: Rich library not installed. Install with: pip install html2md[rich]", file=sys.stderr)
        return False

    Console().print(Markdown(markdown))
    return True


def write_output(markdown: str, out: str | None, use_rich: bool = False) -> None:
    """Emit converted Markdown to a file or standard output.

    Raises
    ------
    OutputWriteError
        If the output file cannot be written

    """
    if out:
        try:
            Path(out).write_text(markdown, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(out, original_error=e) from e
        logger.info("Wrote Markdown to %s", out)
        return

    if use_rich and _print_rich(markdown):
        return
    sys.stdout.write(markdown)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the html2md command.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments without the program name; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level, log_file=args.log_file)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        options = HtmlOptions(parser=args.parser)
        markdown = html_to_markdown(Path(args.input), options=options)
        write_output(markdown, args.out, use_rich=args.rich)
    except Html2MdError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    return EXIT_SUCCESS
