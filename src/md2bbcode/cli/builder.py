#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction and exit codes for the md2bbcode CLI.

Rendering flags are generated from the fields of
:class:`~md2bbcode.options.bbcode.BBCodeRendererOptions`, using each field's
``help`` metadata, so the command line and the options class cannot drift
apart.
"""

from __future__ import annotations

import argparse
from dataclasses import fields
from typing import Any

from md2bbcode.constants import SUPPORTED_DIALECTS
from md2bbcode.exceptions import FileError, ParsingError, RenderingError, ValidationError
from md2bbcode.options.bbcode import BBCodeRendererOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
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
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    # Includes a malformed event stream
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _get_version() -> str:
    """Get the version of the md2bbcode package."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("md2bbcode")
    except PackageNotFoundError:
        from md2bbcode import __version__

        return __version__


def _option_flag(field_name: str) -> str:
    return "--" + field_name.replace("_", "-")


def add_renderer_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one boolean flag per BBCodeRendererOptions field.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to extend

    """
    group = parser.add_argument_group("rendering options")
    for option_field in fields(BBCodeRendererOptions):
        flags = [_option_flag(option_field.name)]
        short = option_field.metadata.get("cli_short")
        if short:
            flags.insert(0, short)
        group.add_argument(
            *flags,
            dest=option_field.name,
            action="store_true",
            default=option_field.default,
            help=option_field.metadata.get("help", ""),
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the md2bbcode command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    Examples
    --------
        >>> args = create_parser().parse_args(["--dialect", "xenforo", "-t"])
        >>> args.dialect, args.tables, args.footnotes
        ('xenforo', True, False)

    """
    parser = argparse.ArgumentParser(
        prog="md2bbcode",
        description="Convert Markdown into XenForo or ProBoards BBCode.",
        epilog="Warnings are written to standard error and do not change the exit code.",
    )
    parser.add_argument(
        "--dialect",
        required=True,
        type=str.lower,
        choices=SUPPORTED_DIALECTS,
        help="BBCode dialect of the target forum",
    )

    add_renderer_arguments(parser)

    io_group = parser.add_argument_group("input and output")
    io_group.add_argument("-i", "--input", default=None, help="Markdown file to read (default: standard input)")
    io_group.add_argument("-o", "--output", default=None, help="File to write BBCode to (default: standard output)")

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level for diagnostics (default: WARNING)",
    )
    log_group.add_argument("--log-file", default=None, help="Also write log messages to this file")
    log_group.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output (DEBUG logging)")
    log_group.add_argument(
        "--trace", action="store_true", help="Enable trace logging with timestamps and logger names"
    )

    parser.add_argument("--version", "-V", action="version", version=f"md2bbcode {_get_version()}")
    return parser


def options_from_args(parsed_args: argparse.Namespace) -> BBCodeRendererOptions:
    """Build renderer options from parsed command-line arguments."""
    values: dict[str, Any] = {
        option_field.name: getattr(parsed_args, option_field.name) for option_field in fields(BBCodeRendererOptions)
    }
    return BBCodeRendererOptions(**values)


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_PARSING_ERROR",
    "EXIT_RENDERING_ERROR",
    "get_exit_code_for_exception",
    "add_renderer_arguments",
    "create_parser",
    "options_from_args",
]
