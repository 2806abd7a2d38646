#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for md2bbcode.

Reads Markdown from a file or standard input, converts it to the chosen BBCode
dialect, and writes the result to a file or standard output.

Examples
--------
    md2bbcode --dialect xenforo -t -f -i post.md -o post.txt
    cat post.md | md2bbcode --dialect proboards --smart-punctuation

"""

from __future__ import annotations

import argparse
import logging
import sys

from md2bbcode.api import markdown_to_bbcode
from md2bbcode.cli.builder import (
    EXIT_SUCCESS,
    create_parser,
    get_exit_code_for_exception,
    options_from_args,
)
from md2bbcode.exceptions import Md2BBCodeError
from md2bbcode.logging_utils import configure_logging
from md2bbcode.utils.io_utils import read_text_input, write_text

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the md2bbcode command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        options = options_from_args(parsed_args)
        markdown = read_text_input(parsed_args.input)
        result = markdown_to_bbcode(markdown, parsed_args.dialect, options)
        write_text(result.output + "\n", parsed_args.output if parsed_args.output else sys.stdout)
    except Md2BBCodeError as e:
        logger.error("%s", e.message)
        if e.original_error is not None:
            logger.debug("Caused by: %r", e.original_error)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        return get_exit_code_for_exception(e)

    if result.warnings:
        logger.info("Conversion finished with %d warning(s)", len(result.warnings))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
