#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/cli/__init__.py
"""Command-line interface for booksource.

Examples
--------
Convert a document to a standalone HTML page on stdout::

    $ bks chapter.bks

Convert a package to JSON in a file::

    $ bks book.kfg -f json -o book.json

Apply post-filters and produce an HTML fragment::

    $ bks chapter.bks -p smart-quotes -p dashes --fragment

Use environment variables for defaults::

    $ export BOOKSOURCE_FORMAT=kfg
    $ bks book.json

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from booksource.api import CliOptions, convert, write_output
from booksource.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    create_parser,
    get_exit_code_for_exception,
)
from booksource.exceptions import BookSourceError, ContentError, MissingSourceError, UsageError
from booksource.formats import parse_output_format
from booksource.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def resolve_options(parsed_args: argparse.Namespace) -> CliOptions:
    """Validate parsed arguments and build the conversion options.

    Raises
    ------
    MissingSourceError
        If no source was given
    UnsupportedFormatError
        If the format name is unknown

    """
    if not parsed_args.source:
        raise MissingSourceError()

    return CliOptions(
        source=parsed_args.source,
        output=parsed_args.output,
        format=parse_output_format(parsed_args.format),
        post_filters=tuple(parsed_args.post_filter or ()),
        fragment=parsed_args.fragment,
    )


def _report_error(error: BookSourceError, parser: argparse.ArgumentParser) -> int:
    """Print a diagnostic for ``error`` and return the exit status."""
    if isinstance(error, ContentError):
        print(f"Error: {error.message}", file=sys.stderr)
    else:
        print(str(error), file=sys.stderr)

    if isinstance(error, UsageError) and error.show_help:
        parser.print_help(sys.stderr)

    logger.debug("Conversion failed", exc_info=error)
    return get_exit_code_for_exception(error)


def main(args: Optional[list[str]] = None) -> int:
    """Run the command-line interface.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit status

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        options = resolve_options(parsed_args)
        output = convert(options)
        write_output(output, options.output)
    except BookSourceError as e:
        return _report_error(e, parser)
    except Exception as e:
        print(f"Error: Unexpected error: {e}", file=sys.stderr)
        logger.debug("Unexpected failure", exc_info=True)
        return EXIT_ERROR

    return EXIT_SUCCESS


__all__ = ["main", "resolve_options"]
