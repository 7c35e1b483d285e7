#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/cli/builder.py
"""Argument parser construction and exit codes for the booksource CLI."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, NoReturn, Optional

from booksource import __version__
from booksource.constants import DEFAULT_OUTPUT_FORMAT, ENV_PREFIX
from booksource.exceptions import ContentError
from booksource.filters import filter_registry
from booksource.formats import list_formats

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONTENT_ERROR = 2

_TRUE_VALUES = ("true", "1", "yes", "on")


def get_exit_code_for_exception(exception: BaseException) -> int:
    """Map an exception to the process exit status.

    Usage and file system errors exit with 1, malformed content with 2, and
    anything unexpected with 1.
    """
    if isinstance(exception, ContentError):
        return EXIT_CONTENT_ERROR
    return EXIT_ERROR


class BookSourceArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_ERROR, f"Error: {message}\n")


class EnvironmentDefaultAppendAction(argparse._AppendAction):
    """Append action whose default list is replaced, not extended, by explicit values.

    The default may come from a ``BOOKSOURCE_*`` environment variable; the
    first occurrence of the option on the command line discards it.
    """

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: Optional[str] = None,
    ) -> None:
        if self.default is not None and getattr(namespace, self.dest, None) is self.default:
            setattr(namespace, self.dest, None)
        super().__call__(parser, namespace, values, option_string)


def get_env_var_value(dest: str) -> Optional[str]:
    """Return the ``BOOKSOURCE_<DEST>`` environment value for an option, if set."""
    return os.environ.get(f"{ENV_PREFIX}{dest.upper().replace('-', '_')}")


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Use environment variables as defaults for parser arguments.

    Explicit command-line arguments still take precedence.
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version"):
            continue

        env_value = get_env_var_value(action.dest)
        if not env_value:
            continue

        if isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in _TRUE_VALUES
        elif isinstance(action, argparse._AppendAction):
            action.default = [item.strip() for item in env_value.split(",") if item.strip()]
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(
                    f"Invalid choice for {ENV_PREFIX}{action.dest.upper()}: {env_value}. "
                    f"Choices: {list(action.choices)}"
                )
        else:
            action.default = env_value


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    formats = ", ".join(list_formats())
    filters = ", ".join(filter_registry.list_filters()) or "none"

    parser = BookSourceArgumentParser(
        prog="bks",
        description="Convert a Book Source document (.bks) or package (.kfg, .json) to another format.",
        epilog=(
            f"Available formats: {formats}. Available post-filters: {filters}. "
            f"Every option can be defaulted from a {ENV_PREFIX}<OPTION> environment variable."
        ),
    )

    parser.add_argument("source", nargs="?", help="Source document (.bks) or package descriptor (.kfg, .json)")
    parser.add_argument("-o", "--output", help="Output file (default: standard output)")
    parser.add_argument(
        "-f",
        "--format",
        default=DEFAULT_OUTPUT_FORMAT.value,
        help=f"Output format, one of: {formats} (default: %(default)s)",
    )
    parser.add_argument(
        "-p",
        "--post-filter",
        dest="post_filter",
        action=EnvironmentDefaultAppendAction,
        metavar="FILTER",
        help=f"Apply a text post-filter; may be repeated. Available: {filters}",
    )
    parser.add_argument(
        "-F",
        "--fragment",
        action="store_true",
        help="Produce an HTML fragment instead of a standalone document",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    logging_group.add_argument("--verbose", action="store_true", help="Enable debug logging")
    logging_group.add_argument(
        "--trace", action="store_true", help="Debug logging with timestamps and logger names"
    )
    logging_group.add_argument("--log-file", help="Also write log records to this file")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    apply_env_vars_to_parser(parser)
    return parser
