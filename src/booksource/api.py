#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/api.py
"""High-level conversion API.

:func:`convert` runs one conversion from a source path to rendered text and
:func:`write_output` delivers that text to stdout or a file. The command-line
interface is a thin layer over these two functions.

Examples
--------
    >>> from booksource.api import CliOptions, convert, write_output
    >>> from booksource.constants import OutputFormat
    >>> text = convert(CliOptions(source="book.kfg", format=OutputFormat.JSON))
    >>> write_output(text, "book.json")

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from booksource import kfg
from booksource.constants import DEFAULT_OUTPUT_FORMAT, SOURCE_ENCODING, OutputFormat
from booksource.context import build_render_context, resolve_post_filters
from booksource.exceptions import OutputWriteError
from booksource.formats import get_renderer
from booksource.package import aggregate_sources, load_package
from booksource.parser import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliOptions:
    """Validated options of a single conversion.

    Parameters
    ----------
    source : str
        ``.bks`` document or ``.kfg``/``.json`` package descriptor
    output : str or None, default None
        Destination file; None writes to stdout
    format : OutputFormat, default OutputFormat.HTML
        Output format
    post_filters : tuple of str, default ()
        Post-filters requested on the command line, applied after the
        package's own
    fragment : bool, default False
        Produce an HTML fragment instead of a standalone page

    """

    source: str
    output: Optional[str] = None
    format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    post_filters: tuple[str, ...] = ()
    fragment: bool = False


def convert(options: CliOptions, cwd: Optional[Path] = None) -> str:
    """Load, parse, filter and render the source named in ``options``.

    Parameters
    ----------
    options : CliOptions
        Conversion options
    cwd : Path, optional
        Directory relative paths resolve against (default: the working directory)

    Returns
    -------
    str
        The rendered output

    Raises
    ------
    BookSourceError
        Any usage, I/O or content error met along the way

    """
    package, base_dir = load_package(options.source, cwd=cwd)
    raw_content = aggregate_sources(package, base_dir)
    logger.info(f"Aggregated {len(package.sources)} source(s), {len(raw_content)} characters")

    document = parse(raw_content, metadata_parser=kfg.parse)

    post_filters = resolve_post_filters(package, options.post_filters)
    if post_filters:
        logger.info(f"Applying post-filters: {', '.join(post_filters)}")
        document = document.text_post_filter(post_filters)

    context = build_render_context(package, document, fragment=options.fragment, post_filters=post_filters)
    logger.debug(f"Rendering as {options.format.value} (standalone={context.standalone})")
    return get_renderer(options.format).render(document, context)


def write_output(text: str, output: Optional[str] = None) -> None:
    """Write rendered text to ``output``, or print it when no path is given.

    Raises
    ------
    OutputWriteError
        If the destination cannot be written

    """
    if not output:
        print(text)
        return

    try:
        Path(output).write_text(text, encoding=SOURCE_ENCODING)
    except OSError as e:
        raise OutputWriteError(output, e) from e
    logger.info(f"Wrote {len(text)} characters to {output}")
