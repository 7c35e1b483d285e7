#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/__init__.py
"""booksource - Book Source document converter.

Load a ``.bks`` document, or a ``.kfg``/``.json`` package descriptor listing
several sources, parse it into a document tree, apply text post-filters and
render it as HTML, JSON, KFG or an inspection dump.

Examples
--------
Convert a single document to standalone HTML:

    >>> from booksource import convert, CliOptions, OutputFormat
    >>> html = convert(CliOptions(source="chapter.bks"))

Parse markup directly:

    >>> from booksource import parse
    >>> doc = parse("# Title\\n\\nSome *text*.")

"""

from booksource.api import CliOptions, convert, write_output
from booksource.ast.nodes import Document
from booksource.constants import OutputFormat
from booksource.exceptions import BookSourceError
from booksource.parser import parse
from booksource.theme import Theme

__version__ = "0.1.0"

__all__ = [
    "BookSourceError",
    "CliOptions",
    "Document",
    "OutputFormat",
    "Theme",
    "__version__",
    "convert",
    "parse",
    "write_output",
]
