#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/options.py
"""Renderer option records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from booksource.constants import INSPECT_MAX_DEPTH, INSPECT_MAX_OUTPUT_LENGTH

CodeHighlighter = Callable[[str, Optional[str]], Optional[str]]


@dataclass(frozen=True)
class HtmlRendererOptions:
    """Configuration options for rendering a document to HTML.

    Parameters
    ----------
    standalone : bool, default True
        Wrap the content in a complete HTML document with embedded CSS;
        when False only the body content is produced
    standalone_css : str, default ""
        Page-level stylesheet, used only for standalone output
    core_css : str, default ""
        Stylesheet for document content
    code_css : str, default ""
        Stylesheet for highlighted code
    code_highlighter : callable, optional
        ``(code, language) -> html or None``. Returning None falls back to
        plain escaped code.

    """

    standalone: bool = True
    standalone_css: str = ""
    core_css: str = ""
    code_css: str = ""
    code_highlighter: Optional[CodeHighlighter] = None


@dataclass(frozen=True)
class InspectOptions:
    """Options for the structure dump.

    Parameters
    ----------
    max_depth : int, default 20
        Nesting depth after which containers are abbreviated
    max_length : int, default 1_000_000
        Maximum number of characters in the output
    color : bool, default True
        Emit ANSI colour codes

    """

    max_depth: int = INSPECT_MAX_DEPTH
    max_length: int = INSPECT_MAX_OUTPUT_LENGTH
    color: bool = True
