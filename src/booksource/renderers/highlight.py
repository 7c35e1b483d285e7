#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/renderers/highlight.py
"""Syntax highlighting of code blocks with Pygments."""

from __future__ import annotations

import logging
from typing import Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from booksource.constants import CODE_CSS_SELECTOR, DEFAULT_CODE_STYLE

logger = logging.getLogger(__name__)

_FORMATTER = HtmlFormatter(nowrap=True)


def highlight_code(code: str, language: Optional[str]) -> Optional[str]:
    """Highlight ``code`` as HTML spans for the given language.

    Parameters
    ----------
    code : str
        Source code to highlight
    language : str or None
        Pygments lexer name or alias (e.g. "python", "js")

    Returns
    -------
    str or None
        Highlighted HTML without a wrapping element, or None when no language
        was given or the language is unknown

    """
    if not language:
        return None
    try:
        lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
    except ClassNotFound:
        logger.debug(f"No highlighter for language '{language}'")
        return None
    return highlight(code, lexer, _FORMATTER)


def get_code_css(style: str = DEFAULT_CODE_STYLE) -> str:
    """Return the Pygments stylesheet for highlighted code blocks."""
    return HtmlFormatter(style=style).get_style_defs(CODE_CSS_SELECTOR)
