#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/filters/builtin.py
"""Built-in text post-filters.

Each filter rewrites the content of ``Text`` nodes only. Inline code, code
blocks, URLs and image attributes are left exactly as written.

Filters
-------
- smart-quotes: straight quotes become typographic quotes
- ellipsis: three dots become an ellipsis character
- dashes: ``--`` becomes an en dash and ``---`` an em dash
- french-spacing: non-breaking spaces before high punctuation and inside guillemets
- collapse-whitespace: runs of spaces and tabs become a single space

"""

from __future__ import annotations

import re
from abc import abstractmethod

from booksource.ast.nodes import Text
from booksource.ast.transforms import NodeTransformer

NBSP = "\u00a0"
NARROW_NBSP = "\u202f"

_OPENING_CONTEXT = r"(^|(?<=[\s(\[{—–-]))"
_DOUBLE_OPEN_PATTERN = re.compile(_OPENING_CONTEXT + '"')
_SINGLE_OPEN_PATTERN = re.compile(_OPENING_CONTEXT + "'")

_ELLIPSIS_PATTERN = re.compile(r"\.\.\.")
_EM_DASH_PATTERN = re.compile(r"---")
_EN_DASH_PATTERN = re.compile(r"--")

_HIGH_PUNCTUATION_PATTERN = re.compile(r"(?<=[^\s;!?])[ \t]*([;!?])")
_COLON_PATTERN = re.compile(r"(?<=\w)[ \t]*:(?=\s|$)")
_OPENING_GUILLEMET_PATTERN = re.compile(r"«(?!\u00a0)[ \t]*")
_CLOSING_GUILLEMET_PATTERN = re.compile(r"(?<!\u00a0)[ \t]*»")

_WHITESPACE_RUN_PATTERN = re.compile(r"[ \t]{2,}|\t")


class TextPostFilter(NodeTransformer):
    """Base class for filters that rewrite plain text runs."""

    @abstractmethod
    def filter_text(self, text: str) -> str:
        """Return the rewritten text of a single ``Text`` node."""

    def visit_text(self, node: Text) -> Text:
        return Text(content=self.filter_text(node.content), metadata=dict(node.metadata))


class SmartQuotesFilter(TextPostFilter):
    """Replace straight quotes with curly quotes.

    A quote at the start of a run or after whitespace or an opening bracket
    opens; every other quote closes (which also turns apostrophes into ’).
    """

    def filter_text(self, text: str) -> str:
        text = _DOUBLE_OPEN_PATTERN.sub("“", text)
        text = text.replace('"', "”")
        text = _SINGLE_OPEN_PATTERN.sub("‘", text)
        return text.replace("'", "’")


class EllipsisFilter(TextPostFilter):
    def filter_text(self, text: str) -> str:
        return _ELLIPSIS_PATTERN.sub("…", text)


class DashesFilter(TextPostFilter):
    """Replace ``---`` with an em dash and ``--`` with an en dash."""

    def filter_text(self, text: str) -> str:
        text = _EM_DASH_PATTERN.sub("—", text)
        return _EN_DASH_PATTERN.sub("–", text)


class FrenchSpacingFilter(TextPostFilter):
    """Apply French typographic spacing.

    A narrow no-break space goes before ``;``, ``!`` and ``?``; a no-break space
    goes before a colon and inside guillemets.
    """

    def filter_text(self, text: str) -> str:
        text = _HIGH_PUNCTUATION_PATTERN.sub(NARROW_NBSP + r"\1", text)
        text = _COLON_PATTERN.sub(NBSP + ":", text)
        text = _OPENING_GUILLEMET_PATTERN.sub("«" + NBSP, text)
        return _CLOSING_GUILLEMET_PATTERN.sub(NBSP + "»", text)


class CollapseWhitespaceFilter(TextPostFilter):
    def filter_text(self, text: str) -> str:
        return _WHITESPACE_RUN_PATTERN.sub(" ", text)
