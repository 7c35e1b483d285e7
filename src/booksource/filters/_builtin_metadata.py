#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/filters/_builtin_metadata.py
"""Metadata definitions for the built-in post-filters."""

from __future__ import annotations

from booksource.filters.builtin import (
    CollapseWhitespaceFilter,
    DashesFilter,
    EllipsisFilter,
    FrenchSpacingFilter,
    SmartQuotesFilter,
)
from booksource.filters.metadata import FilterMetadata

SMART_QUOTES_METADATA = FilterMetadata(
    name="smart-quotes",
    description="Replace straight quotes with typographic quotes",
    filter_class=SmartQuotesFilter,
    tags=["typography"],
    author="booksource",
)

ELLIPSIS_METADATA = FilterMetadata(
    name="ellipsis",
    description="Replace three dots with an ellipsis character",
    filter_class=EllipsisFilter,
    tags=["typography"],
    author="booksource",
)

DASHES_METADATA = FilterMetadata(
    name="dashes",
    description="Replace -- with an en dash and --- with an em dash",
    filter_class=DashesFilter,
    tags=["typography"],
    author="booksource",
)

FRENCH_SPACING_METADATA = FilterMetadata(
    name="french-spacing",
    description="Insert non-breaking spaces before high punctuation and inside guillemets",
    filter_class=FrenchSpacingFilter,
    tags=["typography", "locale"],
    author="booksource",
)

COLLAPSE_WHITESPACE_METADATA = FilterMetadata(
    name="collapse-whitespace",
    description="Collapse runs of spaces and tabs into a single space",
    filter_class=CollapseWhitespaceFilter,
    tags=["cleanup"],
    author="booksource",
)

BUILTIN_FILTERS = (
    SMART_QUOTES_METADATA,
    ELLIPSIS_METADATA,
    DASHES_METADATA,
    FRENCH_SPACING_METADATA,
    COLLAPSE_WHITESPACE_METADATA,
)
