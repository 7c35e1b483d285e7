#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/filters/__init__.py
"""Text post-filters applied to a parsed document before rendering."""

from booksource.filters.builtin import TextPostFilter
from booksource.filters.metadata import FilterMetadata
from booksource.filters.pipeline import apply_post_filters
from booksource.filters.registry import FilterRegistry, filter_registry

__all__ = [
    "FilterMetadata",
    "FilterRegistry",
    "TextPostFilter",
    "apply_post_filters",
    "filter_registry",
]
