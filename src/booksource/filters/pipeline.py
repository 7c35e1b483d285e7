#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/filters/pipeline.py
"""Running a sequence of post-filters over a document."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from booksource.ast.nodes import Document
from booksource.filters.registry import FilterRegistry, filter_registry

logger = logging.getLogger(__name__)


def apply_post_filters(
    document: Document,
    names: Iterable[str],
    registry: Optional[FilterRegistry] = None,
) -> Document:
    """Apply the named post-filters to ``document`` in the given order.

    Each name is resolved against the registry and applied once per
    occurrence, so a name listed twice runs twice. Names with no registered
    filter are reported as a warning and skipped.

    Parameters
    ----------
    document : Document
        Document to filter; it is not modified
    names : iterable of str
        Filter names in application order
    registry : FilterRegistry, optional
        Registry to use instead of the global one

    Returns
    -------
    Document
        The filtered document

    """
    registry = registry or filter_registry
    result = document

    for name in names:
        if not registry.has_filter(name):
            logger.warning(f"Unknown post-filter '{name}' skipped")
            continue

        logger.debug(f"Applying post-filter: {name}")
        transformed = registry.get_filter(name).transform(result)
        if isinstance(transformed, Document):
            result = transformed

    return result
