#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/filters/metadata.py
"""Registration metadata for text post-filters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from booksource.ast.transforms import NodeTransformer


@dataclass
class FilterMetadata:
    """Metadata describing a text post-filter.

    Parameters
    ----------
    name : str
        Name used on the command line and in ``postFilters`` (e.g. "smart-quotes")
    description : str
        One-line description shown in the help text
    filter_class : type[NodeTransformer]
        Transformer class implementing the filter; it must take no
        constructor arguments
    tags : list[str], default = empty list
        Free-form categories (e.g. ["typography"])
    version : str, default = "1.0.0"
        Filter version
    author : str, optional
        Filter author or maintainer

    Examples
    --------
    >>> metadata = FilterMetadata(
    ...     name="shout",
    ...     description="Upper-case all text",
    ...     filter_class=ShoutFilter,
    ... )

    """

    name: str
    description: str
    filter_class: type[NodeTransformer]
    tags: list[str] = field(default_factory=list)
    version: str = "1.0.0"
    author: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Filter name must not be empty")
        if not (isinstance(self.filter_class, type) and issubclass(self.filter_class, NodeTransformer)):
            raise ValueError(f"Filter class for '{self.name}' must be a NodeTransformer subclass")

    def create_instance(self) -> NodeTransformer:
        """Create a fresh instance of the filter."""
        return self.filter_class()
