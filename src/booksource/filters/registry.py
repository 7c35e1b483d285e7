#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/filters/registry.py
"""Registry of text post-filters.

The registry is a process-wide singleton. Built-in filters are registered the
first time the registry is queried, followed by any third-party filters
published under the ``booksource.post_filters`` entry point group.

Examples
--------
    >>> from booksource.filters import filter_registry
    >>> filter_registry.list_filters()
    ['collapse-whitespace', 'dashes', 'ellipsis', 'french-spacing', 'smart-quotes']
    >>> smart = filter_registry.get_filter("smart-quotes")

"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, Optional

from booksource.ast.transforms import NodeTransformer
from booksource.constants import POST_FILTER_ENTRY_POINT_GROUP

if TYPE_CHECKING:
    from booksource.filters.metadata import FilterMetadata

logger = logging.getLogger(__name__)


class FilterRegistry:
    """Singleton registry mapping filter names to their metadata."""

    _instance: Optional[FilterRegistry] = None
    _filters: dict[str, FilterMetadata]
    _initialized: bool

    def __new__(cls) -> FilterRegistry:
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._filters = {}
            cls._instance._initialized = False
        return cls._instance

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self._initialized = True
            self._register_builtins()
            self.discover_plugins()

    def _register_builtins(self) -> None:
        from booksource.filters._builtin_metadata import BUILTIN_FILTERS

        for metadata in BUILTIN_FILTERS:
            self._filters.setdefault(metadata.name, metadata)

    def register(self, metadata: FilterMetadata) -> None:
        """Register a filter, replacing any filter of the same name."""
        self._ensure_initialized()
        if metadata.name in self._filters:
            logger.warning(f"Post-filter '{metadata.name}' already registered, overwriting")

        self._filters[metadata.name] = metadata
        logger.debug(f"Registered post-filter: {metadata.name}")

    def unregister(self, name: str) -> bool:
        """Remove a filter; return False when it was not registered."""
        if name in self._filters:
            del self._filters[name]
            logger.debug(f"Unregistered post-filter: {name}")
            return True
        return False

    def get_metadata(self, name: str) -> FilterMetadata:
        """Get metadata for a filter.

        Raises
        ------
        KeyError
            If no filter of that name is registered

        """
        self._ensure_initialized()

        if name not in self._filters:
            raise KeyError(f"Post-filter '{name}' not registered")

        return self._filters[name]

    def get_filter(self, name: str) -> NodeTransformer:
        """Get a new instance of the named filter.

        Raises
        ------
        KeyError
            If no filter of that name is registered

        """
        return self.get_metadata(name).create_instance()

    def has_filter(self, name: str) -> bool:
        self._ensure_initialized()
        return name in self._filters

    def list_filters(self, tags: Optional[list[str]] = None) -> list[str]:
        """List registered filter names, sorted alphabetically.

        Parameters
        ----------
        tags : list[str], optional
            Only return filters carrying at least one of these tags

        """
        self._ensure_initialized()

        if tags is None:
            return sorted(self._filters)

        return sorted(name for name, metadata in self._filters.items() if any(tag in metadata.tags for tag in tags))

    def discover_plugins(self) -> int:
        """Register filters published through entry points.

        Returns
        -------
        int
            Number of filters discovered and registered

        """
        from booksource.filters.metadata import FilterMetadata

        discovered_count = 0
        try:
            filter_eps = importlib.metadata.entry_points().select(group=POST_FILTER_ENTRY_POINT_GROUP)
        except Exception as e:
            logger.warning(f"Failed to discover post-filter plugins: {e}")
            return 0

        for ep in filter_eps:
            try:
                metadata = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load post-filter entry point '{ep.name}': {e}")
                continue

            if not isinstance(metadata, FilterMetadata):
                logger.warning(f"Entry point '{ep.name}' did not return FilterMetadata, skipping")
                continue

            self._filters[metadata.name] = metadata
            discovered_count += 1
            logger.debug(f"Discovered post-filter from entry point: {ep.name}")

        logger.debug(f"Discovered {discovered_count} post-filter(s) from entry points")
        return discovered_count


filter_registry = FilterRegistry()
