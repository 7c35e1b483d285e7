#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/constants.py
"""Constants and default values shared across booksource.

This module centralizes the input extensions, output format names, package
descriptor keys and theme defaults used by the loader, the renderers and the
command-line interface.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class OutputFormat(str, Enum):
    """Output formats understood by the renderer dispatch."""

    HTML = "html"
    JSON = "json"
    KFG = "kfg"
    INSPECT = "inspect"

    def __str__(self) -> str:
        return self.value


DEFAULT_OUTPUT_FORMAT = OutputFormat.HTML

# Input handling
DOCUMENT_EXTENSION = "bks"
KFG_PACKAGE_EXTENSION = "kfg"
JSON_PACKAGE_EXTENSION = "json"
PACKAGE_EXTENSIONS = (KFG_PACKAGE_EXTENSION, JSON_PACKAGE_EXTENSION)
SOURCE_ENCODING = "utf-8"
SOURCE_SEPARATOR = "\n"

# Package descriptor keys
PACKAGE_KEY_SOURCES = "sources"
PACKAGE_KEY_POST_FILTERS = "postFilters"
PACKAGE_KEY_THEME = "theme"
PACKAGE_KEY_CSS = "css"

# Document metadata keys
METADATA_KEY_THEME = "theme"
METADATA_KEY_TITLE = "title"
METADATA_FENCE = "---"

# Renderer settings
JSON_INDENT = 2
INSPECT_MAX_DEPTH = 20
INSPECT_MAX_OUTPUT_LENGTH = 1_000_000
CSS_SECTIONS = ("standalone", "core", "code")
DEFAULT_CODE_STYLE = "default"
CODE_CSS_SELECTOR = ".bks-code"

# Environment variable prefix for CLI defaults
ENV_PREFIX = "BOOKSOURCE_"

# Theme defaults
DEFAULT_THEME_PALETTE: Mapping[str, str] = MappingProxyType(
    {
        "text": "#222222",
        "background": "#ffffff",
        "heading": "#111111",
        "primary": "#3b6ea5",
        "link": "#3b6ea5",
        "quote": "#5f6368",
        "border": "#dddddd",
        "code-text": "#1f2328",
        "code-background": "#f6f8fa",
    }
)

DEFAULT_THEME_FONTS: Mapping[str, str] = MappingProxyType(
    {
        "main": "Georgia, 'Times New Roman', serif",
        "heading": "'Helvetica Neue', Arial, sans-serif",
        "code": "'DejaVu Sans Mono', Menlo, Consolas, monospace",
    }
)

DEFAULT_THEME_SIZES: Mapping[str, str] = MappingProxyType(
    {
        "text": "1.1rem",
        "line-height": "1.6",
        "max-width": "46rem",
        "code": "0.9em",
    }
)

DEFAULT_THEME_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "untitled": "Untitled document",
    }
)

DEFAULT_THEME_LANGUAGE = "en"

# Post-filter entry point group for third-party filters
POST_FILTER_ENTRY_POINT_GROUP = "booksource.post_filters"
