#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/theme.py
"""Visual theme for rendered documents.

A theme groups the palette, fonts, sizes and text labels used by the HTML
renderer. Themes come from a package descriptor's ``theme`` key or from the
``theme`` key of a document's metadata block; any value they leave out falls
back to the defaults in :mod:`booksource.constants`.

Examples
--------
    >>> theme = Theme.from_mapping({"palette": {"primary": "#aa3300"}})
    >>> theme.palette["primary"], theme.palette["text"]
    ('#aa3300', '#222222')

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from booksource.constants import (
    DEFAULT_THEME_FONTS,
    DEFAULT_THEME_LABELS,
    DEFAULT_THEME_LANGUAGE,
    DEFAULT_THEME_PALETTE,
    DEFAULT_THEME_SIZES,
)

logger = logging.getLogger(__name__)

_SECTIONS = ("palette", "fonts", "sizes", "labels")
_CSS_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
_UNSAFE_CSS_VALUE_PATTERN = re.compile(r"[;{}<>]")


def _merge(defaults: Mapping[str, str], overrides: Any, section: str) -> Mapping[str, str]:
    """Merge a theme section over its defaults, keeping only scalar values."""
    merged = dict(defaults)
    if overrides is None:
        return MappingProxyType(merged)
    if not isinstance(overrides, Mapping):
        logger.warning(f"Theme section '{section}' is not a mapping, using defaults")
        return MappingProxyType(merged)

    for key, value in overrides.items():
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            merged[str(key)] = str(value)
        else:
            logger.warning(f"Ignoring non-scalar theme value {section}.{key}")
    return MappingProxyType(merged)


@dataclass(frozen=True)
class Theme:
    """Immutable theme record.

    Parameters
    ----------
    palette : Mapping[str, str]
        Colours keyed by role (``text``, ``background``, ``primary``, ...)
    fonts : Mapping[str, str]
        Font stacks keyed by role (``main``, ``heading``, ``code``)
    sizes : Mapping[str, str]
        Lengths and ratios (``text``, ``line-height``, ``max-width``, ``code``)
    labels : Mapping[str, str]
        Text used by the renderer (``untitled`` for documents without a title)
    language : str
        Value of the ``lang`` attribute of standalone HTML

    """

    palette: Mapping[str, str] = field(default_factory=lambda: DEFAULT_THEME_PALETTE)
    fonts: Mapping[str, str] = field(default_factory=lambda: DEFAULT_THEME_FONTS)
    sizes: Mapping[str, str] = field(default_factory=lambda: DEFAULT_THEME_SIZES)
    labels: Mapping[str, str] = field(default_factory=lambda: DEFAULT_THEME_LABELS)
    language: str = DEFAULT_THEME_LANGUAGE

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Theme:
        """Build a theme from a descriptor or metadata mapping.

        Unknown top-level keys are ignored (and logged at debug level).
        """
        unknown = sorted(str(key) for key in data if key not in _SECTIONS and key != "language")
        if unknown:
            logger.debug(f"Ignoring unknown theme keys: {', '.join(unknown)}")

        language = data.get("language", DEFAULT_THEME_LANGUAGE)
        if not isinstance(language, str) or not language:
            logger.warning(f"Theme language must be a non-empty string, using '{DEFAULT_THEME_LANGUAGE}'")
            language = DEFAULT_THEME_LANGUAGE

        return cls(
            palette=_merge(DEFAULT_THEME_PALETTE, data.get("palette"), "palette"),
            fonts=_merge(DEFAULT_THEME_FONTS, data.get("fonts"), "fonts"),
            sizes=_merge(DEFAULT_THEME_SIZES, data.get("sizes"), "sizes"),
            labels=_merge(DEFAULT_THEME_LABELS, data.get("labels"), "labels"),
            language=language,
        )

    def label(self, key: str) -> str:
        return self.labels.get(key, DEFAULT_THEME_LABELS.get(key, key))

    def css_variables(self) -> dict[str, str]:
        """Return the theme as CSS custom properties (``--bks-<section>-<key>``).

        Keys that are not valid CSS identifiers and values that could break out
        of a declaration are skipped.
        """
        variables: dict[str, str] = {}
        for section in ("palette", "fonts", "sizes"):
            for key, value in getattr(self, section).items():
                if not _CSS_NAME_PATTERN.match(key) or _UNSAFE_CSS_VALUE_PATTERN.search(value):
                    logger.warning(f"Skipping unsafe theme entry {section}.{key}")
                    continue
                variables[f"--bks-{section}-{key}"] = value
        return variables

    def to_css(self) -> str:
        """Render the theme as a ``:root`` rule of CSS custom properties."""
        declarations = "\n".join(f"  {name}: {value};" for name, value in self.css_variables().items())
        return f":root {{\n{declarations}\n}}\n"
