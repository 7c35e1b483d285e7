#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/context.py
"""Render context assembled once per conversion.

The context bundles everything a renderer needs besides the document: the
resolved theme, the standalone flag, the effective post-filter list and the
package (for stylesheet settings).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from booksource.ast.nodes import Document
from booksource.package import Package
from booksource.theme import Theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """Immutable inputs for a renderer.

    Parameters
    ----------
    package : Package
        The loaded package
    theme : Theme
        Resolved theme
    standalone : bool
        False when only an HTML fragment is wanted
    post_filters : tuple of str
        Post-filters that were applied, in order

    """

    package: Package
    theme: Theme
    standalone: bool = True
    post_filters: tuple[str, ...] = ()


def resolve_post_filters(package: Package, cli_filters: Iterable[str] = ()) -> tuple[str, ...]:
    """Package filters first, then command-line filters; duplicates are kept."""
    return tuple(package.post_filters) + tuple(cli_filters)


def resolve_theme(package: Package, document: Document) -> Theme:
    """Pick the theme for a conversion.

    For a single document, a theme declared in its metadata block wins. For
    a package descriptor only the descriptor's theme is considered. Without
    either, the default theme is used.
    """
    if not package.is_package and document.theme is not None:
        logger.debug("Using theme from document metadata")
        return Theme.from_mapping(document.theme)
    if package.theme is not None:
        logger.debug("Using theme from package")
        return Theme.from_mapping(package.theme)
    return Theme()


def build_render_context(
    package: Package,
    document: Document,
    fragment: bool = False,
    post_filters: Iterable[str] = (),
) -> RenderContext:
    return RenderContext(
        package=package,
        theme=resolve_theme(package, document),
        standalone=not fragment,
        post_filters=tuple(post_filters),
    )
