#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/utils.py
"""Text helpers shared by the renderers."""

from __future__ import annotations

import re
import unicodedata
from html import escape as _html_escape
from typing import Set

DANGEROUS_SCHEMES = (
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
)


def escape_html(text: str, *, quote: bool = True) -> str:
    """Escape HTML special characters."""
    return _html_escape(text, quote=quote)


def is_url_scheme_dangerous(url: str) -> bool:
    """Return True for URLs whose scheme can execute script in a browser.

    Whitespace and control characters are removed before checking, since
    browsers ignore them inside a scheme.
    """
    compact = "".join(ch for ch in url if not ch.isspace() and unicodedata.category(ch) != "Cc").lower()
    return compact.startswith(DANGEROUS_SCHEMES)


def slugify(text: str, *, seen_slugs: Set[str] | None = None, max_length: int = 100) -> str:
    """Create a URL-safe slug, unique among ``seen_slugs`` when given.

    Examples
    --------
    >>> slugify("Café résumé")
    'cafe-resume'
    >>> seen = set()
    >>> slugify("Intro", seen_slugs=seen), slugify("Intro", seen_slugs=seen)
    ('intro', 'intro-2')

    """
    normalized = unicodedata.normalize("NFD", text)
    normalized = "".join(char for char in normalized if unicodedata.category(char) != "Mn")

    slug = re.sub(r"[\s_]+", "-", normalized.lower())
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug).strip("-")
    if not slug:
        slug = "section"
    if len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")

    if seen_slugs is None:
        return slug

    candidate = slug
    counter = 2
    while candidate in seen_slugs:
        candidate = f"{slug}-{counter}"
        counter += 1
    seen_slugs.add(candidate)
    return candidate
