#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/renderers/css.py
"""Built-in stylesheets and stylesheet resolution for HTML output.

HTML output embeds three stylesheets:

- ``standalone``: page layout, used only for standalone documents
- ``core``: styling of document content
- ``code``: colours of highlighted code (generated by Pygments)

A package may replace any of them with a file of its own; see
:func:`resolve_stylesheets`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from booksource.constants import CSS_SECTIONS, SOURCE_ENCODING
from booksource.exceptions import StylesheetReadError
from booksource.package import CssSpec, PerSectionPaths, SingleCorePath
from booksource.renderers.highlight import get_code_css

logger = logging.getLogger(__name__)

STANDALONE_CSS = """\
html {
  background: var(--bks-palette-background);
}
body {
  margin: 0;
  padding: 2rem 1rem;
  color: var(--bks-palette-text);
  background: var(--bks-palette-background);
  font-family: var(--bks-fonts-main);
  font-size: var(--bks-sizes-text);
  line-height: var(--bks-sizes-line-height);
}
main.bks-document {
  max-width: var(--bks-sizes-max-width);
  margin: 0 auto;
}
"""

CORE_CSS = """\
.bks-document h1, .bks-document h2, .bks-document h3,
.bks-document h4, .bks-document h5, .bks-document h6 {
  color: var(--bks-palette-heading);
  font-family: var(--bks-fonts-heading);
  line-height: 1.25;
  margin: 1.6em 0 0.6em;
}
.bks-document h1 {
  border-bottom: 2px solid var(--bks-palette-primary);
  padding-bottom: 0.2em;
}
.bks-document p {
  margin: 0 0 1em;
}
.bks-document a {
  color: var(--bks-palette-link);
}
.bks-document blockquote {
  margin: 1em 0;
  padding: 0.2em 1em;
  color: var(--bks-palette-quote);
  border-left: 4px solid var(--bks-palette-border);
}
.bks-document hr {
  border: 0;
  border-top: 1px solid var(--bks-palette-border);
  margin: 2em 0;
}
.bks-document img {
  max-width: 100%;
}
.bks-document code {
  font-family: var(--bks-fonts-code);
  font-size: var(--bks-sizes-code);
  color: var(--bks-palette-code-text);
  background: var(--bks-palette-code-background);
  padding: 0.1em 0.3em;
  border-radius: 3px;
}
.bks-document pre.bks-code {
  background: var(--bks-palette-code-background);
  padding: 0.8em 1em;
  overflow-x: auto;
  border-radius: 4px;
}
.bks-document pre.bks-code code {
  padding: 0;
  background: none;
}
"""

_BUILTIN_CSS = {
    "standalone": lambda: STANDALONE_CSS,
    "core": lambda: CORE_CSS,
    "code": get_code_css,
}


def get_builtin_css(section: str) -> str:
    """Return the built-in stylesheet for ``section``.

    Raises
    ------
    ValueError
        If ``section`` is not one of ``standalone``, ``core`` or ``code``

    """
    try:
        return _BUILTIN_CSS[section]()
    except KeyError:
        raise ValueError(f"Unknown stylesheet section '{section}'") from None


@dataclass(frozen=True)
class StylesheetSet:
    """The three stylesheets embedded in HTML output."""

    standalone: str
    core: str
    code: str


def _section_paths(css: Optional[CssSpec]) -> PerSectionPaths:
    if css is None:
        return PerSectionPaths()
    if isinstance(css, SingleCorePath):
        return PerSectionPaths(core=css.path)
    return css


def _read_stylesheet(path: str, section: str) -> str:
    try:
        text = Path(path).read_text(encoding=SOURCE_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        raise StylesheetReadError(path, section, e) from e
    logger.debug(f"Loaded {section} stylesheet from {path}")
    return text


def resolve_stylesheets(css: Optional[CssSpec]) -> StylesheetSet:
    """Turn a package's stylesheet setting into concrete CSS text.

    Each section is read from the path the package gives for it (relative
    paths resolve against the working directory) or falls back to the
    built-in stylesheet.

    Raises
    ------
    StylesheetReadError
        If a named stylesheet file cannot be read

    """
    paths = _section_paths(css)
    resolved = {}
    for section in CSS_SECTIONS:
        path = paths.get(section)
        resolved[section] = _read_stylesheet(path, section) if path else get_builtin_css(section)
    return StylesheetSet(**resolved)
