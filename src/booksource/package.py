#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/package.py
"""Package loading and source aggregation.

A *package* is the list of source documents to convert plus optional
post-filters, theme and stylesheet settings. It is either synthesized for a
single ``.bks`` file or read from a ``.kfg``/``.json`` descriptor:

.. code-block:: yaml

    sources:
      - intro            # ".bks" is appended
      - chapters/one.bks
    postFilters: [smart-quotes]
    theme:
      palette: {primary: "#884422"}
    css:
      core: styles/core.css

Relative source and stylesheet paths resolve against the *base directory*:
the descriptor's directory for packages, the working directory for a single
document.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, NamedTuple, Optional, Union

from booksource import kfg
from booksource.constants import (
    CSS_SECTIONS,
    DOCUMENT_EXTENSION,
    PACKAGE_EXTENSIONS,
    PACKAGE_KEY_CSS,
    PACKAGE_KEY_POST_FILTERS,
    PACKAGE_KEY_SOURCES,
    PACKAGE_KEY_THEME,
    SOURCE_ENCODING,
    SOURCE_SEPARATOR,
)
from booksource.exceptions import (
    EmptyPackageError,
    InvalidPackageError,
    SourceReadError,
    UnsupportedExtensionError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SingleCorePath:
    """Stylesheet setting given as one path; it replaces the core stylesheet."""

    path: str


@dataclass(frozen=True)
class PerSectionPaths:
    """Stylesheet setting with an optional path per section.

    Sections left as ``None`` use the built-in stylesheet.
    """

    standalone: Optional[str] = None
    core: Optional[str] = None
    code: Optional[str] = None

    def get(self, section: str) -> Optional[str]:
        return getattr(self, section)


CssSpec = Union[SingleCorePath, PerSectionPaths]


@dataclass(frozen=True)
class Package:
    """Immutable description of what to convert.

    Parameters
    ----------
    sources : tuple of str
        Source entries, as written in the descriptor (or on the command line)
    post_filters : tuple of str, default = ()
        Post-filters declared by the package
    theme : Mapping or None, default = None
        Theme mapping declared by the package
    css : CssSpec or None, default = None
        Stylesheet overrides for HTML output
    is_package : bool, default = False
        True when the package came from a descriptor file

    """

    sources: tuple[str, ...]
    post_filters: tuple[str, ...] = ()
    theme: Optional[Mapping[str, Any]] = None
    css: Optional[CssSpec] = None
    is_package: bool = False

    def __post_init__(self) -> None:
        if not self.sources:
            raise EmptyPackageError()

    @classmethod
    def for_document(cls, source: str) -> Package:
        """Synthesize the package of a single ``.bks`` document."""
        return cls(sources=(source,), is_package=False)

    @classmethod
    def from_mapping(cls, data: Any) -> Package:
        """Validate descriptor content and build a package.

        Raises
        ------
        EmptyPackageError
            If ``sources`` is missing, not a list, or empty (or ``data`` is not
            a mapping at all)
        InvalidPackageError
            If a source entry is not a string

        """
        if not isinstance(data, Mapping):
            logger.debug(f"Package descriptor is a {type(data).__name__}, not a mapping")
            raise EmptyPackageError()

        sources = data.get(PACKAGE_KEY_SOURCES)
        if not isinstance(sources, list) or not sources:
            raise EmptyPackageError()
        for entry in sources:
            if not isinstance(entry, str) or not entry:
                raise InvalidPackageError(f"Invalid source entry in the package: {entry!r}")

        return cls(
            sources=tuple(sources),
            post_filters=_parse_post_filters(data.get(PACKAGE_KEY_POST_FILTERS)),
            theme=_parse_theme(data.get(PACKAGE_KEY_THEME)),
            css=parse_css_spec(data.get(PACKAGE_KEY_CSS)),
            is_package=True,
        )


class LoadedPackage(NamedTuple):
    """A package together with the directory its relative paths resolve against."""

    package: Package
    base_dir: Path


def _parse_post_filters(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, list) and all(isinstance(name, str) for name in value):
        return tuple(value)
    logger.warning(f"Ignoring '{PACKAGE_KEY_POST_FILTERS}': expected a list of filter names")
    return ()


def _parse_theme(value: Any) -> Optional[Mapping[str, Any]]:
    if value is None or isinstance(value, Mapping):
        return value
    logger.warning(f"Ignoring '{PACKAGE_KEY_THEME}': expected a mapping, got {type(value).__name__}")
    return None


def parse_css_spec(value: Any) -> Optional[CssSpec]:
    """Turn a descriptor ``css`` value into a :data:`CssSpec`.

    A string is a single core stylesheet path; a mapping may name a path for
    each of the ``standalone``, ``core`` and ``code`` sections. Anything else
    is ignored.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return SingleCorePath(value)
    if isinstance(value, Mapping):
        paths: dict[str, Optional[str]] = {}
        for section in CSS_SECTIONS:
            path = value.get(section)
            if path is not None and not isinstance(path, str):
                logger.warning(f"Ignoring non-string '{PACKAGE_KEY_CSS}.{section}' stylesheet path")
                path = None
            paths[section] = path
        unknown = sorted(str(key) for key in value if key not in CSS_SECTIONS)
        if unknown:
            logger.warning(f"Ignoring unknown stylesheet sections: {', '.join(unknown)}")
        return PerSectionPaths(**paths)
    logger.warning(f"Ignoring '{PACKAGE_KEY_CSS}': expected a path or a mapping")
    return None


def get_extension(source: str) -> str:
    """Return the text after the final dot of the file name (case preserved)."""
    return os.path.splitext(source)[1][1:]


def load_package(source: str, cwd: Optional[Path] = None) -> LoadedPackage:
    """Load the package named on the command line.

    Parameters
    ----------
    source : str
        Path to a ``.bks`` document or a ``.kfg``/``.json`` descriptor
    cwd : Path, optional
        Directory relative paths resolve against (default: the working directory)

    Returns
    -------
    LoadedPackage
        The package and its base directory

    Raises
    ------
    UnsupportedExtensionError
        If the extension is not ``bks``, ``kfg`` or ``json``
    SourceReadError
        If a descriptor cannot be read
    ConfigSyntaxError
        If a descriptor does not parse
    EmptyPackageError, InvalidPackageError
        If a descriptor's content is unusable

    """
    cwd = cwd if cwd is not None else Path.cwd()
    extension = get_extension(source)

    if extension == DOCUMENT_EXTENSION:
        logger.debug(f"Loading single document {source}")
        return LoadedPackage(Package.for_document(source), cwd)

    if extension in PACKAGE_EXTENSIONS:
        descriptor_path = Path(source) if os.path.isabs(source) else cwd / source
        logger.debug(f"Loading package descriptor {descriptor_path}")
        data = kfg.load(descriptor_path, display_path=source)
        package = Package.from_mapping(data)
        logger.info(f"Package lists {len(package.sources)} source(s)")
        return LoadedPackage(package, descriptor_path.parent)

    raise UnsupportedExtensionError(extension)


def resolve_source_path(entry: str, base_dir: Path) -> Path:
    """Resolve a source entry against the base directory.

    Entries whose file name has no extension get ``.bks`` appended.
    """
    path = Path(entry) if os.path.isabs(entry) else base_dir / entry
    if not get_extension(path.name):
        path = path.with_name(f"{path.name}.{DOCUMENT_EXTENSION}")
    return path


def aggregate_sources(package: Package, base_dir: Path) -> str:
    """Read every source of the package and join them in order.

    Consecutive sources are separated by exactly one newline.

    Raises
    ------
    SourceReadError
        For the first source that cannot be read; the error names the entry
        as written, not the resolved path

    """
    contents: list[str] = []
    for entry in package.sources:
        path = resolve_source_path(entry, base_dir)
        try:
            with open(path, encoding=SOURCE_ENCODING) as f:
                contents.append(f.read())
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(entry, e) from e
        logger.debug(f"Read source {path} ({len(contents[-1])} characters)")

    return SOURCE_SEPARATOR.join(contents)
