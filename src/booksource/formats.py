#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/formats.py
"""Dispatch from output format names to renderers.

Each :class:`~booksource.constants.OutputFormat` maps to one
:class:`OutputRenderer`. The set is fixed; :func:`parse_output_format` rejects
anything else before a conversion starts.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Mapping

from booksource.ast.nodes import Document
from booksource.constants import OutputFormat
from booksource.context import RenderContext
from booksource.exceptions import UnsupportedFormatError
from booksource.options import HtmlRendererOptions
from booksource.renderers.ast_json import JsonRenderer
from booksource.renderers.css import resolve_stylesheets
from booksource.renderers.highlight import highlight_code
from booksource.renderers.html import HtmlRenderer
from booksource.renderers.inspector import InspectRenderer
from booksource.renderers.kfg import KfgRenderer

logger = logging.getLogger(__name__)


class OutputRenderer(ABC):
    """Produce the final output text for one format."""

    @abstractmethod
    def render(self, document: Document, context: RenderContext) -> str:
        """Render ``document`` using the theme and settings in ``context``."""


class HtmlOutput(OutputRenderer):
    """Standalone HTML page or HTML fragment.

    Stylesheets named by the package are read here, so other formats never
    touch CSS files.
    """

    def render(self, document: Document, context: RenderContext) -> str:
        stylesheets = resolve_stylesheets(context.package.css)
        options = HtmlRendererOptions(
            standalone=context.standalone,
            standalone_css=stylesheets.standalone,
            core_css=stylesheets.core,
            code_css=stylesheets.code,
            code_highlighter=highlight_code,
        )
        return HtmlRenderer(theme=context.theme, options=options).render_to_string(document)


class JsonOutput(OutputRenderer):
    def render(self, document: Document, context: RenderContext) -> str:
        return JsonRenderer().render_to_string(document)


class KfgOutput(OutputRenderer):
    def render(self, document: Document, context: RenderContext) -> str:
        return KfgRenderer().render_to_string(document)


class InspectOutput(OutputRenderer):
    def render(self, document: Document, context: RenderContext) -> str:
        return InspectRenderer().render_to_string(document)


RENDERERS: Mapping[OutputFormat, OutputRenderer] = MappingProxyType(
    {
        OutputFormat.HTML: HtmlOutput(),
        OutputFormat.JSON: JsonOutput(),
        OutputFormat.KFG: KfgOutput(),
        OutputFormat.INSPECT: InspectOutput(),
    }
)


def list_formats() -> list[str]:
    """Names of the available output formats."""
    return [fmt.value for fmt in RENDERERS]


def parse_output_format(name: str) -> OutputFormat:
    """Resolve a format name, ignoring case.

    Raises
    ------
    UnsupportedFormatError
        If no renderer is registered under the lower-cased name

    """
    normalized = name.lower()
    try:
        return OutputFormat(normalized)
    except ValueError:
        raise UnsupportedFormatError(normalized) from None


def get_renderer(output_format: OutputFormat) -> OutputRenderer:
    return RENDERERS[output_format]
