#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/renderers/base.py
"""Base classes shared by the document renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from booksource.ast.nodes import Document, Node


class BaseRenderer(ABC):
    """Abstract base class for renderers that turn a document into text.

    Parameters
    ----------
    options : Any, optional
        Format-specific rendering options

    """

    def __init__(self, options: Any = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, document: Document) -> str:
        """Render the document and return the resulting text."""


class InlineContentMixin:
    """Mixin for visitor renderers that accumulate output in ``_output``.

    ``_render_inline_content`` renders a list of inline nodes into a string by
    temporarily swapping out the output buffer.
    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result
