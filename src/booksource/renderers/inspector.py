#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/renderers/inspector.py
"""Colourised structure dump of a document, for debugging."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from rich.console import Console
from rich.pretty import Pretty

from booksource.ast.nodes import Document
from booksource.options import InspectOptions
from booksource.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)

CONSOLE_WIDTH = 120


class InspectRenderer(BaseRenderer):
    """Pretty-print the document tree with rich.

    Containers nested deeper than ``max_depth`` are abbreviated and the
    output is cut at ``max_length`` characters.
    """

    def __init__(self, options: Optional[InspectOptions] = None):
        options = options or InspectOptions()
        super().__init__(options)
        self.options: InspectOptions = options

    def render_to_string(self, document: Document) -> str:
        buffer = StringIO()
        console = Console(
            file=buffer,
            force_terminal=self.options.color,
            no_color=not self.options.color,
            color_system="standard" if self.options.color else None,
            width=CONSOLE_WIDTH,
        )
        console.print(Pretty(document, max_depth=self.options.max_depth))

        output = buffer.getvalue()
        if len(output) > self.options.max_length:
            logger.debug(f"Inspection output truncated from {len(output)} characters")
            output = output[: self.options.max_length]
        return output
