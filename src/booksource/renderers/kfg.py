#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/renderers/kfg.py
"""KFG rendering of the document tree."""

from __future__ import annotations

from booksource import kfg
from booksource.ast.nodes import Document
from booksource.ast.serialization import ast_to_dict
from booksource.renderers.base import BaseRenderer


class KfgRenderer(BaseRenderer):
    """Render the document tree in the KFG configuration language."""

    def render_to_string(self, document: Document) -> str:
        return kfg.stringify(ast_to_dict(document))
