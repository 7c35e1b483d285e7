#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/renderers/ast_json.py
"""JSON rendering of the document tree."""

from __future__ import annotations

import json

from booksource.ast.nodes import Document
from booksource.ast.serialization import ast_to_dict
from booksource.constants import JSON_INDENT
from booksource.renderers.base import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Render the document tree as indented JSON.

    Metadata values without a JSON form (dates, for instance) are written as
    their string representation.
    """

    def __init__(self, indent: int = JSON_INDENT):
        super().__init__()
        self.indent = indent

    def render_to_string(self, document: Document) -> str:
        return json.dumps(ast_to_dict(document), indent=self.indent, ensure_ascii=False, default=str)
