#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/renderers/__init__.py
"""Renderers turning a document tree into output text."""

from booksource.renderers.ast_json import JsonRenderer
from booksource.renderers.base import BaseRenderer
from booksource.renderers.html import HtmlRenderer
from booksource.renderers.inspector import InspectRenderer
from booksource.renderers.kfg import KfgRenderer

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "InspectRenderer",
    "JsonRenderer",
    "KfgRenderer",
]
