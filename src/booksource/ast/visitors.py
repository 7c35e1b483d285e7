#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/ast/visitors.py
"""Visitor base class for walking the document tree.

Renderers subclass :class:`NodeVisitor` and implement one ``visit_*`` method
per node type; :class:`booksource.ast.transforms.NodeTransformer` builds on it
to produce modified copies of a tree.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from booksource.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
)


class NodeVisitor(ABC):
    """Abstract base class for document tree visitors.

    Examples
    --------
    A visitor that collects heading levels:

        >>> class HeadingLevels(NodeVisitor):
        ...     def __init__(self):
        ...         self.levels = []
        ...     def visit_heading(self, node):
        ...         self.levels.append(node.level)
        ...     # remaining visit_* methods omitted

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit the root document node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a fenced code block."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a block quote."""

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a list."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a list item."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a thematic break."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a plain text run."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit emphasized content."""

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit strong content."""

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit underlined content."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit struck-through content."""

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit an inline code span."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a link."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an image."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a line break."""
