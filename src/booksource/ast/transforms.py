#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/ast/transforms.py
"""Tree-rewriting visitor used by the text post-filters.

:class:`NodeTransformer` returns a new tree; subclasses override only the
``visit_*`` methods for the node types they change. Returning ``None`` from a
visit method drops the node.

Examples
--------
Upper-case every text run:

    >>> class Shout(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>> loud = Shout().transform(doc)

"""

from __future__ import annotations

import copy
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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
    get_node_children,
    replace_node_children,
)
from booksource.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Base class for visitors that rebuild the tree."""

    def transform(self, node: Node) -> Node | None:
        """Transform ``node`` and return the result (``None`` removes it)."""
        return node.accept(self)

    def _transform_children(self, children: list[Any]) -> list[Any]:
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Rebuild ``node`` from its transformed children; leaves are copied."""
        children = get_node_children(node)
        if not children:
            return copy.copy(node)
        return replace_node_children(node, self._transform_children(children))

    def visit_document(self, node: Document) -> Document:
        return Document(children=self._transform_children(node.children), metadata=dict(node.metadata))

    def visit_heading(self, node: Heading) -> Heading:
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        return CodeBlock(content=node.content, language=node.language, metadata=dict(node.metadata))

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote:
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list(self, node: List) -> List:
        return List(
            ordered=node.ordered,
            items=self._transform_children(node.items),
            start=node.start,
            metadata=dict(node.metadata),
        )

    def visit_list_item(self, node: ListItem) -> ListItem:
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_thematic_break(self, node: ThematicBreak) -> ThematicBreak:
        return ThematicBreak(metadata=dict(node.metadata))

    def visit_text(self, node: Text) -> Text:
        return Text(content=node.content, metadata=dict(node.metadata))

    def visit_emphasis(self, node: Emphasis) -> Emphasis:
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strong(self, node: Strong) -> Strong:
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_underline(self, node: Underline) -> Underline:
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strikethrough(self, node: Strikethrough) -> Strikethrough:
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code(self, node: Code) -> Code:
        return Code(content=node.content, metadata=dict(node.metadata))

    def visit_link(self, node: Link) -> Link:
        return Link(
            url=node.url,
            content=self._transform_children(node.content),
            title=node.title,
            metadata=dict(node.metadata),
        )

    def visit_image(self, node: Image) -> Image:
        return Image(url=node.url, alt_text=node.alt_text, title=node.title, metadata=dict(node.metadata))

    def visit_line_break(self, node: LineBreak) -> LineBreak:
        return LineBreak(soft=node.soft, metadata=dict(node.metadata))
