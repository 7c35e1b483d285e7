#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/ast/serialization.py
"""Plain-dictionary form of the document tree.

The JSON and KFG output formats are both produced from :func:`ast_to_dict`,
which turns every node into a dictionary tagged with ``node_type`` and holding
only lists, dictionaries, strings, numbers, booleans and ``None``.

Examples
--------
    >>> from booksource.ast.nodes import Heading, Text
    >>> ast_to_dict(Heading(level=1, content=[Text(content="Title")]))
    {'node_type': 'Heading', 'level': 1, 'content': [{'node_type': 'Text', 'content': 'Title'}]}

"""

from __future__ import annotations

from typing import Any, Callable

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
)


def _with_metadata(result: dict[str, Any], node: Node) -> dict[str, Any]:
    if node.metadata:
        result["metadata"] = dict(node.metadata)
    return result


def _serialize_children_node(node: Node, node_type: str) -> dict[str, Any]:
    children = node.children  # type: ignore[attr-defined]
    result = {"node_type": node_type, "children": [ast_to_dict(child) for child in children]}
    return _with_metadata(result, node)


def _serialize_inline_content_node(node: Node, node_type: str) -> dict[str, Any]:
    content = node.content  # type: ignore[attr-defined]
    result = {"node_type": node_type, "content": [ast_to_dict(child) for child in content]}
    return _with_metadata(result, node)


def _serialize_text_content_node(node: Node, node_type: str) -> dict[str, Any]:
    return _with_metadata({"node_type": node_type, "content": node.content}, node)  # type: ignore[attr-defined]


def _serialize_heading(node: Heading) -> dict[str, Any]:
    result = {
        "node_type": "Heading",
        "level": node.level,
        "content": [ast_to_dict(child) for child in node.content],
    }
    return _with_metadata(result, node)


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    return _with_metadata({"node_type": "CodeBlock", "content": node.content, "language": node.language}, node)


def _serialize_list(node: List) -> dict[str, Any]:
    result = {
        "node_type": "List",
        "ordered": node.ordered,
        "start": node.start,
        "items": [ast_to_dict(item) for item in node.items],
    }
    return _with_metadata(result, node)


def _serialize_link(node: Link) -> dict[str, Any]:
    result = {
        "node_type": "Link",
        "url": node.url,
        "title": node.title,
        "content": [ast_to_dict(child) for child in node.content],
    }
    return _with_metadata(result, node)


def _serialize_image(node: Image) -> dict[str, Any]:
    return _with_metadata(
        {"node_type": "Image", "url": node.url, "alt_text": node.alt_text, "title": node.title}, node
    )


def _serialize_line_break(node: LineBreak) -> dict[str, Any]:
    return _with_metadata({"node_type": "LineBreak", "soft": node.soft}, node)


def _serialize_thematic_break(node: ThematicBreak) -> dict[str, Any]:
    return _with_metadata({"node_type": "ThematicBreak"}, node)


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Document: lambda n: _serialize_children_node(n, "Document"),
    BlockQuote: lambda n: _serialize_children_node(n, "BlockQuote"),
    ListItem: lambda n: _serialize_children_node(n, "ListItem"),
    Paragraph: lambda n: _serialize_inline_content_node(n, "Paragraph"),
    Emphasis: lambda n: _serialize_inline_content_node(n, "Emphasis"),
    Strong: lambda n: _serialize_inline_content_node(n, "Strong"),
    Underline: lambda n: _serialize_inline_content_node(n, "Underline"),
    Strikethrough: lambda n: _serialize_inline_content_node(n, "Strikethrough"),
    Text: lambda n: _serialize_text_content_node(n, "Text"),
    Code: lambda n: _serialize_text_content_node(n, "Code"),
    Heading: _serialize_heading,
    CodeBlock: _serialize_code_block,
    List: _serialize_list,
    Link: _serialize_link,
    Image: _serialize_image,
    LineBreak: _serialize_line_break,
    ThematicBreak: _serialize_thematic_break,
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and its subtree) to a dictionary.

    Parameters
    ----------
    node : Node
        The node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type is not part of the document model

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")
