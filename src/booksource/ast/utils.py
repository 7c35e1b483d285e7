#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/ast/utils.py
"""Small helpers for reading information out of a document tree."""

from __future__ import annotations

from typing import Optional, Union

from booksource.ast.nodes import Code, Document, Heading, Image, LineBreak, Node, Text, get_node_children


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String placed between the text of sibling nodes

    Returns
    -------
    str
        Concatenated text content

    Examples
    --------
    >>> extract_text(Heading(level=1, content=[Text("A "), Strong(content=[Text("title")])]))
    'A title'

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(extract_text(node, joiner) for node in node_or_nodes)

    node = node_or_nodes
    if isinstance(node, (Text, Code)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text
    if isinstance(node, LineBreak):
        return " " if node.soft else "\n"
    return joiner.join(extract_text(child, joiner) for child in get_node_children(node))


def find_first_heading(document: Document) -> Optional[Heading]:
    """Return the first top-level heading of the document, if any."""
    for child in document.children:
        if isinstance(child, Heading):
            return child
    return None
