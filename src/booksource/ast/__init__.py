#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/ast/__init__.py
"""Document tree for parsed Book Source markup."""

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
from booksource.ast.serialization import ast_to_dict
from booksource.ast.transforms import NodeTransformer
from booksource.ast.utils import extract_text, find_first_heading
from booksource.ast.visitors import NodeVisitor

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeTransformer",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Text",
    "ThematicBreak",
    "Underline",
    "ast_to_dict",
    "extract_text",
    "find_first_heading",
    "get_node_children",
    "replace_node_children",
]
