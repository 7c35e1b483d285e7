#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/ast/nodes.py
"""Node classes for the Book Source document tree.

A parsed ``.bks`` document is a tree of dataclass nodes rooted at
:class:`Document`. Every node accepts a visitor, which is how the renderers,
the serializer and the text post-filters walk the tree.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, ThematicBreak

Inline nodes:
    - Text, Emphasis, Strong, Underline, Strikethrough
    - Code, Link, Image, LineBreak

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from booksource.constants import METADATA_KEY_THEME

if TYPE_CHECKING:
    from booksource.filters.registry import FilterRegistry


class Node(ABC):
    """Base class for all document nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root node of a parsed Book Source document.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Values from the document's metadata block (title, theme, ...)

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def theme(self) -> Optional[Mapping[str, Any]]:
        """Theme mapping declared in the metadata block, if it is a mapping."""
        theme = self.metadata.get(METADATA_KEY_THEME)
        if isinstance(theme, Mapping):
            return theme
        return None

    def text_post_filter(
        self, names: Iterable[str], registry: Optional[FilterRegistry] = None
    ) -> Document:
        """Apply the named text post-filters in order.

        Parameters
        ----------
        names : iterable of str
            Filter names; repeated names run repeatedly
        registry : FilterRegistry, optional
            Registry to resolve names against (defaults to the global one)

        Returns
        -------
        Document
            A new, filtered document

        """
        from booksource.filters.pipeline import apply_post_filters

        return apply_post_filters(self, names, registry=registry)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Section heading, level 1 to 6."""

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph of inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced block of literal code.

    Parameters
    ----------
    content : str
        Code text, without the fences
    language : str or None, default = None
        Language given after the opening fence

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Quoted block containing other block nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool
        True for numbered lists
    items : list of ListItem, default = empty list
        The list entries
    start : int, default = 1
        First number of an ordered list

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List entry holding block content (paragraphs, nested lists)."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_list_item(self)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule between sections."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_thematic_break(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text run."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasized (italic) inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strongly emphasized (bold) inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strong(self)


@dataclass
class Underline(Node):
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_underline(self)


@dataclass
class Strikethrough(Node):
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_strikethrough(self)


@dataclass
class Code(Node):
    """Inline code span; its content is never touched by post-filters."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    url : str
        Link target
    content : list of Node, default = empty list
        Inline content shown as the link text
    title : str or None, default = None
        Optional tooltip title

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Inline image reference."""

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Line break inside a paragraph.

    Parameters
    ----------
    soft : bool, default = False
        True for an ordinary newline in the source, False for an explicit
        hard break (trailing backslash or two trailing spaces)

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_line_break(self)


_BLOCK_CONTAINERS = (Document, BlockQuote, ListItem)
_INLINE_CONTAINERS = (Heading, Paragraph, Emphasis, Strong, Underline, Strikethrough, Link)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        Child nodes (empty list for leaf nodes)

    """
    if isinstance(node, _BLOCK_CONTAINERS):
        return list(node.children)
    if isinstance(node, _INLINE_CONTAINERS):
        return list(node.content)
    if isinstance(node, List):
        return list(node.items)
    return []


def replace_node_children(node: Node, new_children: list[Node]) -> Node:
    """Return a copy of ``node`` with its children replaced.

    Parameters
    ----------
    node : Node
        Node whose children should be replaced
    new_children : list of Node
        Replacement children

    Returns
    -------
    Node
        New node of the same type

    Raises
    ------
    ValueError
        If ``node`` is a leaf node and ``new_children`` is not empty

    """
    if isinstance(node, _BLOCK_CONTAINERS):
        return replace(node, children=new_children, metadata=dict(node.metadata))
    if isinstance(node, _INLINE_CONTAINERS):
        return replace(node, content=new_children, metadata=dict(node.metadata))
    if isinstance(node, List):
        return replace(node, items=new_children, metadata=dict(node.metadata))
    if new_children:
        raise ValueError(f"{type(node).__name__} nodes cannot have children")
    return replace(node, metadata=dict(node.metadata))
