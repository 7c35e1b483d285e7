#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for the document tree: nodes, transformer, serialization and helpers."""

import pytest

from booksource.ast import (
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
    NodeTransformer,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
    ast_to_dict,
    extract_text,
    find_first_heading,
    get_node_children,
    replace_node_children,
)


@pytest.mark.unit
class TestNodes:
    """Tests for node construction and child access."""

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_level_validated(self, level):
        with pytest.raises(ValueError, match="Heading level"):
            Heading(level=level)

    def test_defaults(self):
        assert Document().children == []
        assert Document().metadata == {}
        assert List(ordered=False).start == 1
        assert LineBreak().soft is False
        assert Image(url="a.png").alt_text == ""

    def test_metadata_not_shared(self):
        first, second = Text(content="a"), Text(content="b")
        first.metadata["k"] = "v"
        assert second.metadata == {}

    def test_get_node_children(self):
        items = [ListItem()]
        assert get_node_children(List(ordered=True, items=items)) == items
        assert get_node_children(Paragraph(content=[Text(content="x")])) == [Text(content="x")]
        assert get_node_children(BlockQuote(children=[ThematicBreak()])) == [ThematicBreak()]
        assert get_node_children(Text(content="leaf")) == []

    def test_replace_node_children(self):
        original = Strong(content=[Text(content="a")], metadata={"k": 1})
        replaced = replace_node_children(original, [Text(content="b")])
        assert replaced.content == [Text(content="b")]
        assert replaced.metadata == {"k": 1}
        assert original.content == [Text(content="a")]

    def test_replace_children_of_leaf(self):
        with pytest.raises(ValueError):
            replace_node_children(Code(content="x"), [Text(content="y")])

    def test_document_theme(self):
        assert Document(metadata={"theme": {"language": "fr"}}).theme == {"language": "fr"}
        assert Document(metadata={"theme": ["x"]}).theme is None
        assert Document().theme is None


@pytest.mark.unit
class TestNodeTransformer:
    """Tests for the base tree transformer."""

    def test_identity_transform_copies(self):
        doc = Document(
            children=[
                Heading(level=2, content=[Text(content="T")]),
                List(ordered=True, start=4, items=[ListItem(children=[Paragraph(content=[Text(content="i")])])]),
                CodeBlock(content="code", language="py"),
            ],
            metadata={"title": "x"},
        )
        result = NodeTransformer().transform(doc)
        assert result == doc
        assert result is not doc
        assert result.children[1] is not doc.children[1]

    def test_returning_none_drops_node(self):
        class DropImages(NodeTransformer):
            def visit_image(self, node):
                return None

        doc = Document(children=[Paragraph(content=[Text(content="a"), Image(url="x.png")])])
        assert DropImages().transform(doc).children[0].content == [Text(content="a")]

    def test_override_reaches_nested_text(self):
        class Shout(NodeTransformer):
            def visit_text(self, node):
                return Text(content=node.content.upper())

        doc = Document(
            children=[BlockQuote(children=[Paragraph(content=[Emphasis(content=[Text(content="deep")])])])]
        )
        result = Shout().transform(doc)
        assert extract_text(result) == "DEEP"


@pytest.mark.unit
class TestSerialization:
    """Tests for ast_to_dict."""

    def test_heading(self):
        assert ast_to_dict(Heading(level=1, content=[Text(content="Title")])) == {
            "node_type": "Heading",
            "level": 1,
            "content": [{"node_type": "Text", "content": "Title"}],
        }

    def test_metadata_only_when_present(self):
        assert ast_to_dict(Document(metadata={"title": "T"})) == {
            "node_type": "Document",
            "children": [],
            "metadata": {"title": "T"},
        }

    def test_link_image_and_breaks(self):
        paragraph = Paragraph(
            content=[
                Link(url="u", content=[Text(content="t")], title="tt"),
                LineBreak(soft=True),
                Image(url="i.png", alt_text="alt"),
            ]
        )
        assert ast_to_dict(paragraph)["content"] == [
            {"node_type": "Link", "url": "u", "title": "tt", "content": [{"node_type": "Text", "content": "t"}]},
            {"node_type": "LineBreak", "soft": True},
            {"node_type": "Image", "url": "i.png", "alt_text": "alt", "title": None},
        ]

    def test_list(self):
        result = ast_to_dict(List(ordered=True, start=2, items=[ListItem()]))
        assert result == {
            "node_type": "List",
            "ordered": True,
            "start": 2,
            "items": [{"node_type": "ListItem", "children": []}],
        }

    def test_code_block_and_rule(self):
        assert ast_to_dict(CodeBlock(content="x", language=None)) == {
            "node_type": "CodeBlock",
            "content": "x",
            "language": None,
        }
        assert ast_to_dict(ThematicBreak()) == {"node_type": "ThematicBreak"}


@pytest.mark.unit
class TestAstUtils:
    """Tests for extract_text and find_first_heading."""

    def test_extract_text_nested(self):
        heading = Heading(level=1, content=[Text(content="A "), Strong(content=[Text(content="title")])])
        assert extract_text(heading) == "A title"

    def test_extract_text_breaks_and_images(self):
        nodes = [
            Text(content="a"),
            LineBreak(soft=True),
            Text(content="b"),
            LineBreak(soft=False),
            Image(url="x", alt_text="pic"),
            Code(content="c"),
        ]
        assert extract_text(nodes) == "a b\npicc"

    def test_extract_text_joiner(self):
        assert extract_text([Text(content="a"), Text(content="b")], joiner="|") == "a|b"

    def test_find_first_heading(self):
        doc = Document(
            children=[
                Paragraph(content=[Text(content="p")]),
                Heading(level=3, content=[Text(content="first")]),
                Heading(level=1, content=[Text(content="second")]),
            ]
        )
        assert find_first_heading(doc).content == [Text(content="first")]
        assert find_first_heading(Document()) is None
