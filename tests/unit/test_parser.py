#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_parser.py
"""Unit tests for the Book Source markup parser.

Tests cover:
- Metadata blocks and the metadata parser callback
- Block constructs (headings, paragraphs, quotes, lists, code, rules)
- Inline constructs and escapes
- Error reporting for malformed metadata

"""

import pytest

from booksource.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    Underline,
)
from booksource.exceptions import ContentError, ParsingError
from booksource.parser import BookSourceParser, parse


@pytest.mark.unit
class TestMetadataBlock:
    """Tests for the leading metadata block."""

    def test_metadata_parsed_with_kfg(self):
        doc = parse("---\ntitle: My Book\nauthor: Jane\n---\n# Hello")
        assert doc.metadata == {"title": "My Book", "author": "Jane"}
        assert isinstance(doc.children[0], Heading)

    def test_no_metadata_block(self):
        doc = parse("# Hello")
        assert doc.metadata == {}

    def test_empty_metadata_block(self):
        doc = parse("---\n---\nText")
        assert doc.metadata == {}
        assert doc.children == [Paragraph(content=[Text(content="Text")])]

    def test_custom_metadata_parser_receives_block_text(self):
        seen = []

        def fake_parser(text):
            seen.append(text)
            return {"raw": text}

        doc = BookSourceParser(metadata_parser=fake_parser).parse("---\na: 1\nb: 2\n---\nBody")
        assert seen == ["a: 1\nb: 2"]
        assert doc.metadata == {"raw": "a: 1\nb: 2"}

    def test_theme_property_exposes_mapping(self):
        doc = parse("---\ntheme:\n  palette:\n    primary: red\n---\n")
        assert doc.theme == {"palette": {"primary": "red"}}

    def test_theme_property_ignores_non_mapping(self):
        doc = parse("---\ntheme: dark\n---\n")
        assert doc.theme is None

    def test_unterminated_metadata_block(self):
        with pytest.raises(ParsingError, match="Unterminated"):
            parse("---\ntitle: x\n# no closing fence")

    def test_invalid_metadata_is_content_error(self):
        with pytest.raises(ParsingError) as exc_info:
            parse("---\ntitle: [unclosed\n---\nBody")
        assert isinstance(exc_info.value, ContentError)
        assert exc_info.value.original_error is not None

    def test_non_mapping_metadata_rejected(self):
        with pytest.raises(ParsingError, match="mapping"):
            parse("---\n- a\n- b\n---\nBody")

    def test_rule_later_in_document_is_not_metadata(self):
        doc = parse("Intro\n\n---\n\nOutro")
        assert doc.metadata == {}
        assert isinstance(doc.children[1], ThematicBreak)


@pytest.mark.unit
class TestBlocks:
    """Tests for block-level constructs."""

    def test_heading_levels(self):
        doc = parse("# One\n## Two\n###### Six")
        assert [h.level for h in doc.children] == [1, 2, 6]
        assert doc.children[1].content == [Text(content="Two")]

    def test_hash_without_space_is_text(self):
        doc = parse("#hashtag")
        assert isinstance(doc.children[0], Paragraph)

    def test_paragraphs_split_by_blank_lines(self):
        doc = parse("First\n\nSecond")
        assert len(doc.children) == 2
        assert all(isinstance(p, Paragraph) for p in doc.children)

    def test_soft_line_break_between_lines(self):
        doc = parse("line one\nline two")
        assert doc.children[0].content == [
            Text(content="line one"),
            LineBreak(soft=True),
            Text(content="line two"),
        ]

    def test_hard_line_break_with_backslash(self):
        doc = parse("line one\\\nline two")
        assert doc.children[0].content[1] == LineBreak(soft=False)
        assert doc.children[0].content[0] == Text(content="line one")

    def test_hard_line_break_with_trailing_spaces(self):
        doc = parse("line one  \nline two")
        assert doc.children[0].content[1] == LineBreak(soft=False)

    def test_heading_ends_paragraph(self):
        doc = parse("text\n# Heading")
        assert doc.children[0] == Paragraph(content=[Text(content="text")])
        assert isinstance(doc.children[1], Heading)

    def test_fenced_code_block_with_language(self):
        doc = parse("```python\ndef f():\n    return 1\n```")
        block = doc.children[0]
        assert isinstance(block, CodeBlock)
        assert block.language == "python"
        assert block.content == "def f():\n    return 1"

    def test_tilde_fence_without_language(self):
        doc = parse("~~~\n*not emphasis*\n~~~")
        assert doc.children[0] == CodeBlock(content="*not emphasis*", language=None)

    def test_unclosed_fence_runs_to_end(self):
        doc = parse("```\ncode\nmore")
        assert doc.children[0].content == "code\nmore"

    def test_block_quote_contains_blocks(self):
        doc = parse("> # Quoted heading\n> quoted text")
        quote = doc.children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Heading)
        assert quote.children[1] == Paragraph(content=[Text(content="quoted text")])

    @pytest.mark.parametrize("rule", ["---", "***", "___", "- - -"])
    def test_thematic_breaks(self, rule):
        doc = parse(f"above\n\n{rule}\n\nbelow")
        assert isinstance(doc.children[1], ThematicBreak)

    def test_unordered_list(self):
        doc = parse("- a\n* b\n+ c")
        lst = doc.children[0]
        assert isinstance(lst, List)
        assert not lst.ordered
        assert [item.children[0].content[0].content for item in lst.items] == ["a", "b", "c"]

    def test_ordered_list_start(self):
        doc = parse("3. three\n4. four")
        lst = doc.children[0]
        assert lst.ordered
        assert lst.start == 3
        assert len(lst.items) == 2

    def test_nested_list(self):
        doc = parse("- parent\n  - child\n  - child two\n- sibling")
        lst = doc.children[0]
        assert len(lst.items) == 2
        nested = lst.items[0].children[1]
        assert isinstance(nested, List)
        assert len(nested.items) == 2

    def test_list_kind_change_starts_new_list(self):
        doc = parse("- bullet\n1. number")
        assert [lst.ordered for lst in doc.children] == [False, True]

    def test_list_continuation_line(self):
        doc = parse("- first line\n  continued")
        paragraph = doc.children[0].items[0].children[0]
        assert paragraph.content == [
            Text(content="first line"),
            LineBreak(soft=True),
            Text(content="continued"),
        ]

    def test_blank_line_between_items_keeps_list(self):
        doc = parse("- a\n\n- b")
        assert len(doc.children) == 1
        assert len(doc.children[0].items) == 2

    def test_crlf_input(self):
        doc = parse("# Title\r\n\r\nBody\r\n")
        assert len(doc.children) == 2


@pytest.mark.unit
class TestInline:
    """Tests for inline constructs."""

    def _inline(self, text):
        return parse(text).children[0].content

    def test_emphasis_and_strong(self):
        assert self._inline("*em* and **strong**") == [
            Emphasis(content=[Text(content="em")]),
            Text(content=" and "),
            Strong(content=[Text(content="strong")]),
        ]

    def test_underscore_emphasis(self):
        assert self._inline("_word_") == [Emphasis(content=[Text(content="word")])]

    def test_snake_case_is_not_emphasis(self):
        assert self._inline("snake_case_name") == [Text(content="snake_case_name")]

    def test_strong_inside_emphasis(self):
        result = self._inline("*a **b** c*")
        assert result == [
            Emphasis(
                content=[
                    Text(content="a "),
                    Strong(content=[Text(content="b")]),
                    Text(content=" c"),
                ]
            )
        ]

    def test_underline_and_strikethrough(self):
        assert self._inline("__under__ ~~gone~~") == [
            Underline(content=[Text(content="under")]),
            Text(content=" "),
            Strikethrough(content=[Text(content="gone")]),
        ]

    def test_code_span_is_literal(self):
        assert self._inline("`*not* [a](b)`") == [Code(content="*not* [a](b)")]

    def test_double_backtick_code_span(self):
        assert self._inline("`` a`b ``") == [Code(content="a`b")]

    def test_link_with_title(self):
        link = self._inline('[the *site*](https://example.com "Example")')[0]
        assert isinstance(link, Link)
        assert link.url == "https://example.com"
        assert link.title == "Example"
        assert link.content == [Text(content="the "), Emphasis(content=[Text(content="site")])]

    def test_image(self):
        assert self._inline("![alt text](img.png)") == [Image(url="img.png", alt_text="alt text", title=None)]

    def test_escapes_are_merged_into_text(self):
        assert self._inline(r"\*not emphasis\*") == [Text(content="*not emphasis*")]

    def test_unmatched_markers_stay_text(self):
        assert self._inline("2 * 3 = 6") == [Text(content="2 * 3 = 6")]


@pytest.mark.unit
def test_sample_document_structure(sample_document):
    doc = parse(sample_document)
    assert doc.metadata["title"] == "Sample"
    assert [type(child).__name__ for child in doc.children] == [
        "Heading",
        "Paragraph",
        "BlockQuote",
        "List",
        "List",
        "CodeBlock",
        "ThematicBreak",
        "Paragraph",
    ]
