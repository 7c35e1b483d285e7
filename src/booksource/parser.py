#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/parser.py
"""Book Source markup parser.

Turns ``.bks`` markup into a :class:`~booksource.ast.nodes.Document`. The
parser works line by line, buffering inline content into paragraphs until a
block construct or a blank line ends it.

Supported syntax
----------------
- Metadata block: a ``---`` first line, KFG text, and a closing ``---`` line
- Headings: ``#`` to ``######`` followed by a space
- Fenced code blocks: ```` ``` ```` or ``~~~`` with an optional language
- Block quotes: lines starting with ``>``
- Lists: ``-``, ``*``, ``+`` (unordered) or ``1.``/``1)`` (ordered), nested by indentation
- Thematic breaks: three or more ``-``, ``*`` or ``_``
- Inline: ``**strong**``, ``*emphasis*`` or ``_emphasis_``, ``__underline__``,
  ``~~strikethrough~~``, `` `code` ``, ``[text](url "title")``,
  ``![alt](url "title")`` and backslash escapes
- Hard line breaks: a trailing backslash or two trailing spaces

"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Mapping, Optional

from booksource import kfg
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
from booksource.constants import METADATA_FENCE
from booksource.exceptions import ContentError, ParsingError

logger = logging.getLogger(__name__)

MetadataParser = Callable[[str], Any]

# Block patterns
HEADING_PATTERN = re.compile(r"^(#{1,6})[ \t]+(.+?)\s*$")
THEMATIC_BREAK_PATTERN = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")
FENCE_OPEN_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})[ \t]*([^\s`]*)[ \t]*$")
BLOCKQUOTE_PATTERN = re.compile(r"^ {0,3}>[ ]?(.*)$")
LIST_ITEM_PATTERN = re.compile(r"^([ \t]*)([-*+]|\d{1,9}[.)])[ \t]+(.*)$")

# Inline patterns
ESCAPE_PATTERN = re.compile(r"\\([\\`*_{}\[\]()#+\-.!~>|])")
CODE_PATTERN = re.compile(r"(`+)(.+?)(?<!`)\1(?!`)")
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(\s*([^\s)]+)(?:\s+\"([^\"]*)\")?\s*\)")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(\s*([^\s)]+)(?:\s+\"([^\"]*)\")?\s*\)")
STRONG_PATTERN = re.compile(r"\*\*(?!\s)(.+?)(?<![\s\\])\*\*")
UNDERLINE_PATTERN = re.compile(r"__(?!\s)(.+?)(?<![\s\\])__")
STRIKETHROUGH_PATTERN = re.compile(r"~~(?!\s)(.+?)(?<![\s\\])~~")
EMPHASIS_PATTERN = re.compile(r"\*(?![\s*])(.+?)(?<![\s\\*])\*(?!\*)")
UNDERSCORE_EMPHASIS_PATTERN = re.compile(r"(?<![\w_])_(?![\s_])(.+?)(?<![\s\\_])_(?![\w_])")

# Earliest match wins; on a tie the first entry wins
_INLINE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("escape", ESCAPE_PATTERN),
    ("code", CODE_PATTERN),
    ("image", IMAGE_PATTERN),
    ("link", LINK_PATTERN),
    ("strong", STRONG_PATTERN),
    ("underline", UNDERLINE_PATTERN),
    ("strikethrough", STRIKETHROUGH_PATTERN),
    ("emphasis", EMPHASIS_PATTERN),
    ("emphasis", UNDERSCORE_EMPHASIS_PATTERN),
)

_CONTAINER_TYPES: dict[str, type] = {
    "strong": Strong,
    "underline": Underline,
    "strikethrough": Strikethrough,
    "emphasis": Emphasis,
}


class BookSourceParser:
    """Parser for Book Source markup.

    Parameters
    ----------
    metadata_parser : callable, optional
        Function turning the text of the metadata block into a mapping.
        Defaults to :func:`booksource.kfg.parse`.

    Examples
    --------
    >>> doc = BookSourceParser().parse("---\\ntitle: Hi\\n---\\n# Hello")
    >>> doc.metadata["title"]
    'Hi'

    """

    def __init__(self, metadata_parser: Optional[MetadataParser] = None):
        self.metadata_parser = metadata_parser or kfg.parse

    def parse(self, text: str) -> Document:
        """Parse markup text into a document.

        Raises
        ------
        ParsingError
            If the metadata block is malformed or the markup cannot be parsed

        """
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        metadata, body_start = self._parse_metadata(lines)

        try:
            children = self._process_lines(lines[body_start:])
        except RecursionError as e:
            raise ParsingError("Document nesting is too deep to parse", original_error=e) from e

        logger.debug(f"Parsed {len(children)} top-level block(s), {len(metadata)} metadata key(s)")
        return Document(children=children, metadata=metadata)

    def _parse_metadata(self, lines: list[str]) -> tuple[dict[str, Any], int]:
        """Extract the leading metadata block.

        Returns the metadata mapping and the index of the first body line.
        """
        if not lines or lines[0].rstrip() != METADATA_FENCE:
            return {}, 0

        for end, line in enumerate(lines[1:], start=1):
            if line.rstrip() == METADATA_FENCE:
                break
        else:
            raise ParsingError("Unterminated metadata block", line=1)

        block = "\n".join(lines[1:end])
        try:
            metadata = self.metadata_parser(block)
        except ContentError as e:
            raise ParsingError(f"Invalid metadata block: {e.message}", line=2, original_error=e) from e

        if metadata is None:
            return {}, end + 1
        if not isinstance(metadata, Mapping):
            raise ParsingError(
                f"Metadata block must be a mapping, got {type(metadata).__name__}",
                line=2,
            )
        return dict(metadata), end + 1

    def _flush_inline_buffer(self, inline_buffer: list[Node], result: list[Node]) -> None:
        if inline_buffer:
            result.append(Paragraph(content=list(inline_buffer)))
            inline_buffer.clear()

    def _process_lines(self, lines: list[str]) -> list[Node]:
        """Turn body lines into block nodes."""
        result: list[Node] = []
        inline_buffer: list[Node] = []
        hard_break = False
        i = 0

        while i < len(lines):
            line = lines[i]

            if not line.strip():
                self._flush_inline_buffer(inline_buffer, result)
                i += 1
                continue

            block, next_i = self._try_parse_block(lines, i)
            if block is not None:
                self._flush_inline_buffer(inline_buffer, result)
                result.append(block)
                i = next_i
                continue

            if inline_buffer:
                inline_buffer.append(LineBreak(soft=not hard_break))

            content, hard_break = self._split_hard_break(line.lstrip())
            inline_buffer.extend(self._process_inline(content))
            i += 1

        self._flush_inline_buffer(inline_buffer, result)
        return result

    def _try_parse_block(self, lines: list[str], i: int) -> tuple[Optional[Node], int]:
        """Try each block construct at line ``i``; return the node and the next index."""
        line = lines[i]

        heading_match = HEADING_PATTERN.match(line)
        if heading_match:
            level = len(heading_match.group(1))
            return Heading(level=level, content=self._process_inline(heading_match.group(2))), i + 1

        fence_match = FENCE_OPEN_PATTERN.match(line)
        if fence_match:
            return self._parse_code_block(lines, i, fence_match)

        if THEMATIC_BREAK_PATTERN.match(line):
            return ThematicBreak(), i + 1

        if BLOCKQUOTE_PATTERN.match(line):
            return self._parse_blockquote(lines, i)

        if LIST_ITEM_PATTERN.match(line):
            return self._parse_list(lines, i)

        return None, i

    @staticmethod
    def _split_hard_break(line: str) -> tuple[str, bool]:
        """Strip a trailing hard-break marker from a paragraph line."""
        if line.endswith("\\") and not line.endswith("\\\\"):
            return line[:-1].rstrip(), True
        if line.endswith("  "):
            return line.rstrip(), True
        return line.rstrip(), False

    def _parse_code_block(self, lines: list[str], start_idx: int, fence_match: re.Match[str]) -> tuple[CodeBlock, int]:
        """Collect a fenced code block; an unclosed fence runs to the end of input."""
        fence = fence_match.group(1)
        language = fence_match.group(2) or None
        fence_char = fence[0]

        code_lines: list[str] = []
        i = start_idx + 1
        while i < len(lines):
            stripped = lines[i].strip()
            if stripped and set(stripped) == {fence_char} and len(stripped) >= len(fence):
                i += 1
                break
            code_lines.append(lines[i])
            i += 1
        else:
            logger.debug(f"Code block opened on body line {start_idx + 1} is not closed")

        return CodeBlock(content="\n".join(code_lines), language=language), i

    def _parse_blockquote(self, lines: list[str], start_idx: int) -> tuple[BlockQuote, int]:
        quote_lines: list[str] = []
        i = start_idx
        while i < len(lines):
            match = BLOCKQUOTE_PATTERN.match(lines[i])
            if not match:
                break
            quote_lines.append(match.group(1))
            i += 1
        return BlockQuote(children=self._process_lines(quote_lines)), i

    def _parse_list(self, lines: list[str], start_idx: int) -> tuple[List, int]:
        """Parse a list and any lists nested under its items.

        Items at the same indentation with the same kind of marker belong to the
        list. A more deeply indented item starts a nested list under the
        previous item; a more deeply indented plain line continues the previous
        item's paragraph.
        """
        first_match = LIST_ITEM_PATTERN.match(lines[start_idx])
        assert first_match is not None
        base_indent = _indent_width(first_match.group(1))
        ordered = first_match.group(2)[0].isdigit()
        start = int(first_match.group(2)[:-1]) if ordered else 1

        items: list[ListItem] = []
        i = start_idx

        while i < len(lines):
            line = lines[i]

            if not line.strip():
                next_i = _next_nonblank(lines, i)
                next_match = LIST_ITEM_PATTERN.match(lines[next_i]) if next_i < len(lines) else None
                if next_match and _indent_width(next_match.group(1)) >= base_indent:
                    i = next_i
                    continue
                break

            match = LIST_ITEM_PATTERN.match(line)
            if match:
                indent = _indent_width(match.group(1))
                if indent < base_indent:
                    break
                if indent > base_indent and items:
                    nested, i = self._parse_list(lines, i)
                    items[-1].children.append(nested)
                    continue
                if match.group(2)[0].isdigit() != ordered:
                    break
                items.append(ListItem(children=[Paragraph(content=self._process_inline(match.group(3).strip()))]))
                i += 1
                continue

            if _indent_width(line[: len(line) - len(line.lstrip())]) > base_indent and items:
                last = items[-1].children[-1]
                if isinstance(last, Paragraph):
                    last.content.append(LineBreak(soft=True))
                    last.content.extend(self._process_inline(line.strip()))
                    i += 1
                    continue
            break

        return List(ordered=ordered, items=items, start=start), i

    def _process_inline(self, text: str) -> list[Node]:
        """Process inline formatting in ``text``.

        The earliest matching construct is converted and the text before and
        after it is processed recursively.
        """
        if not text:
            return []

        earliest_match: Optional[re.Match[str]] = None
        earliest_type = ""
        for pattern_type, pattern in _INLINE_PATTERNS:
            match = pattern.search(text)
            if match and (earliest_match is None or match.start() < earliest_match.start()):
                earliest_match = match
                earliest_type = pattern_type

        if earliest_match is None:
            return [Text(content=text)]

        result: list[Node] = []
        before = text[: earliest_match.start()]
        if before:
            result.append(Text(content=before))

        result.append(self._handle_inline_match(earliest_type, earliest_match))
        result.extend(self._process_inline(text[earliest_match.end():]))
        return _merge_adjacent_text(result)

    def _handle_inline_match(self, match_type: str, match: re.Match[str]) -> Node:
        if match_type == "escape":
            return Text(content=match.group(1))
        if match_type == "code":
            content = match.group(2)
            if len(content) > 2 and content.startswith(" ") and content.endswith(" "):
                content = content[1:-1]
            return Code(content=content)
        if match_type == "image":
            return Image(url=match.group(2), alt_text=match.group(1), title=match.group(3))
        if match_type == "link":
            return Link(url=match.group(2), content=self._process_inline(match.group(1)), title=match.group(3))
        return _CONTAINER_TYPES[match_type](content=self._process_inline(match.group(1)))


def _indent_width(whitespace: str) -> int:
    return len(whitespace.expandtabs(4))


def _next_nonblank(lines: list[str], i: int) -> int:
    while i < len(lines) and not lines[i].strip():
        i += 1
    return i


def _merge_adjacent_text(nodes: list[Node]) -> list[Node]:
    """Join neighbouring Text nodes produced by escapes into single runs."""
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(content=merged[-1].content + node.content)
        else:
            merged.append(node)
    return merged


def parse(text: str, metadata_parser: Optional[MetadataParser] = None) -> Document:
    """Parse Book Source markup into a document.

    Parameters
    ----------
    text : str
        Markup text (usually the aggregated content of all sources)
    metadata_parser : callable, optional
        Parser for the metadata block; defaults to :func:`booksource.kfg.parse`

    Returns
    -------
    Document
        The parsed document

    """
    return BookSourceParser(metadata_parser=metadata_parser).parse(text)
