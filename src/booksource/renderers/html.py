#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/renderers/html.py
"""HTML rendering of Book Source documents.

The renderer walks the document tree and produces either a complete HTML page
(doctype, head with title and embedded stylesheets, body) or, in fragment
mode, just the rendered content.

Examples
--------
    >>> from booksource.parser import parse
    >>> from booksource.options import HtmlRendererOptions
    >>> html = HtmlRenderer(options=HtmlRendererOptions(standalone=False)).render_to_string(parse("*Hi*"))
    >>> html
    '<p><em>Hi</em></p>\\n'

"""

from __future__ import annotations

import logging
from typing import Optional

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
from booksource.ast.utils import extract_text, find_first_heading
from booksource.ast.visitors import NodeVisitor
from booksource.constants import CODE_CSS_SELECTOR, METADATA_KEY_TITLE
from booksource.options import HtmlRendererOptions
from booksource.renderers.base import BaseRenderer, InlineContentMixin
from booksource.theme import Theme
from booksource.utils import escape_html, is_url_scheme_dangerous, slugify

logger = logging.getLogger(__name__)

_CODE_CLASS = CODE_CSS_SELECTOR.lstrip(".")


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render a document tree to HTML.

    Parameters
    ----------
    theme : Theme or None, default = None
        Theme providing CSS variables, the page language and labels
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    """

    def __init__(self, theme: Optional[Theme] = None, options: Optional[HtmlRendererOptions] = None):
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.theme = theme or Theme()
        self._output: list[str] = []
        self._seen_ids: set[str] = set()

    def render_to_string(self, document: Document) -> str:
        """Render a document to an HTML string."""
        self._output = []
        self._seen_ids = set()

        document.accept(self)
        content = "".join(self._output)

        if self.options.standalone:
            return self._wrap_in_document(document, content)
        return content

    def _document_title(self, document: Document) -> str:
        title = document.metadata.get(METADATA_KEY_TITLE)
        if isinstance(title, (str, int, float)) and str(title).strip():
            return str(title)
        heading = find_first_heading(document)
        if heading is not None:
            text = extract_text(heading.content).strip()
            if text:
                return text
        return self.theme.label("untitled")

    def _wrap_in_document(self, document: Document, content: str) -> str:
        """Wrap rendered content in a complete HTML page."""
        styles = [
            self.theme.to_css(),
            self.options.standalone_css,
            self.options.core_css,
            self.options.code_css,
        ]
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(self.theme.language)}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(self._document_title(document), quote=False)}</title>",
            "<style>",
            "\n".join(style.strip("\n") for style in styles if style.strip()),
            "</style>",
            "</head>",
            "<body>",
            '<main class="bks-document">',
            content.rstrip("\n"),
            "</main>",
            "</body>",
            "</html>",
        ]
        return "\n".join(parts) + "\n"

    @staticmethod
    def _safe_url(url: str) -> str:
        if is_url_scheme_dangerous(url):
            logger.warning(f"Dropping URL with unsafe scheme: {url[:50]}")
            return "#"
        return url

    def visit_document(self, node: Document) -> None:
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        content = self._render_inline_content(node.content)
        heading_id = slugify(extract_text(node.content), seen_slugs=self._seen_ids, max_length=50)
        self._output.append(f'<h{node.level} id="{heading_id}">{content}</h{node.level}>\n')

    def visit_paragraph(self, node: Paragraph) -> None:
        self._output.append(f"<p>{self._render_inline_content(node.content)}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a code block, highlighted when a highlighter knows the language."""
        highlighted = None
        if self.options.code_highlighter is not None:
            highlighted = self.options.code_highlighter(node.content, node.language)

        body = highlighted if highlighted is not None else escape_html(node.content, quote=False)
        body = body.rstrip("\n")
        class_attr = f' class="language-{escape_html(node.language)}"' if node.language else ""
        self._output.append(f'<pre class="{_CODE_CLASS}"><code{class_attr}>{body}</code></pre>\n')

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._output.append("<blockquote>\n")
        for child in node.children:
            child.accept(self)
        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start != 1 else ""
        self._output.append(f"<{tag}{start_attr}>\n")
        for item in node.items:
            item.accept(self)
        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a list item; a leading paragraph is rendered without ``<p>``."""
        self._output.append("<li>")
        children = list(node.children)
        if children and isinstance(children[0], Paragraph):
            self._output.append(self._render_inline_content(children[0].content))
            children = children[1:]
            if children:
                self._output.append("\n")
        for child in children:
            child.accept(self)
        self._output.append("</li>\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self._output.append("<hr>\n")

    def visit_text(self, node: Text) -> None:
        self._output.append(escape_html(node.content, quote=False))

    def visit_emphasis(self, node: Emphasis) -> None:
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_strong(self, node: Strong) -> None:
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_underline(self, node: Underline) -> None:
        self._output.append(f"<u>{self._render_inline_content(node.content)}</u>")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self._output.append(f"<del>{self._render_inline_content(node.content)}</del>")

    def visit_code(self, node: Code) -> None:
        self._output.append(f"<code>{escape_html(node.content, quote=False)}</code>")

    def visit_link(self, node: Link) -> None:
        href = escape_html(self._safe_url(node.url))
        title_attr = f' title="{escape_html(node.title)}"' if node.title else ""
        content = self._render_inline_content(node.content)
        self._output.append(f'<a href="{href}"{title_attr}>{content}</a>')

    def visit_image(self, node: Image) -> None:
        src = escape_html(self._safe_url(node.url))
        title_attr = f' title="{escape_html(node.title)}"' if node.title else ""
        self._output.append(f'<img src="{src}" alt="{escape_html(node.alt_text)}"{title_attr}>')

    def visit_line_break(self, node: LineBreak) -> None:
        self._output.append("\n" if node.soft else "<br>\n")
