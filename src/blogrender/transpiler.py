#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/transpiler.py
"""Syntax tree to HTML transpilation.

This module provides the Transpiler class, a recursive visitor that
dispatches on node kind and writes Tailwind-styled HTML for the blog theme.
A handful of kinds are special-cased:

- the first level-1 heading becomes a header block with social icons
- the first paragraph after that heading becomes the "bio" block
- lists take their items from the line-scanned list table
- images read extra attributes from a comment placed right before them

Any other kind falls through to a default rule that emits the node's own
source text. Nodes whose text cannot be decoded contribute nothing, so a
single bad node never fails a render.

Per-render flags live in a TranspileState that is created for each
``transpile`` call and threaded through every visit method.

"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

from blogrender.constants import (
    BIO_PARAGRAPH_CLASS,
    BIO_RULE_HTML,
    BLOCKQUOTE_CLASS,
    CODE_BLOCK_PRE_CLASS,
    CODE_SPAN_CLASS,
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_HEADING_SIZE,
    EMPHASIS_CLASS,
    HEADER_CONTAINER_CLASS,
    HEADER_LINKS_CLASS,
    HEADING_CLASS_TEMPLATE,
    HEADING_SIZES,
    LINK_CLASS,
    LIST_CLASS,
    LIST_MARKER_FRAGMENT,
    LIST_NODE_KINDS,
    PARAGRAPH_CLASS,
    SOCIAL_ICON_SVGS,
    STRONG_CLASS,
)
from blogrender.images import render_image
from blogrender.lists import ListTable
from blogrender.options import TranspilerOptions
from blogrender.references import LinkReferenceTable, strip_label, strip_title
from blogrender.syntax import SyntaxNode
from blogrender.utils.html_utils import escape_html

logger = logging.getLogger(__name__)


@dataclass
class TranspileState:
    """Mutable flags for a single render.

    Attributes
    ----------
    is_first_heading : bool
        True until the first level-1 heading has been rendered as the header block
    is_first_paragraph : bool
        True until the bio paragraph following that heading has been rendered
    current_list_context : str or None
        Key of the list being rendered; paragraphs are suppressed while set

    """

    is_first_heading: bool = True
    is_first_paragraph: bool = True
    current_list_context: str | None = None

    @contextmanager
    def list_context(self, key: str) -> Iterator[None]:
        previous = self.current_list_context
        self.current_list_context = key
        try:
            yield
        finally:
            self.current_list_context = previous


Visit = Callable[[SyntaxNode, TranspileState, list[str]], None]


def is_list_node(node: SyntaxNode) -> bool:
    return node.kind in LIST_NODE_KINDS or LIST_MARKER_FRAGMENT in node.kind


class Transpiler:
    """Render a syntax tree to an HTML fragment.

    Parameters
    ----------
    source : str or bytes
        The document the tree was parsed from
    link_references : LinkReferenceTable, optional
        Reference definitions used to resolve reference-style links
    list_table : ListTable, optional
        Line-scanned list items keyed by the list's first line
    options : TranspilerOptions, optional
        Header links and list behaviour

    Examples
    --------
        >>> tree = MarkdownParser().parse("# Title\\n\\nAbout me.\\n")
        >>> html = Transpiler(tree.source).transpile(tree.root)

    """

    def __init__(
        self,
        source: str | bytes,
        link_references: LinkReferenceTable | None = None,
        list_table: ListTable | None = None,
        options: TranspilerOptions | None = None,
    ):
        self.source = source.encode("utf-8") if isinstance(source, str) else source
        self.link_references = link_references or {}
        self.list_table = list_table or {}
        self.options = options or TranspilerOptions()
        self._handlers: dict[str, Visit] = {
            "document": self.visit_document,
            "list": self.visit_list,
            "atx_heading": self.visit_heading,
            "paragraph": self.visit_paragraph,
            "link": self.visit_link,
            "image": self.visit_image,
            "strong_emphasis": self.visit_emphasis,
            "emphasis": self.visit_emphasis,
            "code_span": self.visit_code_span,
            "code": self.visit_code_span,
            "fenced_code_block": self.visit_fenced_code_block,
            "block_quote": self.visit_block_quote,
        }

    def transpile(self, node: SyntaxNode) -> str:
        """Render ``node`` and its descendants with fresh per-render state."""
        out: list[str] = []
        self.visit(node, TranspileState(), out)
        return "".join(out)

    def visit(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        handler = self._handlers.get(node.kind, self.visit_default)
        handler(node, state, out)

    def visit_children(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        for child in node.children:
            self.visit(child, state, out)

    def _text(self, node: SyntaxNode) -> str | None:
        return node.text(self.source)

    # Block nodes

    def visit_document(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        # Definitions are consumed by the link reference pass
        for child in node.children:
            if child.kind == "link_reference_definition":
                continue
            self.visit(child, state, out)

    def visit_list(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        tag = "ol" if self._is_ordered(node) else "ul"
        key = str(node.start_line)

        with state.list_context(key):
            items = self._list_items(node) if self.options.use_list_table else None
            if not items:
                logger.debug("No list table entry for list at line %s, rendering placeholder item", key)
                raw = self._text(node)
                items = [" ".join(raw.split()) if raw else ""]

            out.append(f'<{tag} class="{LIST_CLASS}">\n')
            for item in items:
                out.append(f"<li>{item}</li>\n")
            out.append(f"</{tag}>\n")

    def _list_items(self, node: SyntaxNode) -> list[str]:
        # A loose list is one node but several table entries, one per blank-line group
        last_line = node.start_line + self.source[node.start_byte : node.end_byte].rstrip(b"\r\n").count(b"\n")
        items: list[str] = []
        for line in sorted(int(key) for key in self.list_table if key.isdigit()):
            if node.start_line <= line <= last_line:
                items.extend(self.list_table[str(line)])
        return items

    def _is_ordered(self, node: SyntaxNode) -> bool:
        if not node.children:
            return False
        for marker in node.children[0].children:
            if LIST_MARKER_FRAGMENT in marker.kind:
                text = self._text(marker)
                return bool(text) and text.lstrip()[:1].isdigit()
        return False

    def visit_heading(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        level = 1
        for child in node.children:
            if "atx_h" in child.kind and child.kind.endswith("_marker"):
                marker = self._text(child)
                if marker is not None:
                    level = len(marker.strip())
                    break

        content = node.child_of_kind("heading_content")
        heading_text = ""
        if content is not None:
            heading_text = (self._text(content) or "").strip()

        if level == 1 and state.is_first_heading:
            state.is_first_heading = False
            out.append(self.render_profile_header(heading_text))
            return

        size = HEADING_SIZES.get(level, DEFAULT_HEADING_SIZE)
        out.append(f'<h{level} class="{HEADING_CLASS_TEMPLATE.format(size=size)}">')
        if content is not None:
            self.visit_children(content, state, out)
        out.append(f"</h{level}>\n")

    def render_profile_header(self, heading_text: str) -> str:
        """Render the first heading together with the configured social links."""
        parts = [
            f'<div class="{HEADER_CONTAINER_CLASS}">\n',
            f'<h1 class="{HEADING_CLASS_TEMPLATE.format(size=HEADING_SIZES[1])}">{heading_text}</h1>\n',
            f'<div class="{HEADER_LINKS_CLASS}">\n',
        ]
        for link in self.options.social_links:
            target = ' target="_blank"' if link.new_tab else ""
            parts.append(f'<a href="{link.url}"{target} class="{LINK_CLASS}">\n')
            parts.append(SOCIAL_ICON_SVGS[link.icon])
            parts.append("\n</a>\n")
        parts.append("</div>\n</div>\n")
        return "".join(parts)

    def visit_paragraph(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        if state.current_list_context is not None:
            return

        if state.is_first_paragraph and not state.is_first_heading:
            state.is_first_paragraph = False
            text = None if self._in_block_quote(node) else self._text(node)
            if text is None:
                text = "".join(self._text(child) or "" for child in node.children)
            out.append(f'<p class="{BIO_PARAGRAPH_CLASS}">{text}</p>\n')
            out.append(f"{BIO_RULE_HTML}\n")
            return

        out.append(f'<p class="{PARAGRAPH_CLASS}">')
        self.visit_children(node, state, out)
        out.append("</p>\n")

    @staticmethod
    def _in_block_quote(node: SyntaxNode) -> bool:
        parent = node.parent
        while parent is not None:
            if parent.kind == "block_quote":
                return True
            parent = parent.parent
        return False

    def visit_fenced_code_block(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        language = DEFAULT_CODE_LANGUAGE
        code = ""

        for child in node.children:
            text = self._text(child)
            if text is None:
                continue
            if child.kind == "info_string" and text.split():
                language = text.split()[0]
            elif child.kind == "code_fence_content":
                code = text.strip("\n")

        out.append(
            f'<pre class="{CODE_BLOCK_PRE_CLASS}"><code class="language-{language}">{escape_html(code)}</code></pre>\n'
        )

    def visit_block_quote(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        out.append(f'<blockquote class="{BLOCKQUOTE_CLASS}">')
        self.visit_children(node, state, out)
        out.append("</blockquote>\n")

    # Inline nodes

    def visit_link(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        text = url = title = ""
        label: str | None = None
        has_destination = False

        for child in node.children:
            value = self._text(child)
            if value is None:
                continue
            if child.kind == "link_text":
                text = value
            elif child.kind == "link_destination":
                url = value
                has_destination = True
            elif child.kind == "link_title":
                title = strip_title(value)
            elif child.kind == "link_label":
                label = strip_label(value)

        if not has_destination:
            reference = self.link_references.get((label or text).lower())
            if reference is None:
                out.append(self._text(node) or "")
                return
            url, title = reference.destination, reference.title

        out.append(f'<a href="{url}" title="{title}" class="{LINK_CLASS}">{text}</a>')

    def visit_image(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        raw = self._text(node)
        if raw is None:
            return
        preceding = self.source[: node.start_byte].decode("utf-8", errors="replace")
        out.append(render_image(raw, preceding))

    def visit_emphasis(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        if node.kind == "strong_emphasis":
            tag, css_class = "strong", STRONG_CLASS
        else:
            tag, css_class = "em", EMPHASIS_CLASS

        out.append(f'<{tag} class="{css_class}">')
        for child in node.children:
            if child.kind != "emphasis_delimiter":
                self.visit(child, state, out)
        out.append(f"</{tag}>")

    def visit_code_span(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        # Author-controlled content, emitted without escaping
        text = self._text(node)
        if text is not None:
            out.append(f'<code class="{CODE_SPAN_CLASS}">{text}</code>')

    def visit_default(self, node: SyntaxNode, state: TranspileState, out: list[str]) -> None:
        if is_list_node(node):
            return
        text = self._text(node)
        if text is not None:
            out.append(text)
            return
        self.visit_children(node, state, out)


def markdown_to_html(
    root: SyntaxNode,
    source: str | bytes,
    link_references: LinkReferenceTable | None = None,
    list_table: ListTable | None = None,
    options: TranspilerOptions | None = None,
) -> str:
    """Transpile a syntax tree to an HTML fragment.

    Parameters
    ----------
    root : SyntaxNode
        Root of the tree, normally the ``document`` node
    source : str or bytes
        The document text the tree indexes into
    link_references : LinkReferenceTable, optional
        Output of :func:`blogrender.references.extract_link_references`
    list_table : ListTable, optional
        Output of :func:`blogrender.lists.extract_lists`
    options : TranspilerOptions, optional
        Transpiler options

    Returns
    -------
    str
        HTML fragment

    """
    return Transpiler(source, link_references, list_table, options).transpile(root)
