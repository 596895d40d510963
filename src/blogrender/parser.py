#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/parser.py
"""Markdown to syntax tree parsing.

This module wraps the tree-sitter Markdown grammars and normalises their
output into the node vocabulary documented in :mod:`blogrender.syntax`.

tree-sitter splits Markdown into two grammars. The block grammar yields the
document structure with opaque ``inline`` nodes; each of those is parsed
again with the inline grammar, restricted to the inline node's byte ranges
minus its ``block_continuation`` children so that continuation markers
(``> `` inside a quote) are skipped. The
inline grammar does not produce nodes for plain text, so text between
inline constructs is added here as ``text`` nodes.

Other normalisations:

- ``section`` wrappers are removed; headings and paragraphs become direct
  children of ``document``
- heading inline content becomes a ``heading_content`` node
- a paragraph spans its inline content, without the trailing newline
- inline, reference-style and autolinks all become ``link`` nodes
- ``code_span`` spans the code between its backticks
- ``backslash_escape`` becomes ``text`` covering the escaped character
- ``indented_code_block`` is presented as a ``fenced_code_block``

"""

from __future__ import annotations

import bisect
import logging
from typing import TYPE_CHECKING, Any, Sequence

from blogrender.constants import DEPS_MARKDOWN
from blogrender.exceptions import LanguageError, MarkdownParseError
from blogrender.syntax import SyntaxNode, SyntaxTree
from blogrender.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode
    from tree_sitter import Range

logger = logging.getLogger(__name__)

SPLICED_KINDS = frozenset({"section"})
DROPPED_KINDS = frozenset({"block_continuation", "block_quote_marker", "fenced_code_block_delimiter"})
INLINE_CONTAINER_KINDS = frozenset({"emphasis", "strong_emphasis"})
LINK_KINDS = frozenset({"inline_link", "full_reference_link", "collapsed_reference_link", "shortcut_link"})
LINK_PART_KINDS = frozenset({"link_destination", "link_title", "link_label"})

Segment = tuple[int, int]


class MarkdownParser:
    """Parse Markdown into a normalised :class:`SyntaxTree`.

    A parser instance holds only the loaded grammar handles; each call to
    :meth:`parse` creates its own tree-sitter parsers, so one instance is
    never mutated by concurrent renders. The renderer facade nevertheless
    builds a new instance per render.

    Examples
    --------
        >>> tree = MarkdownParser().parse("# Hello\\n\\nThis is **bold**.\\n")
        >>> [child.kind for child in tree.root.children]
        ['atx_heading', 'paragraph']

    """

    def __init__(self) -> None:
        self._block_language: Any = None
        self._inline_language: Any = None

    def _load_languages(self) -> None:
        if self._block_language is not None:
            return

        import tree_sitter_markdown
        from tree_sitter import Language

        try:
            self._block_language = Language(tree_sitter_markdown.language())
            self._inline_language = Language(tree_sitter_markdown.inline_language())
        except (ValueError, TypeError) as e:
            raise LanguageError(original_error=e) from e

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, markdown: str | bytes) -> SyntaxTree:
        """Parse Markdown text.

        Parameters
        ----------
        markdown : str or bytes
            Document text; bytes must be UTF-8

        Returns
        -------
        SyntaxTree
            Normalised tree and the encoded source it indexes into

        Raises
        ------
        DependencyError
            If tree-sitter or the Markdown grammar is not installed
        LanguageError
            If the grammar cannot be bound to a parser
        MarkdownParseError
            If the grammar produces no tree

        """
        from tree_sitter import Parser

        source = markdown.encode("utf-8") if isinstance(markdown, str) else markdown
        self._load_languages()

        try:
            block_parser = Parser(self._block_language)
        except (ValueError, TypeError) as e:
            raise LanguageError(original_error=e) from e

        try:
            tree = block_parser.parse(source)
        except (ValueError, TypeError, RuntimeError) as e:
            raise MarkdownParseError(original_error=e) from e
        if tree is None:
            raise MarkdownParseError()

        if tree.root_node.has_error:
            logger.debug("Markdown grammar reported errors; rendering best-effort tree")

        builder = _TreeBuilder(source, self._inline_language)
        return SyntaxTree(builder.build(tree.root_node), source)


class _TreeBuilder:
    """Convert one tree-sitter block tree (plus inline parses) to SyntaxNodes."""

    def __init__(self, source: bytes, inline_language: Any):
        self.source = source
        self.inline_language = inline_language
        self._newlines = [index for index, byte in enumerate(source) if byte == 0x0A]

    def build(self, root: TSNode) -> SyntaxNode:
        return self._make("document", root.start_byte, root.end_byte, self._block_children(root))

    def _line(self, offset: int) -> int:
        return bisect.bisect_left(self._newlines, offset)

    def _make(self, kind: str, start: int, end: int, children: Sequence[SyntaxNode] = ()) -> SyntaxNode:
        return SyntaxNode(kind, start, end, children, start_line=self._line(start))

    def _leaf(self, kind: str, node: TSNode) -> SyntaxNode:
        return self._make(kind, node.start_byte, node.end_byte)

    def _trim_start(self, start: int, end: int) -> int:
        while start < end and self.source[start : start + 1] in (b" ", b"\t"):
            start += 1
        return start

    def _trim_end(self, start: int, end: int) -> int:
        while end > start and self.source[end - 1 : end] in (b" ", b"\t", b"\r", b"\n"):
            end -= 1
        return end

    def _strip_delimiters(self, node: TSNode, opening: bytes, closing: bytes) -> Segment:
        start, end = node.start_byte, node.end_byte
        if end - start >= 2 and self.source[start : start + 1] == opening and self.source[end - 1 : end] == closing:
            return start + 1, end - 1
        return start, end

    # Block grammar

    def _block_children(self, node: TSNode) -> list[SyntaxNode]:
        children: list[SyntaxNode] = []
        for child in node.named_children:
            if child.type in SPLICED_KINDS:
                children.extend(self._block_children(child))
            elif child.type not in DROPPED_KINDS:
                children.append(self._block(child))
        return children

    def _block(self, node: TSNode) -> SyntaxNode:
        kind = node.type

        if kind == "atx_heading":
            children = []
            for child in node.named_children:
                if child.type == "inline":
                    end = self._trim_end(child.start_byte, child.end_byte)
                    start = self._trim_start(child.start_byte, end)
                    children.append(self._make("heading_content", start, end, self._inline(child)))
                elif child.type not in DROPPED_KINDS:
                    children.append(self._leaf(child.type, child))
            return self._make(kind, node.start_byte, node.end_byte, children)

        if kind == "paragraph":
            for child in node.named_children:
                if child.type == "inline":
                    end = self._trim_end(child.start_byte, child.end_byte)
                    return self._make(kind, child.start_byte, end, self._inline(child))
            return self._make(kind, node.start_byte, node.end_byte, self._block_children(node))

        if kind == "indented_code_block":
            content = self._leaf("code_fence_content", node)
            return self._make("fenced_code_block", node.start_byte, node.end_byte, [content])

        if kind == "inline":
            return self._make(kind, node.start_byte, node.end_byte, self._inline(node))

        return self._make(kind, node.start_byte, node.end_byte, self._block_children(node))

    # Inline grammar

    def _inline_ranges(self, node: TSNode) -> list[Range]:
        from tree_sitter import Range

        ranges = []
        start_byte, start_point = node.start_byte, node.start_point
        for child in node.children:
            # Newer grammars also expose punctuation tokens here; those stay in range
            if child.type != "block_continuation":
                continue
            if child.start_byte > start_byte:
                ranges.append(Range(start_point, child.start_point, start_byte, child.start_byte))
            start_byte, start_point = child.end_byte, child.end_point
        if node.end_byte > start_byte:
            ranges.append(Range(start_point, node.end_point, start_byte, node.end_byte))
        return ranges

    def _inline(self, node: TSNode) -> list[SyntaxNode]:
        from tree_sitter import Parser

        ranges = self._inline_ranges(node)
        if not ranges:
            return []

        try:
            inline_parser = Parser(self.inline_language, included_ranges=ranges)
        except (ValueError, TypeError) as e:
            raise LanguageError(original_error=e) from e

        try:
            tree = inline_parser.parse(self.source)
        except (ValueError, TypeError, RuntimeError) as e:
            raise MarkdownParseError(original_error=e) from e
        if tree is None:
            raise MarkdownParseError()

        segments = [(r.start_byte, r.end_byte) for r in ranges]
        end = self._trim_end(node.start_byte, node.end_byte)
        start = self._trim_start(node.start_byte, end)
        return self._inline_children(tree.root_node, start, end, segments)

    def _text_nodes(self, start: int, end: int, segments: list[Segment]) -> list[SyntaxNode]:
        nodes = []
        for seg_start, seg_end in segments:
            low, high = max(start, seg_start), min(end, seg_end)
            if low < high:
                nodes.append(self._make("text", low, high))
        return nodes

    def _inline_children(self, node: TSNode, start: int, end: int, segments: list[Segment]) -> list[SyntaxNode]:
        children: list[SyntaxNode] = []
        cursor = start
        for child in node.named_children:
            if child.start_byte > cursor:
                children.extend(self._text_nodes(cursor, child.start_byte, segments))
            children.extend(self._inline_node(child, segments))
            cursor = max(cursor, child.end_byte)
        if end > cursor:
            children.extend(self._text_nodes(cursor, end, segments))
        return children

    def _inline_node(self, node: TSNode, segments: list[Segment]) -> list[SyntaxNode]:
        kind = node.type

        if kind in INLINE_CONTAINER_KINDS:
            children = self._inline_children(node, node.start_byte, node.end_byte, segments)
            return [self._make(kind, node.start_byte, node.end_byte, children)]

        if kind in LINK_KINDS:
            return [self._make("link", node.start_byte, node.end_byte, self._link_parts(node))]

        if kind == "uri_autolink":
            start, end = self._strip_delimiters(node, b"<", b">")
            parts = [self._make("link_text", start, end), self._make("link_destination", start, end)]
            return [self._make("link", node.start_byte, node.end_byte, parts)]

        if kind == "code_span":
            delimiters = [child for child in node.named_children if child.type == "code_span_delimiter"]
            start, end = node.start_byte, node.end_byte
            if len(delimiters) >= 2:
                start, end = delimiters[0].end_byte, delimiters[-1].start_byte
            return [self._make(kind, start, end)]

        if kind == "backslash_escape":
            return [self._make("text", node.start_byte + 1, node.end_byte)]

        return [self._leaf(kind, node)]

    def _link_parts(self, node: TSNode) -> list[SyntaxNode]:
        parts = []
        for child in node.named_children:
            if child.type == "link_text":
                start, end = self._strip_delimiters(child, b"[", b"]")
                parts.append(self._make("link_text", start, end))
            elif child.type == "link_destination":
                start, end = self._strip_delimiters(child, b"<", b">")
                parts.append(self._make("link_destination", start, end))
            elif child.type in LINK_PART_KINDS:
                parts.append(self._leaf(child.type, child))
        return parts
