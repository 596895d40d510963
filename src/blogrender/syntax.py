#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/syntax.py
"""Concrete syntax tree used by the extraction passes and the transpiler.

Nodes are addressed by byte ranges into the UTF-8 encoded document. Text is
never stored on a node; it is recovered by slicing the source, which may fail
for a range that does not fall on character boundaries. Callers treat such a
failure as "no text" rather than as an error.

The tree is produced by :mod:`blogrender.parser` from the tree-sitter Markdown
grammars, but any producer that follows the node vocabulary below works,
which is how the unit tests build trees by hand.

Node kinds
----------
Block: ``document``, ``atx_heading`` (children ``atx_hN_marker`` and
``heading_content``), ``paragraph``, ``list``, ``list_item``,
``list_marker_*``, ``fenced_code_block`` (``info_string``,
``code_fence_content``), ``block_quote``, ``link_reference_definition``
(``link_label``, ``link_destination``, ``link_title``), ``html_block``,
``thematic_break``.

Inline: ``text``, ``emphasis``, ``strong_emphasis``, ``emphasis_delimiter``,
``code_span``, ``link`` (``link_text``, ``link_destination``, ``link_title``,
``link_label``), ``image``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence


@dataclass(eq=False)
class SyntaxNode:
    """A node of the concrete syntax tree.

    Parameters
    ----------
    kind : str
        Node kind discriminator (e.g. ``"paragraph"``)
    start_byte : int
        Offset of the first byte of the node in the encoded source
    end_byte : int
        Offset one past the last byte of the node
    children : sequence of SyntaxNode, default ()
        Ordered, non-overlapping child nodes
    start_line : int, default 0
        Zero-based source line on which the node starts

    """

    kind: str
    start_byte: int
    end_byte: int
    children: Sequence[SyntaxNode] = ()
    start_line: int = 0
    parent: Optional[SyntaxNode] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.children = tuple(self.children)
        for child in self.children:
            child.parent = self

    def text(self, source: bytes) -> str | None:
        """Return the node's source text, or None if the range is not valid UTF-8."""
        try:
            return source[self.start_byte : self.end_byte].decode("utf-8")
        except UnicodeDecodeError:
            return None

    def child_of_kind(self, kind: str) -> SyntaxNode | None:
        """Return the first immediate child with the given kind."""
        for child in self.children:
            if child.kind == kind:
                return child
        return None

    def walk(self) -> Iterator[SyntaxNode]:
        """Iterate over this node and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class SyntaxTree:
    """A parsed document: the root node plus the bytes it indexes into."""

    root: SyntaxNode
    source: bytes

    @property
    def text(self) -> str:
        return self.source.decode("utf-8", errors="replace")
