"""Test utilities for the blogrender test suite.

Unit tests build syntax trees by hand so that the transpiler and the
extraction passes can be tested without the tree-sitter grammars.
"""

from blogrender.syntax import SyntaxNode


class TreeBuilder:
    """Build SyntaxNodes whose ranges are located by searching the source.

    Parameters
    ----------
    text : str
        Document text; nodes index into its UTF-8 encoding

    """

    def __init__(self, text: str):
        self.text = text
        self.source = text.encode("utf-8")

    def span(self, fragment: str, after: int = 0) -> tuple[int, int]:
        """Return the byte range of the first ``fragment`` at or after ``after``."""
        needle = fragment.encode("utf-8")
        start = self.source.index(needle, after)
        return start, start + len(needle)

    def node(self, kind: str, fragment: str, *children: SyntaxNode, after: int = 0) -> SyntaxNode:
        """Create a node covering ``fragment``."""
        start, end = self.span(fragment, after)
        line = self.source.count(b"\n", 0, start)
        return SyntaxNode(kind, start, end, children, start_line=line)

    def text_node(self, fragment: str, after: int = 0) -> SyntaxNode:
        return self.node("text", fragment, after=after)

    def document(self, *children: SyntaxNode) -> SyntaxNode:
        return SyntaxNode("document", 0, len(self.source), children)
