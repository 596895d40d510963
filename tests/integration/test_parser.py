#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the tree-sitter backed Markdown parser."""

import pytest

pytest.importorskip("tree_sitter")
pytest.importorskip("tree_sitter_markdown")

from blogrender.parser import MarkdownParser  # noqa: E402


def kinds(node):
    return [child.kind for child in node.children]


def find(root, kind):
    return [node for node in root.walk() if node.kind == kind]


@pytest.fixture(scope="module")
def parser():
    return MarkdownParser()


@pytest.mark.integration
class TestBlockStructure:
    """Tests for block-level normalisation."""

    def test_sections_are_spliced(self, parser):
        """Test that headings and paragraphs are direct document children."""
        tree = parser.parse("# Hi\n\nText\n\n## Sub\n\nMore\n")

        assert tree.root.kind == "document"
        assert kinds(tree.root) == ["atx_heading", "paragraph", "atx_heading", "paragraph"]

    def test_heading_parts(self, parser):
        """Test the heading marker and content nodes."""
        tree = parser.parse("## Projects\n")
        heading = tree.root.children[0]

        marker = heading.children[0]
        content = heading.child_of_kind("heading_content")
        assert marker.kind == "atx_h2_marker"
        assert content is not None
        assert content.text(tree.source).strip() == "Projects"

    def test_paragraph_text(self, parser):
        """Test that a paragraph spans its text without the newline."""
        tree = parser.parse("Hello world\n")
        paragraph = tree.root.children[0]

        assert paragraph.text(tree.source) == "Hello world"

    def test_list_start_line(self, parser):
        """Test that a list records the zero-based line of its first item."""
        tree = parser.parse("Intro\n\n- a\n- b\n")
        (node,) = find(tree.root, "list")

        assert node.start_line == 2
        assert len(find(node, "list_item")) == 2
        assert any("list_marker" in n.kind for n in node.walk())

    def test_fenced_code_block(self, parser):
        """Test the info string and content of a fenced block."""
        tree = parser.parse("```rust\nfn main() {}\n```\n")
        (block,) = find(tree.root, "fenced_code_block")

        info = block.child_of_kind("info_string")
        content = block.child_of_kind("code_fence_content")
        assert info is not None and info.text(tree.source) == "rust"
        assert content is not None and content.text(tree.source).strip("\n") == "fn main() {}"
        assert "fenced_code_block_delimiter" not in kinds(block)

    def test_indented_code_block(self, parser):
        """Test that indented code is presented as a fenced block."""
        tree = parser.parse("Text\n\n    code line\n")
        (block,) = find(tree.root, "fenced_code_block")

        assert "code line" in block.child_of_kind("code_fence_content").text(tree.source)

    def test_block_quote(self, parser):
        """Test that quote markers are dropped and the paragraph kept."""
        tree = parser.parse("> quoted text\n")
        (quote,) = find(tree.root, "block_quote")

        assert "block_quote_marker" not in kinds(quote)
        (paragraph,) = find(quote, "paragraph")
        assert "quoted text" in paragraph.text(tree.source)

    def test_link_reference_definition(self, parser):
        """Test the parts of a reference definition."""
        tree = parser.parse('[docs]: https://d.dev "Manual"\n')
        (definition,) = find(tree.root, "link_reference_definition")

        assert definition.child_of_kind("link_label").text(tree.source) == "[docs]"
        assert definition.child_of_kind("link_destination").text(tree.source) == "https://d.dev"
        assert definition.child_of_kind("link_title").text(tree.source) == '"Manual"'


@pytest.mark.integration
class TestInlineStructure:
    """Tests for inline normalisation."""

    def test_text_between_inlines(self, parser):
        """Test that plain text is covered by text nodes."""
        tree = parser.parse("Say *hi* now\n")
        paragraph = tree.root.children[0]

        texts = [n.text(tree.source) for n in paragraph.children if n.kind == "text"]
        assert texts[0] == "Say "
        assert texts[-1] == " now"
        (emphasis,) = find(paragraph, "emphasis")
        assert emphasis.text(tree.source) == "*hi*"

    def test_punctuation_is_kept(self, parser):
        """Test that punctuation in plain text is covered by text nodes."""
        tree = parser.parse("Hello, world.\n")
        paragraph = tree.root.children[0]

        assert "".join(n.text(tree.source) for n in paragraph.children) == "Hello, world."

    def test_punctuation_in_heading(self, parser):
        """Test that heading text keeps commas and periods."""
        tree = parser.parse("## Odds, ends.\n")
        content = tree.root.children[0].child_of_kind("heading_content")

        assert "".join(n.text(tree.source) for n in content.children) == "Odds, ends."

    def test_inline_link(self, parser):
        """Test link text, destination and title."""
        tree = parser.parse('[site](https://x.dev "Home")\n')
        (link,) = find(tree.root, "link")

        assert link.child_of_kind("link_text").text(tree.source) == "site"
        assert link.child_of_kind("link_destination").text(tree.source) == "https://x.dev"
        assert link.child_of_kind("link_title").text(tree.source) == '"Home"'

    def test_reference_link(self, parser):
        """Test that a full reference link keeps its label and has no destination."""
        tree = parser.parse("[docs][d]\n\n[d]: https://d.dev\n")
        links = find(tree.root, "link")

        assert len(links) == 1
        assert links[0].child_of_kind("link_destination") is None
        assert links[0].child_of_kind("link_label").text(tree.source) == "[d]"

    def test_autolink(self, parser):
        """Test that an autolink becomes a link to itself."""
        tree = parser.parse("<https://x.dev>\n")
        (link,) = find(tree.root, "link")

        assert link.child_of_kind("link_destination").text(tree.source) == "https://x.dev"
        assert link.child_of_kind("link_text").text(tree.source) == "https://x.dev"

    def test_code_span_excludes_backticks(self, parser):
        """Test that a code span covers only its content."""
        tree = parser.parse("Use `a<b` here\n")
        (span,) = find(tree.root, "code_span")

        assert span.text(tree.source) == "a<b"

    def test_image(self, parser):
        """Test that images keep their full source text."""
        tree = parser.parse('![Me](/me.png "Portrait")\n')
        (image,) = find(tree.root, "image")

        assert image.text(tree.source) == '![Me](/me.png "Portrait")'

    def test_inline_inside_block_quote(self, parser):
        """Test that inline parsing skips continuation markers."""
        tree = parser.parse("> one **two**\n> three\n")

        assert len(find(tree.root, "strong_emphasis")) == 1
        texts = "".join(n.text(tree.source) for n in find(tree.root, "text"))
        assert "three" in texts
        assert ">" not in texts

    def test_multibyte_text(self, parser):
        """Test byte offsets on non-ASCII input."""
        tree = parser.parse("Café *naïve*\n")
        (emphasis,) = find(tree.root, "emphasis")

        assert emphasis.text(tree.source) == "*naïve*"

    def test_empty_document(self, parser):
        """Test that an empty string parses to an empty document."""
        tree = parser.parse("")

        assert tree.root.kind == "document"
        assert tree.root.children == ()
