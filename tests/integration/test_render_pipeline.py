#  Copyright (c) 2025 Tom Villani, Ph.D.
"""End-to-end rendering through the real parser."""

import pytest

pytest.importorskip("tree_sitter")
pytest.importorskip("tree_sitter_markdown")

from blogrender import Renderer  # noqa: E402
from blogrender.cli import main  # noqa: E402

H1_CLASS = "text-2xl text-gruvbox-yellow font-normal mt-8 mb-6 relative"


@pytest.fixture
def post_renderer(content_root, template_file, sample_post):
    (content_root / "posts" / "sample.md").write_text(sample_post, encoding="utf-8")
    return Renderer(content_root, template_file)


@pytest.mark.integration
class TestRenderPipeline:
    """Tests for rendering documents from disk."""

    def test_sample_post(self, post_renderer):
        """Test every special case of a typical post."""
        html = post_renderer.render("/blog/posts/sample")

        assert "<title>Hello</title>" in html
        assert 'content="A first post"' in html
        assert f'<h1 class="{H1_CLASS}">Jane Doe</h1>' in html
        assert '<p class="cursor">I write code.</p>' in html
        assert '<h2 class="text-xl text-gruvbox-yellow font-normal mt-8 mb-6 relative">Projects</h2>' in html
        assert '<ul class="pl-6">\n<li>first</li>\n<li>second wrapped</li>\n</ul>\n' in html
        assert '<a href="https://x.dev" title="" class="text-gruvbox-blue hover:text-gruvbox-aqua">site</a>' in html
        assert "bold</strong>" in html
        assert 'rounded font-mono text-sm">x</code>' in html
        assert '<code class="language-python">print(1 &lt; 2)</code>' in html

    def test_list_paragraphs_are_not_repeated(self, post_renderer):
        """Test that list items appear only inside the list."""
        html = post_renderer.render("posts/sample")

        assert '<p class="my-4">first' not in html

    def test_reference_links_resolve(self, content_root, template_file):
        """Test that reference-style links use their definitions."""
        (content_root / "refs.md").write_text(
            'Read the [docs][manual] or [Manual].\n\n[manual]: https://d.dev "Docs"\n', encoding="utf-8"
        )

        html = Renderer(content_root, template_file).render("refs")

        assert html.count('<a href="https://d.dev" title="Docs"') == 2
        assert "[manual]:" not in html

    def test_image_attribute_comment(self, content_root, template_file):
        """Test that an attribute comment applies to the following image."""
        (content_root / "gallery.md").write_text(
            '# Me\n\nBio.\n\n<!-- preset="banner" height="200" -->\n![Sky](/sky.png "Dusk")\n', encoding="utf-8"
        )

        html = Renderer(content_root, template_file).render("gallery")

        assert '<img src="/sky.png" alt="Sky" title="Dusk" class="w-full h-64 object-cover" height="200">' in html

    def test_inline_markup_and_punctuation(self, post_renderer):
        """Test that punctuation survives around links and strong emphasis."""
        html = post_renderer.render_text("See [site](https://x.dev) and **bold**.\n", "{content}")

        assert html == (
            '<p class="my-4">See '
            '<a href="https://x.dev" title="" class="text-gruvbox-blue hover:text-gruvbox-aqua">site</a>'
            ' and <strong class="font-bold">bold</strong>.</p>\n'
        )

    def test_loose_list_keeps_every_item(self, post_renderer):
        """Test that a list separated by blank lines renders all of its items."""
        html = post_renderer.render_text("- a\n\n- b\n\n- c\n", "{content}")

        assert html == '<ul class="pl-6">\n<li>a</li>\n<li>b</li>\n<li>c</li>\n</ul>\n'

    def test_quoted_bio_has_no_markers(self, post_renderer):
        """Test that a bio paragraph inside a quote drops the continuation markers."""
        html = post_renderer.render_text("# Me\n\n> one\n> two\n", "{content}")

        assert '<p class="cursor">one\ntwo</p>' in html

    def test_index_page(self, content_root, template_file):
        """Test the index document and its header block."""
        html = Renderer(content_root, template_file).render("/")

        assert "<title>Home</title>" in html
        assert f'<h1 class="{H1_CLASS}">Jane Doe</h1>' in html
        assert '<p class="cursor">I write code.</p>' in html

    def test_cli_render(self, content_root, template_file, capsys):
        """Test the CLI against the real parser."""
        code = main(["posts/hello", "--content-root", str(content_root), "--template", str(template_file)])

        assert code == 0
        assert "<title>Hello</title>" in capsys.readouterr().out
