"""blogrender - render a directory of Markdown documents as styled blog pages.

blogrender turns a Markdown document into a Tailwind-styled HTML page for a
personal blog. Documents are parsed with the tree-sitter Markdown grammars
and walked by a transpiler that knows the blog's conventions:

- front matter lives in an HTML comment at the top of the document
- the first heading becomes a header with social links
- the first paragraph after it becomes the bio block
- images take sizes and classes from an HTML comment placed before them

The Renderer facade resolves a document identifier (typically a URL path)
under a content root, guards against path traversal, and fills the page
template.

Examples
--------
Render a document from disk:

    >>> from blogrender import Renderer
    >>> html = Renderer("blog", "template.html").render("/blog/posts/hello")

Render Markdown that is already in memory:

    >>> html = Renderer("blog", "template.html").render_text("# Hi\\n", "{content}")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from blogrender.exceptions import (
    BlogRenderError,
    DocumentNotFoundError,
    FileReadError,
    InvalidPathError,
    LanguageError,
    MarkdownParseError,
)
from blogrender.lists import extract_lists
from blogrender.metadata import extract_metadata
from blogrender.options import RendererOptions, SocialLink, TranspilerOptions
from blogrender.parser import MarkdownParser
from blogrender.references import extract_link_references
from blogrender.renderer import Renderer
from blogrender.template import apply_template
from blogrender.transpiler import Transpiler, TranspileState, markdown_to_html

__all__ = [
    "__version__",
    "BlogRenderError",
    "DocumentNotFoundError",
    "FileReadError",
    "InvalidPathError",
    "LanguageError",
    "MarkdownParseError",
    "MarkdownParser",
    "Renderer",
    "RendererOptions",
    "SocialLink",
    "Transpiler",
    "TranspileState",
    "TranspilerOptions",
    "apply_template",
    "extract_link_references",
    "extract_lists",
    "extract_metadata",
    "markdown_to_html",
]
