#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blogrender/renderer.py
"""Document rendering facade.

The Renderer turns a document identifier (the path part of a blog URL) into
a finished HTML page: it resolves the identifier to a Markdown file under the
content root, reads the document and the template, parses the Markdown, runs
the extraction passes and the transpiler, and fills the template.

This is the only surface an outer layer such as an HTTP route needs. Typed
failures from :mod:`blogrender.exceptions` propagate unchanged; mapping them
to responses is left to the caller.

"""

from __future__ import annotations

import logging
from pathlib import Path

from blogrender.constants import MARKDOWN_EXTENSION
from blogrender.exceptions import DocumentNotFoundError, FileReadError, InvalidPathError
from blogrender.lists import extract_lists
from blogrender.metadata import extract_metadata
from blogrender.options import RendererOptions
from blogrender.parser import MarkdownParser
from blogrender.references import extract_link_references
from blogrender.template import apply_template, load_template
from blogrender.transpiler import markdown_to_html
from blogrender.utils.decorators import debug_timer
from blogrender.utils.security import validate_path_within_root

logger = logging.getLogger(__name__)


class Renderer:
    """Render blog documents to HTML pages.

    Each call to :meth:`render` builds its own parser, tree and per-render
    state, so one Renderer can serve concurrent requests.

    Parameters
    ----------
    content_root : str or Path, optional
        Directory containing the Markdown documents. Defaults to
        ``options.content_root``.
    template_path : str or Path, optional
        HTML template file. Defaults to ``options.template_path``.
    options : RendererOptions, optional
        Renderer options

    Raises
    ------
    FileReadError
        If the content root or the template file does not exist

    Examples
    --------
        >>> renderer = Renderer("blog", "template.html")
        >>> html = renderer.render("/blog/posts/hello")

    """

    def __init__(
        self,
        content_root: str | Path | None = None,
        template_path: str | Path | None = None,
        options: RendererOptions | None = None,
    ):
        self.options = options or RendererOptions()
        self.content_root = Path(content_root if content_root is not None else self.options.content_root)
        self.template_path = Path(template_path if template_path is not None else self.options.template_path)

        if not self.content_root.is_dir():
            raise FileReadError(
                str(self.content_root), message=f"Blog directory not found: {self.content_root}"
            )
        if not self.template_path.is_file():
            raise FileReadError(
                str(self.template_path), message=f"Template file not found: {self.template_path}"
            )

    def resolve_markdown_path(self, path: str) -> Path:
        """Map a document identifier to a Markdown file under the content root.

        Leading slashes, the configured path prefix and trailing slashes are
        removed, an empty identifier maps to the index document, and ``.md``
        is appended.

        Parameters
        ----------
        path : str
            Document identifier, e.g. ``"/blog/posts/hello"``

        Returns
        -------
        Path
            Resolved path of an existing file inside the content root

        Raises
        ------
        InvalidPathError
            If the identifier resolves outside the content root
        DocumentNotFoundError
            If no such document exists

        """
        clean_path = path.lstrip("/")
        prefix = self.options.path_prefix
        if prefix:
            while clean_path.startswith(prefix):
                clean_path = clean_path[len(prefix) :]
        clean_path = clean_path.rstrip("/")

        file_name = f"{clean_path or self.options.index_document}{MARKDOWN_EXTENSION}"

        try:
            full_path = validate_path_within_root(self.content_root, file_name)
        except InvalidPathError:
            logger.error("Path traversal attempt detected: %r", path)
            raise

        logger.debug("Resolved markdown path: %s", full_path)

        if not full_path.is_file():
            logger.error("File not found: %s", full_path)
            raise DocumentNotFoundError(str(full_path))

        return full_path

    def render(self, path: str) -> str:
        """Render the document identified by ``path`` into the page template.

        Parameters
        ----------
        path : str
            Document identifier

        Returns
        -------
        str
            Final HTML page

        Raises
        ------
        InvalidPathError, DocumentNotFoundError, FileReadError
            If the document or template cannot be located or read
        MarkdownParseError, LanguageError, DependencyError
            If the Markdown cannot be parsed

        """
        md_path = self.resolve_markdown_path(path)
        try:
            markdown = md_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(str(md_path), original_error=e) from e

        template = load_template(self.template_path)
        return self.render_text(markdown, template)

    def render_text(self, markdown: str, template: str) -> str:
        """Render already-loaded Markdown into ``template``."""
        tree = MarkdownParser().parse(markdown)

        metadata = extract_metadata(markdown)
        link_references = extract_link_references(tree.root, tree.source)
        list_table = extract_lists(markdown)

        with debug_timer(logger, "Transpiling"):
            content_html = markdown_to_html(
                tree.root, tree.source, link_references, list_table, self.options.transpiler
            )

        return apply_template(template, content_html, metadata, self.options.default_title)
