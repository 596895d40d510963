"""Command-line interface for rendering blog documents.

Renders one document through the same facade an HTTP route would use and
writes the page to stdout or a file.

Examples
--------
Render the index page:
    $ blogrender

Render a post from a specific content directory:
    $ blogrender posts/hello --content-root ./blog --template ./template.html

Write to a file with debug logging:
    $ blogrender /blog/about --out about.html --log-level DEBUG

Use environment variables for defaults:
    $ export BLOGRENDER_CONTENT_ROOT=./content
    $ blogrender posts/hello
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import load_options
from .exceptions import BlogRenderError, FileWriteError
from .logging_utils import configure_logging
from .renderer import Renderer

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="blogrender",
        description="Render a Markdown blog document to an HTML page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="",
        help="Document identifier, e.g. 'posts/hello' or '/blog/posts/hello' (default: index)",
    )
    parser.add_argument("--content-root", help="Directory containing Markdown documents")
    parser.add_argument("--template", help="HTML template with {title} and {content} placeholders")
    parser.add_argument("--out", "-o", help="Write the page to this file instead of stdout")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def write_output(html: str, out: str) -> None:
    """Write rendered HTML to ``out``, creating parent directories.

    Raises
    ------
    FileWriteError
        If the file cannot be written

    """
    output_path = Path(out)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(str(output_path), original_error=e) from e


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = load_options(parsed_args.config)
        renderer = Renderer(parsed_args.content_root, parsed_args.template, options=options)
        html = renderer.render(parsed_args.path)

        if parsed_args.out:
            write_output(html, parsed_args.out)
            logger.info("Wrote %s", parsed_args.out)
        else:
            sys.stdout.write(html)
    except BlogRenderError as e:
        print(f"Error [{e.error_type}]: {e.message}", file=sys.stderr)
        return 1

    return 0
