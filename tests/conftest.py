"""Pytest configuration and shared fixtures for the blogrender test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
from pathlib import Path

import pytest

TEMPLATE_HTML = """<!DOCTYPE html>
<html>
<head><title>{title}</title><meta name="description" content="{description}"></head>
<body>
<main>{content}</main>
</body>
</html>
"""


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - need the tree-sitter grammars")


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler and level changes made by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """Provide a page template with title, description and content placeholders.

    Returns
    -------
    Path
        Path to ``template.html`` inside a temporary directory.

    """
    path = tmp_path / "template.html"
    path.write_text(TEMPLATE_HTML, encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Provide a content directory with an index page and one post.

    Returns
    -------
    Path
        Content root containing ``index.md`` and ``posts/hello.md``.

    """
    root = tmp_path / "blog"
    (root / "posts").mkdir(parents=True)
    (root / "index.md").write_text("<!-- title: Home -->\n# Jane Doe\n\nI write code.\n", encoding="utf-8")
    (root / "posts" / "hello.md").write_text(
        "<!--\ntitle: Hello\ndescription: First post\n-->\n## Hello\n\nFirst post.\n", encoding="utf-8"
    )
    return root


@pytest.fixture
def sample_post() -> str:
    """Provide a post exercising every construct the transpiler special-cases.

    Returns
    -------
    str
        Markdown document text.

    """
    return """<!--
title: Hello
description: A first post
-->
# Jane Doe

I write code.

## Projects

- first
- second
  wrapped

See [site](https://x.dev) and **bold** and `x`.

```python
print(1 < 2)
```
"""
