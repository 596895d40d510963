#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for blogrender.

Configuration may live in ``.blogrender.toml``, ``.blogrender.yaml``,
``.blogrender.yml``, ``.blogrender.json`` or a ``[tool.blogrender]`` table of
``pyproject.toml``. Recognised keys::

    content_root = "blog"
    template = "template.html"
    path_prefix = "blog/"
    index_document = "index"
    default_title = "Blog Post"
    use_list_table = true

    [[social_links]]
    name = "github"
    url = "https://github.com/someone"
    icon = "github"

``BLOGRENDER_CONTENT_ROOT``, ``BLOGRENDER_TEMPLATE``,
``BLOGRENDER_PATH_PREFIX`` and ``BLOGRENDER_DEFAULT_TITLE`` override the
file values.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Mapping, Optional

import yaml

from blogrender.constants import CONFIG_FILENAMES, ENV_PREFIX
from blogrender.exceptions import ConfigurationError
from blogrender.options import RendererOptions, SocialLink, TranspilerOptions

ENV_KEYS = ("content_root", "template", "path_prefix", "default_title")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.blogrender]`` table, or an empty dict if absent."""
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    config = data.get("tool", {}).get("blogrender", {})
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.blogrender] section in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Dedicated config files win over ``pyproject.toml``, which only counts
    when it has a ``[tool.blogrender]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the search, defaults to the working directory

    Returns
    -------
    Path or None
        First configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except (ConfigurationError, tomllib.TOMLDecodeError, OSError):
                # Someone else's broken pyproject; keep searching
                pass

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML or pyproject.toml file.

    Raises
    ------
    ConfigurationError
        If the file is missing, has an unsupported extension or cannot be parsed

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))

    ext = config_path.suffix.lower()
    try:
        if config_path.name.lower() == "pyproject.toml":
            return _load_pyproject_section(config_path)
        if ext == ".toml":
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
            )
    except ConfigurationError:
        raise
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration in {config_path} must be a mapping, got {type(data).__name__}",
            config_path=str(config_path),
        )
    return data


def apply_env_overrides(config: Mapping[str, Any], environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Return a copy of ``config`` with ``BLOGRENDER_*`` environment values applied."""
    environ = os.environ if environ is None else environ
    merged = dict(config)
    for key in ENV_KEYS:
        value = environ.get(f"{ENV_PREFIX}{key.upper()}")
        if value:
            merged[key] = value
    return merged


def options_from_mapping(config: Mapping[str, Any]) -> RendererOptions:
    """Build RendererOptions from a configuration mapping.

    Raises
    ------
    ConfigurationError
        If a value has the wrong shape or a social link is invalid

    """
    defaults = RendererOptions()
    transpiler = TranspilerOptions()

    try:
        if "social_links" in config:
            links = tuple(
                SocialLink(
                    name=str(link["name"]),
                    url=str(link["url"]),
                    icon=str(link.get("icon", link["name"])),
                    new_tab=bool(link.get("new_tab", True)),
                )
                for link in config["social_links"]
            )
            transpiler = transpiler.create_updated(social_links=links)
        if "use_list_table" in config:
            transpiler = transpiler.create_updated(use_list_table=bool(config["use_list_table"]))

        return RendererOptions(
            content_root=str(config.get("content_root", defaults.content_root)),
            template_path=str(config.get("template", defaults.template_path)),
            path_prefix=str(config.get("path_prefix", defaults.path_prefix)),
            index_document=str(config.get("index_document", defaults.index_document)),
            default_title=str(config.get("default_title", defaults.default_title)),
            transpiler=transpiler,
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}", original_error=e) from e


def load_options(
    config_path: Path | str | None = None,
    start_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RendererOptions:
    """Load RendererOptions from an explicit or discovered config file plus the environment.

    Parameters
    ----------
    config_path : Path or str, optional
        Explicit configuration file. When omitted, parent directories of
        ``start_dir`` are searched.
    start_dir : Path, optional
        Where discovery starts, defaults to the working directory
    environ : Mapping[str, str], optional
        Environment to read overrides from, defaults to ``os.environ``

    Returns
    -------
    RendererOptions
        Options with defaults for anything not configured

    """
    if config_path is None:
        config_path = find_config_in_parents(start_dir)

    config: Dict[str, Any] = load_config_file(config_path) if config_path is not None else {}
    return options_from_mapping(apply_env_overrides(config, environ))
