#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the wordown CLI.

Config files hold a flat table whose keys are option field names of
``WordownParserOptions``, ``DocxRendererOptions`` or ``JsonRendererOptions``,
plus ``target_format``. For example, ``.wordown.toml``::

    target_format = "docx"
    template_path = "templates/report.docx"
    missing_style_mode = "error"
    unterminated_block_mode = "error"

The same table may live under ``[tool.wordown]`` in ``pyproject.toml``.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from wordown.options import DocxRendererOptions, JsonRendererOptions, WordownParserOptions

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WORDOWN_CONFIG"
DEDICATED_CONFIG_FILENAMES = [".wordown.toml", ".wordown.yaml", ".wordown.yml", ".wordown.json"]
CONFIG_FILENAMES = DEDICATED_CONFIG_FILENAMES + ["pyproject.toml"]
EXTRA_CONFIG_KEYS = frozenset({"target_format"})


def known_config_keys() -> set[str]:
    """Return every key a config file may set."""
    return (
        WordownParserOptions.field_names()
        | DocxRendererOptions.field_names()
        | JsonRendererOptions.field_names()
        | EXTRA_CONFIG_KEYS
    )


def _load_pyproject_wordown_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.wordown] section from a pyproject.toml file.

    Returns
    -------
    dict
        The section, or an empty dict if the file has none

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get("wordown", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.wordown] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for ``.wordown.toml``, ``.wordown.yaml``,
    ``.wordown.yml``, ``.wordown.json`` and finally a ``pyproject.toml`` with a
    ``[tool.wordown]`` section. The first match wins.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        Path to the first config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_wordown_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has an unsupported format

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    ext = config_path.suffix.lower()
    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_wordown_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except argparse.ArgumentTypeError:
        raise
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise argparse.ArgumentTypeError(f"Invalid config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a table at root level, got {type(config).__name__}"
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Environment variable config path (``WORDOWN_CONFIG``)
    3. Config file discovered from the working directory upward

    Unknown keys are logged and dropped.

    Returns
    -------
    dict
        Configuration mapping, empty if no config file applies

    Raises
    ------
    argparse.ArgumentTypeError
        If the selected config file cannot be loaded

    """
    if explicit_path:
        config_path: Optional[Path] = Path(explicit_path)
    elif env_var_path:
        config_path = Path(env_var_path)
    else:
        config_path = find_config_in_parents()

    if config_path is None:
        return {}

    logger.debug(f"Loading configuration from {config_path}")
    config = load_config_file(config_path)

    known = known_config_keys()
    for key in sorted(set(config) - known):
        logger.warning(f"Ignoring unknown config key {key!r} in {config_path}")
    return {key: value for key, value in config.items() if key in known}
