#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and structured (TOML/YAML/JSON) loading.

Besides the native ``name: value`` line format, option values can be kept
in a ``.tidyconf.toml``, ``.tidyconf.yaml``/``.yml`` or ``.tidyconf.json``
file, or in a ``[tool.tidyconf]`` table of ``pyproject.toml``. Keys are
option names (underscores may stand in for dashes); every value is turned
into option text and run through the same parsers as the native format.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

from tidyconf.config import TidyConfig
from tidyconf.consistency import adjust_config
from tidyconf.constants import (
    DEFAULT_CONFIG_FILE_ENCODING,
    MAPPING_CONFIG_FILENAMES,
    NATIVE_CONFIG_FILENAME,
    PYPROJECT_SECTION,
    OptionId,
)
from tidyconf.exceptions import ConfigFileError, ConfigFormatError
from tidyconf.loader import parse_config_option
from tidyconf.parsers import QUOTES
from tidyconf.picklists import DOCTYPE_PICKS, resolve_pick
from tidyconf.registry import lookup_option

logger = logging.getLogger(__name__)

STRUCTURED_SUFFIXES = (".toml", ".yaml", ".yml", ".json")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.tidyconf]`` table from a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict if the file has none

    Raises
    ------
    ConfigFormatError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFormatError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigFileError(f"Error reading pyproject.toml {pyproject_path}: {e}", str(pyproject_path), e) from e

    section = data.get("tool", {}).get(PYPROJECT_SECTION)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigFormatError(
            f"[tool.{PYPROJECT_SECTION}] section in {pyproject_path} must be a table, got {type(section).__name__}",
            str(pyproject_path),
        )
    return section


def _candidates_in(directory: Path) -> list[Path]:
    return [directory / name for name in [*MAPPING_CONFIG_FILENAMES, NATIVE_CONFIG_FILENAME]]


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root. In each directory the dedicated files are checked in
    priority order (``.tidyconf.toml``, ``.tidyconf.yaml``,
    ``.tidyconf.yml``, ``.tidyconf.json``, ``.tidyrc``), then a
    ``pyproject.toml`` that has a ``[tool.tidyconf]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for config_path in _candidates_in(current):
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigFileError:
                logger.debug("Skipping unreadable %s during discovery", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches the working directory and its parents first, then the user's
    home directory (dedicated files only).
    """
    found = find_config_in_parents()
    if found:
        return found

    for config_path in _candidates_in(Path.home()):
        if config_path.is_file():
            return config_path
    return None


def get_config_search_paths() -> list[Path]:
    """List representative paths in discovery order, for display."""
    cwd = Path.cwd()
    paths = [*_candidates_in(cwd), cwd / "pyproject.toml"]
    paths.extend(_candidates_in(Path.home()))
    return paths


def is_structured_config(config_path: Union[str, Path]) -> bool:
    """Return True for TOML, YAML, JSON and pyproject.toml config files."""
    path = Path(config_path)
    return path.name.lower() == "pyproject.toml" or path.suffix.lower() in STRUCTURED_SUFFIXES


def load_config_mapping(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load option settings from a TOML, YAML, JSON or pyproject.toml file.

    Raises
    ------
    ConfigFileError
        If the file does not exist or cannot be read
    ConfigFormatError
        If the content cannot be decoded or is not a mapping

    """
    config_path = Path(config_path)
    if not config_path.is_file():
        raise ConfigFileError(f"Configuration file does not exist: {config_path}", str(config_path))

    if config_path.name.lower() == "pyproject.toml":
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                data: Any = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigFormatError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigFormatError(
            f"Invalid {ext.lstrip('.')} in config file {config_path}: {e}", str(config_path), e
        ) from e
    except OSError as e:
        raise ConfigFileError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFormatError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}", str(config_path)
        )
    return data


def option_text(value: Any) -> str:
    """Convert a structured config value to the text an option parser reads.

    Examples
    --------
    >>> option_text(True)
    'yes'
    >>> option_text(["foo", "bar"])
    'foo, bar'

    """
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (list, tuple)):
        return ", ".join(option_text(item) for item in value)
    if isinstance(value, dict):
        raise TypeError("nested tables are not option values")
    return str(value)


def _doctype_text(text: str) -> str:
    stripped = text.strip()
    if not stripped or stripped[0] in QUOTES or resolve_pick(DOCTYPE_PICKS, stripped) is not None:
        return text
    return f'"{stripped}"'


def apply_config_mapping(config: TidyConfig, mapping: Mapping[str, Any]) -> int:
    """Set options from a mapping of option names to values.

    Each entry goes through ``parse_config_option``; bad entries are
    reported and skipped like bad lines of a native file. A null value is a
    missing argument. A ``doctype`` that is not a doctype keyword is taken
    as a formal public identifier. The consistency pass runs afterwards.

    Returns
    -------
    int
        1 if any diagnostics were recorded, otherwise 0

    """
    errors_before = config.option_errors
    for key, value in mapping.items():
        name = str(key).replace("_", "-")
        text: Optional[str] = None
        if value is not None:
            try:
                text = option_text(value)
            except TypeError:
                config.diagnostics.report_bad_argument(name)
                continue
            option = lookup_option(name)
            if option is not None and option.id == OptionId.DOCTYPE:
                text = _doctype_text(text)
        parse_config_option(config, name, text)

    adjust_config(config)
    return 1 if config.option_errors > errors_before else 0


def load_config(
    config_path: Union[str, Path],
    config: Optional[TidyConfig] = None,
    encoding: str = DEFAULT_CONFIG_FILE_ENCODING,
) -> TidyConfig:
    """Load any supported configuration file into ``config`` (or a new one).

    Structured files are applied with ``apply_config_mapping``; anything
    else is read as the native line format in ``encoding``.
    """
    config = config if config is not None else TidyConfig()
    if is_structured_config(config_path):
        apply_config_mapping(config, load_config_mapping(config_path))
    else:
        config.parse_file(config_path, encoding)
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None,
    env_var_path: Optional[str] = None,
    encoding: str = DEFAULT_CONFIG_FILE_ENCODING,
) -> tuple[TidyConfig, Optional[Path]]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path
    2. Environment variable config path (TIDYCONF_CONFIG)
    3. Auto-discovered config file

    Returns
    -------
    tuple
        The loaded configuration and the path it came from (None when
        nothing was found and defaults are in effect)

    """
    for candidate in (explicit_path, env_var_path):
        if candidate:
            return load_config(candidate, encoding=encoding), Path(candidate)

    discovered = discover_config_file()
    if discovered:
        return load_config(discovered, encoding=encoding), discovered

    return TidyConfig(), None
