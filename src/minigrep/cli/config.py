#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration files for the minigrep CLI.

Defaults for every option can live in a configuration file holding two
optional tables whose keys are option field names::

    [search]
    case_insensitive = true
    max_workers = 8

    [output]
    color = false
    show_count = true

The same tables may sit under ``[tool.minigrep]`` in a pyproject.toml, or be
written as YAML or JSON. Flags given on the command line always win over the
file.
"""

import argparse
import json
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, BinaryIO, Callable, Dict, Iterator, Mapping, Optional, TypeVar

import yaml

from minigrep.options.base import CloneFrozenMixin
from minigrep.options.search import OutputOptions, SearchOptions

CONFIG_FILENAMES = [".minigrep.toml", ".minigrep.yaml", ".minigrep.yml", ".minigrep.json"]
CONFIG_ENV_VAR = "MINIGREP_CONFIG"
PYPROJECT_FILENAME = "pyproject.toml"

_OptionsT = TypeVar("_OptionsT", bound=CloneFrozenMixin)


def _parse_json(handle: BinaryIO) -> Any:
    return json.loads(handle.read().decode("utf-8"))


# Suffix -> (format name, parser, errors the parser raises for bad content)
_PARSERS: dict[str, tuple[str, Callable[[BinaryIO], Any], tuple[type[Exception], ...]]] = {
    ".toml": ("TOML", tomllib.load, (tomllib.TOMLDecodeError,)),
    ".yaml": ("YAML", yaml.safe_load, (yaml.YAMLError,)),
    ".yml": ("YAML", yaml.safe_load, (yaml.YAMLError,)),
    ".json": ("JSON", _parse_json, (json.JSONDecodeError, UnicodeDecodeError)),
}


def _parse_file(config_path: Path) -> Dict[str, Any]:
    """Parse a dedicated configuration file into a dictionary.

    Raises
    ------
    argparse.ArgumentTypeError
        If the suffix is unsupported, the file cannot be read, or its content
        is malformed or not a mapping

    """
    suffix = config_path.suffix.lower()
    if suffix not in _PARSERS:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {suffix}. Use .json, .toml, or .yaml")
    kind, parse, content_errors = _PARSERS[suffix]

    try:
        with open(config_path, "rb") as handle:
            data = parse(handle)
    except content_errors as e:
        raise argparse.ArgumentTypeError(f"Invalid {kind} in config file {config_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading {kind} config {config_path}: {e}") from e

    # An empty YAML document parses to None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError(
            f"{kind} config file {config_path} must contain an object, got {type(data).__name__}"
        )
    return data


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.minigrep]`` table of a pyproject.toml, or ``{}`` when absent.

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is not valid TOML or the section is not a table

    """
    tool_section = _parse_file(pyproject_path).get("tool", {})
    section = tool_section.get("minigrep") if isinstance(tool_section, dict) else None
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.minigrep] section in {pyproject_path} must be a table, got {type(section).__name__}"
        )
    return section


def _dedicated_config_in(directory: Path) -> Optional[Path]:
    for filename in CONFIG_FILENAMES:
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def _walk_up(start_dir: Path) -> Iterator[Path]:
    current = start_dir.resolve()
    yield current
    yield from current.parents


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file at or above ``start_dir``.

    In each directory, from ``start_dir`` (the working directory by default)
    up to the filesystem root, the dedicated files are tried in
    ``CONFIG_FILENAMES`` order and then a pyproject.toml that carries a
    ``[tool.minigrep]`` table. A pyproject.toml that fails to parse is passed
    over.

    Returns
    -------
    Path or None
        The first file found

    """
    for directory in _walk_up(start_dir if start_dir is not None else Path.cwd()):
        dedicated = _dedicated_config_in(directory)
        if dedicated is not None:
            return dedicated

        pyproject_path = directory / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError:
                continue
    return None


def discover_config_file() -> Optional[Path]:
    """Look for a configuration file above the working directory, then in the home directory."""
    return find_config_in_parents() or _dedicated_config_in(Path.home())


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a ``.toml``, ``.yaml``/``.yml``, ``.json`` or pyproject.toml configuration file.

    Parameters
    ----------
    config_path : Path or str
        File to load

    Returns
    -------
    dict
        Parsed configuration; for pyproject.toml only the ``[tool.minigrep]`` table

    Raises
    ------
    argparse.ArgumentTypeError
        If the file is missing, unsupported or malformed

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == PYPROJECT_FILENAME:
        return _load_pyproject_section(config_path)
    return _parse_file(config_path)


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``.

    Nested tables are merged key by key; any other value in ``override``
    replaces the one in ``base``.

    Examples
    --------
    >>> merge_configs({"search": {"use_regex": True}}, {"search": {"max_workers": 2}})
    {'search': {'use_regex': True, 'max_workers': 2}}

    """
    result = dict(base)
    for key, value in override.items():
        existing = result.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            result[key] = merge_configs(existing, value)
        else:
            result[key] = value
    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load the one configuration file that applies.

    ``--config`` wins over ``MINIGREP_CONFIG``, which wins over discovery.
    Returns ``{}`` when there is no file at all.

    Raises
    ------
    argparse.ArgumentTypeError
        If the selected file cannot be loaded

    """
    chosen = explicit_path or env_var_path or discover_config_file()
    if not chosen:
        return {}
    return load_config_file(chosen)


def apply_config_section(options: _OptionsT, config_section: Mapping[str, object] | None) -> _OptionsT:
    """Return ``options`` updated from one configuration table.

    Unknown keys are ignored; invalid values raise ``ValueError`` from the
    options' own validation.
    """
    if not config_section:
        return options
    if not isinstance(config_section, Mapping):
        raise ValueError(f"Configuration section must be a table, got {type(config_section).__name__}")
    return options.update_from_mapping(config_section)


def build_options(config: Mapping[str, Any]) -> tuple[SearchOptions, OutputOptions]:
    """Build search and output options from a merged configuration dictionary.

    Raises
    ------
    ValueError
        If a configured value fails option validation

    """
    search_options = apply_config_section(SearchOptions(), config.get("search"))
    output_options = apply_config_section(OutputOptions(), config.get("output"))
    return search_options, output_options
