"""Helpers for loading navigation build configuration from TOML/JSON sources.

``load_navigation_config`` accepts:

* None -> default NavigationConfig
* dict -> validated directly
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings

A top-level ``navigation`` table is unwrapped, so the options can live
in a shared project config file.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from navgraph.config.schema import NavigationConfig
from navgraph.errors import ConfigError

logger = logging.getLogger("navgraph.runtime.config_loader")

ConfigSource = Union[str, Path, Dict[str, Any], NavigationConfig, None]


def _from_mapping(data: Dict[str, Any]) -> NavigationConfig:
    section = data.get("navigation", data)
    if not isinstance(section, dict):
        raise ConfigError("The 'navigation' section must be a mapping/dict")
    try:
        return NavigationConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(f"Invalid navigation configuration: {exc}") from exc


def _is_config_file(path: Path) -> bool:
    """Whether a string source names an existing file.

    Inline TOML/JSON can exceed the OS file name limit; that reads as inline.
    """
    try:
        return path.is_file()
    except OSError:
        return False


def _guess_format(text: str) -> str:
    stripped = text.lstrip()
    return "json" if stripped.startswith(("{", "[")) else "toml"


def load_navigation_config(source: ConfigSource) -> NavigationConfig:
    """Load NavigationConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns NavigationConfig.default()
            * NavigationConfig: returned unchanged
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        NavigationConfig instance.

    Raises:
        ConfigError: If the source cannot be parsed or fails validation.
    """
    if source is None:
        logger.debug("No config source provided; using default NavigationConfig")
        return NavigationConfig.default()

    if isinstance(source, NavigationConfig):
        return source

    if isinstance(source, dict):
        logger.debug("Loading NavigationConfig from provided dict")
        return _from_mapping(source)

    if not isinstance(source, (str, Path)):
        raise ConfigError(f"Unsupported config source type: {type(source)!r}")

    path = Path(source)
    text: Optional[str] = None
    fmt: Optional[str] = None

    if isinstance(source, Path) or _is_config_file(path):
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        suffix = path.suffix.lower()
        if suffix in {".toml", ".tml"}:
            fmt = "toml"
        elif suffix == ".json":
            fmt = "json"
        else:
            fmt = _guess_format(text)
        logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
    else:
        text = str(source)
        fmt = _guess_format(text)
        logger.info("Loading configuration from inline %s string", fmt)

    try:
        data = json.loads(text) if fmt == "json" else tomllib.loads(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot parse {fmt} configuration: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Top-level configuration must be a mapping/dict")

    return _from_mapping(data)


__all__ = ["load_navigation_config"]
