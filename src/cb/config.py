"""Settings for the CB command line tools.

Values come from, in increasing priority:

- built-in defaults
- a JSON object in ``cb.json`` (or an explicit path)
- ``CB_PROMPT``, ``CB_LOG_LEVEL`` and ``CB_STRICT`` environment variables
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

logger = logging.getLogger("cb.config")

DEFAULT_CONFIG_FILE = "cb.json"

_ENV_KEYS = {
    "prompt": "CB_PROMPT",
    "log_level": "CB_LOG_LEVEL",
    "strict": "CB_STRICT",
}

_TRUE_VALUES = ("true", "yes", "on", "1")
_FALSE_VALUES = ("false", "no", "off", "0")


@dataclass(frozen=True)
class CBConfig:
    prompt: str = ">>"
    log_level: str = "WARNING"
    strict: bool = False


def load_config(
    path: Optional[Path] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[Path] = None,
) -> CBConfig:
    """Build a CBConfig from the config file and environment."""

    environ = os.environ if environ is None else environ
    config = CBConfig()

    file_path = _resolve_config_path(path, cwd)
    if file_path is not None:
        config = replace(config, **_load_from_file(file_path))

    overrides: Dict[str, Any] = {}
    for field_name, env_key in _ENV_KEYS.items():
        raw = environ.get(env_key)
        if raw is None:
            continue
        overrides[field_name] = raw
    if overrides:
        logger.debug("environment overrides: %s", sorted(overrides))
        config = replace(config, **_coerce(overrides, source="environment"))

    return config


def _resolve_config_path(path: Optional[Path], cwd: Optional[Path]) -> Optional[Path]:
    if path is not None:
        return Path(path)
    candidate = Path(cwd or os.getcwd()) / DEFAULT_CONFIG_FILE
    if candidate.is_file():
        return candidate
    return None


def _load_from_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    unknown = set(data) - set(_ENV_KEYS)
    if unknown:
        logger.warning("ignoring unknown config keys in %s: %s", path, ", ".join(sorted(unknown)))

    logger.debug("loaded config file %s", path)
    known = {key: value for key, value in data.items() if key in _ENV_KEYS}
    return _coerce(known, source=str(path))


def _coerce(values: Dict[str, Any], *, source: str) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for key, value in values.items():
        if key == "strict":
            result[key] = _parse_bool(value, key=key, source=source)
        elif key == "log_level":
            level = str(value).upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ConfigError(f"Unknown log level in {source}: {value!r}")
            result[key] = level
        else:
            if not isinstance(value, str):
                raise ConfigError(f"Invalid value for '{key}' in {source}: expected a string, got {value!r}")
            result[key] = value
    return result


def _parse_bool(value: Any, *, key: str, source: str) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for '{key}' in {source}: {value!r}")
