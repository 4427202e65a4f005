"""
envseed/settings.py
Load options and CLI settings.

LoadOptions is what ``load()`` consumes. Settings adds the CLI-only knobs
(logging). ``resolve_settings`` layers them, highest priority first:

  1. explicit overrides (CLI flags)
  2. ENVSEED_* environment variables
  3. envseed.yaml (or the file given with --config)
  4. built-in defaults

Usage:
    from envseed.settings import resolve_settings
    settings = resolve_settings(config_path="envseed.yaml")
    load(settings.options)
"""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import yaml

from envseed.errors import SettingsError

logger = logging.getLogger(__name__)

DEFAULT_ENV_PATH = ".env"
DEFAULT_ENCODING = "utf8"
DEFAULT_CONFIG_PATH = "envseed.yaml"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# setting name → (expected type, ENVSEED_* variable)
_FIELDS = {
    "path": (str, "ENVSEED_PATH"),
    "encoding": (str, "ENVSEED_ENCODING"),
    "silent": (bool, "ENVSEED_SILENT"),
    "log_level": (str, "ENVSEED_LOG_LEVEL"),
    "structured_logs": (bool, "ENVSEED_STRUCTURED_LOGS"),
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class LoadOptions:
    """Options for a single ``load()`` call."""

    path: str = DEFAULT_ENV_PATH
    encoding: str = DEFAULT_ENCODING
    silent: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LoadOptions":
        """Build options from a plain dict like ``{"path": "test/.env"}``.

        Missing keys take defaults; unknown keys are ignored.
        """
        unknown = set(data) - {"path", "encoding", "silent"}
        if unknown:
            logger.debug("Ignoring unknown load options: %s", ", ".join(sorted(unknown)))
        return cls(
            path=os.fspath(data.get("path") or DEFAULT_ENV_PATH),
            encoding=data.get("encoding") or DEFAULT_ENCODING,
            silent=bool(data.get("silent", False)),
        )


@dataclass(frozen=True)
class Settings:
    options: LoadOptions = field(default_factory=LoadOptions)
    log_level: str = "WARNING"
    structured_logs: bool = False


def validate_settings(data: Mapping[str, Any]) -> list[str]:
    """Check a settings dict. Returns a list of problems (empty = valid)."""
    errors: list[str] = []

    for key, value in data.items():
        if key not in _FIELDS:
            errors.append(f"Unknown setting '{key}'. "
                          f"Valid: {', '.join(sorted(_FIELDS))}")
            continue
        expected = _FIELDS[key][0]
        if not isinstance(value, expected):
            errors.append(f"'{key}' must be a {expected.__name__}, "
                          f"got {type(value).__name__}")

    level = data.get("log_level")
    if isinstance(level, str) and level.upper() not in VALID_LOG_LEVELS:
        errors.append(f"Unknown log_level '{level}'. "
                      f"Valid: {', '.join(sorted(VALID_LOG_LEVELS))}")

    encoding = data.get("encoding")
    if isinstance(encoding, str):
        try:
            codecs.lookup(encoding)
        except LookupError:
            errors.append(f"Unknown encoding '{encoding}'")

    path = data.get("path")
    if isinstance(path, str) and not path.strip():
        errors.append("'path' must not be empty")

    return errors


def read_settings_file(path: str) -> dict[str, Any]:
    """Load and validate a YAML settings file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SettingsError([f"Cannot read settings file: {e}"], source=path) from e
    except yaml.YAMLError as e:
        raise SettingsError([f"YAML parse error: {e}"], source=path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(["Settings file must contain a mapping"], source=path)

    problems = validate_settings(data)
    if problems:
        raise SettingsError(problems, source=path)
    return data


def settings_from_env(environ: Mapping[str, str]) -> dict[str, Any]:
    """Collect settings from ENVSEED_* variables."""
    data: dict[str, Any] = {}
    problems: list[str] = []

    for key, (expected, var) in _FIELDS.items():
        raw = environ.get(var)
        if raw is None or raw == "":
            continue
        if expected is bool:
            flag = raw.strip().lower()
            if flag in _TRUE:
                data[key] = True
            elif flag in _FALSE:
                data[key] = False
            else:
                problems.append(f"{var} must be a boolean, got '{raw}'")
        else:
            data[key] = raw

    problems.extend(validate_settings(data))
    if problems:
        raise SettingsError(problems, source="environment")
    return data


def resolve_settings(config_path: Optional[str] = None,
                     overrides: Optional[Mapping[str, Any]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Merge defaults, settings file, ENVSEED_* variables and overrides.

    An explicit ``config_path`` must exist; the default ``envseed.yaml`` is
    only read when present. ``None`` values in ``overrides`` are ignored so
    unset CLI flags fall through to the lower layers.
    """
    if environ is None:
        environ = os.environ

    merged: dict[str, Any] = {}

    if config_path is not None:
        merged.update(read_settings_file(config_path))
    elif os.path.exists(DEFAULT_CONFIG_PATH):
        logger.debug("Using settings from %s", DEFAULT_CONFIG_PATH)
        merged.update(read_settings_file(DEFAULT_CONFIG_PATH))

    merged.update(settings_from_env(environ))

    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
    problems = validate_settings(explicit)
    if problems:
        raise SettingsError(problems, source="command line")
    merged.update(explicit)

    load_keys = ("path", "encoding", "silent")
    return Settings(
        options=LoadOptions.from_mapping({k: merged[k] for k in load_keys if k in merged}),
        log_level=merged.get("log_level", "WARNING").upper(),
        structured_logs=merged.get("structured_logs", False),
    )
