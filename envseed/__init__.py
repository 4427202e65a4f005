"""envseed: load KEY=value pairs from an env file into the environment."""
from __future__ import annotations

from envseed.environment import (EnvStore, MappingEnvironment, MemoryEnvironment,
                                 ProcessEnvironment)
from envseed.errors import EnvFileError, EnvseedError, SettingsError
from envseed.loader import (MergeReport, config, load, load_report, log_diagnostic,
                            merge, read_env_file)
from envseed.parser import parse
from envseed.settings import LoadOptions

__all__ = [
    "EnvFileError",
    "EnvStore",
    "EnvseedError",
    "LoadOptions",
    "MappingEnvironment",
    "MemoryEnvironment",
    "MergeReport",
    "ProcessEnvironment",
    "SettingsError",
    "config",
    "load",
    "load_report",
    "log_diagnostic",
    "merge",
    "parse",
    "read_env_file",
]
