"""Exception types raised or reported by envseed."""
from __future__ import annotations

import os


class EnvseedError(Exception):
    """Base class for envseed errors."""


class EnvFileError(EnvseedError):
    """Reading, parsing or merging one env file failed.

    ``load()`` never raises this; it hands it to the diagnostic reporter.
    """

    def __init__(self, path: str | os.PathLike, cause: BaseException):
        self.path = os.fspath(path)
        self.cause = cause
        self.__cause__ = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"Could not load env file {self.path}: {detail}")


class SettingsError(EnvseedError):
    """The envseed settings (YAML file or ENVSEED_* variables) are invalid."""

    def __init__(self, problems: list[str], source: str = ""):
        self.problems = list(problems)
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Invalid settings{where}: " + "; ".join(self.problems))
