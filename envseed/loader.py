"""
envseed/loader.py
Reads an env file, parses it and merges the pairs into an environment store.

Keys that already exist in the store are never overwritten, so values set by
the host (or by an earlier load) always win. Failures never escape: they
are handed to a reporter and turned into a False / None result.

Usage:
    import envseed
    envseed.load()                              # ./.env into os.environ
    envseed.load({"path": "config/.env", "silent": True})
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from envseed.environment import EnvStore, ProcessEnvironment
from envseed.errors import EnvFileError
from envseed.parser import parse
from envseed.settings import LoadOptions

logger = logging.getLogger(__name__)

Reader = Callable[[str, str], Union[str, bytes]]
Reporter = Callable[[EnvFileError], None]
Options = Union[LoadOptions, Mapping[str, Any], None]


@dataclass
class MergeReport:
    """Outcome of merging one parsed file into a store."""

    path: str = ""
    applied: list[str] = field(default_factory=list)
    kept: list[str] = field(default_factory=list)


def read_env_file(path: str, encoding: str = "utf8") -> str:
    """Default file reader: the whole file as text."""
    with open(path, encoding=encoding) as f:
        return f.read()


def log_diagnostic(error: EnvFileError) -> None:
    """Default reporter: log the failure at ERROR level."""
    logger.error("%s", error)


def merge(parsed: Mapping[str, str], environ: EnvStore,
          path: str = "") -> MergeReport:
    """Set every parsed key that ``environ`` doesn't have yet.

    All or nothing: if the store rejects a value, keys set by this call
    are removed again before the error is re-raised.
    """
    report = MergeReport(path=path)
    try:
        for key, value in parsed.items():
            if environ.get(key) is not None:
                report.kept.append(key)
                continue
            environ.set(key, value)
            report.applied.append(key)
    except Exception:
        for key in report.applied:
            environ.unset(key)
        raise
    return report


def load_report(options: Options = None, *,
                environ: Optional[EnvStore] = None,
                reader: Optional[Reader] = None,
                reporter: Optional[Reporter] = None) -> Optional[MergeReport]:
    """Like ``load()``, but returns the MergeReport (None on failure)."""
    _check_options_type(options)
    if environ is None:
        environ = ProcessEnvironment()
    reader = reader or read_env_file
    reporter = reporter or log_diagnostic

    try:
        opts = _coerce_options(options)
    except Exception as e:
        # a bad path option fails like an unreadable file
        if not options.get("silent", False):
            reporter(EnvFileError(str(options.get("path")), e))
        return None

    try:
        raw = reader(opts.path, opts.encoding)
        parsed = parse(raw)
        report = merge(parsed, environ, path=opts.path)
    except Exception as e:
        error = EnvFileError(opts.path, e)
        if not opts.silent:
            reporter(error)
        return None

    logger.debug("Loaded %s: %d applied, %d already set",
                 opts.path, len(report.applied), len(report.kept))
    return report


def load(options: Options = None, *,
         environ: Optional[EnvStore] = None,
         reader: Optional[Reader] = None,
         reporter: Optional[Reporter] = None) -> bool:
    """
    Load an env file into the environment without overwriting existing keys.

    Args:
        options: LoadOptions or a dict with ``path`` (default ".env"),
            ``encoding`` (default "utf8") and ``silent`` (default False)
        environ: store to merge into (default: the process environment)
        reader: ``reader(path, encoding)`` returning the raw file content
        reporter: called with an EnvFileError on failure unless silent

    Returns:
        True if the file was read, parsed and merged; False otherwise.
    """
    return load_report(options, environ=environ, reader=reader,
                       reporter=reporter) is not None


config = load


def _check_options_type(options: Options) -> None:
    if options is None or isinstance(options, (LoadOptions, Mapping)):
        return
    raise TypeError(f"options must be LoadOptions or a mapping, "
                    f"not {type(options).__name__}")


def _coerce_options(options: Options) -> LoadOptions:
    if options is None:
        return LoadOptions()
    if isinstance(options, LoadOptions):
        return options
    return LoadOptions.from_mapping(options)
