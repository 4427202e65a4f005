"""Shared utilities for CLI modules."""
from __future__ import annotations

import os
import re
from importlib import metadata

from rich.console import Console


def get_version() -> str:
    """Read version from pyproject.toml, then installed metadata, fallback '0.1.0'."""
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        tomllib = None  # type: ignore[assignment]

    pyproject = os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
        "pyproject.toml")
    if tomllib and os.path.exists(pyproject):
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            return data.get("project", {}).get("version", "0.1.0")
        except (OSError, tomllib.TOMLDecodeError):
            pass

    # Python 3.10: simple regex parse
    if os.path.exists(pyproject):
        with open(pyproject, encoding="utf-8") as f:
            for line in f:
                if line.strip().startswith("version"):
                    m = re.search(r'"([^"]+)"', line)
                    if m:
                        return m.group(1)

    try:
        return metadata.version("envseed")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def make_console(stderr: bool = False) -> Console:
    """Console honoring NO_COLOR; highlighting off so values print as-is."""
    return Console(stderr=stderr, highlight=False,
                   no_color=bool(os.environ.get("NO_COLOR")))
