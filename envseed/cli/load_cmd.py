"""Load and run subcommands."""
from __future__ import annotations

import json
import logging
import subprocess

from rich.markup import escape

from envseed.cli.helpers import make_console
from envseed.environment import ProcessEnvironment
from envseed.loader import load_report
from envseed.settings import LoadOptions
from envseed.theme import theme as _theme

logger = logging.getLogger(__name__)


def cmd_load(options: LoadOptions, json_output: bool = False) -> int:
    """Load into this process and show which keys were applied or kept.

    Values are never printed; env files tend to hold secrets.
    """
    report = load_report(options, environ=ProcessEnvironment())

    if json_output:
        print(json.dumps({
            "loaded": report is not None,
            "path": options.path,
            "applied": report.applied if report else [],
            "kept": report.kept if report else [],
        }, indent=2))
        return 0 if report else 1

    if report is None:
        return 1

    console = make_console()
    console.print(f"  [{_theme.success}]Loaded[/{_theme.success}] {escape(options.path)}")
    for key in report.applied:
        console.print(f"    [{_theme.success}]+[/{_theme.success}] [{_theme.key}]{key}[/{_theme.key}]")
    for key in report.kept:
        console.print(f"    [{_theme.muted}]= {key} (already set)[/{_theme.muted}]")
    return 0


def cmd_run(options: LoadOptions, command: list[str]) -> int:
    """Load the env file, then run *command* with the merged environment.

    A failed load aborts the run unless the options are silent.
    """
    if command and command[0] == "--":
        command = command[1:]
    if not command:
        make_console(stderr=True).print(
            f"[{_theme.error}]No command given.[/{_theme.error}] "
            "Usage: envseed run [--path FILE] -- CMD [ARGS...]")
        return 2

    report = load_report(options, environ=ProcessEnvironment())
    if report is None and not options.silent:
        return 1

    logger.debug("Running %s", command)
    try:
        result = subprocess.run(command)
    except FileNotFoundError:
        make_console(stderr=True).print(
            f"[{_theme.error}]Command not found:[/{_theme.error}] {escape(command[0])}")
        return 127
    return result.returncode
