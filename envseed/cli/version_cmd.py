"""Version subcommand: package, Python and dependency versions."""
from __future__ import annotations

import json
import os
import sys
from importlib import metadata

from rich.table import Table

from envseed.cli.helpers import get_version, make_console
from envseed.theme import theme as _theme

# distribution names on the index
_DEPENDENCIES = ("PyYAML", "rich")


def cmd_version(json_output: bool = False) -> int:
    """Show version, Python version and key dependency versions."""
    version = get_version()
    # envseed/cli/version_cmd.py -> project root
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    py_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    deps: dict[str, str] = {}
    for dist in _DEPENDENCIES:
        try:
            deps[dist] = metadata.version(dist)
        except metadata.PackageNotFoundError:
            deps[dist] = "not installed"

    if json_output:
        info = {
            "version": version,
            "python": py_version,
            "dependencies": deps,
            "install_path": project_root,
        }
        print(json.dumps(info, indent=2))
        return 0

    console = make_console()
    console.print(f"\n  [{_theme.heading}]envseed[/{_theme.heading}]  v{version}")
    console.print(f"  [{_theme.muted}]Python:[/{_theme.muted}]  {py_version}")
    console.print(f"  [{_theme.muted}]Path:[/{_theme.muted}]    {project_root}")

    table = Table(show_header=True, header_style=_theme.heading,
                  box=None, padding=(0, 2))
    table.add_column("Package", style=_theme.muted)
    table.add_column("Version")
    for dist, ver in deps.items():
        style = _theme.success if ver != "not installed" else _theme.error
        table.add_row(dist, f"[{style}]{ver}[/{style}]")
    console.print()
    console.print(table)
    console.print()
    return 0
