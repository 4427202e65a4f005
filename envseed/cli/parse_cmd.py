"""Parse subcommand: show what an env file contains without loading it."""
from __future__ import annotations

import json

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from envseed.cli.helpers import make_console
from envseed.loader import read_env_file
from envseed.parser import parse
from envseed.theme import theme as _theme


def cmd_parse(path: str, encoding: str = "utf8", json_output: bool = False) -> int:
    try:
        raw = read_env_file(path, encoding)
    except (OSError, LookupError, UnicodeDecodeError) as e:
        err = make_console(stderr=True)
        err.print(f"[{_theme.error}]Cannot read {escape(path)}:[/{_theme.error}] {escape(str(e))}")
        return 1

    entries = parse(raw)

    if json_output:
        print(json.dumps(entries, indent=2, ensure_ascii=False))
        return 0

    console = make_console()
    if not entries:
        console.print(f"  [{_theme.muted}]No entries in {escape(path)}[/{_theme.muted}]")
        return 0

    tbl = Table(box=None, padding=(0, 2), show_header=True,
                header_style=_theme.heading)
    tbl.add_column("Key", style=_theme.key, no_wrap=True)
    tbl.add_column("Value", overflow="fold")
    for key, value in entries.items():
        tbl.add_row(Text(key), Text(value))

    console.print()
    console.print(f"  [{_theme.heading}]{escape(path)}[/{_theme.heading}]  "
                  f"[{_theme.muted}]{len(entries)} entries[/{_theme.muted}]")
    console.print(tbl)
    console.print()
    return 0
