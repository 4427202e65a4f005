"""CLI dispatcher, lazy-loads command modules on demand."""
from __future__ import annotations


def dispatch_command(args, settings) -> int:
    """Route args.cmd to the appropriate cli module, importing only on use.

    Returns the process exit status.
    """
    cmd = getattr(args, "cmd", None)
    json_output = getattr(args, "json", False)

    if cmd == "parse":
        from envseed.cli.parse_cmd import cmd_parse
        return cmd_parse(path=args.file or settings.options.path,
                         encoding=settings.options.encoding,
                         json_output=json_output)

    elif cmd == "load":
        from envseed.cli.load_cmd import cmd_load
        return cmd_load(settings.options, json_output=json_output)

    elif cmd == "run":
        from envseed.cli.load_cmd import cmd_run
        return cmd_run(settings.options, args.command)

    elif cmd == "version":
        from envseed.cli.version_cmd import cmd_version
        return cmd_version(json_output=json_output)

    raise ValueError(f"Unknown command: {cmd!r}")
