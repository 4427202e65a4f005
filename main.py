#!/usr/bin/env python3
"""
main.py: envseed CLI
Usage:
  envseed parse [FILE]               # show the KEY=value pairs of an env file
  envseed load                       # load .env into this process, list applied/kept keys
  envseed run -- CMD [ARGS...]       # load .env, then run CMD with the merged environment
  envseed version                    # version, Python, dependency versions

Global options (before the subcommand):
  --config FILE         settings file (default: ./envseed.yaml when present)
  --log-level LEVEL     DEBUG / INFO / WARNING / ERROR
  --structured-logs     JSON log lines on stderr

Settings precedence: command-line flags > ENVSEED_* variables > settings file.
"""

import argparse
import sys

from envseed.cli import dispatch_command
from envseed.errors import SettingsError
from envseed.logging_config import setup_logging
from envseed.settings import resolve_settings


def _add_load_flags(p: argparse.ArgumentParser):
    p.add_argument("--path", default=None,
                   help="Env file to load (default: .env or ENVSEED_PATH)")
    p.add_argument("--encoding", default=None,
                   help="File encoding (default: utf8)")
    p.add_argument("--silent", action="store_true", default=None,
                   help="Don't report a missing or unreadable file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envseed",
        description="Load KEY=value pairs from an env file without "
                    "overwriting variables that are already set.")
    parser.add_argument("--config", default=None,
                        help="Settings file (default: ./envseed.yaml if present)")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG / INFO / WARNING / ERROR (default: WARNING)")
    parser.add_argument("--structured-logs", action="store_true", default=None,
                        help="Emit JSON log lines")
    sub = parser.add_subparsers(dest="cmd")

    p_parse = sub.add_parser("parse", help="Print the entries of an env file")
    p_parse.add_argument("file", nargs="?", default=None,
                         help="Env file (default: the configured path)")
    p_parse.add_argument("--encoding", default=None,
                         help="File encoding (default: utf8)")
    p_parse.add_argument("--json", action="store_true",
                         help="Output JSON")

    p_load = sub.add_parser("load", help="Load an env file and report the result")
    _add_load_flags(p_load)
    p_load.add_argument("--json", action="store_true",
                        help="Output JSON")

    p_run = sub.add_parser("run", help="Load an env file, then run a command")
    _add_load_flags(p_run)
    p_run.add_argument("command", nargs=argparse.REMAINDER,
                       help="Command to run (after --)")

    p_ver = sub.add_parser("version", help="Show version information")
    p_ver.add_argument("--json", action="store_true",
                       help="Output JSON")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cmd is None:
        parser.print_help()
        return 0

    overrides = {
        "path": getattr(args, "path", None),
        "encoding": getattr(args, "encoding", None),
        "silent": getattr(args, "silent", None),
        "log_level": args.log_level,
        "structured_logs": args.structured_logs,
    }
    try:
        settings = resolve_settings(config_path=args.config, overrides=overrides)
    except SettingsError as e:
        print(f"envseed: {e}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level, structured=settings.structured_logs)
    return dispatch_command(args, settings)


if __name__ == "__main__":
    sys.exit(main())
