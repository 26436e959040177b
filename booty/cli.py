"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from booty import initialization

_INIT_DESCRIPTION = """\
Initializes your local development environment by creating a ".devsetup" folder
in your $HOME directory with user-only permissions.

Configuration files are generated and managed exclusively in this location to avoid
tampering or accidental exposure.

Re-run this command anytime to recreate or verify your setup.

Example:
  booty init"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="booty", description="Bootstrap a local development environment."
    )
    commands = parser.add_subparsers(dest="command")

    init = commands.add_parser(
        "init",
        help="Prepares the required folder structure and config files",
        description=_INIT_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    init.add_argument(
        "--no-example",
        dest="no_example",
        action="store_true",
        help="Skip generating the example config file",
    )
    init.add_argument(
        "--example-config",
        dest="example_config",
        type=Path,
        default=None,
        help="File whose contents become the example config",
    )

    commands.add_parser("run", help="Run the configured setup")
    return parser


def _init(args: argparse.Namespace) -> int:
    try:
        data = args.example_config.read_bytes() if args.example_config else b""
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    initialization.run(data, sys.stdout)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    if args.command == "init":
        return _init(args)
    if args.command == "run":
        print("run called")
        return 0
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())