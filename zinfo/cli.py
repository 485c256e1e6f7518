"""
Command-line interface for zinfo.

This module is responsible for argument parsing, merging the
environment defaults and delegating to the renderer.
"""

from __future__ import annotations

import argparse
import os
import shutil
import sys
from typing import List, Optional

import colorama

from . import __version__
from .config import DEFAULTS_ENV, DIMSYM_ENV, NERDFONTS_ENV, UNDERLINE_ENV, config_from_args
from .errors import InvalidOptionError, ZinfoError
from .logging_utils import configure_logging
from .options import format_option_list, resolve_options
from .render import render


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zinfo",
        description=(
            "Quickly get information about the current directory, git "
            "repository, system and Python."
        ),
        epilog=(
            f"Environment: {DEFAULTS_ENV} holds the space-separated default "
            f"options; {UNDERLINE_ENV}, {NERDFONTS_ENV} and {DIMSYM_ENV} set "
            "the style flags when given a non-zero number."
        ),
    )

    parser.add_argument(
        "-i",
        "--include",
        nargs="+",
        action="extend",
        metavar="OPTION",
        help="Options to show in addition to the defaults.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        nargs="+",
        action="extend",
        metavar="OPTION",
        help="Options to leave out.",
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="use_all",
        action="store_true",
        help="Show every option, ignoring --include, --exclude and the defaults.",
    )
    parser.add_argument(
        "-I",
        "--ignore-defaults",
        action="store_true",
        help=f"Ignore the default options from {DEFAULTS_ENV}.",
    )
    parser.add_argument(
        "-u",
        "--underline",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=f"Underline the data (default: {UNDERLINE_ENV}).",
    )
    parser.add_argument(
        "--nerdfonts",
        "--nf",
        dest="nerd_fonts",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=f"Use Nerd Fonts icons (default: {NERDFONTS_ENV}).",
    )
    parser.add_argument(
        "--icons-secondary",
        "--dimsym",
        dest="icons_secondary",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=f"Draw icons in a dim secondary color (default: {DIMSYM_ENV}).",
    )
    parser.add_argument(
        "--options",
        "--ls",
        dest="list_options",
        action="store_true",
        help="List every available option and exit.",
    )
    parser.add_argument(
        "-C",
        "--directory",
        metavar="DIR",
        help="Report on DIR instead of the current directory.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (can be specified multiple times).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = config_from_args(args)
    configure_logging(verbosity=config.verbosity)

    if config.list_options:
        width = shutil.get_terminal_size().columns
        print(format_option_list(width))
        return 0

    if config.directory is not None and not os.path.isdir(config.directory):
        parser.error(f"not a directory: {config.directory}")

    try:
        options = resolve_options(
            include=config.include,
            exclude=config.exclude,
            defaults=config.defaults,
            use_all=config.use_all,
            ignore_defaults=config.ignore_defaults,
        )
    except InvalidOptionError as exc:
        print(f"zinfo: error: {exc}", file=sys.stderr)
        return 2

    colorama.just_fix_windows_console()

    try:
        lines = render(options, directory=config.directory, style=config.style)
    except KeyboardInterrupt:
        return 130
    except ZinfoError as exc:
        print(f"zinfo: error: {exc}", file=sys.stderr)
        return 1

    if lines:
        print("\n".join(lines))
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
