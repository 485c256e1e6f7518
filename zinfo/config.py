"""
Configuration model for zinfo.

The CLI constructs a Config instance from parsed arguments and the
environment, then passes it down so the renderer never has to consult
global state. StyleConfig only affects presentation, never values.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

LOG = logging.getLogger(__name__)

DEFAULTS_ENV = "ZINFO_DEFAULTS"
UNDERLINE_ENV = "ZINFO_UNDERLINE"
NERDFONTS_ENV = "ZINFO_NERDFONTS"
DIMSYM_ENV = "ZINFO_DIMSYM"

FALLBACK_DEFAULTS = ["cwd-path", "git-branch", "git-status"]


@dataclass(frozen=True)
class StyleConfig:
    """
    Presentation flags for rendered lines.

    underline draws values underlined, nerd_fonts selects the Nerd Fonts
    glyph set and icons_secondary draws icons in a dim secondary color.
    """

    underline: bool = False
    nerd_fonts: bool = False
    icons_secondary: bool = False


@dataclass
class Config:
    """
    Top-level configuration for a single zinfo run.
    """

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    defaults: List[str] = field(default_factory=list)
    use_all: bool = False
    ignore_defaults: bool = False
    style: StyleConfig = field(default_factory=StyleConfig)
    list_options: bool = False
    verbosity: int = 0
    directory: Optional[str] = None


def env_flag(name: str, environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Read a numeric boolean from the environment.

    Unset or empty means False; any non-zero integer means True.
    """

    if environ is None:
        environ = os.environ

    raw = environ.get(name, "").strip()
    if not raw:
        return False
    try:
        return int(raw) != 0
    except ValueError:
        LOG.warning("ignoring non-numeric value %r for %s", raw, name)
        return False


def env_defaults(environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Return the default option list from the environment.

    Falls back to FALLBACK_DEFAULTS when the variable is unset; an empty
    value means no defaults at all.
    """

    if environ is None:
        environ = os.environ

    raw = environ.get(DEFAULTS_ENV)
    if raw is None:
        return list(FALLBACK_DEFAULTS)
    return raw.split()


def config_from_args(
    args: argparse.Namespace,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """
    Merge parsed CLI arguments with environment defaults.

    Style flags left unset on the command line (None) take their value
    from the matching environment variable.
    """

    if environ is None:
        environ = os.environ

    def _flag(value: Optional[bool], env_name: str) -> bool:
        return env_flag(env_name, environ) if value is None else value

    style = StyleConfig(
        underline=_flag(args.underline, UNDERLINE_ENV),
        nerd_fonts=_flag(args.nerd_fonts, NERDFONTS_ENV),
        icons_secondary=_flag(args.icons_secondary, DIMSYM_ENV),
    )

    return Config(
        include=list(args.include or []),
        exclude=list(args.exclude or []),
        defaults=env_defaults(environ),
        use_all=args.use_all,
        ignore_defaults=args.ignore_defaults,
        style=style,
        list_options=args.list_options,
        verbosity=args.verbose,
        directory=args.directory,
    )
