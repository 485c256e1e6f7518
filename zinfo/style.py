"""
Presentation of rendered lines.

Each option has a color and two icons: a plain glyph that any terminal
font can draw and a Nerd Fonts glyph. format_line is a pure function of
the option, its value and the StyleConfig, so it does no I/O and can be
tested on its own.
"""

from __future__ import annotations

import sys
from typing import Dict, Optional, Tuple

from colorama import Fore, Style
from colorama.ansi import code_to_chars

from .config import StyleConfig
from .utilities import optional_style

UNDERLINE = code_to_chars(4)
UNDERLINE_OFF = code_to_chars(24)
SECONDARY_COLOR = Fore.LIGHTBLACK_EX

# option -> (color, plain icon, nerd fonts icon); path options have no icon.
OPTION_STYLES: Dict[str, Tuple[str, str, str]] = {
    "cwd-path": (Fore.BLUE, "", ""),
    "cwd-path-absolute": (Fore.BLUE, "", ""),
    "git-branch": (Fore.MAGENTA, "\u2387", "\ue0a0"),
    "git-status": (Fore.MAGENTA, "\u00b1", "\uf1d3"),
    "platform": (Fore.YELLOW, "P", "\uf109"),
    "user": (Fore.LIGHTGREEN_EX, "\u2666", "\uf841"),
    "time": (Fore.LIGHTRED_EX, "T", "\uf64f"),
    "time-24": (Fore.LIGHTRED_EX, "T", "\uf64f"),
    "date": (Fore.LIGHTRED_EX, "D", "\uf5ec"),
    "date-time": (Fore.LIGHTRED_EX, "D", "\uf5ef"),
    "date-time-24": (Fore.LIGHTRED_EX, "D", "\uf5ef"),
    "python-v": (Fore.GREEN, "\u2b22", "\ue235"),
    "uptime": (Fore.RED, "U", "\uf55d"),
}

PLATFORM_ICONS = {
    "darwin": "\uf179",
    "linux": "\uf17c",
    "win32": "\uf17a",
}
GENERIC_PLATFORM_ICON = "\uf109"


def platform_icon(platform: Optional[str] = None) -> str:
    """Return the Nerd Fonts glyph for platform (defaults to sys.platform)."""

    if platform is None:
        platform = sys.platform
    return PLATFORM_ICONS.get(platform, GENERIC_PLATFORM_ICON)


def underline(text: str) -> str:
    return f"{UNDERLINE}{text}{UNDERLINE_OFF}"


def icon_for(option: str, style: StyleConfig, platform: Optional[str] = None) -> str:
    _, plain, nerd = OPTION_STYLES[option]
    if not style.nerd_fonts:
        return plain
    if option == "platform":
        return platform_icon(platform)
    return nerd


def format_line(
    option: str,
    value: str,
    style: StyleConfig,
    platform: Optional[str] = None,
) -> str:
    """
    Format one output line for option.

    The whole line is drawn in the option's color. With icons_secondary
    the icon is drawn in SECONDARY_COLOR instead; with underline only
    the value is underlined.
    """

    color = OPTION_STYLES[option][0]
    text = optional_style(underline, style.underline)(value)
    icon = icon_for(option, style, platform)

    if not icon:
        return f"{color}{text}{Style.RESET_ALL}"
    if style.icons_secondary:
        return f"{SECONDARY_COLOR}{icon}{color} {text}{Style.RESET_ALL}"
    return f"{color}{icon} {text}{Style.RESET_ALL}"
