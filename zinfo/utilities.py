"""
Small helpers shared by the renderer and the CLI.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Optional, Sequence

# Entries next to the home directories that do not belong to a user.
NON_USER_DIRS = ("Shared", ".localized")


def home_relative_path(path: str, home: Optional[str] = None) -> str:
    """
    Convert path to its home-relative form.

    The home directory becomes "~", and directories belonging to other
    users (siblings of the home directory) become "~<name>", so that
    "/Users/bob/Desktop" is shown as "~bob/Desktop". Anything else is
    returned as an absolute path.
    """

    resolved = os.path.normpath(os.path.abspath(path))
    if home is None:
        home = os.path.expanduser("~")
    home = os.path.normpath(os.path.abspath(home))

    if resolved == home:
        return "~"

    parent = os.path.dirname(home)
    if parent == home:
        # Home is the filesystem root.
        return resolved
    if resolved.startswith(home + os.sep):
        return "~" + resolved[len(home):]

    if parent == os.path.dirname(parent):
        # Home sits directly under the filesystem root.
        return resolved

    prefix = parent.rstrip(os.sep) + os.sep
    if resolved.startswith(prefix):
        rest = resolved[len(prefix):]
        if rest and rest.split(os.sep, 1)[0] not in NON_USER_DIRS:
            return "~" + rest

    return resolved


def optional_style(style: Callable[[str], str], enabled: bool) -> Callable[[str], str]:
    """Return style when enabled, otherwise a function that leaves text unchanged."""

    if enabled:
        return style
    return lambda text: text


def to_sentence(items: Sequence[Any], wrap_values: bool = True) -> str:
    """
    Join items into an English list: "a", "a and b", "a, b, and c".

    With wrap_values, strings are double-quoted and anything else is
    wrapped in backticks.
    """

    values = [str(item) for item in items]
    if wrap_values:
        values = [
            f'"{item}"' if isinstance(item, str) else f"`{item}`" for item in items
        ]

    if not values:
        return ""
    if len(values) == 1:
        return values[0]
    if len(values) == 2:
        return f"{values[0]} and {values[1]}"
    return f"{', '.join(values[:-1])}, and {values[-1]}"


def ordinal(number: int) -> str:
    """Return number with its English ordinal suffix (1st, 2nd, 11th, 23rd)."""

    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"
