"""
The closed set of zinfo options and the rules for choosing among them.

Every option selects exactly one line of output. The CLI feeds user
input through resolve_options, which validates all names before any
rendering happens.
"""

from __future__ import annotations

import textwrap
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidOptionError
from .utilities import to_sentence

OPTIONS: Tuple[str, ...] = (
    "cwd-path",
    "cwd-path-absolute",
    "git-branch",
    "git-status",
    "platform",
    "user",
    "time",
    "time-24",
    "date",
    "date-time",
    "date-time-24",
    "python-v",
    "uptime",
)

OPTION_DESCRIPTIONS: Dict[str, str] = {
    "cwd-path": "The current directory, in home-relative format.",
    "cwd-path-absolute": "The current directory's absolute path.",
    "git-branch": "The current git branch, when inside a git repository.",
    "git-status": (
        "Whether the git working tree is clean or dirty, and how many commits "
        "it is ahead of and behind origin."
    ),
    "platform": "The platform being used.",
    "user": "The name of the current user.",
    "time": "The current time.",
    "time-24": "The current time, in 24-hour format.",
    "date": "The current date.",
    "date-time": "The current date and time.",
    "date-time-24": "The current date and time, in 24-hour format.",
    "python-v": "The current Python version.",
    "uptime": "How long the system has been up.",
}

GIT_OPTIONS = frozenset(name for name in OPTIONS if name.startswith("git-"))


def is_option(name: object) -> bool:
    return isinstance(name, str) and name in OPTION_DESCRIPTIONS


def validate_options(names: Iterable[str]) -> None:
    """
    Raise InvalidOptionError naming every unrecognized option.
    """

    invalid: List[str] = []
    for name in names:
        if not is_option(name) and name not in invalid:
            invalid.append(name)

    if invalid:
        noun = "option" if len(invalid) == 1 else "options"
        raise InvalidOptionError(
            f"invalid {noun}: {to_sentence(invalid)}; run with --options to list them",
            invalid,
        )


def _dedupe(names: Iterable[str]) -> List[str]:
    seen = set()
    result: List[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


def resolve_options(
    include: Sequence[str] = (),
    exclude: Sequence[str] = (),
    defaults: Sequence[str] = (),
    use_all: bool = False,
    ignore_defaults: bool = False,
) -> List[str]:
    """
    Work out which options to render, in order.

    With use_all every option is returned in canonical order. Otherwise
    the defaults (unless ignored) come first, followed by the included
    options; excluded options are removed and duplicates keep their
    first position. All names are validated before anything is resolved.
    """

    validate_options([*defaults, *include, *exclude])

    if use_all:
        return list(OPTIONS)

    requested = list(include) if ignore_defaults else [*defaults, *include]
    excluded = set(exclude)
    return _dedupe(name for name in requested if name not in excluded)


def format_option_list(width: Optional[int] = None) -> str:
    """
    Return every option with its description, wrapped to width columns.
    """

    if width is None:
        width = 80
    name_width = max(len(name) for name in OPTIONS) + 2
    indent = " " * name_width

    blocks: List[str] = []
    for name in OPTIONS:
        blocks.append(
            textwrap.fill(
                OPTION_DESCRIPTIONS[name],
                width=max(width, name_width + 20),
                initial_indent=name.ljust(name_width),
                subsequent_indent=indent,
            )
        )
    return "\n".join(blocks)
