"""
Rendering of zinfo options into text lines.

render() turns an ordered list of option names into one formatted line
per option. Values are read from the environment here; formatting is
left to zinfo.style. Git options share a single GitStatus per call and
are skipped when the directory is not inside a repository.
"""

from __future__ import annotations

import getpass
import logging
import os
import platform
import sys
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional, Sequence

import psutil

from .config import StyleConfig
from .errors import NotARepositoryError
from .git_adapter import GitStatus, GitStatusResolver
from .style import format_line
from .utilities import home_relative_path, ordinal

LOG = logging.getLogger(__name__)

AHEAD_SYMBOL = "\u2191"
BEHIND_SYMBOL = "\u2193"

_UNSET = object()


class RenderContext:
    """
    Call-scoped state shared by the value functions of one render.

    The git status is computed on first use and cached for the rest of
    the call, including the "not a repository" outcome (stored as None).
    """

    def __init__(
        self,
        directory: str,
        style: StyleConfig,
        resolver: GitStatusResolver,
        now: datetime,
    ):
        self.directory = directory
        self.style = style
        self.resolver = resolver
        self.now = now
        self._git_status = _UNSET

    def git_status(self) -> Optional[GitStatus]:
        if self._git_status is _UNSET:
            try:
                self._git_status = self.resolver.status(self.directory)
            except NotARepositoryError:
                LOG.info("%s is not a git repository; skipping git options", self.directory)
                self._git_status = None
        return self._git_status


def format_time(moment: datetime) -> str:
    """12-hour clock, e.g. "3:07:09 pm"."""

    hour = moment.hour % 12 or 12
    meridiem = "am" if moment.hour < 12 else "pm"
    return f"{hour}:{moment:%M:%S} {meridiem}"


def format_time_24(moment: datetime) -> str:
    return f"{moment.hour}:{moment:%M:%S}"


def format_date(moment: datetime) -> str:
    """Long date, e.g. "Friday, October 16th 2026"."""

    return f"{moment:%A, %B} {ordinal(moment.day)} {moment.year}"


def format_duration(seconds: float) -> str:
    """Whole-second duration, e.g. "2 days, 3:04:05"."""

    return str(timedelta(seconds=int(max(seconds, 0))))


def format_git_status(status: GitStatus) -> str:
    parts = ["dirty" if status.dirty else "clean"]
    parts.append(f"{AHEAD_SYMBOL}{status.ahead}")
    parts.append(f"{BEHIND_SYMBOL}{status.behind}")
    if status.is_fresh:
        parts.append("(no commits)")
    return " ".join(parts)


def system_uptime(now: datetime) -> float:
    return now.timestamp() - psutil.boot_time()


def _git_value(render_value: Callable[[GitStatus], str]) -> Callable[[RenderContext], Optional[str]]:
    def value(context: RenderContext) -> Optional[str]:
        status = context.git_status()
        if status is None:
            return None
        return render_value(status)

    return value


VALUE_FUNCTIONS: Dict[str, Callable[[RenderContext], Optional[str]]] = {
    "cwd-path": lambda ctx: home_relative_path(ctx.directory),
    "cwd-path-absolute": lambda ctx: os.path.abspath(ctx.directory),
    "git-branch": _git_value(lambda status: status.branch),
    "git-status": _git_value(format_git_status),
    "platform": lambda ctx: sys.platform,
    "user": lambda ctx: getpass.getuser(),
    "time": lambda ctx: format_time(ctx.now),
    "time-24": lambda ctx: format_time_24(ctx.now),
    "date": lambda ctx: format_date(ctx.now),
    "date-time": lambda ctx: f"{format_date(ctx.now)}, {format_time(ctx.now)}",
    "date-time-24": lambda ctx: f"{format_date(ctx.now)}, {format_time_24(ctx.now)}",
    "python-v": lambda ctx: platform.python_version(),
    "uptime": lambda ctx: format_duration(system_uptime(ctx.now)),
}


def render(
    options: Sequence[str],
    directory: Optional[str] = None,
    style: Optional[StyleConfig] = None,
    resolver: Optional[GitStatusResolver] = None,
    now: Optional[datetime] = None,
) -> List[str]:
    """
    Render one line per option, preserving the order of options.

    Options that do not apply (git options outside a repository) produce
    no line. Git failures other than "not a repository" propagate.
    """

    context = RenderContext(
        directory=directory if directory is not None else os.getcwd(),
        style=style if style is not None else StyleConfig(),
        resolver=resolver if resolver is not None else GitStatusResolver(),
        now=now if now is not None else datetime.now(),
    )

    lines: List[str] = []
    for option in options:
        value = VALUE_FUNCTIONS[option](context)
        if value is None:
            continue
        lines.append(format_line(option, value, context.style))
    return lines


def zinfo(
    options: Sequence[str],
    directory: Optional[str] = None,
    style: Optional[StyleConfig] = None,
) -> str:
    """Return the rendered lines for options joined by newlines."""

    return "\n".join(render(options, directory, style))
