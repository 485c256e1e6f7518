from colorama import Fore, Style

from zinfo.config import StyleConfig
from zinfo.options import OPTIONS
from zinfo.style import (
    OPTION_STYLES,
    PLATFORM_ICONS,
    SECONDARY_COLOR,
    UNDERLINE,
    format_line,
    platform_icon,
)


def test_every_option_has_a_style():
    assert set(OPTION_STYLES) == set(OPTIONS)


def test_plain_line_uses_plain_icon_and_color():
    line = format_line("uptime", "1:00:00", StyleConfig())
    color, plain, _ = OPTION_STYLES["uptime"]

    assert line == f"{color}{plain} 1:00:00{Style.RESET_ALL}"
    assert UNDERLINE not in line


def test_path_lines_have_no_icon():
    assert format_line("cwd-path", "~/src", StyleConfig()) == f"{Fore.BLUE}~/src{Style.RESET_ALL}"


def test_nerd_fonts_selects_alternate_icon():
    _, plain, nerd = OPTION_STYLES["git-branch"]
    line = format_line("git-branch", "main", StyleConfig(nerd_fonts=True))

    assert nerd in line
    assert plain not in line


def test_platform_icon_depends_on_platform():
    line = format_line("platform", "darwin", StyleConfig(nerd_fonts=True), platform="darwin")
    assert PLATFORM_ICONS["darwin"] in line
    assert platform_icon("sunos5") == OPTION_STYLES["platform"][2]


def test_underline_wraps_only_the_value():
    line = format_line("user", "alice", StyleConfig(underline=True))
    _, plain, _ = OPTION_STYLES["user"]

    assert f"{plain} {UNDERLINE}alice" in line


def test_secondary_icons_use_secondary_color():
    color, plain, _ = OPTION_STYLES["time"]
    line = format_line("time", "3:00:00 pm", StyleConfig(icons_secondary=True))

    assert line.startswith(f"{SECONDARY_COLOR}{plain}{color} 3:00:00 pm")
