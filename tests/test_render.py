from datetime import datetime

from zinfo.config import StyleConfig
from zinfo.errors import GitError
from zinfo.git_adapter import GitStatus, GitStatusResolver
from zinfo.options import OPTIONS
from zinfo.render import (
    VALUE_FUNCTIONS,
    RenderContext,
    format_date,
    format_duration,
    format_git_status,
    format_time,
    format_time_24,
    render,
    zinfo,
)

NOW = datetime(2026, 10, 16, 15, 7, 9)


class CountingResolver(GitStatusResolver):
    def __init__(self, result):
        super().__init__(runner=None)
        self.result = result
        self.calls = 0

    def status(self, directory):
        self.calls += 1
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _status(**overrides):
    values = dict(branch="main", dirty=False, ahead=0, behind=0, is_fresh=False)
    values.update(overrides)
    return GitStatus(**values)


def test_time_formats():
    assert format_time(NOW) == "3:07:09 pm"
    assert format_time(datetime(2026, 1, 1, 0, 5, 0)) == "12:05:00 am"
    assert format_time(datetime(2026, 1, 1, 12, 0, 0)) == "12:00:00 pm"
    assert format_time_24(NOW) == "15:07:09"
    assert format_time_24(datetime(2026, 1, 1, 9, 5, 0)) == "9:05:00"


def test_date_format():
    assert format_date(NOW) == "Friday, October 16th 2026"
    assert format_date(datetime(2026, 3, 2)) == "Monday, March 2nd 2026"


def test_duration_format():
    assert format_duration(59.9) == "0:00:59"
    assert format_duration(2 * 86400 + 3 * 3600 + 4 * 60 + 5) == "2 days, 3:04:05"
    assert format_duration(-5) == "0:00:00"


def test_git_status_format():
    assert format_git_status(_status(dirty=True, ahead=2, behind=1)) == "dirty ↑2 ↓1"
    assert format_git_status(_status(is_fresh=True, branch="master")).endswith("(no commits)")


def test_render_preserves_requested_order():
    resolver = CountingResolver(_status())
    lines = render(["time-24", "cwd-path-absolute", "date"], "/tmp", StyleConfig(), resolver, NOW)

    assert len(lines) == 3
    assert "15:07:09" in lines[0]
    assert "/tmp" in lines[1]
    assert "Friday, October 16th 2026" in lines[2]
    assert resolver.calls == 0


def test_render_computes_git_status_once():
    resolver = CountingResolver(_status(branch="feature", dirty=True, ahead=3))
    lines = render(["git-branch", "git-status"], "/repo", StyleConfig(), resolver, NOW)

    assert resolver.calls == 1
    assert "feature" in lines[0]
    assert "dirty ↑3 ↓0" in lines[1]


def test_render_skips_git_options_outside_repository(tmp_path):
    resolver = GitStatusResolver()
    resolver.is_repository = lambda directory: False

    lines = render(
        ["git-branch", "cwd-path-absolute", "git-status"],
        str(tmp_path),
        resolver=resolver,
        now=NOW,
    )

    assert len(lines) == 1
    assert str(tmp_path) in lines[0]


def test_render_propagates_git_failures():
    resolver = CountingResolver(GitError("failed to execute git"))

    try:
        render(["cwd-path", "git-branch"], "/repo", StyleConfig(), resolver, NOW)
    except GitError as exc:
        assert "failed to execute git" in str(exc)
    else:
        raise AssertionError("expected GitError to be raised")


def test_render_context_caches_missing_repository():
    resolver = GitStatusResolver()
    calls = []

    def fake_is_repository(directory):
        calls.append(directory)
        return False

    resolver.is_repository = fake_is_repository
    context = RenderContext("/nowhere", StyleConfig(), resolver, NOW)

    assert context.git_status() is None
    assert context.git_status() is None
    assert calls == ["/nowhere"]


def test_render_uptime_uses_boot_time(monkeypatch):
    monkeypatch.setattr("zinfo.render.psutil.boot_time", lambda: NOW.timestamp() - 3725)

    lines = render(["uptime"], "/tmp", StyleConfig(), CountingResolver(_status()), NOW)

    assert "1:02:05" in lines[0]


def test_every_option_has_a_value_function():
    assert set(VALUE_FUNCTIONS) == set(OPTIONS)


def test_zinfo_joins_lines(monkeypatch, tmp_path):
    monkeypatch.setattr("zinfo.render.platform.python_version", lambda: "3.12.1")

    output = zinfo(["cwd-path-absolute", "python-v"], str(tmp_path))

    assert output.count("\n") == 1
    assert "3.12.1" in output.splitlines()[1]
