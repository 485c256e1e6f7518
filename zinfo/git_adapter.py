"""
Git integration for zinfo.

This module answers two questions about a directory: is it inside a
git repository, and if so, what is its branch, dirtiness and
ahead/behind position relative to origin. Every query goes through a
GitRunner so the resolver can be exercised without a real git binary.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import GitCommandError, GitError, NotARepositoryError

LOG = logging.getLogger(__name__)

DEFAULT_BRANCH = "master"
DEFAULT_REMOTE = "origin"


@dataclass
class GitStatus:
    """
    Branch and working-tree state of a repository.

    is_fresh marks a checkout whose current branch has no commits yet
    (a new repository or an orphan branch); ahead is then always 0 and
    branch falls back to DEFAULT_BRANCH when HEAD cannot be read.
    """

    branch: str
    dirty: bool
    ahead: int
    behind: int
    is_fresh: bool


class GitRunner(ABC):
    """
    Abstract interface for running git commands.
    """

    @abstractmethod
    def run(self, args: List[str], cwd: Optional[str] = None) -> str:
        """
        Run git with args inside cwd and return its standard output.

        Implementations raise GitCommandError when git exits with a
        non-zero status and GitError when git cannot be run at all.
        """


class SubprocessGitRunner(GitRunner):
    """
    Runs the git executable found on PATH.
    """

    def __init__(self, executable: str = "git"):
        self.executable = executable

    def run(self, args: List[str], cwd: Optional[str] = None) -> str:
        return _run_git(args, cwd=cwd, executable=self.executable).stdout


def _run_git(
    args: List[str],
    cwd: Optional[str] = None,
    executable: str = "git",
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command and return the completed process.

    All git invocations go through here so that error handling and
    logging are centralized.
    """

    cmd = [executable, *args]
    LOG.debug("Running git command: %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:
        raise GitError(f"failed to execute git: {exc}") from exc

    if completed.returncode != 0:
        stderr = completed.stderr.strip()
        LOG.debug("git stderr: %s", stderr)
        message = f"git command failed: {' '.join(cmd)}"
        if stderr:
            message = f"{message}: {stderr}"
        raise GitCommandError(message, completed.returncode, stderr)

    return completed


class GitStatusResolver:
    """
    Computes GitStatus values from a sequence of git queries.

    All queries made by one status() call target the same directory;
    the repository is assumed not to change while they run.
    """

    def __init__(self, runner: Optional[GitRunner] = None):
        self.runner = runner if runner is not None else SubprocessGitRunner()

    def _git(self, directory: str, *args: str) -> str:
        return self.runner.run(list(args), cwd=directory)

    def is_repository(self, directory: str) -> bool:
        """
        Return True if directory is inside a git working tree.

        A failing `git status` means "not a repository"; only a missing
        or unrunnable git binary raises.
        """

        try:
            self._git(directory, "status")
        except GitCommandError:
            return False
        return True

    def commit_count(self, directory: str) -> int:
        """
        Count the commits reachable from local branches.

        Remote-tracking refs are left out, so a repository that has only
        fetched from origin still counts as having no commits.
        """

        return int(self._git(directory, "rev-list", "--count", "--branches").strip() or 0)

    def has_head_commit(self, directory: str) -> bool:
        """Return False when the current branch has no commits yet (unborn or orphan)."""

        try:
            self._git(directory, "rev-parse", "--verify", "-q", "HEAD")
        except GitCommandError:
            return False
        return True

    def has_remote(self, directory: str, remote: str = DEFAULT_REMOTE) -> bool:
        remotes = self._git(directory, "remote").split()
        return remote in remotes

    def remote_branch_exists(
        self,
        directory: str,
        branch: str,
        remote: str = DEFAULT_REMOTE,
    ) -> bool:
        """Return True if remote/branch is a known remote-tracking branch."""

        wanted = f"{remote}/{branch}"
        for line in self._git(directory, "branch", "-r").splitlines():
            # Symbolic refs are listed as "origin/HEAD -> origin/master".
            name = line.strip().split(" -> ", 1)[0]
            if name == wanted:
                return True
        return False

    def current_branch(self, directory: str) -> str:
        """
        Return the checked-out branch name.

        Works on branches without commits. A detached HEAD is reported as
        its abbreviated commit hash.
        """

        try:
            return self._git(directory, "symbolic-ref", "--short", "HEAD").strip()
        except GitCommandError:
            return self._git(directory, "rev-parse", "--short", "HEAD").strip()

    def is_dirty(self, directory: str) -> bool:
        return bool(self._git(directory, "status", "--porcelain").strip())

    def ahead_behind(self, directory: str, local: str, upstream: str) -> Tuple[int, int]:
        """
        Return (ahead, behind) of local relative to upstream.

        Both counts come from a single symmetric-difference query so they
        describe the same snapshot.
        """

        output = self._git(
            directory, "rev-list", "--left-right", "--count", f"{local}...{upstream}"
        )
        parts = output.split()
        if len(parts) != 2:
            raise GitError(f"unexpected rev-list output: {output.strip()!r}")
        return int(parts[0]), int(parts[1])

    def _fresh_branch(self, directory: str) -> str:
        try:
            return self._git(directory, "symbolic-ref", "--short", "HEAD").strip()
        except GitCommandError:
            return DEFAULT_BRANCH

    def status(self, directory: str) -> GitStatus:
        """
        Return the GitStatus of the repository containing directory.

        Raises NotARepositoryError when directory is not under git.
        """

        if not self.is_repository(directory):
            raise NotARepositoryError(f"not a git repository: {directory}")

        has_origin = self.has_remote(directory)
        dirty = self.is_dirty(directory)

        if self.commit_count(directory) == 0 or not self.has_head_commit(directory):
            branch = self._fresh_branch(directory)
            behind = 0
            if has_origin and self.remote_branch_exists(directory, branch):
                behind = int(
                    self._git(
                        directory, "rev-list", "--count", f"{DEFAULT_REMOTE}/{branch}"
                    ).strip()
                )
            return GitStatus(
                branch=branch,
                dirty=dirty,
                ahead=0,
                behind=behind,
                is_fresh=True,
            )

        branch = self.current_branch(directory)

        if not has_origin:
            ahead, behind = 0, 0
        elif not self.remote_branch_exists(directory, branch):
            # Nothing on origin to compare with; ahead=1 only signals that
            # the branch has not been pushed.
            ahead, behind = 1, 0
        else:
            ahead, behind = self.ahead_behind(
                directory, branch, f"{DEFAULT_REMOTE}/{branch}"
            )

        LOG.debug(
            "git status for %s: branch=%s dirty=%s ahead=%d behind=%d",
            directory,
            branch,
            dirty,
            ahead,
            behind,
        )
        return GitStatus(
            branch=branch,
            dirty=dirty,
            ahead=ahead,
            behind=behind,
            is_fresh=False,
        )
