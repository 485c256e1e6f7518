"""
Custom exception types used across zinfo.

Defining explicit error classes lets the CLI tell apart user mistakes
(unknown option names), conditions the renderer recovers from (a git
option outside a repository) and real failures of the git executable.
"""

from __future__ import annotations

from typing import Sequence


class ZinfoError(Exception):
    """Base class for all zinfo specific errors."""


class InvalidOptionError(ZinfoError):
    """Raised when one or more option names are not recognized."""

    def __init__(self, message: str, names: Sequence[str] = ()):
        super().__init__(message)
        self.names = list(names)


class GitError(ZinfoError):
    """Raised when git operations fail."""


class GitCommandError(GitError):
    """Raised when a git command runs but exits with a non-zero status."""

    def __init__(self, message: str, returncode: int, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class NotARepositoryError(ZinfoError):
    """Raised when git status is requested for a directory outside a repository."""
