from typing import Dict, List, Optional, Tuple, Union

import pytest

from zinfo.errors import GitCommandError
from zinfo.git_adapter import GitRunner

Response = Union[str, Exception]


class FakeGitRunner(GitRunner):
    """
    GitRunner that answers from a table keyed by the git arguments.

    Unknown commands fail the way git does outside a repository.
    """

    def __init__(self, responses: Dict[Tuple[str, ...], Response]):
        self.responses = responses
        self.calls: List[Tuple[str, ...]] = []

    def run(self, args: List[str], cwd: Optional[str] = None) -> str:
        key = tuple(args)
        self.calls.append(key)
        response = self.responses.get(key)
        if response is None:
            raise GitCommandError(f"git command failed: git {' '.join(args)}", 128)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def make_runner():
    return FakeGitRunner
