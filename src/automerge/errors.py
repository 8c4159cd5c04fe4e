from __future__ import annotations

from .constants import ExitCode


class AutomergeError(Exception):
    """Base exception for all automerge errors."""

    exit_code: ExitCode = ExitCode.ERROR


class ContextError(AutomergeError):
    """GitHub Actions context is missing or invalid."""


class NotPullRequestError(ContextError):
    """Event is not tied to a pull request (expected skip)."""

    exit_code = ExitCode.SKIPPED


class FetchError(AutomergeError):
    """A GitHub API read failed (network, non-2xx or malformed payload)."""

    def __init__(self, what: str, detail: str = "") -> None:
        super().__init__(f"{what}: {detail}" if detail else what)
        self.what = what
        self.detail = detail
