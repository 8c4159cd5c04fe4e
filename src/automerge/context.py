from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ContextError, NotPullRequestError


def _load_event() -> Dict[str, Any]:
    event_path = os.environ.get("GITHUB_EVENT_PATH")
    if not event_path:
        return {}
    try:
        return json.loads(Path(event_path).read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _coerce_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _pr_number_from_event(event: Dict[str, Any]) -> Optional[int]:
    # pull_request / pull_request_review events carry the PR; check_suite and
    # status events only point at it indirectly.
    pr = event.get("pull_request") or {}
    if pr:
        return _coerce_int(event.get("number") or pr.get("number"))
    issue = event.get("issue") or {}
    if issue.get("pull_request"):
        return _coerce_int(issue.get("number"))
    suite = event.get("check_suite") or {}
    for candidate in suite.get("pull_requests") or []:
        number = _coerce_int(candidate.get("number"))
        if number:
            return number
    return None


@dataclass(frozen=True)
class GitHubContext:
    """Immutable GitHub Actions context for one pull request."""

    repo_full_name: str  # "owner/name"
    event_name: str
    pr_number: int

    @classmethod
    def from_environment(cls) -> "GitHubContext":
        event = _load_event()

        repo_full_name = (
            os.environ.get("GITHUB_REPOSITORY")
            or event.get("repository", {}).get("full_name")
            or ""
        )
        if not repo_full_name or "/" not in repo_full_name:
            raise ContextError("Missing or invalid GITHUB_REPOSITORY")

        event_name = os.environ.get("GITHUB_EVENT_NAME") or ""
        if not event_name:
            raise ContextError("Missing GITHUB_EVENT_NAME")

        pr_number = _coerce_int(os.environ.get("AUTOMERGE_PR_NUMBER")) or _pr_number_from_event(event)
        if not pr_number:
            raise NotPullRequestError(f"Event {event_name} is not tied to a pull request")

        return cls(
            repo_full_name=repo_full_name,
            event_name=event_name,
            pr_number=pr_number,
        )
