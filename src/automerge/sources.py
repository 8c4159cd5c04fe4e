"""
Fetch-and-classify helpers around the GitHub client.

Every function returns a FetchResult instead of raising, so the caller can
abort an evaluation on the first failure without guessing.
"""

from __future__ import annotations

from typing import Dict, List

import requests

from .errors import FetchError
from .github import GitHubClient
from .logging import AutomergeLogger
from .models import BranchProtection, CheckRun, FetchResult, StatusItem

# requests.JSONDecodeError is a ValueError; Key/Type/Attribute cover payloads of the wrong shape.
_FETCH_ERRORS = (requests.RequestException, ValueError, KeyError, TypeError, AttributeError)


def fetch_required_checks(
    gh: GitHubClient,
    branch_ref: str,
    logger: AutomergeLogger,
) -> FetchResult[List[str]]:
    """Required check names for ``branch_ref``; empty when the branch is unprotected."""
    try:
        protection = BranchProtection.from_api(gh.get_branch(branch_ref))
    except _FETCH_ERRORS as exc:
        logger.warning("There was a problem getting the branch protections", branch=branch_ref, error=str(exc))
        return FetchResult.failure(FetchError("branch protection", str(exc)))

    if not protection.protected:
        logger.info("Branch is not protected", branch=branch_ref)
    return FetchResult.success(list(protection.required_check_names))


def fetch_check_runs(
    gh: GitHubClient,
    head_sha: str,
    logger: AutomergeLogger,
) -> FetchResult[Dict[str, CheckRun]]:
    try:
        runs = [CheckRun.from_api(raw) for raw in gh.list_check_runs(head_sha)]
    except _FETCH_ERRORS as exc:
        logger.warning("Failed to fetch check-runs", head_sha=head_sha, error=str(exc))
        return FetchResult.failure(FetchError("check-runs", str(exc)))
    # Later entries overwrite earlier ones with the same name.
    return FetchResult.success({run.name: run for run in runs})


def fetch_statuses(
    gh: GitHubClient,
    head_sha: str,
    logger: AutomergeLogger,
) -> FetchResult[Dict[str, StatusItem]]:
    try:
        statuses = [StatusItem.from_api(raw) for raw in gh.list_statuses(head_sha)]
    except _FETCH_ERRORS as exc:
        logger.warning("Failed to fetch commit statuses", head_sha=head_sha, error=str(exc))
        return FetchResult.failure(FetchError("statuses", str(exc)))
    return FetchResult.success({status.context: status for status in statuses})
