from __future__ import annotations

from typing import Sequence

from .assess import decide
from .constants import BLOCKED_MERGE_STATE
from .github import GitHubClient
from .labels import LabelService
from .logging import AutomergeLogger
from .models import Decision, PullRequest
from .sources import fetch_check_runs, fetch_required_checks, fetch_statuses


def should_assess(pull: PullRequest, labels: Sequence[str], require_blocked: bool = True) -> bool:
    """A pull request is worth assessing when it carries a merge-intent label and is blocked."""
    if not any(label in pull.labels for label in labels):
        return False
    if require_blocked and pull.mergeable_state != BLOCKED_MERGE_STATE:
        return False
    return True


class StatusService:
    """Decides whether a blocked pull request is waiting on checks or on reviews."""

    def __init__(self, gh: GitHubClient, labels: LabelService, logger: AutomergeLogger):
        self.gh = gh
        self.labels = labels
        self.logger = logger

    def assess_status_and_checks(self, pull: PullRequest) -> Decision:
        """
        Check for outstanding required statuses and check-runs on ``pull``.

        If the pull request is blocked and nothing required is outstanding,
        something else (reviews) is blocking it and the labels are removed.
        A failed required check also removes them. Any failed fetch leaves the
        labels alone.
        """
        logger = self.logger.bind(pr_number=pull.number)

        required = fetch_required_checks(self.gh, pull.base_ref, logger)
        if not required.ok:
            return Decision(error=required.error)

        if not required.value:
            logger.info("No required checks on base branch", branch=pull.base_ref)
            return self._apply(pull, decide([], {}, {}))

        check_runs = fetch_check_runs(self.gh, pull.head_sha, logger)
        if not check_runs.ok:
            return Decision(error=check_runs.error)
        statuses = fetch_statuses(self.gh, pull.head_sha, logger)
        if not statuses.ok:
            return Decision(error=statuses.error)

        decision = decide(required.value, check_runs.value, statuses.value)
        logger.info(
            "Assessed required checks",
            outcome=decision.outcome.value if decision.outcome else None,
            verdicts={name: verdict.value for name, verdict in decision.verdicts.items()},
        )
        return self._apply(pull, decision)

    def _apply(self, pull: PullRequest, decision: Decision) -> Decision:
        if decision.reason is not None:
            decision.removed_labels = self.labels.remove_labels(pull, decision.reason)
        return decision
