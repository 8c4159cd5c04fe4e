from __future__ import annotations

from typing import List, Sequence

import requests

from .github import GitHubClient
from .logging import AutomergeLogger
from .models import LabelRemovalReason, PullRequest


class LabelService:
    """Takes merge-intent labels off a pull request."""

    def __init__(
        self,
        gh: GitHubClient,
        labels: Sequence[str],
        logger: AutomergeLogger,
        dry_run: bool = False,
    ):
        self.gh = gh
        self.labels = tuple(labels)
        self.logger = logger
        self.dry_run = dry_run

    def present_labels(self, pull: PullRequest) -> List[str]:
        return [label for label in self.labels if label in pull.labels]

    def remove_labels(self, pull: PullRequest, reason: LabelRemovalReason) -> List[str]:
        """
        Remove every configured label that is on ``pull``.

        Removal of an already-absent label is not an error. API failures are
        logged and skipped; the caller never sees them.

        Returns:
            Names of the labels that were removed (or would be, in dry-run).
        """
        removed: List[str] = []
        for label in self.present_labels(pull):
            if self.dry_run:
                self.logger.info("label_removal_dry_run", pr_number=pull.number, label=label, reason=reason.value)
                removed.append(label)
                continue
            try:
                if self.gh.remove_label(pull.number, label):
                    removed.append(label)
            except requests.RequestException as exc:
                self.logger.error("Failed to remove label", pr_number=pull.number, label=label, error=str(exc))

        if removed:
            self.logger.warning(
                reason.message,
                pr_number=pull.number,
                reason=reason.value,
                labels=removed,
            )
        return removed
