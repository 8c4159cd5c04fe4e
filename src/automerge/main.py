from __future__ import annotations

import os
import sys
import uuid
from typing import Optional

import requests

from .config import AutomergeConfig
from .constants import ExitCode
from .context import GitHubContext
from .errors import ContextError
from .github import GitHubClient
from .labels import LabelService
from .logging import AutomergeLogger
from .models import Decision, PullRequest
from .service import StatusService, should_assess


def main() -> int:
    """Main entry point."""
    run_id = str(uuid.uuid4())
    logger = AutomergeLogger(run_id)

    try:
        config = AutomergeConfig()
    except Exception as exc:
        print(f"::error::Configuration error: {exc}")
        return ExitCode.ERROR

    try:
        ctx = GitHubContext.from_environment()
    except ContextError as exc:
        if exc.exit_code == ExitCode.SKIPPED:
            logger.info("Skipping assessment", reason=str(exc))
        else:
            logger.error(f"Failed to load GitHub context: {exc}")
        return exc.exit_code

    logger = logger.bind(repo=ctx.repo_full_name, pr_number=ctx.pr_number, event=ctx.event_name)
    token = config.github_token.get_secret_value() or os.environ.get("GITHUB_TOKEN", "")
    gh = GitHubClient(
        token=token,
        repo=ctx.repo_full_name,
        api_url=config.github_api_url,
        timeout=config.http_timeout_seconds,
    )

    try:
        pull = PullRequest.from_api(gh.get_pull_request(ctx.pr_number))
    except (requests.RequestException, ValueError, KeyError) as exc:
        logger.error("Failed to load pull request", error=str(exc))
        return ExitCode.ERROR

    if not should_assess(pull, config.label_names, require_blocked=config.require_blocked):
        logger.info(
            "Pull request does not need assessment",
            mergeable_state=pull.mergeable_state,
            labels=list(pull.labels),
        )
        _write_github_outputs(None)
        return ExitCode.SKIPPED

    labels = LabelService(gh, config.label_names, logger, dry_run=config.dry_run)
    service = StatusService(gh, labels, logger)
    with logger.stage("assess"):
        decision = service.assess_status_and_checks(pull)

    _write_github_outputs(decision)
    return ExitCode.SUCCESS


def _write_github_outputs(decision: Optional[Decision]) -> None:
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return

    if decision and decision.error is not None:
        outcome = "aborted"
    elif decision and decision.outcome:
        outcome = decision.outcome.value
    else:
        outcome = "none"
    action = decision.reason.value if decision and decision.reason else "none"
    removed = ",".join(decision.removed_labels) if decision else ""
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"outcome={outcome}\n")
        f.write(f"label_action={action}\n")
        f.write(f"removed_labels={removed}\n")


if __name__ == "__main__":
    sys.exit(main())
