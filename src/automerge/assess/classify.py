from __future__ import annotations

from ..constants import CHECK_FAILURE_CONCLUSIONS, STATUS_FAILURE_STATES
from ..models import CheckRun, StatusItem, Verdict


def classify_status(item: StatusItem) -> Verdict:
    """
    Map a legacy commit status to a verdict.

    Unknown states count as success; only failure/error fail and only
    pending waits.
    """
    if item.state in STATUS_FAILURE_STATES:
        return Verdict.FAILURE
    if item.state == "pending":
        return Verdict.PENDING
    return Verdict.SUCCESS


def classify_check(item: CheckRun) -> Verdict:
    """
    Map a check-run to a verdict.

    A failing conclusion wins over the status field. Any other completed run
    (success, neutral, skipped or an unrecognized conclusion) is a success.
    """
    if item.conclusion in CHECK_FAILURE_CONCLUSIONS:
        return Verdict.FAILURE
    if item.status == "completed":
        return Verdict.SUCCESS
    return Verdict.PENDING
