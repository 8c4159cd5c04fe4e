from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ..models import BranchOutcome, CheckRun, Decision, LabelRemovalReason, StatusItem, Verdict
from .resolve import resolve_required


def aggregate(verdicts: Iterable[Verdict]) -> BranchOutcome:
    """Fold per-check verdicts into one branch outcome."""
    seen = set(verdicts)
    if seen <= {Verdict.SUCCESS}:
        return BranchOutcome.ALL_SUCCESS
    if Verdict.FAILURE in seen:
        return BranchOutcome.HAS_FAILURE
    return BranchOutcome.INDETERMINATE


_REASON_BY_OUTCOME = {
    BranchOutcome.ALL_SUCCESS: LabelRemovalReason.OUTSTANDING_REVIEWS,
    BranchOutcome.HAS_FAILURE: LabelRemovalReason.STATUS_CHECKS,
    BranchOutcome.INDETERMINATE: None,
}


def decide(
    required_names: Sequence[str],
    check_map: Mapping[str, CheckRun],
    status_map: Mapping[str, StatusItem],
) -> Decision:
    """
    Decide what to do with the merge-intent labels of a blocked pull request.

    Returns a Decision whose ``reason`` is:
        OUTSTANDING_REVIEWS: nothing is required, or every required check passed,
            so the block must come from reviews
        STATUS_CHECKS: at least one required check failed
        None: some required check is still pending; wait
    """
    if not required_names:
        return Decision(
            outcome=BranchOutcome.ALL_SUCCESS,
            reason=LabelRemovalReason.OUTSTANDING_REVIEWS,
        )

    verdicts = resolve_required(required_names, check_map, status_map)
    outcome = aggregate(verdicts.values())
    return Decision(outcome=outcome, reason=_REASON_BY_OUTCOME[outcome], verdicts=verdicts)
