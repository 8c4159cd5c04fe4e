from __future__ import annotations

from automerge.assess import aggregate, decide
from automerge.models import BranchOutcome, CheckRun, LabelRemovalReason, StatusItem, Verdict


def test_aggregate_outcomes() -> None:
    assert aggregate([Verdict.SUCCESS, Verdict.SUCCESS]) == BranchOutcome.ALL_SUCCESS
    assert aggregate([Verdict.SUCCESS, Verdict.PENDING, Verdict.FAILURE]) == BranchOutcome.HAS_FAILURE
    assert aggregate([Verdict.SUCCESS, Verdict.PENDING]) == BranchOutcome.INDETERMINATE
    assert aggregate([Verdict.PENDING]) == BranchOutcome.INDETERMINATE
    assert aggregate([]) == BranchOutcome.ALL_SUCCESS


def test_no_required_checks_means_outstanding_reviews() -> None:
    decision = decide([], {"x": CheckRun(name="x", status="queued")}, {})

    assert decision.reason == LabelRemovalReason.OUTSTANDING_REVIEWS
    assert decision.remove_labels is True
    assert decision.verdicts == {}


def test_all_required_succeeded() -> None:
    checks = {"ci/build": CheckRun(name="ci/build", status="completed", conclusion="success")}

    decision = decide(["ci/build"], checks, {})

    assert decision.outcome == BranchOutcome.ALL_SUCCESS
    assert decision.reason == LabelRemovalReason.OUTSTANDING_REVIEWS
    assert decision.verdicts == {"ci/build": Verdict.SUCCESS}


def test_failed_check_removes_for_status_checks() -> None:
    checks = {"ci/build": CheckRun(name="ci/build", status="completed", conclusion="failure")}
    statuses = {"legacy-ci": StatusItem(context="legacy-ci", state="success")}

    decision = decide(["ci/build", "legacy-ci"], checks, statuses)

    assert decision.outcome == BranchOutcome.HAS_FAILURE
    assert decision.reason == LabelRemovalReason.STATUS_CHECKS


def test_failure_beats_pending() -> None:
    statuses = {
        "a": StatusItem(context="a", state="error"),
        "b": StatusItem(context="b", state="pending"),
    }

    decision = decide(["a", "b"], {}, statuses)

    assert decision.reason == LabelRemovalReason.STATUS_CHECKS


def test_missing_required_check_waits() -> None:
    decision = decide(["ci/build"], {}, {})

    assert decision.outcome == BranchOutcome.INDETERMINATE
    assert decision.reason is None
    assert decision.remove_labels is False


def test_mixed_success_and_pending_waits() -> None:
    checks = {
        "build": CheckRun(name="build", status="completed", conclusion="success"),
        "deploy": CheckRun(name="deploy", status="in_progress"),
    }

    decision = decide(["build", "deploy"], checks, {})

    assert decision.reason is None
    assert decision.verdicts == {"build": Verdict.SUCCESS, "deploy": Verdict.PENDING}
