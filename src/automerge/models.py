from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from .errors import FetchError

T = TypeVar("T")


class Verdict(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    PENDING = "pending"


class BranchOutcome(str, Enum):
    ALL_SUCCESS = "all_success"
    HAS_FAILURE = "has_failure"
    INDETERMINATE = "indeterminate"


class LabelRemovalReason(str, Enum):
    """Why merge-intent labels were taken off a pull request."""

    OUTSTANDING_REVIEWS = "outstanding_reviews"
    STATUS_CHECKS = "status_checks"

    @property
    def message(self) -> str:
        if self is LabelRemovalReason.STATUS_CHECKS:
            return "Required status checks failed; remove the failure and re-add the label to retry."
        return "No status checks are outstanding but the pull request is still blocked; reviews are outstanding."


@dataclass(frozen=True)
class StatusItem:
    """Legacy commit status (``/commits/{sha}/status``)."""

    context: str
    state: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "StatusItem":
        return cls(context=data["context"], state=data.get("state") or "")


@dataclass(frozen=True)
class CheckRun:
    """Check-run report (``/commits/{sha}/check-runs``)."""

    name: str
    status: str
    conclusion: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CheckRun":
        return cls(
            name=data["name"],
            status=data.get("status") or "",
            conclusion=data.get("conclusion"),
        )


@dataclass(frozen=True)
class BranchProtection:
    protected: bool
    required_check_names: Tuple[str, ...] = ()

    @classmethod
    def from_api(cls, branch: Dict[str, Any]) -> "BranchProtection":
        """Build from a ``GET /branches/{branch}`` payload."""
        if not branch.get("protected"):
            return cls(protected=False)

        protection = branch.get("protection") or {}
        required = protection.get("required_status_checks") or {}
        names: List[str] = list(required.get("contexts") or [])
        for check in required.get("checks") or []:
            context = check.get("context")
            if context and context not in names:
                names.append(context)
        return cls(protected=True, required_check_names=tuple(dict.fromkeys(names)))


@dataclass(frozen=True)
class PullRequest:
    number: int
    head_sha: str
    base_ref: str
    labels: Tuple[str, ...] = ()
    mergeable_state: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PullRequest":
        return cls(
            number=int(data["number"]),
            head_sha=(data.get("head") or {}).get("sha") or "",
            base_ref=(data.get("base") or {}).get("ref") or "",
            labels=tuple(label.get("name", "") for label in data.get("labels") or []),
            mergeable_state=data.get("mergeable_state"),
        )


@dataclass
class Decision:
    """Result of one evaluation. ``reason`` of None means no label action."""

    outcome: Optional[BranchOutcome] = None
    reason: Optional[LabelRemovalReason] = None
    verdicts: Dict[str, Verdict] = field(default_factory=dict)
    removed_labels: List[str] = field(default_factory=list)
    # Set when a fetch failed and the evaluation was abandoned.
    error: Optional[FetchError] = None

    @property
    def remove_labels(self) -> bool:
        return self.reason is not None


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FetchResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult[T]":
        return cls(error=error)
