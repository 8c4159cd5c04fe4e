from __future__ import annotations

from enum import Enum


class ExitCode(int, Enum):
    """Process exit codes."""

    SUCCESS = 0
    ERROR = 2
    SKIPPED = 10


# Conclusions that fail a check-run no matter what its status says.
CHECK_FAILURE_CONCLUSIONS = frozenset({"failure", "action_required", "cancelled", "timed_out"})

STATUS_FAILURE_STATES = frozenset({"failure", "error"})

DEFAULT_LABELS = ("automerge", "priority")
BLOCKED_MERGE_STATE = "blocked"
