from __future__ import annotations

from typing import Dict, Iterable, Mapping, Tuple

from ..models import CheckRun, StatusItem, Verdict
from .classify import classify_check, classify_status


def resolve_name(
    name: str,
    check_map: Mapping[str, CheckRun],
    status_map: Mapping[str, StatusItem],
) -> Tuple[str, Verdict]:
    """
    Determine the verdict for one required check name.

    Check-runs take precedence over legacy statuses; a name reported by
    neither is still pending.
    """
    if name in check_map:
        return name, classify_check(check_map[name])
    if name in status_map:
        return name, classify_status(status_map[name])
    return name, Verdict.PENDING


def resolve_required(
    names: Iterable[str],
    check_map: Mapping[str, CheckRun],
    status_map: Mapping[str, StatusItem],
) -> Dict[str, Verdict]:
    return dict(resolve_name(name, check_map, status_map) for name in names)
