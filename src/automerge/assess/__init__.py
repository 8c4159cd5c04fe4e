"""Status aggregation: classify reports, resolve required names, decide."""

from .classify import classify_check, classify_status
from .decision import aggregate, decide
from .resolve import resolve_name, resolve_required

__all__ = [
    "aggregate",
    "classify_check",
    "classify_status",
    "decide",
    "resolve_name",
    "resolve_required",
]
