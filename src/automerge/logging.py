from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator

_SENSITIVE_TOKENS = ("token", "secret", "password", "authorization")


class AutomergeLogger:
    """JSON lines on stderr, mirrored as workflow annotations for warnings and errors."""

    def __init__(self, run_id: str, **fields: Any):
        self.run_id = run_id
        self._fields = dict(fields)

    def bind(self, **fields: Any) -> "AutomergeLogger":
        """Return a logger that adds ``fields`` to every record."""
        return AutomergeLogger(self.run_id, **{**self._fields, **fields})

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("error", message, **kwargs)

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        start = datetime.now(timezone.utc)
        self.debug("stage_start", stage=name)
        status = "ok"
        try:
            yield
        except Exception as exc:
            status = "error"
            self.error("stage_error", stage=name, error=str(exc))
            raise
        finally:
            duration_ms = int((datetime.now(timezone.utc) - start).total_seconds() * 1000)
            self.debug("stage_end", stage=name, duration_ms=duration_ms, status=status)

    def _emit(self, level: str, message: str, **kwargs: Any) -> None:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "run_id": self.run_id,
            "message": message,
        }
        payload.update(self._sanitize({**self._fields, **kwargs}))

        sys.stderr.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        if level in ("error", "warning"):
            sys.stderr.write(f"::{level}::{message}\n")
        sys.stderr.flush()

    @staticmethod
    def _sanitize(fields: Dict[str, Any]) -> Dict[str, Any]:
        return {
            key: "***" if any(token in key.lower() for token in _SENSITIVE_TOKENS) else value
            for key, value in fields.items()
        }
