from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest


@pytest.fixture
def write_event(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    def _write(payload: Dict[str, Any]) -> Path:
        path = tmp_path / "event.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
