import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tracker.models.schemas import AppState, Task  # noqa: E402


@pytest.fixture()
def state_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def populated_state() -> AppState:
    return AppState(
        tasks=[
            Task(name="Write Report", accumulated=120),
            Task(name="Review PR", accumulated=0),
            Task(name="Email", accumulated=3661),
        ],
        selected=1,
        new_task_name="Plan sprint",
    )
