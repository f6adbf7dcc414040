"""JSON persistence for the tracker state.

The whole AppState is written as one document after every mutation. Loading
never fails: a missing or unusable file yields a fresh, empty state.
"""
import json
import os
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from tracker.models.schemas import AppState
from tracker.utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


def _ensure_dir(path: Path) -> None:
    if path.parent and not path.parent.exists():
        os.makedirs(path.parent, exist_ok=True)


def _discard(tmp_path: Path) -> None:
    try:
        tmp_path.unlink(missing_ok=True)
    except (OSError, ValueError) as e:
        logger.debug("Could not remove %s: %s", tmp_path, e)


def save_state(state: AppState, path: PathLike) -> bool:
    """Write ``state`` to ``path``, replacing any previous contents.

    The document goes to a temporary sibling first and is then moved into
    place. Returns False (after logging) if the write failed; the temporary
    file is removed in that case.
    """
    target = Path(path)
    tmp_path = target.with_name(target.name + ".tmp")
    try:
        _ensure_dir(target)
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(state.model_dump_json(indent=2))
        os.replace(tmp_path, target)
    except (OSError, ValueError) as e:
        logger.error("Failed to save state to %s: %s", target, e)
        _discard(tmp_path)
        return False
    return True


def load_state(path: PathLike) -> AppState:
    """Read the state document at ``path``.

    Falls back to ``AppState()`` when the file is absent, unreadable, not
    JSON, or does not match the expected structure.
    """
    target = Path(path)
    if not target.exists():
        logger.debug("No state file at %s; starting empty", target)
        return AppState()
    try:
        with open(target, "r", encoding="utf-8") as f:
            data = json.load(f)
        state = AppState.model_validate(data)
    except (OSError, ValueError, ValidationError) as e:
        logger.warning("Ignoring unreadable state file %s: %s", target, e)
        return AppState()
    logger.info("Loaded %d task(s) from %s", len(state.tasks), target)
    return state
