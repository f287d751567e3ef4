"""Persisted category selection helpers."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from snipdeck.lib.errors import StateError
from snipdeck.models.selection_state import SelectionState

STATE_VERSION = "1.0"
STATE_FILE_NAME = "state.json"


def get_state_path(state_dir: Path) -> Path:
    """Return the selection state file path inside ``state_dir``."""
    return state_dir / STATE_FILE_NAME


def load_state(state_path: Path) -> SelectionState:
    """Load selection state from disk, or a default state if there is none."""
    if not state_path.exists():
        return SelectionState(version=STATE_VERSION)

    try:
        content = state_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StateError(str(state_path), f"cannot read state file: {exc}") from exc
    if not content.strip():
        return SelectionState(version=STATE_VERSION)

    try:
        return SelectionState.model_validate_json(content)
    except ValidationError as exc:
        raise StateError(str(state_path), f"invalid state format: {exc}") from exc


def save_state(state_path: Path, state: SelectionState) -> None:
    """Persist selection state to disk, creating the directory if needed."""
    try:
        state_path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(state.model_dump(mode="json"), indent=2, sort_keys=True)
        state_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise StateError(str(state_path), f"cannot write state file: {exc}") from exc


def remember_category(state_path: Path, category: str, source_file: Path) -> SelectionState:
    """Record ``category`` as the selection for ``source_file`` and persist it."""
    state = SelectionState(
        version=STATE_VERSION,
        category=category,
        source_file=str(source_file.resolve()),
        updated_at=datetime.now(timezone.utc),
    )
    save_state(state_path, state)
    return state


def remembered_category(state_path: Path, source_file: Path) -> str | None:
    """Return the persisted category if it was chosen for ``source_file``."""
    state = load_state(state_path)
    if state.category is None or state.source_file != str(source_file.resolve()):
        return None
    return state.category
