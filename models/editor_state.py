# models/editor_state.py

"""
Tracks whether the form creates a new row or updates an existing one.

The editor starts in `EditorMode.CREATING`. Requesting an edit moves it to
`EditorMode.EDITING` and remembers the synthetic id of the targeted row; the
row's position is looked up in the `RecordStore` whenever it is needed, so
deleting other rows never leaves the editor pointing at the wrong student.
"""

from __future__ import annotations

from enum import Enum


class EditorMode(str, Enum):
    CREATING = "Creating"
    EDITING = "Editing"


class EditorState:

    def __init__(self):
        self._record_id: str | None = None

    # === properties ===

    @property
    def mode(self) -> EditorMode:
        return EditorMode.CREATING if self._record_id is None else EditorMode.EDITING

    @property
    def is_creating(self) -> bool:
        return self._record_id is None

    @property
    def is_editing(self) -> bool:
        return self._record_id is not None

    @property
    def record_id(self) -> str | None:
        return self._record_id

    # === transitions ===

    def start_editing(self, record_id: str) -> None:
        self._record_id = record_id

    def reset(self) -> None:
        self._record_id = None

    def is_editing_record(self, record_id: str) -> bool:
        return self._record_id == record_id

    # === dunder methods ===

    def __repr__(self) -> str:
        if self.is_creating:
            return "EditorState(Creating)"
        return f"EditorState(EditingAt {self._record_id})"
