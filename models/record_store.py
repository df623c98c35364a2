# models/record_store.py

"""
The RecordStore holds the ordered list of `StudentRecord` rows shown in the table.

Rows are addressed by position (the table index) or by their synthetic `id`.
Order is insertion order; an update replaces a row in place.

The whole list is persisted as a single JSON array under `STORAGE_KEY` in a
key-value backing store. `persist()` always rewrites the full value, and
`load()` replaces the in-memory list with whatever the store holds.

Stored entries are re-validated on load. Malformed entries are dropped, logged,
and handed back to the caller so they can be reported.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

from core.exceptions import PersistenceError
from core.storage import KeyValueStore
from models.student import StudentRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = "studentsData"


class RecordStore:

    def __init__(self, backing_store: KeyValueStore, key: str = STORAGE_KEY):
        self._backing_store = backing_store
        self._key = key
        self._records: list[StudentRecord] = []

    # === properties ===

    @property
    def records(self) -> list[StudentRecord]:
        return list(self._records)

    # === persistence and import ===

    def load(self) -> list[Any]:
        """
        Replaces the in-memory rows with the rows held in the backing store.

        Returns:
            list[Any]: The stored entries that failed validation and were dropped. Empty if every entry was accepted.

        Raises:
            PersistenceError: If the backing store cannot be read.
            ValueError: If the stored value is not valid JSON or is not a JSON array.

        Notes:
            - If nothing is stored under the key, or the stored value is empty, the store is emptied.
            - On error the in-memory rows are left untouched.
        """
        try:
            raw = self._backing_store.get_item(self._key)
        except PersistenceError:
            raise
        except OSError as e:
            raise PersistenceError(f"Failed to read stored records: {e}")

        if not raw:
            self._records = []
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            raise ValueError(f"Stored records are not valid JSON: {e}")

        if not isinstance(data, list):
            raise ValueError(
                f"Expected '{self._key}' to contain a list of records."
            )

        loaded: list[StudentRecord] = []
        rejected: list[Any] = []

        for entry in data:
            try:
                loaded.append(StudentRecord.from_dict(entry))
            except (ValueError, TypeError) as e:
                logger.warning("Dropping malformed stored record %r: %s", entry, e)
                rejected.append(entry)

        self._records = loaded

        logger.info(
            "Loaded %d record(s) from '%s' (%d dropped)",
            len(loaded),
            self._key,
            len(rejected),
        )

        return rejected

    def persist(self) -> None:
        """
        Serializes every row and writes the result under the storage key.

        Raises:
            PersistenceError: If the backing store rejects the write.

        Notes:
            - This intentionally overwrites the previously stored value.
        """
        payload = json.dumps([record.to_dict() for record in self._records])

        try:
            self._backing_store.set_item(self._key, payload)
        except PersistenceError:
            raise
        except OSError as e:
            raise PersistenceError(f"Failed to write stored records: {e}")

    # === data accessors ===

    def index_of(self, record_id: str) -> int:
        """
        Returns the current position of the row with the given synthetic id.

        Raises:
            KeyError: If no row has that id.
        """
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index

        raise KeyError(record_id)

    def find_by_id(self, record_id: str) -> StudentRecord | None:
        return next((r for r in self._records if r.id == record_id), None)

    def find_by_student_id(self, student_id: str) -> list[StudentRecord]:
        student_id = student_id.strip()
        return [r for r in self._records if r.student_id == student_id]

    # === data manipulators ===

    def append(self, record: StudentRecord) -> None:
        self._records.append(record)

    def replace_at(self, index: int, record: StudentRecord) -> None:
        self._check_index(index)
        self._records[index] = record

    def delete_at(self, index: int) -> StudentRecord:
        self._check_index(index)
        return self._records.pop(index)

    # === helper methods ===

    def _check_index(self, index: int) -> None:
        # negative indexes are rejected rather than counted from the end
        if not 0 <= index < len(self._records):
            raise IndexError(
                f"No record at position {index} (store holds {len(self._records)})."
            )

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(list(self._records))

    def __getitem__(self, index: int) -> StudentRecord:
        self._check_index(index)
        return self._records[index]

    def __repr__(self) -> str:
        return f"RecordStore({self._key!r}, {len(self._records)} records)"
