# core/storage.py

"""
Key-value backing stores for persisted registry data.

Both stores hold string values under string keys, the same contract as browser
local storage. `MemoryStorage` keeps everything in a dictionary and is used for
tests and throwaway sessions. `JsonFileStorage` keeps every key in one JSON
object on disk and rewrites the whole file on each write.

Read and write failures are raised as `PersistenceError` so callers can report
them without caring which store is in use.
"""

from __future__ import annotations

import json
import logging
import os

from core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    Minimal interface shared by all backing stores.

    Subclasses must implement `get_item()`, `set_item()`, and `remove_item()`.
    """

    def get_item(self, key: str) -> str | None:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStore):

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items


class JsonFileStorage(KeyValueStore):
    """
    File-backed key-value store.

    Attributes:
        path (str): The JSON file holding all keys.

    Notes:
        - A missing file reads as an empty store; it is created on the first write.
        - A key holding a non-string value is reported as a `PersistenceError` on read.
        - The caller is responsible for ensuring the parent directory exists.
        - Every write replaces the whole file. There is no partial-write guarantee beyond what the filesystem offers.
    """

    def __init__(self, path: str):
        self._path = path

    # === properties ===

    @property
    def path(self) -> str:
        return self._path

    # === key-value interface ===

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)

        if value is not None and not isinstance(value, str):
            raise PersistenceError(
                f"Storage file {self._path} holds a non-string value for '{key}'."
            )

        return value

    def set_item(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Stored values must be strings, not {type(value)}.")

        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()

        if items.pop(key, None) is not None:
            self._write_all(items)

    # === file helpers ===

    def _read_all(self) -> dict[str, str]:
        """
        Helper method to open, load, and return the stored key-value pairs.

        Returns:
            The deserialized dictionary, or an empty dictionary if the file does not exist.

        Raises:
            PersistenceError: If the file cannot be read or does not contain a JSON object.
        """
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)

        except FileNotFoundError:
            return {}

        except json.JSONDecodeError as e:
            raise PersistenceError(f"Storage file {self._path} is not valid JSON: {e}")

        except OSError as e:
            raise PersistenceError(f"Failed to read storage file {self._path}: {e}")

        if not isinstance(data, dict):
            raise PersistenceError(
                f"Storage file {self._path} must contain a JSON object."
            )

        return data

    def _write_all(self, items: dict[str, str]) -> None:
        # this intentionally overwrites existing data
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2)

        except OSError as e:
            raise PersistenceError(f"Failed to write storage file {self._path}: {e}")

        logger.debug("Wrote %d key(s) to %s", len(items), self._path)

    def __repr__(self) -> str:
        return f"JsonFileStorage({self._path!r})"
