# tests/conftest.py

import json

import pytest

from core.storage import JsonFileStorage, KeyValueStore, MemoryStorage
from models.record_store import STORAGE_KEY, RecordStore
from models.registry import StudentRegistry
from models.student import StudentRecord


class FailingStorage(KeyValueStore):
    """Backing store that accepts reads but rejects every write, like a full quota."""

    def __init__(self, initial: str | None = None):
        self._value = initial

    def get_item(self, key: str) -> str | None:
        return self._value

    def set_item(self, key: str, value: str) -> None:
        raise OSError("quota exceeded")

    def remove_item(self, key: str) -> None:
        raise OSError("quota exceeded")


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def file_storage(tmp_path):
    return JsonFileStorage(str(tmp_path / "storage.json"))


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def sample_record():
    return StudentRecord("Alice Smith", "1001", "a@s.com", "1234567890")


@pytest.fixture
def sample_records():
    return [
        StudentRecord("Alice Smith", "1001", "a@s.com", "1234567890"),
        StudentRecord("Bob Jones", "1002", "bob@school.edu", "5551234567"),
        StudentRecord("Carol White", "1003", "carol@school.edu", "5559876543"),
    ]


@pytest.fixture
def record_store(memory_storage):
    return RecordStore(memory_storage)


@pytest.fixture
def populated_store(memory_storage, sample_records):
    memory_storage.set_item(
        STORAGE_KEY, json.dumps([r.to_dict() for r in sample_records])
    )
    store = RecordStore(memory_storage)
    store.load()
    return store


@pytest.fixture
def registry(memory_storage):
    registry = StudentRegistry(memory_storage)
    registry.request_initial_load()
    return registry


@pytest.fixture
def populated_registry(memory_storage, sample_records):
    memory_storage.set_item(
        STORAGE_KEY, json.dumps([r.to_dict() for r in sample_records])
    )
    registry = StudentRegistry(memory_storage)
    registry.request_initial_load()
    return registry


@pytest.fixture
def failing_registry(sample_records):
    registry = StudentRegistry(
        FailingStorage(json.dumps([r.to_dict() for r in sample_records]))
    )
    registry.request_initial_load()
    return registry
