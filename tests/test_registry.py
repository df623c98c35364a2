# tests/test_registry.py

import json

from core.response import ErrorCode
from core.validators import (
    CONTACT_MESSAGE,
    EMAIL_MESSAGE,
    NAME_MESSAGE,
    REQUIRED_FIELDS_MESSAGE,
)
from models.editor_state import EditorMode
from models.record_store import STORAGE_KEY
from models.registry import StudentRegistry

ALICE = {
    "name": "Alice Smith",
    "student_id": "1001",
    "email": "a@s.com",
    "contact": "1234567890",
}


def stored_entries(storage):
    return json.loads(storage.get_item(STORAGE_KEY))


# === initial load ===


def test_initial_load_of_empty_store(registry):
    assert registry.records == []
    assert registry.mode is EditorMode.CREATING
    assert registry.error_message is None


def test_initial_load_reports_dropped_records(memory_storage):
    memory_storage.set_item(
        STORAGE_KEY,
        json.dumps(
            [
                {"name": "Alice Smith", "studentId": "1001", "email": "a@s.com", "contact": "1234567890"},
                {"name": "Bob", "studentId": "abc", "email": "b@s.com", "contact": "1234567890"},
            ]
        ),
    )
    registry = StudentRegistry(memory_storage)

    response = registry.request_initial_load()

    assert response.success
    assert len(response.data["records"]) == 1
    assert response.data["rejected"][0]["studentId"] == "abc"
    assert "Dropped 1 malformed record(s)." in response.detail


def test_initial_load_of_undecodable_data(memory_storage):
    memory_storage.set_item(STORAGE_KEY, "not json")
    registry = StudentRegistry(memory_storage)

    response = registry.request_initial_load()

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
    assert registry.records == []


def test_initial_load_of_empty_stored_value(memory_storage):
    memory_storage.set_item(STORAGE_KEY, "")
    registry = StudentRegistry(memory_storage)

    response = registry.request_initial_load()

    assert response.success
    assert response.data["records"] == []
    assert response.data["rejected"] == []


def test_initial_load_of_non_string_file_value(file_storage):
    with open(file_storage.path, "w", encoding="utf-8") as f:
        json.dump({STORAGE_KEY: [{"name": "Alice Smith"}]}, f)
    registry = StudentRegistry(file_storage)

    response = registry.request_initial_load()

    assert not response.success
    assert response.error is ErrorCode.PERSISTENCE_FAILED
    assert registry.records == []


def test_initial_load_resets_editor(populated_registry):
    populated_registry.request_edit(0)

    populated_registry.request_initial_load()

    assert populated_registry.mode is EditorMode.CREATING


# === submit ===


def test_submit_appends_and_persists(registry, memory_storage):
    response = registry.submit_form(**ALICE)

    assert response.success
    assert response.data["index"] == 0
    assert len(registry) == 1
    assert registry.records[0].to_dict() == {
        "name": "Alice Smith",
        "studentId": "1001",
        "email": "a@s.com",
        "contact": "1234567890",
    }
    assert stored_entries(memory_storage) == [registry.records[0].to_dict()]
    assert registry.mode is EditorMode.CREATING


def test_submit_validation_failure_does_not_mutate(registry, memory_storage):
    response = registry.submit_form(**dict(ALICE, name="Alice3"))

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert response.detail == NAME_MESSAGE
    assert registry.error_message == NAME_MESSAGE
    assert registry.records == []
    assert memory_storage.get_item(STORAGE_KEY) is None


def test_submit_reports_one_message_at_a_time(registry):
    response = registry.submit_form(name="", student_id="x", email="y", contact="z")
    assert response.detail == REQUIRED_FIELDS_MESSAGE

    response = registry.submit_form(**dict(ALICE, contact="123", email="bad"))
    assert response.detail == CONTACT_MESSAGE

    response = registry.submit_form(**dict(ALICE, email="bad"))
    assert response.detail == EMAIL_MESSAGE


def test_successful_submit_clears_error_message(registry):
    registry.submit_form(**dict(ALICE, email="bad"))
    assert registry.error_message == EMAIL_MESSAGE

    registry.submit_form(**ALICE)
    assert registry.error_message is None


def test_duplicate_student_ids_allowed_by_default(registry):
    registry.submit_form(**ALICE)
    response = registry.submit_form(**dict(ALICE, name="Alice Jones"))

    assert response.success
    assert len(registry) == 2


def test_unique_student_id_policy(memory_storage):
    registry = StudentRegistry(memory_storage, enforce_unique_student_id=True)
    registry.submit_form(**ALICE)

    response = registry.submit_form(**dict(ALICE, name="Alice Jones"))

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert response.detail == "A student with the ID '1001' already exists."
    assert len(registry) == 1

    # the row being edited may keep its own ID
    registry.request_edit(0)
    response = registry.submit_form(**dict(ALICE, name="Alice Jones"))
    assert response.success


# === edit ===


def test_request_edit_prefills_form(populated_registry):
    response = populated_registry.request_edit(1)

    assert response.success
    assert response.data["form_values"] == {
        "name": "Bob Jones",
        "student_id": "1002",
        "email": "bob@school.edu",
        "contact": "5551234567",
    }
    assert populated_registry.mode is EditorMode.EDITING
    assert populated_registry.editing_index == 1


def test_request_edit_out_of_bounds(populated_registry):
    response = populated_registry.request_edit(7)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404
    assert populated_registry.mode is EditorMode.CREATING


def test_submit_while_editing_replaces_in_place(populated_registry, memory_storage):
    original_id = populated_registry.records[1].id
    populated_registry.request_edit(1)

    response = populated_registry.submit_form(
        **dict(populated_registry.form_values, name="Robert Jones")
    )

    assert response.success
    assert response.data["index"] == 1
    assert len(populated_registry) == 3
    assert populated_registry.records[1].name == "Robert Jones"
    assert populated_registry.records[1].id == original_id
    assert populated_registry.mode is EditorMode.CREATING
    assert stored_entries(memory_storage)[1]["name"] == "Robert Jones"


def test_failed_submit_while_editing_keeps_editing(populated_registry):
    populated_registry.request_edit(0)

    response = populated_registry.submit_form(**dict(ALICE, contact="12"))

    assert not response.success
    assert populated_registry.mode is EditorMode.EDITING
    assert populated_registry.records[0].contact == "1234567890"


def test_cancel_edit(populated_registry):
    populated_registry.request_edit(0)

    response = populated_registry.cancel_edit()

    assert response.success
    assert populated_registry.mode is EditorMode.CREATING
    assert populated_registry.form_values == {
        "name": "",
        "student_id": "",
        "email": "",
        "contact": "",
    }


# === delete ===


def test_request_delete_persists(populated_registry, memory_storage):
    response = populated_registry.request_delete(0)

    assert response.success
    assert response.data["record"].name == "Alice Smith"
    assert [r.name for r in populated_registry.records] == ["Bob Jones", "Carol White"]
    assert [e["name"] for e in stored_entries(memory_storage)] == [
        "Bob Jones",
        "Carol White",
    ]


def test_request_delete_out_of_bounds(populated_registry):
    response = populated_registry.request_delete(3)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert len(populated_registry) == 3


def test_deleting_edited_row_resets_editor(populated_registry):
    populated_registry.request_edit(1)

    populated_registry.request_delete(1)

    assert populated_registry.mode is EditorMode.CREATING
    assert populated_registry.editing_index is None


def test_deleting_earlier_row_keeps_edit_target(populated_registry):
    populated_registry.request_edit(2)

    populated_registry.request_delete(0)

    assert populated_registry.mode is EditorMode.EDITING
    assert populated_registry.editing_index == 1

    response = populated_registry.submit_form(
        **dict(populated_registry.form_values, name="Caroline White")
    )

    assert response.success
    assert [r.name for r in populated_registry.records] == [
        "Bob Jones",
        "Caroline White",
    ]


# === listeners ===


def test_listeners_notified_after_mutations(registry):
    calls = []

    def listener(changed):
        calls.append(len(changed))

    registry.add_listener(listener)

    registry.submit_form(**ALICE)
    registry.submit_form(**dict(ALICE, name="Bad1"))
    registry.request_edit(0)
    registry.request_delete(0)

    assert calls == [1, 0]

    registry.remove_listener(listener)
    registry.submit_form(**ALICE)
    assert calls == [1, 0]


def test_failing_listener_does_not_break_operation(registry):
    def broken_listener(_):
        raise RuntimeError("render failed")

    registry.add_listener(broken_listener)

    response = registry.submit_form(**ALICE)

    assert response.success
    assert len(registry) == 1


# === persistence failures ===


def test_persistence_failure_keeps_in_memory_change(failing_storage):
    registry = StudentRegistry(failing_storage)
    registry.request_initial_load()
    calls = []
    registry.add_listener(lambda changed: calls.append(len(changed)))

    response = registry.submit_form(**ALICE)

    assert not response.success
    assert response.error is ErrorCode.PERSISTENCE_FAILED
    assert response.data["record"].name == "Alice Smith"
    assert len(registry) == 1
    assert registry.error_message.startswith("Changes could not be saved")
    assert calls == [1]


# === full scenario ===


def test_add_edit_delete_scenario(registry, memory_storage):
    response = registry.submit_form(**ALICE)
    assert response.success
    assert len(registry) == 1
    assert registry.records[0].to_dict() == {
        "name": "Alice Smith",
        "studentId": "1001",
        "email": "a@s.com",
        "contact": "1234567890",
    }

    response = registry.request_edit(0)
    assert response.success

    response = registry.submit_form(**dict(ALICE, name="Alice Jones"))
    assert response.success
    assert len(registry) == 1
    assert registry.records[0].name == "Alice Jones"
    assert registry.records[0].student_id == "1001"
    assert registry.records[0].email == "a@s.com"
    assert registry.records[0].contact == "1234567890"

    response = registry.request_delete(0)
    assert response.success
    assert len(registry) == 0
    assert stored_entries(memory_storage) == []


def test_state_survives_reload(file_storage):
    registry = StudentRegistry(file_storage)
    registry.request_initial_load()
    registry.submit_form(**ALICE)
    registry.submit_form(**dict(ALICE, name="Bob Jones", student_id="1002"))

    reopened = StudentRegistry(file_storage)
    reopened.request_initial_load()

    assert reopened.records == registry.records
