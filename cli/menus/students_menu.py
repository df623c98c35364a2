# cli/menus/students_menu.py

"""
Manage Students menu for the Student Registry CLI.

This module defines the full interface for managing `StudentRecord` rows, including:
- Adding new students
- Editing a student (the prompts are pre-filled with the current values)
- Deleting a student
- Viewing the student table

All operations are routed through the `StudentRegistry` API for consistency, validation, and persistence.
Every change is saved immediately; the table is re-rendered by the data-changed listener registered in `run()`.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.response import ErrorCode
from models.registry import StudentRegistry

FORM_FIELDS = [
    ("name", "Student Name"),
    ("student_id", "Student ID"),
    ("email", "Email Address"),
    ("contact", "Contact Number"),
]


def run(registry: StudentRegistry, zero_option: str = "Exit Program") -> None:
    """
    Top-level loop with dispatch for the Manage Students menu.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.
        zero_option (str): Label for leaving the menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - The table listener is registered for the lifetime of the menu and removed on the way out.
    """
    title = formatters.format_banner_text("Manage Students")
    options = [
        ("Add Student", add_student),
        ("Edit Student", find_and_edit_student),
        ("Delete Student", find_and_delete_student),
        ("View Students", view_students),
    ]

    registry.add_listener(render_table)

    try:
        while True:
            menu_response = helpers.display_menu(title, options, zero_option)

            if menu_response is MenuSignal.EXIT:
                break

            elif callable(menu_response):
                menu_response(registry)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        registry.remove_listener(render_table)


def render_table(registry: StudentRegistry) -> None:
    banner = formatters.format_banner_text("Students")
    print(f"\n{banner}")
    helpers.display_student_table(registry)


# === add student ===


def add_student(registry: StudentRegistry) -> None:
    """
    Loops a prompt to collect the form fields and submit a new student.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.

    Notes:
        - Blank fields are submitted as-is so the registry reports the "All fields are required" message.
        - Any edit left in progress is cancelled first, so the submission always creates a new row.
        - The loop ends if a change cannot be saved; the new row is kept in memory.
    """
    registry.cancel_edit()

    while True:
        values = prompt_form_fields()
        registry_response = registry.submit_form(**values)

        if not registry_response.success:
            helpers.display_response_failure(registry_response)

            if registry_response.error is ErrorCode.PERSISTENCE_FAILED:
                break

        else:
            print(f"\n{registry_response.detail}")

        if not helpers.confirm_action(
            "Would you like to continue adding new students?"
        ):
            break

    helpers.returning_to("Manage Students menu")


def prompt_form_fields() -> dict[str, str]:
    values: dict[str, str] = {}

    for key, label in FORM_FIELDS:
        values[key] = helpers.prompt_user_input(f"Enter {label}:")

    return values


# === edit student ===


def find_and_edit_student(registry: StudentRegistry) -> None:
    """
    Prompts user to select a table row and then passes the result to `edit_student()`.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.
    """
    index = helpers.prompt_row_selection(registry, "edit")

    if index is MenuSignal.CANCEL:
        return
    index = cast(int, index)

    edit_student(index, registry)


def edit_student(index: int, registry: StudentRegistry) -> None:
    """
    Interface for editing the fields of a student row.

    Args:
        index (int): The row's position in the table.
        registry (StudentRegistry): The active `StudentRegistry`.

    Notes:
        - Each prompt shows the current value; leaving it blank keeps that value.
        - On a failed submission the user may retry with the same row still selected, or give up, which cancels the edit.
        - If the update cannot be saved, the failure is reported and the menu returns; the row keeps the new values in memory.
    """
    registry_response = registry.request_edit(index)

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        return

    print("\nYou are editing the following student:")
    print(model_formatters.format_student_multiline(registry_response.data["record"]))

    while True:
        values = prompt_form_fields_with_defaults(registry.form_values)
        registry_response = registry.submit_form(**values)

        if registry_response.success:
            print(f"\n{registry_response.detail}")
            break

        helpers.display_response_failure(registry_response)

        if registry_response.error is ErrorCode.PERSISTENCE_FAILED:
            break

        if not registry.editor_state.is_editing or not helpers.confirm_action(
            "Would you like to try editing this student again?"
        ):
            registry.cancel_edit()
            helpers.returning_without_changes()
            break

    helpers.returning_to("Manage Students menu")


def prompt_form_fields_with_defaults(current: dict[str, str]) -> dict[str, str]:
    values: dict[str, str] = {}

    for key, label in FORM_FIELDS:
        response = helpers.prompt_user_input_or_default(
            f"Enter {label} (leave blank to keep '{current[key]}'):"
        )

        if response is MenuSignal.DEFAULT:
            values[key] = current[key]
        else:
            values[key] = cast(str, response)

    return values


# === delete student ===


def find_and_delete_student(registry: StudentRegistry) -> None:
    """
    Prompts user to select a table row and then passes the result to `confirm_and_delete()`.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.
    """
    index = helpers.prompt_row_selection(registry, "delete")

    if index is MenuSignal.CANCEL:
        return
    index = cast(int, index)

    confirm_and_delete(index, registry)


def confirm_and_delete(index: int, registry: StudentRegistry) -> None:
    record = registry.records[index]

    print("\nYou are viewing the following student:")
    print(model_formatters.format_student_oneline(record))

    if not helpers.confirm_action(
        "Are you sure you want to permanently delete this student? This action cannot be undone."
    ):
        helpers.returning_without_changes()
        return

    registry_response = registry.request_delete(index)

    if not registry_response.success:
        helpers.display_response_failure(registry_response)

    else:
        print(f"\n{registry_response.detail}")


# === view students ===


def view_students(registry: StudentRegistry) -> None:
    render_table(registry)
