# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Registry application.

This module provides utilities for:
- Displaying interactive menus
- Prompting for user input and confirmation
- Selecting a row from the student table
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable

import cli.model_formatters as model_formatters
from core.response import ErrorCode, Response
from models.registry import StudentRegistry


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            return options[int(choice) - 1][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_student_table(registry: StudentRegistry) -> None:
    records = registry.records

    if not records:
        print("\nThere are no students yet.")
        return

    print(
        "\n"
        + model_formatters.format_student_table(
            records, editing_index=registry.editing_index
        )
    )


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input and confirmation prompts.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT`.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.
#
# These methods are intentionally concise and self-documenting. No individual docstrings are necessary.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


# === finder and select methods ===


def prompt_row_selection(registry: StudentRegistry, action: str) -> int | MenuSignal:
    """
    Prompts the user to pick a row from the student table.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.
        action (str): A verb describing what the selection is for (e.g. "edit").

    Returns:
        The zero-based row index, or `MenuSignal.CANCEL` if the table is empty or the user cancels with "0".

    Notes:
        - Rows are shown in table order and numbered from 1.
        - The range is checked here for feedback only; `StudentRegistry` re-checks the index.
    """
    if len(registry) == 0:
        print("\nThere are no students yet.")
        return MenuSignal.CANCEL

    while True:
        display_student_table(registry)

        choice = prompt_user_input(f"Select a row to {action} (0 to cancel):")

        if choice == "0":
            return MenuSignal.CANCEL

        try:
            index = int(choice) - 1

        except ValueError:
            print("\nInvalid selection. Please try again.")
            continue

        if 0 <= index < len(registry):
            return index

        print("\nInvalid selection. Please try again.")


# === system messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Validation failures print only the form message; other failures include the error code name.
    """
    if response.success:
        return

    if response.error is ErrorCode.VALIDATION_FAILED or not isinstance(
        response.error, Enum
    ):
        print(f"\n[ERROR] {response.detail}")
    else:
        print(f"\n[ERROR: {response.error.name}] {response.detail}")
