# cli/main.py

"""
Start Menu for the Student Registry CLI.

Resolves where the registry is stored, loads any saved students, and hands off to the Manage Students menu.
"""

import logging

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menus import students_menu
from cli.path_utils import resolve_storage_path
from core.storage import JsonFileStorage
from models.registry import StudentRegistry

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def run_cli() -> None:
    """
    Top-level entry point for the Student Registry CLI.

    Notes:
        - Logging goes to stderr at WARNING level, so dropped records and failed writes are visible without cluttering the menus.
        - A failed initial load is reported but does not stop the program; the registry starts empty.
    """
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    title = formatters.format_banner_text("STUDENT REGISTRY")
    print(f"\n{title}")

    registry = open_registry()

    print("\nLoading students ...")

    registry_response = registry.request_initial_load()

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        print("Starting with an empty registry. Saving will overwrite the stored data.")

    else:
        print(f"... {registry_response.detail}")

        for entry in registry_response.data["rejected"]:
            print(f"[SKIPPED] {entry}")

    students_menu.run(registry)

    exit_program()


def open_registry() -> StudentRegistry:
    """
    Prompts the user for a storage directory and returns a `StudentRegistry` backed by it.

    Returns:
        StudentRegistry: A registry using a `JsonFileStorage` file inside the chosen directory.

    Notes:
        - If the directory input is left blank, the registry is stored in `~/Documents/StudentRegistry`.
        - The directory is created if it does not exist; the storage file is created on the first save.
    """
    while True:
        dir_input = helpers.prompt_user_input_or_none(
            "Enter directory for the student registry (leave blank to use default):"
        )

        try:
            storage_path = resolve_storage_path(dir_input)

        except OSError as e:
            print(f"\n[ERROR] Could not use that directory: {e}. Please try again.")
            continue

        print(f"\nUsing storage file: {storage_path}")

        return StudentRegistry(JsonFileStorage(storage_path))


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - Every change is saved as it is made, so there is nothing to flush here.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
