# cli/path_utils.py

import os

DEFAULT_STORAGE_FILENAME = "storage.json"


def get_storage_dir(user_input: str | None) -> str:
    """
    Resolves the directory holding the registry storage file, based on user input or default location.

    Args:
        user_input (str | None): An optional user-specified directory path. If None or blank, the default path is used.

    Returns:
        A resolved path string. If user input is provided, it is expanded and returned directly.
        Otherwise, defaults to: `~/Documents/StudentRegistry`.
    """
    if user_input is not None and user_input.strip():
        return os.path.abspath(os.path.expanduser(user_input.strip()))
    else:
        documents = os.path.join(os.path.expanduser("~"), "Documents")
        return os.path.join(documents, "StudentRegistry")


def resolve_storage_path(
    dir_input: str | None, filename: str = DEFAULT_STORAGE_FILENAME
) -> str:
    """
    Produces the storage file path and ensures its directory exists.

    Args:
        dir_input (str | None): An optional directory path string. If None, the default path is used.
        filename (str): The storage file name inside the directory.

    Returns:
        The full path of the storage file. The file itself is not created.

    Notes:
        - Creates the directory path on disk (including parent directories) if it does not exist.
    """
    storage_dir = get_storage_dir(dir_input)

    os.makedirs(storage_dir, exist_ok=True)

    return os.path.join(storage_dir, filename)
