"""Handles list files and the application's storage directory."""

import os
import logging

from src.config import Config
from src.core.shopping_list import ShoppingList
from src.exceptions import PersistenceError
from src.utils.validators import InputValidator

# --- Path Management ---


def get_storage_directory():
    """Ensures and returns the application's storage directory path."""
    storage_dir = os.getenv(Config.STORAGE_DIR_ENV) or os.path.join(
        os.path.expanduser("~"), Config.STORAGE_DIR_NAME
    )
    os.makedirs(storage_dir, exist_ok=True)
    return storage_dir


def get_log_file_path():
    """Returns the path to the activity log."""
    return os.path.join(get_storage_directory(), Config.LOG_FILE)


# --- List Files ---


def save_list(shopping_list: ShoppingList, path: str) -> int:
    """
    Write the list to a text file, one item per line.

    Existing content is truncated. Lines end with a bare newline on every
    platform. Items holding undecodable input bytes are written back as
    those bytes. The content is encoded before the file is opened, so an
    unencodable item leaves an existing file untouched.

    Args:
        shopping_list: List to save
        path: Destination file

    Returns:
        Number of items written

    Raises:
        PersistenceError: If the items could not be encoded or the file
            could not be opened or written
    """
    items = list(shopping_list)
    try:
        data = "".join(f"{item}\n" for item in items).encode(
            Config.FILE_ENCODING, Config.FILE_ERRORS
        )
    except UnicodeEncodeError as e:
        raise PersistenceError("save", path, f"cannot encode item: {e.reason}") from e

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise PersistenceError("save", path, e.strerror or str(e)) from e

    logging.info(f"Saved {len(items)} items to '{path}'")
    return len(items)


def read_items(path: str) -> list:
    """
    Read the non-blank lines of a list file.

    Only "\\n" ends a line. Trailing carriage return and ASCII whitespace
    are stripped; lines left empty are skipped. Undecodable bytes are kept
    as surrogate escapes.

    Raises:
        PersistenceError: If the file could not be opened or read
    """
    try:
        with open(
            path,
            "r",
            encoding=Config.FILE_ENCODING,
            errors=Config.FILE_ERRORS,
            newline="\n",
        ) as f:
            lines = [InputValidator.normalize_line(line) for line in f]
    except OSError as e:
        raise PersistenceError("open", path, e.strerror or str(e)) from e

    return [line for line in lines if line]


def load_list(shopping_list: ShoppingList, path: str) -> int:
    """
    Append the items of a list file to the current list.

    The list is not replaced and duplicates are kept, so loading the same
    file twice doubles its entries. The file is read completely before the
    list is touched.

    Args:
        shopping_list: List to append to
        path: Source file

    Returns:
        Number of items appended

    Raises:
        PersistenceError: If the file could not be opened or read
    """
    added = 0
    for item in read_items(path):
        if shopping_list.add(item):
            added += 1

    logging.info(f"Loaded {added} items from '{path}' (now {len(shopping_list)})")
    return added
