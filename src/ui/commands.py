"""Slash-command handlers.

Every handler takes the positional arguments (tokens after the command)
and the active list. Recoverable failures are reported here and go no
further.
"""

import logging
from enum import Enum
from typing import List, Optional

from src.core.shopping_list import ShoppingList
from src.data import storage
from src.exceptions import InvalidIndexError, PersistenceError
from src.utils.validators import InputValidator
from src.ui import views


class CommandOutcome(Enum):
    """Result of offering a line to the command interpreter."""

    NOT_A_COMMAND = "not_a_command"
    HANDLED = "handled"
    QUIT = "quit"


# ============================================
# COMMAND HANDLERS
# ============================================


def view_command(args: List[str], shopping_list: ShoppingList):
    """Display the current list."""
    views.display_list(shopping_list)


def remove_command(args: List[str], shopping_list: ShoppingList):
    """
    Remove an item by its 1-based number.

    The argument is parsed leniently: trailing junk is ignored and a
    value without leading digits counts as 0.

    Args:
        args: [INDEX]
        shopping_list: Active list
    """
    position = InputValidator.parse_index(args[0])
    if position <= 0:
        views.show_warning("Specify a positive index")
        return

    try:
        removed = shopping_list.remove(position - 1)
        views.show_success(f"Removed: {removed}")
    except InvalidIndexError:
        views.show_error("Invalid index")


def save_command(args: List[str], shopping_list: ShoppingList):
    """Save the list to FILE, replacing its content."""
    path = args[0]
    valid, msg = InputValidator.validate_filename(path)
    if not valid:
        views.show_warning(msg)
        return

    try:
        count = storage.save_list(shopping_list, path)
        views.show_success(f"Saved {count} items to '{path}'")
    except PersistenceError as e:
        views.show_error(str(e))


def load_command(args: List[str], shopping_list: ShoppingList):
    """Append the items of FILE to the list."""
    path = args[0]
    valid, msg = InputValidator.validate_filename(path)
    if not valid:
        views.show_warning(msg)
        return

    try:
        storage.load_list(shopping_list, path)
        views.show_success(
            f"Loaded items from '{path}' (now {len(shopping_list)} items)"
        )
    except PersistenceError as e:
        views.show_error(str(e))


def clear_command(args: List[str], shopping_list: ShoppingList):
    """Remove all items."""
    shopping_list.clear()
    views.show_success("Cleared the list")


def help_command(args: List[str], shopping_list: ShoppingList, registry: dict):
    """Show usage and summary of every command in the active registry."""
    views.show_help([(spec.usage, spec.summary) for spec in registry.values()])


def quit_command(
    args: List[str], shopping_list: ShoppingList
) -> Optional[CommandOutcome]:
    """Say goodbye and end the session without the final listing."""
    views.show_farewell()
    logging.info("User quit with /quit")
    return CommandOutcome.QUIT
