import argparse
import logging
import os
from enum import Enum
from typing import List, Optional

from src.config import Config
from src.core.shopping_list import ShoppingList
from src.data import storage
from src.exceptions import StorageExhaustedError
from src.ui import colors, parser, views
from src.ui.commands import CommandOutcome
from src.utils.validators import InputValidator

# run_shell() results
FINALIZE = "FINALIZE"
QUIT = "QUIT"


class ShellState(Enum):
    """States of the interactive loop."""

    AWAITING_ITEM = "awaiting_item"
    AWAITING_CONFIRMATION = "awaiting_confirmation"


def setup_logging():
    """
    Configure logging to file within application storage directory.

    Creates log file in ~/.usagi/usagi_activity.log with timestamps. When
    the directory cannot be created, warnings still go to stderr.
    """
    try:
        log_file_path = storage.get_log_file_path()
    except OSError as e:
        logging.basicConfig(level=logging.WARNING, format=Config.LOG_FORMAT)
        views.show_warning(f"Activity log disabled: {e}")
        return

    logging.basicConfig(
        filename=log_file_path,
        level=Config.get_log_level(),
        format=Config.LOG_FORMAT,
        datefmt=Config.LOG_DATE_FORMAT,
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the process command line."""
    arg_parser = argparse.ArgumentParser(
        prog=Config.PROG_NAME,
        description=f"{Config.APP_NAME} - interactive shopping list builder",
    )
    arg_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{Config.APP_NAME} v{Config.VERSION}",
    )
    arg_parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    return arg_parser.parse_args(argv)


def run_shell(shopping_list: ShoppingList, registry=None) -> str:
    """
    Run the add / "anything else?" loop until input ends or the user stops.

    Args:
        shopping_list: List being built
        registry: Command registry (defaults to the built-in commands)

    Returns:
        FINALIZE when the final list should be shown, QUIT after /quit
    """
    if registry is None:
        registry = parser.initialize_registry()

    state = ShellState.AWAITING_ITEM

    while True:
        if state is ShellState.AWAITING_ITEM:
            raw_line = views.prompt_line(Config.ITEM_PROMPT)
            if raw_line is None:
                return FINALIZE

            line = InputValidator.normalize_line(raw_line)
            if not line:
                views.show_muted("(no input)")
                continue

            outcome = parser.dispatch(line, shopping_list, registry)
            if outcome is CommandOutcome.QUIT:
                return QUIT
            if outcome is CommandOutcome.HANDLED:
                continue

            shopping_list.add(line)
            views.show_success(f"Added: {line}")
            state = ShellState.AWAITING_CONFIRMATION

        else:
            raw_line = views.prompt_line(Config.CONFIRM_PROMPT)
            if raw_line is None:
                return FINALIZE

            line = InputValidator.normalize_line(raw_line)
            if not line:
                views.show_warning("Please answer y or n.")
                continue

            answer = InputValidator.answer_of(line)
            if answer == "yes":
                state = ShellState.AWAITING_ITEM
            elif answer == "no":
                return FINALIZE
            elif InputValidator.is_command(line):
                outcome = parser.dispatch(line, shopping_list, registry)
                if outcome is CommandOutcome.QUIT:
                    return QUIT
                if outcome is CommandOutcome.NOT_A_COMMAND:
                    views.show_warning(
                        "Please answer y or n or enter a command starting with "
                        f"{Config.COMMAND_MARKER}."
                    )
            else:
                m = Config.COMMAND_MARKER
                views.show_warning(
                    f"Please answer y or n. You can also use {m}view, {m}save, "
                    f"{m}help, etc."
                )


def start_application(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.

    Flow:
    1. Parse options, setup logging
    2. Interactive loop on a fresh list
    3. Final listing unless the user quit

    Returns:
        Process exit code
    """
    options = parse_arguments(argv)
    if options.no_color or os.getenv("NO_COLOR"):
        colors.Colors.disable()

    setup_logging()
    logging.info("Application starting")

    shopping_list = ShoppingList()
    views.show_banner()

    try:
        action = run_shell(shopping_list)

        if action == QUIT:
            return Config.EXIT_SUCCESS

        views.show_final_list(shopping_list)
        logging.info(f"Session finished with {len(shopping_list)} items")
        return Config.EXIT_SUCCESS

    except StorageExhaustedError:
        views.show_error("Out of memory")
        logging.critical("Storage exhausted, aborting")
        return Config.EXIT_FAILURE

    except KeyboardInterrupt:
        print(
            f"\n\n{colors.Colors.WARNING}Session interrupted by user.{colors.Colors.RESET}"
        )
        logging.info("Session interrupted by user (Ctrl+C)")
        return Config.EXIT_SUCCESS

    finally:
        shopping_list.clear()
        logging.info("Application shutdown")


if __name__ == "__main__":
    raise SystemExit(start_application())
