"""Handles all user-facing output and prompts."""

from typing import Iterable, List, Optional, Tuple
from src.ui.colors import Colors
from src.config import Config
from src.core.shopping_list import ShoppingList
from src.utils.formatters import UIFormatter


# ============================================
# BANNER & HEADERS
# ============================================


def show_banner():
    """Display the welcome lines."""
    print(f"{Colors.HEADER}Welcome to {Config.APP_NAME}!{Colors.RESET}")
    print(
        f"{Colors.MUTED}Type an item to add it. Type "
        f"{Colors.PRIMARY}{Config.COMMAND_MARKER}help{Colors.MUTED} for commands."
        f"{Colors.RESET}\n"
    )


def show_help(commands_data: List[Tuple[str, str]]):
    """
    Display the command summary.

    Args:
        commands_data: (usage, description) pairs
    """
    print(f"{Colors.HEADER}Commands:{Colors.RESET}")
    for line in UIFormatter.format_help_table(commands_data):
        print(line)


# ============================================
# USER PROMPTS
# ============================================


def prompt_line(question: str) -> Optional[str]:
    """
    Ask Usagi's question and read one line.

    Args:
        question: Question text

    Returns:
        The raw line, or None when input has ended
    """
    print(f"{Colors.ACCENT}{Config.ASSISTANT_NAME}:{Colors.RESET} {question}")
    try:
        return input(f"{Colors.PROMPT}>{Colors.RESET} ")
    except EOFError:
        return None


# ============================================
# STATUS MESSAGES
# ============================================


def show_success(message: str):
    """Display success message with icon."""
    print(f"{Colors.SUCCESS}✓ {message}{Colors.RESET}")


def show_error(message: str):
    """Display error message with icon."""
    print(f"{Colors.ERROR}✗ {message}{Colors.RESET}")


def show_warning(message: str):
    """Display warning message with icon."""
    print(f"{Colors.WARNING}⚠ {message}{Colors.RESET}")


def show_muted(message: str):
    print(f"{Colors.MUTED}{message}{Colors.RESET}")


def show_usage(usage: str):
    """Display the usage line of a command."""
    print(f"{Colors.WARNING}Usage: {Colors.PRIMARY}{usage}{Colors.RESET}")


def show_farewell():
    print(f"{Colors.ACCENT}Goodbye!{Colors.RESET}")


# ============================================
# LIST DISPLAYS
# ============================================


def display_list(shopping_list: ShoppingList):
    """
    Display the numbered list, or the empty-list message.

    Args:
        shopping_list: List to display
    """
    if shopping_list.is_empty():
        show_muted("(shopping list is empty)")
        return

    print(f"{Colors.HEADER}Your shopping list:{Colors.RESET}")
    for row in UIFormatter.format_entries(shopping_list.entries()):
        print(row)


def show_final_list(shopping_list: ShoppingList):
    """Display the list one last time before exit."""
    print(f"\n{Colors.HEADER}Final list:{Colors.RESET}")
    display_list(shopping_list)


# ============================================
# HELPER UTILITIES
# ============================================


def suggest_command(user_input: str, available_commands: Iterable[str]):
    """
    Report an unknown command, suggesting a close match for typos.

    Args:
        user_input: The unknown command token
        available_commands: Valid command tokens
    """
    from difflib import get_close_matches

    print(f"{Colors.ERROR}Unknown command: {Colors.MUTED}'{user_input}'{Colors.RESET}")

    matches: List[str] = get_close_matches(
        user_input, list(available_commands), n=1, cutoff=Config.SUGGESTION_CUTOFF
    )
    if matches:
        print(f"{Colors.WARNING}Did you mean: {Colors.PRIMARY}{matches[0]}{Colors.RESET}?")

    print(
        f"{Colors.INFO}Type {Config.COMMAND_MARKER}help for commands.{Colors.RESET}"
    )
