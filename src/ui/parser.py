"""Tokenizes command lines and maps command tokens to handlers."""

import logging
from typing import Callable, Dict, List, NamedTuple, Optional

from src.config import Config
from src.core.shopping_list import ShoppingList
from src.ui import commands, views
from src.utils.validators import InputValidator


class CommandSpec(NamedTuple):
    """One entry of the command registry."""

    name: str
    handler: Callable
    usage: str
    summary: str
    min_args: int = 0
    wants_registry: bool = False  # Handler also receives the registry


class ParsedCommand(NamedTuple):
    """A command line split into its command token and arguments."""

    name: str
    args: List[str]


def initialize_registry() -> Dict[str, CommandSpec]:
    """
    Build the command registry.

    Available commands:
    - view: Show the list
    - remove: Remove an item by number
    - save: Save the list to a file
    - load: Append items from a file
    - clear: Remove all items
    - help: Show the command summary
    - quit: Leave immediately

    Returns:
        Mapping of command token (marker included) to its spec
    """
    m = Config.COMMAND_MARKER
    specs = [
        CommandSpec(f"{m}view", commands.view_command, f"{m}view", "show list"),
        CommandSpec(
            f"{m}remove",
            commands.remove_command,
            f"{m}remove INDEX",
            "remove item by number",
            min_args=1,
        ),
        CommandSpec(
            f"{m}save",
            commands.save_command,
            f"{m}save FILE",
            "save list to file",
            min_args=1,
        ),
        CommandSpec(
            f"{m}load",
            commands.load_command,
            f"{m}load FILE",
            "load items from file (appends)",
            min_args=1,
        ),
        CommandSpec(f"{m}clear", commands.clear_command, f"{m}clear", "remove all items"),
        CommandSpec(
            f"{m}help",
            commands.help_command,
            f"{m}help",
            "show this help",
            wants_registry=True,
        ),
        CommandSpec(f"{m}quit", commands.quit_command, f"{m}quit", "quit immediately"),
    ]
    return {spec.name: spec for spec in specs}


def parse_command_line(line: str) -> Optional[ParsedCommand]:
    """
    Split a command line into command token and arguments.

    Args:
        line: Input line, already right-trimmed

    Returns:
        ParsedCommand, or None if the line is not a command or holds
        nothing after the marker
    """
    if not InputValidator.is_command(line):
        return None

    if InputValidator.is_blank(line[len(Config.COMMAND_MARKER):]):
        return None

    tokens = line.split()
    return ParsedCommand(tokens[0], tokens[1:])


def dispatch(
    line: str,
    shopping_list: ShoppingList,
    registry: Optional[Dict[str, CommandSpec]] = None,
) -> commands.CommandOutcome:
    """
    Run the command on a line, if it is one.

    Args:
        line: Input line, already right-trimmed
        shopping_list: Active list
        registry: Command registry (defaults to the built-in commands)

    Returns:
        NOT_A_COMMAND for item lines, QUIT after /quit, HANDLED otherwise
    """
    if not InputValidator.is_command(line):
        return commands.CommandOutcome.NOT_A_COMMAND

    parsed = parse_command_line(line)
    if parsed is None:
        # Bare marker
        return commands.CommandOutcome.HANDLED

    if registry is None:
        registry = initialize_registry()

    spec = registry.get(parsed.name)
    if spec is None:
        logging.info(f"Unknown command: {parsed.name}")
        views.suggest_command(parsed.name, registry.keys())
        return commands.CommandOutcome.HANDLED

    if len(parsed.args) < spec.min_args:
        views.show_usage(spec.usage)
        return commands.CommandOutcome.HANDLED

    logging.info(f"Command: {spec.name}")
    if spec.wants_registry:
        result = spec.handler(parsed.args, shopping_list, registry)
    else:
        result = spec.handler(parsed.args, shopping_list)
    if result is commands.CommandOutcome.QUIT:
        return result
    return commands.CommandOutcome.HANDLED
