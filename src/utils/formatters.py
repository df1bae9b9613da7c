"""Reusable formatting utilities."""

from src.ui import colors
from typing import Iterable, List, Tuple


class UIFormatter:
    """Centralized UI formatting logic."""

    @staticmethod
    def format_entry(position: int, text: str) -> str:
        """Format one numbered list row, e.g. '1. milk'."""
        return f"{colors.Colors.ITEM}{position}. {text}{colors.Colors.RESET}"

    @staticmethod
    def format_entries(entries: Iterable[Tuple[int, str]]) -> List[str]:
        """Format (position, text) pairs as numbered rows."""
        return [UIFormatter.format_entry(pos, text) for pos, text in entries]

    @staticmethod
    def format_help_table(rows: List[Tuple[str, str]], indent: int = 2) -> List[str]:
        """Align (command, description) pairs into two columns."""
        if not rows:
            return []

        width = max(len(cmd) for cmd, _ in rows) + 4
        pad = " " * indent
        return [
            f"{pad}{colors.Colors.PRIMARY}{cmd:<{width}}{colors.Colors.RESET}- {desc}"
            for cmd, desc in rows
        ]
