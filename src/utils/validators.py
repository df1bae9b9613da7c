"""Reusable validation utilities."""

import re
from typing import Optional, Tuple
from src.config import Config

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


class InputValidator:
    """Centralized input checks for the interactive loop and commands."""

    @staticmethod
    def normalize_line(line: str) -> str:
        """Strip trailing newline, carriage return and ASCII whitespace."""
        return line.rstrip(Config.TRAILING_WHITESPACE)

    @staticmethod
    def is_blank(text: str) -> bool:
        """True if nothing but ASCII whitespace remains."""
        return not text.strip(Config.TRAILING_WHITESPACE)

    @staticmethod
    def is_command(line: str) -> bool:
        """A line is a command iff it starts with the command marker."""
        return line.startswith(Config.COMMAND_MARKER)

    @staticmethod
    def validate_filename(path: str) -> Tuple[bool, str]:
        """Validate a /save or /load file argument."""
        if not path or not path.strip():
            return False, "File name cannot be empty"

        if "\x00" in path:
            return False, "File name contains invalid null byte"

        return True, ""

    @staticmethod
    def parse_index(value: str) -> int:
        """
        Parse a leading integer, as far as digits go.

        "3abc" gives 3, "-2" gives -2, and anything without leading
        digits gives 0.
        """
        match = _LEADING_INT.match(value)
        if not match:
            return 0
        return int(match.group(1))

    @staticmethod
    def answer_of(line: str) -> Optional[str]:
        """
        Classify a confirmation reply by its first character.

        Returns:
            'yes', 'no', or None
        """
        if not line:
            return None
        first = line[0]
        if first in Config.YES_ANSWERS:
            return "yes"
        if first in Config.NO_ANSWERS:
            return "no"
        return None
