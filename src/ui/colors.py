"""ANSI color codes with semantic meanings."""

import platform
import os

# Initialize color support for Windows terminals
if platform.system() == "Windows":
    os.system("")  # Enables ANSI escape sequences in Windows 10/11 terminals


class Colors:
    """ANSI color codes with semantic naming."""

    RESET = "\033[0m"

    # ========== SEMANTIC COLORS - USE THESE FOR CONSISTENCY ==========

    PRIMARY = "\033[96m"  # Bright Cyan - Commands, interactive elements
    ACCENT = "\033[95m"  # Bright Magenta - Usagi's voice

    SUCCESS = "\033[92m"  # Bright Green
    ERROR = "\033[91m"  # Bright Red
    WARNING = "\033[93m"  # Bright Yellow
    INFO = "\033[94m"  # Bright Blue

    PROMPT = "\033[96m"  # Bright Cyan - Input prompts
    HEADER = "\033[1m\033[96m"  # Bold Cyan - Section headers
    ITEM = "\033[97m"  # Bright White - List rows
    MUTED = "\033[90m"  # Gray - Less important text

    @classmethod
    def palette(cls):
        """Names of every escape-code attribute."""
        return [
            name
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]

    @classmethod
    def disable(cls):
        """Turn all colors into empty strings (--no-color, NO_COLOR)."""
        for name in cls.palette():
            setattr(cls, name, "")
