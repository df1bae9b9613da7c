"""Application entry point."""

import sys

from src.ui.cli import start_application


def main():
    """Runs the shopping list session and exits with its status."""
    sys.exit(start_application())


if __name__ == "__main__":
    main()
