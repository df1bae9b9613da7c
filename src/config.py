import os


class Config:
    """
    Application configuration constants.

    A few values can be overridden from the environment:
    USAGI_HOME relocates the storage directory (activity log) and
    USAGI_LOG_LEVEL sets the logging level.
    """

    # ============================================
    # VERSION
    # ============================================

    VERSION = "1.0.0"
    APP_NAME = "Usagi's Shopping List"
    PROG_NAME = "usagi"

    # ============================================
    # COMMAND SYNTAX
    # ============================================

    COMMAND_MARKER = "/"  # First character of every command line
    YES_ANSWERS = ("y", "Y")  # Checked against the first character only
    NO_ANSWERS = ("n", "N")

    # ============================================
    # PROMPTS
    # ============================================

    ASSISTANT_NAME = "Usagi"
    ITEM_PROMPT = "What do you want to add?"
    CONFIRM_PROMPT = "Anything else? (y/n)"

    # ============================================
    # FILES
    # ============================================

    FILE_ENCODING = "utf-8"
    FILE_ERRORS = "surrogateescape"  # Undecodable bytes round-trip unchanged
    TRAILING_WHITESPACE = " \t\r\n\v\f"  # C isspace set, no Unicode spaces
    STORAGE_DIR_ENV = "USAGI_HOME"
    STORAGE_DIR_NAME = ".usagi"
    LOG_FILE = "usagi_activity.log"

    # ============================================
    # LOGGING
    # ============================================

    LOG_LEVEL = os.getenv("USAGI_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # ============================================
    # USER INTERFACE
    # ============================================

    SUGGESTION_CUTOFF = 0.6  # difflib ratio for "Did you mean" hints

    # ============================================
    # EXIT CODES
    # ============================================

    EXIT_SUCCESS = 0
    EXIT_FAILURE = 1

    @classmethod
    def get_log_level(cls) -> int:
        """
        Resolve LOG_LEVEL to a logging constant.

        Returns:
            Numeric logging level, INFO when the name is unknown
        """
        import logging

        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def print_config_summary(cls):
        """Print configuration summary (useful for debugging)."""
        print(f"\n{cls.APP_NAME} v{cls.VERSION}")
        print(f"Command marker: {cls.COMMAND_MARKER}")
        print(f"Log level: {cls.LOG_LEVEL}")
        print(f"Storage override: ${cls.STORAGE_DIR_ENV}\n")


# ============================================
# VALIDATION
# ============================================


def validate_config():
    """
    Validate that the command syntax constants are usable.

    Raises:
        ValueError: If configuration is inconsistent
    """
    errors = []

    marker = Config.COMMAND_MARKER
    if len(marker) != 1 or marker.isspace():
        errors.append("COMMAND_MARKER must be a single non-whitespace character")

    if set(Config.YES_ANSWERS) & set(Config.NO_ANSWERS):
        errors.append("YES_ANSWERS and NO_ANSWERS must not overlap")

    for answer in Config.YES_ANSWERS + Config.NO_ANSWERS:
        if len(answer) != 1:
            errors.append(f"Answer '{answer}' must be a single character")
        elif answer == marker:
            errors.append(f"Answer '{answer}' collides with COMMAND_MARKER")

    if errors:
        raise ValueError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


# Run validation on import
try:
    validate_config()
except ValueError as e:
    import logging

    logging.warning(f"Configuration validation warning: {e}")


if __name__ == "__main__":
    Config.print_config_summary()
