"""Custom exceptions for application."""

import logging


class CoreException(Exception):
    """Base exception that logs errors."""

    def __init__(self, message: str):
        self.message = message
        logging.error(f"{self.__class__.__name__}: {message}")
        super().__init__(self.message)


class InvalidIndexError(CoreException):
    """Item position outside the list."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Invalid index {index} for list of {count} items")


class PersistenceError(CoreException):
    """Saving or loading the list file failed."""

    def __init__(self, action: str, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to {action} '{path}': {reason}")


class StorageExhaustedError(CoreException):
    """Out of memory while growing the list. Fatal."""

    pass
