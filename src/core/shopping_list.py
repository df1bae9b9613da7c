"""In-memory shopping list container."""

import logging
from typing import Iterator, Tuple

from src.exceptions import InvalidIndexError, StorageExhaustedError
from src.utils.validators import InputValidator


class ShoppingList:
    """Ordered, dense sequence of item strings."""

    def __init__(self):
        self._items: list = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    @property
    def items(self) -> Tuple[str, ...]:
        """Snapshot of the current items."""
        return tuple(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def add(self, text: str) -> bool:
        """
        Append an item unless it is blank.

        Args:
            text: Item text, stored as given

        Returns:
            True if the item was appended, False for blank input

        Raises:
            StorageExhaustedError: If the list could not grow
        """
        if not text or InputValidator.is_blank(text):
            return False

        try:
            self._items.append(text)
        except MemoryError as e:
            raise StorageExhaustedError("Out of memory while adding item") from e

        logging.info(f"Item added at position {len(self._items)}")
        return True

    def remove(self, index: int) -> str:
        """
        Remove the item at a 0-based position.

        Later items shift down by one.

        Args:
            index: 0-based position

        Returns:
            The removed item text

        Raises:
            InvalidIndexError: If index is outside the list
        """
        if index < 0 or index >= len(self._items):
            raise InvalidIndexError(index, len(self._items))

        removed = self._items.pop(index)
        logging.info(f"Item removed from position {index + 1}")
        return removed

    def clear(self) -> int:
        """Remove every item. Returns how many were removed."""
        removed = len(self._items)
        self._items.clear()
        logging.info(f"List cleared ({removed} items)")
        return removed

    def entries(self) -> Iterator[Tuple[int, str]]:
        """Yield (1-based position, text) pairs in insertion order."""
        for position, text in enumerate(self._items, 1):
            yield position, text
