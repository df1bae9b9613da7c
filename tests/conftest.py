import builtins

import pytest

from src.core.shopping_list import ShoppingList
from src.ui.colors import Colors


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Plain output so assertions can match text."""
    for name in Colors.palette():
        monkeypatch.setattr(Colors, name, "")


@pytest.fixture
def clean_storage(tmp_path, monkeypatch):
    """Point the storage directory at a temporary folder."""
    storage_dir = tmp_path / "usagi_home"
    monkeypatch.setenv("USAGI_HOME", str(storage_dir))
    yield storage_dir


@pytest.fixture
def shopping_list():
    return ShoppingList()


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a scripted sequence; EOF once exhausted."""

    def _feed(*lines):
        remaining = list(lines)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr(builtins, "input", fake_input)

    return _feed
