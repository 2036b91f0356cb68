"""
Pytest fixtures for passgen tests
"""

import pytest
import pyperclip

from passgen.config import get_settings


class FakeClipboard:
    """In-memory stand-in for the system clipboard"""

    def __init__(self):
        self.contents = ""
        self.copies = []

    def copy(self, text):
        self.contents = text
        self.copies.append(text)

    def paste(self):
        return self.contents


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from PASSGEN_* variables on the host."""
    for name in ("LENGTH", "SEPARATOR", "CASE", "SALT_LENGTH", "SALT_CHARS", "WORDLIST", "WAIT"):
        monkeypatch.delenv(f"PASSGEN_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_clipboard(monkeypatch) -> FakeClipboard:
    clipboard = FakeClipboard()
    monkeypatch.setattr(pyperclip, "copy", clipboard.copy)
    monkeypatch.setattr(pyperclip, "paste", clipboard.paste)
    return clipboard


@pytest.fixture
def fruit_words():
    return ("apple", "banana")


@pytest.fixture
def wordlist_file(tmp_path):
    """An EFF-style dice-numbered wordlist file."""
    path = tmp_path / "words.txt"
    path.write_text("11111\tabacus\n11112\tabdomen\n11113\tabdominal\n", encoding="utf-8")
    return path
