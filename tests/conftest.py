"""Shared test fixtures: isolated settings, word-list files, scripted randomness."""

from __future__ import annotations

import os

import pytest

from namegen.config import get_settings


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch):
    """Drop NAMEGEN_* env vars and cached settings so each test starts from defaults."""
    for name in list(os.environ):
        if name.startswith("NAMEGEN_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def word_file(tmp_path):
    """Write a word list file and return its path."""

    def write(name: str, *lines: str) -> str:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)

    return write


class ScriptedRng:
    """Random source replaying fixed values and recording every bound it was asked for."""

    def __init__(self, values: list[int]):
        self.values = list(values)
        self.bounds: list[int] = []

    def randrange(self, stop: int) -> int:
        self.bounds.append(stop)
        return self.values.pop(0) % stop


@pytest.fixture
def scripted_rng():
    return ScriptedRng
