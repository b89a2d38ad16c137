"""Test configuration and fixtures for dnscewl."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the global config at an empty home and clear DNSCEWL_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    for key in ("DNSCEWL_LEVEL", "DNSCEWL_VERBOSE", "DNSCEWL_NO_COLOR"):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def wordlist(tmp_path: Path) -> Callable[..., Path]:
    """Write a word file and return its path."""

    def _write(name: str, *words: str) -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{word}\n" for word in words))
        return path

    return _write
