"""Runtime access to public CLI facade symbols.

Command modules resolve dependencies from ``dnscewl.cli`` at call time so tests can
monkeypatch facade-level symbols (for example ``load_word_sources`` or ``generate``).
"""

from importlib import import_module
from types import ModuleType


def cli_module() -> ModuleType:
    """Return the public CLI facade module."""
    return import_module("dnscewl.cli")
