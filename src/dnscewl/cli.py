"""dnscewl CLI - subdomain wordlist generator."""

from dnscewl.cli_commands.shared import app, console
from dnscewl.config import get_level, get_no_color, get_verbose
from dnscewl.modules.permute import (
    ConfigurationError,
    OutputSink,
    RangeSpec,
    RunConfig,
    generate,
    load_word_sources,
    parse_range,
)
from dnscewl.utils.debug import configure_logging

# Command modules register themselves on ``app`` at import time.
from dnscewl.cli_commands import generate_command as _generate_command  # noqa: F401
from dnscewl.cli_commands import version_command as _version_command  # noqa: F401

__all__ = [
    "ConfigurationError",
    "OutputSink",
    "RangeSpec",
    "RunConfig",
    "app",
    "configure_logging",
    "console",
    "generate",
    "get_level",
    "get_no_color",
    "get_verbose",
    "load_word_sources",
    "main",
    "parse_range",
]


def main():
    """Entry point for the CLI."""
    app()
