"""Central output channel for generated candidates."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .labels import count_char, has_repeated_label


class OutputSink:
    """Filter candidates for display and collect every one of them.

    Filters decide console visibility only: ``results`` receives each
    candidate passed to :meth:`emit`, printed or not.
    """

    def __init__(
        self,
        write: Callable[[str], None],
        *,
        subdomains_only: bool = False,
        no_repeats: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self._write = write
        self.subdomains_only = subdomains_only
        self.no_repeats = no_repeats
        self.logger = logger or logging.getLogger(__name__)
        self.results: list[str] = []
        self.printed = 0

    def is_visible(self, candidate: str) -> bool:
        if self.subdomains_only and count_char(candidate) < 2:
            return False
        if self.no_repeats and has_repeated_label(candidate, self.logger):
            return False
        return True

    def emit(self, candidate: str) -> None:
        if self.is_visible(candidate):
            self._write(candidate)
            self.printed += 1
        self.results.append(candidate)
