"""Label helpers shared by the permutation rules."""

from __future__ import annotations

import logging
import re

DELIMITER = "."

_DIGITS = re.compile(r"[0-9]+")


def count_char(domain: str, character: str = DELIMITER) -> int:
    return domain.count(character)


def split_labels(domain: str, delimiter: str = DELIMITER) -> list[str]:
    """Split *domain* on every *delimiter*.

    A domain without the delimiter yields an empty list. A trailing empty
    segment after a final delimiter is dropped; leading and inner empty
    segments are kept.
    """
    if delimiter not in domain:
        return []
    labels = domain.split(delimiter)
    if labels[-1] == "":
        labels.pop()
    return labels


def has_repeated_label(domain: str, logger: logging.Logger | None = None) -> bool:
    """Return True if any two labels of *domain* are identical."""
    log = logger or logging.getLogger(__name__)
    seen: set[str] = set()
    for label in split_labels(domain):
        if label in seen:
            log.debug("Repeats found in %s.", domain)
            return True
        seen.add(label)
    return False


def is_integer(word: str) -> bool:
    """Return True for a non-empty run of ASCII digits."""
    return _DIGITS.fullmatch(word) is not None


def replace_first(domain: str, old: str, new: str) -> str:
    """Replace the first textual occurrence of *old* in *domain* with *new*.

    The match is a plain substring search, so it is not label aware: for
    ``"1.a1.com"`` and ``old="1"`` the leading ``1`` is the one replaced.
    """
    return domain.replace(old, new, 1)
