"""Loading of targets and word lists."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .errors import ConfigurationError
from .models import WordSources


def _clean_lines(lines: Iterable[str]) -> list[str]:
    return [line.strip("\r\n") for line in lines if line.strip()]


def read_word_file(path: Path, logger: logging.Logger | None = None) -> list[str]:
    """Read one word per line from *path*, skipping blank lines.

    Raises :class:`ConfigurationError` if the file cannot be read or holds no words.
    """
    log = logger or logging.getLogger(__name__)
    log.debug("Reading words from %s", path)
    try:
        words = _clean_lines(Path(path).read_text(encoding="utf-8").splitlines())
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Can not read {path}") from exc
    if not words:
        raise ConfigurationError(f"Please check {path}, no words read")
    log.debug("Successfully read %d words from %s", len(words), path)
    return words


def load_word_sources(
    *,
    target: str | None = None,
    target_list: Path | None = None,
    append_list: Path | None = None,
    prepend_list: Path | None = None,
    set_list: Path | None = None,
    exclude_list: Path | None = None,
    extension_list: Path | None = None,
    stdin: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> WordSources:
    """Validate the requested inputs and load them into a :class:`WordSources`.

    Targets come from *target* and *target_list*; when neither is given they
    are read from *stdin* (default ``sys.stdin``) until end of stream.
    """
    log = logger or logging.getLogger(__name__)

    if not (append_list or prepend_list or set_list):
        raise ConfigurationError(
            "File name of words to process a set list, append or prepend to targets is needed"
        )

    append: list[str] = []
    prepend: list[str] = []
    if append_list:
        log.debug("Reading append list.")
        append = read_word_file(append_list, log)
        if prepend_list:
            log.warning("Append list given; ignoring prepend list %s", prepend_list)
    elif prepend_list:
        log.debug("Reading prepend list.")
        prepend = read_word_file(prepend_list, log)

    targets: list[str] = []
    if target:
        log.debug("Adding target [%s] to list.", target)
        targets.append(target)
    if target_list:
        targets.extend(read_word_file(target_list, log))
    if not target and not target_list:
        stream = stdin if stdin is not None else sys.stdin
        targets.extend(_clean_lines(stream))
        log.debug("Read %d targets from standard input", len(targets))

    exclusions = frozenset(read_word_file(exclude_list, log)) if exclude_list else frozenset()
    substitutions = frozenset(read_word_file(set_list, log)) if set_list else frozenset()
    extensions = read_word_file(extension_list, log) if extension_list else []

    return WordSources(
        targets=tuple(targets),
        append=tuple(append),
        prepend=tuple(prepend),
        substitutions=substitutions,
        extensions=tuple(extensions),
        exclusions=exclusions,
    )
