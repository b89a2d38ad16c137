"""Rule orchestration for a permutation run."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .models import RunConfig, WordSources
from .rules import (
    append_variants,
    extension_variants,
    prepend_variants,
    range_variants,
    set_variants,
)
from .sink import OutputSink


def plan_rules(sources: WordSources, config: RunConfig) -> list[str]:
    """Return the names of the rules a run would execute, in order."""
    plan = ["append" if sources.append else "prepend"]
    if sources.substitutions:
        plan.append("set")
    if sources.extensions:
        plan.append("extension")
    if config.level == 2 or config.range_requested:
        plan.append("range")
    return plan


def _rule_stream(name: str, sources: WordSources, config: RunConfig) -> Iterator[str]:
    if name == "append":
        return append_variants(sources.targets, sources.append, config.level, sources.exclusions)
    if name == "prepend":
        return prepend_variants(
            sources.targets, sources.prepend, config.level, sources.exclusions
        )
    if name == "set":
        return set_variants(sources.targets, sources.substitutions, config.include_original)
    if name == "extension":
        return extension_variants(sources.targets, sources.extensions)
    if name == "range":
        return range_variants(sources.targets, config.range)
    raise ValueError(f"Unknown rule: {name}")


def generate(
    sources: WordSources,
    config: RunConfig,
    sink: OutputSink,
    logger: logging.Logger | None = None,
) -> list[str]:
    """Run every applicable rule and push its candidates into *sink*.

    Returns the sink's results collection.
    """
    log = logger or logging.getLogger(__name__)
    log.debug("Level: %d", config.level)
    for name in plan_rules(sources, config):
        log.debug("Processing %s list.", name)
        if name == "range":
            log.debug(
                "Range: %d (one-sided: %s)", config.range.value, config.range.one_sided
            )
        for candidate in _rule_stream(name, sources, config):
            sink.emit(candidate)
    return sink.results
