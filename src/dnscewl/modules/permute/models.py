"""Data models for a permutation run."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RangeSpec:
    """Parsed ``--range`` value.

    ``value`` is signed; ``0`` selects the fixed +/-100 window. ``one_sided``
    is set when the range text carried an explicit ``+`` or ``-`` sign.
    """

    value: int = 0
    one_sided: bool = False


@dataclass(frozen=True)
class WordSources:
    """Targets and word lists loaded once before generation starts."""

    targets: tuple[str, ...] = ()
    append: tuple[str, ...] = ()
    prepend: tuple[str, ...] = ()
    substitutions: frozenset[str] = frozenset()
    extensions: tuple[str, ...] = ()
    exclusions: frozenset[str] = frozenset()


@dataclass(frozen=True)
class RunConfig:
    """Read-only options for a permutation run."""

    level: int = 0
    range: RangeSpec = field(default_factory=RangeSpec)
    range_requested: bool = False
    include_original: bool = False
    subdomains_only: bool = False
    no_repeats: bool = False
    limit: int | None = None
