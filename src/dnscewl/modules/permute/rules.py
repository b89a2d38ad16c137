"""Permutation rules.

Every rule is a generator: it reads the targets and its own word source and
yields candidate strings in target-major, word-minor order. Rules never mutate
their inputs; filtering and collection happen in :mod:`.sink`.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator

from .labels import DELIMITER, count_char, is_integer, replace_first, split_labels
from .models import RangeSpec
from .ranges import resolve_bounds


def _split_point(target: str) -> int:
    """Index of the append split point, or -1 when the target has no dot."""
    if count_char(target) >= 2:
        return target.find(DELIMITER)
    return target.rfind(DELIMITER)


def append_variants(
    targets: Iterable[str],
    words: Iterable[str],
    level: int = 0,
    exclusions: Collection[str] = frozenset(),
) -> Iterator[str]:
    """Attach each word to the first structural label of every target.

    ``foo.example.com`` + ``bar`` yields ``foo-bar.example.com``,
    ``foo.bar.example.com`` (not at level 1) and ``foobar.example.com``.
    """
    words = tuple(words)
    for target in targets:
        if target in exclusions:
            continue
        location = _split_point(target)
        if location == -1:
            continue
        left, right = target[:location], target[location:]
        for word in words:
            yield f"{left}-{word}{right}"
            if level != 1:
                yield f"{left}.{word}{right}"
            yield f"{left}{word}{right}"


def prepend_variants(
    targets: Iterable[str],
    words: Iterable[str],
    level: int = 0,
    exclusions: Collection[str] = frozenset(),
) -> Iterator[str]:
    """Put each word in front of every target."""
    words = tuple(words)
    for target in targets:
        if target in exclusions:
            continue
        for word in words:
            yield f"{word}{target}"
            if level != 1:
                yield f"{word}-{target}"
            yield f"{word}.{target}"


def set_variants(
    targets: Iterable[str],
    substitutions: Collection[str],
    include_original: bool = False,
) -> Iterator[str]:
    """Swap any label found in *substitutions* for every other member of the set."""
    ordered = sorted(substitutions)
    for target in targets:
        for label in split_labels(target):
            if label not in substitutions:
                continue
            for word in ordered:
                if word != label or include_original:
                    yield replace_first(target, label, word)


def extension_variants(targets: Iterable[str], extensions: Iterable[str]) -> Iterator[str]:
    """Replace everything from the last dot onwards with each extension.

    Extensions are used verbatim, so they normally carry their own leading
    dot (``.org``). Targets without a dot are skipped.
    """
    extensions = tuple(extensions)
    for target in targets:
        location = target.rfind(DELIMITER)
        if location == -1:
            continue
        for extension in extensions:
            yield target[:location] + extension


def range_variants(targets: Iterable[str], spec: RangeSpec) -> Iterator[str]:
    """Replace every numeric label with each integer of its resolved window."""
    for target in targets:
        for label in split_labels(target):
            if not is_integer(label):
                continue
            lower, upper = resolve_bounds(int(label), spec.value, spec.one_sided)
            for i in range(lower, upper):
                yield replace_first(target, label, str(i))
