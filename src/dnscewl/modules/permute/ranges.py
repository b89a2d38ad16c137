"""Numeric range parsing and window resolution."""

from __future__ import annotations

from .errors import ConfigurationError
from .labels import is_integer
from .models import RangeSpec

DEFAULT_WINDOW = 100


def parse_range(text: str) -> RangeSpec:
    """Parse a ``--range`` string into a :class:`RangeSpec`.

    ``"+5"`` and ``"-5"`` produce one-sided ranges; ``"5"`` is two-sided.
    Anything else raises :class:`ConfigurationError`.
    """
    if text and text[0] in "+-":
        if not is_integer(text[1:]):
            raise ConfigurationError(f"{text} is not a valid range")
        return RangeSpec(value=int(text), one_sided=True)
    if not is_integer(text):
        raise ConfigurationError(f"{text} is not a valid range")
    return RangeSpec(value=int(text), one_sided=False)


def resolve_bounds(n: int, range_: int, one_sided: bool) -> tuple[int, int]:
    """Return the ``[lower, upper)`` window to permute *n* over."""
    if range_ < 0:
        if one_sided:
            return n + range_, n
        return n + range_, n - range_
    if range_ == 0:
        return n - DEFAULT_WINDOW, n + DEFAULT_WINDOW
    if one_sided:
        return n, n + range_
    return n - range_, n + range_
