"""Subdomain permutation engine."""

from .engine import generate, plan_rules
from .errors import ConfigurationError
from .labels import has_repeated_label, replace_first, split_labels
from .models import RangeSpec, RunConfig, WordSources
from .ranges import parse_range, resolve_bounds
from .rules import (
    append_variants,
    extension_variants,
    prepend_variants,
    range_variants,
    set_variants,
)
from .sink import OutputSink
from .wordlists import load_word_sources, read_word_file

__all__ = [
    "ConfigurationError",
    "OutputSink",
    "RangeSpec",
    "RunConfig",
    "WordSources",
    "append_variants",
    "extension_variants",
    "generate",
    "has_repeated_label",
    "load_word_sources",
    "parse_range",
    "plan_rules",
    "prepend_variants",
    "range_variants",
    "read_word_file",
    "replace_first",
    "resolve_bounds",
    "set_variants",
    "split_labels",
]
