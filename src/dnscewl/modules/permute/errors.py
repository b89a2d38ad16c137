"""Errors raised while preparing a permutation run."""


class ConfigurationError(Exception):
    """Fatal problem with the run configuration or its input files."""
