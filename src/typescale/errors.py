"""Exceptions raised by the strict entry points of typescale."""


class ScaleError(ValueError):
    """Invalid scale input, unknown preset or ratio name, or empty range."""
