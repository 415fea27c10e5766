"""
Exceptions raised by the hypermines engine.
"""


class MinesError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(MinesError, ValueError):
    """Board dimensions or game configuration are unusable."""


class CoordinateError(MinesError, IndexError):
    """A coordinate or flat index lies outside the board."""
