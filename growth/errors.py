"""
Exceptions raised by the growth engine.
"""


class GrowthError(Exception):
    """Base class for growth simulation errors."""


class ConfigurationError(GrowthError, ValueError):
    """Out-of-range or degenerate configuration. Raised before a run starts."""


class DegenerateTopologyError(GrowthError):
    """The path has too few nodes to form a usable cycle."""
