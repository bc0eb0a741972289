class DelveError(Exception):
    """Base exception for the delve project."""


class OutOfBoundsError(DelveError, IndexError):
    """Raised when a grid coordinate falls outside the map extent."""


class ConfigError(DelveError, ValueError):
    """Raised when generation settings are invalid or cannot be loaded."""
