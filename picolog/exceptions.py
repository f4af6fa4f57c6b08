"""Exception classes for picolog."""

class PicologError(Exception):
    """Base exception class for picolog."""
    pass

class InvalidLogLevelError(PicologError, ValueError):
    """Raised when a log level name or value is not recognised."""
    pass

class ConfigError(PicologError):
    """Raised when there is a configuration error."""
    pass
