"""Exception hierarchy for randset."""


class RandSetError(Exception):
    """Base exception for randset errors."""
    pass


class ConfigError(RandSetError):
    """Raised when configuration cannot be located or parsed."""
    pass


class SetPoolError(RandSetError):
    """Raised when a preset set pool cannot satisfy a request."""
    pass
