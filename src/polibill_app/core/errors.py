"""Exception types raised by polibill."""


class PolibillError(Exception):
    """Base exception for polibill errors."""


class RecordFormatError(PolibillError, ValueError):
    """Raised in strict mode when a stored record does not match its layout."""


class ConfigError(PolibillError):
    """Raised when the configuration file is unreadable or malformed."""
