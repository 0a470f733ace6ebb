"""Custom exceptions for emitkit.

The emitter never raises these: whatever a listener raises reaches the
``dispatch`` caller unchanged.
"""


class EmitkitError(Exception):
    """Base exception for all emitkit errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(EmitkitError):
    """Raised when a setting cannot be turned into a working configuration."""
