"""Event registry, keys and ports."""

from emitkit.core.emitter import EventEmitter
from emitkit.core.exceptions import ConfigurationError, EmitkitError
from emitkit.core.keys import Token
from emitkit.core.ports import Emitter

__all__ = [
    # Registry
    "EventEmitter",
    "Emitter",
    "Token",
    # Exceptions
    "EmitkitError",
    "ConfigurationError",
]
