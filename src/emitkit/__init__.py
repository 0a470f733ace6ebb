"""emitkit: an in-process, synchronous, keyed event emitter."""

from emitkit.core import ConfigurationError, Emitter, EmitkitError, EventEmitter, Token

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "Emitter",
    "EmitkitError",
    "EventEmitter",
    "Token",
    "__version__",
]
