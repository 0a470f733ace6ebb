"""structlog configuration.

emitkit loggers are structlog loggers wrapped around stdlib loggers under the
``emitkit`` namespace, so a host application that never calls
:func:`configure_logging` sees nothing below WARNING.  Calling it installs one
handler on the ``emitkit`` logger that renders events as console lines or JSON.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from emitkit.config.settings import Settings, get_settings

ROOT_LOGGER_NAME = "emitkit"

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]

_handler: logging.Handler | None = None


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger on top of ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Attach a rendering handler to the ``emitkit`` logger.

    Safe to call repeatedly: the handler installed by a previous call is
    replaced, not duplicated.  Raises
    :class:`~emitkit.core.exceptions.ConfigurationError` if the level name in
    *settings* cannot be resolved.
    """
    global _handler

    settings = settings or get_settings()

    level = settings.log_level_number

    renderer: Any
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(level)
    _handler = handler
    return handler
