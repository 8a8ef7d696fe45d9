"""Structured logging for textdates.

Importing textdates configures nothing. Modules log through
``logging.getLogger(__name__)`` at DEBUG and stay silent until the host
application either configures the standard library itself or calls
``configure_logging``, which renders textdates records with structlog as JSON
(production) or colored console lines (development).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

from textdates.config import settings

if TYPE_CHECKING:
    from structlog.typing import Processor

PACKAGE_LOGGER = "textdates"

# Handler installed by the last configure_logging call
_handler: logging.Handler | None = None

_SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _renderer(format: str) -> list[Processor]:
    if format.lower() == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def configure_logging(
    level: str | None = None,
    format: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Send textdates log records to a stream, rendered by structlog.

    Only the ``textdates`` logger gets a handler; the root logger is left
    alone. Loggers from ``get_logger`` are routed through the same renderer.
    Calling this again replaces the handler from the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown
            names mean INFO. Defaults to ``settings.log_level``.
        format: "json" for production, "text" for development.
            Defaults to ``settings.log_format``.
        stream: Where to write. Defaults to standard error.

    Example:
        ```python
        from textdates import parse
        from textdates.logging import configure_logging

        configure_logging(level="DEBUG", format="text")
        parse("see you on sunday")
        ```
    """
    global _handler

    level = level or settings.log_level
    format = format or settings.log_format
    log_level = logging.getLevelNamesMapping().get(level.upper(), logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*_SHARED_PROCESSORS, structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_renderer(format),
        ],
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    _handler = handler

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = PACKAGE_LOGGER) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Does not configure anything. Names under ``textdates`` share the handler
    installed by ``configure_logging``.

    Args:
        name: Logger name.

    Returns:
        A bound structlog logger.
    """
    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log messages.

    Useful for tagging every parse of one document, e.g. with a message id.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.

    Example:
        ```python
        from textdates import parse
        from textdates.logging import bind_context, clear_context

        bind_context(message_id="msg_42")
        parse("see you tomorrow", reference_date=sent_on)
        clear_context()
        ```
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """Remove specific keys from the logging context.

    Args:
        *keys: Keys to remove from context.
    """
    structlog.contextvars.unbind_contextvars(*keys)
