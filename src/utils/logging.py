"""Structured logging setup for the caches.

Every module logs through ``structlog`` with snake_case events
(``cache_hit``, ``cache_write_failed``, ``deferred_commit_completed``, ...).
Events are printed to stdout, rendered by a ConsoleRenderer for local
development or a JSONRenderer in production (``APP_ENV=production`` or ``json_output``).

When the caches run in a namespace it is bound once into the context
variables, so every event carries ``cache_namespace`` without each call
site repeating it.
"""

import logging
import os

import structlog

from src.utils.errors import ConfigurationError


def _level_number(log_level: str) -> int:
    levels = logging.getLevelNamesMapping()
    try:
        return levels[log_level.upper()]
    except KeyError:
        raise ConfigurationError(f"Unknown log level {log_level!r}") from None


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    namespace: str | None = None,
) -> structlog.BoundLogger:
    """Configure structlog for cache-bridge.

    Args:
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Hits and misses are DEBUG events; absorbed store faults are
            WARNING.
        json_output: Force JSON output regardless of ``APP_ENV``.
        namespace: Cache namespace to bind into every event; ``None`` or
            ``""`` binds nothing.

    Raises:
        ConfigurationError: If *log_level* is not a known level name.
    """
    min_level = _level_number(log_level)
    use_json = json_output or os.environ.get("APP_ENV", "development") == "production"

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if use_json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.unbind_contextvars("cache_namespace")
    if namespace:
        structlog.contextvars.bind_contextvars(cache_namespace=namespace)

    return structlog.get_logger()


def get_logger(name: str, **context: object) -> structlog.BoundLogger:
    """Return a logger for module *name* with *context* bound to every event."""
    if not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(logger_name=name, **context)
