"""Structured logging for calshift.

calshift never configures logging on import. Applications that want to see
its events call configure_logging once at startup.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Generator

import structlog

_ROOT_LOGGER = "calshift"


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger bound to a calshift module name."""
    return structlog.get_logger(name or _ROOT_LOGGER)


def _level_number(level: str) -> int:
    try:
        return logging.getLevelNamesMapping()[level.upper()]
    except (AttributeError, KeyError):
        # getLevelNamesMapping is new in 3.11
        number = logging.getLevelName(level.upper())
        if not isinstance(number, int):
            raise ValueError(f"Unknown log level: {level!r}") from None
        return number


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure calshift logging.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for JSON output (production), False for console
    """
    level_no = _level_number(level)
    logging.basicConfig(format="%(message)s", level=level_no)

    processors: list[Any] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def timed_block(
    logger: structlog.BoundLogger,
    event: str,
    level: str = "debug",
    **fields: Any,
) -> Generator[None, None, None]:
    """Log event with elapsed_ms once the block exits.

    Extra keyword arguments are attached to the event. If the block raises,
    the event also carries the exception class name as ``error``.
    """
    start = time.perf_counter()
    try:
        yield
    except Exception as exc:
        fields["error"] = type(exc).__name__
        raise
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        getattr(logger, level)(event, elapsed_ms=round(elapsed_ms, 2), **fields)
