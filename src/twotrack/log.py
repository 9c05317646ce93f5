"""
Logging hooks for the tee family, built on structlog.

The algebra never logs on its own. Observation happens at the points a
pipeline chooses, by passing these hooks to success_tee / failure_tee /
either_tee:

    log = structlog.get_logger()

    result = (
        validate(request)
        .failure_tee(log_failure("signup.rejected", logger=log))
        .bind(persist)
        .success_tee(log_success("signup.stored", logger=log))
    )

Events follow the "<subject>.<what happened>" naming, with the value and
messages attached as key-values.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

import structlog

from twotrack.config import LoggingSettings
from twotrack.result import Result

S = TypeVar("S")
M = TypeVar("M")

_LEVELS = ("debug", "info", "warning", "error", "critical")


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure structlog for the hooks in this module.

    JSON lines for machine consumption, or colored, human-readable console
    output for development, as chosen by settings.renderer.
    """
    settings = settings or LoggingSettings()

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]
    if settings.timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    if settings.renderer == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.level_number()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _emitter(logger: Optional[Any], level: str) -> Callable[..., Any]:
    if level.lower() not in _LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    log = logger if logger is not None else structlog.get_logger()
    return getattr(log, level.lower())


def log_success(
    event: str = "result.success",
    *,
    logger: Optional[Any] = None,
    level: str = "info",
) -> Callable[[Any, tuple[Any, ...]], None]:
    """Build a success_tee callback that logs the value and its messages."""
    emit = _emitter(logger, level)

    def hook(value: Any, messages: tuple[Any, ...]) -> None:
        emit(event, value=value, messages=list(messages))

    return hook


def log_failure(
    event: str = "result.failure",
    *,
    logger: Optional[Any] = None,
    level: str = "warning",
) -> Callable[[tuple[Any, ...]], None]:
    """Build a failure_tee callback that logs the error messages."""
    emit = _emitter(logger, level)

    def hook(messages: tuple[Any, ...]) -> None:
        emit(event, messages=list(messages))

    return hook


def log_result(
    result: Result[S, M],
    operation: str,
    *,
    logger: Optional[Any] = None,
) -> Result[S, M]:
    """
    Log a result under "<operation>.succeeded" or "<operation>.failed".

    Returns the result unchanged, so it can sit in the middle of a chain.
    """
    return result.either_tee(
        log_success(f"{operation}.succeeded", logger=logger),
        log_failure(f"{operation}.failed", logger=logger),
    )
