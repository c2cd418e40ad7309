"""Narrow reporting seam used by every extractor.

Extractors talk to an ``ExtractionReporter`` instead of a global logger, so a
caller can collect results in memory or silence them. The default reporter
forwards to the standard ``logging`` module.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class ExtractionReporter(Protocol):
    def found(self, component: str, value: str, source: str) -> None: ...

    def not_found(self, component: str) -> None: ...

    def warning(self, component: str, message: str, *args: Any) -> None: ...


class LoggingReporter:
    """Report through ``logging.getLogger("sanctions_mapper.<component>")``."""

    def __init__(self, prefix: str = "sanctions_mapper") -> None:
        self.prefix = prefix

    def _logger(self, component: str) -> logging.Logger:
        return logging.getLogger(f"{self.prefix}.{component}")

    def found(self, component: str, value: str, source: str) -> None:
        self._logger(component).debug("Found %r from %s", value, source)

    def not_found(self, component: str) -> None:
        self._logger(component).debug("Nothing found")

    def warning(self, component: str, message: str, *args: Any) -> None:
        self._logger(component).warning(message, *args)


DEFAULT_REPORTER = LoggingReporter()


def resolve(reporter: Optional[ExtractionReporter]) -> ExtractionReporter:
    return reporter if reporter is not None else DEFAULT_REPORTER


def degrades_to(factory: Callable[[], T]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Turn an unexpected fault inside an extractor into its empty result.

    The fault is logged with its traceback; the batch carries on with the
    value produced by ``factory``.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        log = logging.getLogger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except Exception:
                log.exception("%s failed; returning empty result", func.__name__)
                return factory()

        return wrapper

    return decorator
