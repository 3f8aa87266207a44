"""Structured logging for Selenium MCP.

Loguru is configured to write to stderr only (stdout carries MCP JSON-RPC),
plus an optional rotating file under the configured log directory.

    from sm.logging import LogSpan, configure_logging

    configure_logging(log_name="serve")

    with LogSpan(span="tool.call", tool="navigate") as span:
        ...
        span.add(success=True)
"""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from types import TracebackType

__all__ = ["LogSpan", "configure_logging"]

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} - {message}"

# Remove Loguru's default stderr handler at import so nothing is emitted
# before configure_logging() decides on sinks and level.
logger.remove()


def configure_logging(
    log_name: str = "serve",
    level: str = "INFO",
    log_dir: str | Path | None = None,
) -> None:
    """Configure loguru sinks for a process.

    Args:
        log_name: Base name of the log file (e.g., "serve" -> serve.log)
        level: Minimum level for all sinks
        log_dir: Directory for the log file; no file sink when empty
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT, backtrace=False)

    if log_dir:
        path = Path(log_dir).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        logger.add(
            path / f"{log_name}.log",
            level=level,
            format=_FORMAT,
            rotation="10 MB",
            retention=5,
            enqueue=True,
        )


class LogSpan:
    """A timed logging span that emits one structured line on exit.

    Exceptions raised inside the span are recorded and re-raised.
    """

    def __init__(self, span: str, **attrs: Any) -> None:
        self.span = span
        self.attrs: dict[str, Any] = dict(attrs)
        self.start_time = time.monotonic()
        self.error: str | None = None

    def add(self, key: str | None = None, value: Any = None, **attrs: Any) -> LogSpan:
        """Add attributes to the span.

        Supports both positional and keyword argument styles.

        Args:
            key: Attribute name (optional if using kwargs)
            value: Attribute value (required if key is provided)
            **attrs: Bulk attribute additions (e.g., count=10, found=True)

        Returns:
            Self for method chaining
        """
        if key is not None:
            self.attrs[key] = value
        self.attrs.update(attrs)
        return self

    @property
    def elapsed_ms(self) -> float:
        return round((time.monotonic() - self.start_time) * 1000, 2)

    def __enter__(self) -> LogSpan:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is not None:
            self.error = f"{exc_type.__name__ if exc_type else 'Error'}: {exc}"
        self._emit()

    def _emit(self) -> None:
        fields = " ".join(f"{k}={v!r}" for k, v in self.attrs.items())
        message = f"{self.span} elapsed_ms={self.elapsed_ms}"
        if fields:
            message = f"{message} {fields}"
        if self.error:
            logger.opt(depth=2).error(f"{message} error={self.error!r}")
        else:
            logger.opt(depth=2).debug(message)
