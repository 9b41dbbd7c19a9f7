"""Structured logging for railcase internals.

The library only emits DEBUG events (short-circuits in fail-fast traversals,
failure counts in aggregations, exceptions captured by ``attempt``), so it is
silent unless the level is lowered.

Quick Start:
    >>> from railcase.observability import configure_logging, get_logger
    >>> configure_logging(format="console", level="DEBUG")
    >>> log = get_logger("my-service")
    >>> log.debug("validated", items=3)

Defaults are read from ``railcase.config.get_settings()`` until
``configure_logging`` is called explicitly.
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol, TextIO, runtime_checkable

from railcase.config import get_settings

LogContext = dict[str, Any]


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context. Immutable - bind() returns a new logger.

    Example:
        >>> log = BoundLogger(context={"logger": "railcase.results"})
        >>> log.debug("sequence short-circuited", index=2)
        # => 10:30:45.120 [debug] sequence short-circuited index=2 logger=railcase.results
    """

    context: LogContext = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int | None = None

    def bind(self, **kw: Any) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer, _level=self._level)

    def unbind(self, *keys: str) -> BoundLogger:
        """Create new logger without specified keys."""
        return BoundLogger(context={k: v for k, v in self.context.items() if k not in keys},
                           _renderer=self._renderer, _level=self._level)

    def is_enabled_for(self, level: int) -> bool:
        return level >= (self._level if self._level is not None else _get_level())

    def _log(self, level: int, event: str, **kw: Any) -> None:
        if not self.is_enabled_for(level):
            return
        (self._renderer or _get_renderer()).render(
            LogEntry(time.time(), logging.getLevelName(level).lower(), event, {**self.context, **kw})
        )

    def debug(self, event: str, **kw: Any) -> None: self._log(logging.DEBUG, event, **kw)
    def info(self, event: str, **kw: Any) -> None: self._log(logging.INFO, event, **kw)
    def warning(self, event: str, **kw: Any) -> None: self._log(logging.WARNING, event, **kw)
    def error(self, event: str, **kw: Any) -> None: self._log(logging.ERROR, event, **kw)


@dataclass(slots=True)
class LogEntry:
    """Single rendered log event."""

    timestamp: float
    level: str
    event: str
    context: LogContext

    @property
    def ts_iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable output. Format: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    show_timestamp: bool = True

    def render(self, entry: LogEntry) -> None:
        parts = [entry.ts_human] if self.show_timestamp else []
        parts += [f"[{entry.level}]", entry.event]
        parts += [f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in sorted(entry.context.items())]
        print(" ".join(parts), file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        import orjson
        print(orjson.dumps({"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event,
                            **entry.context}, option=orjson.OPT_NON_STR_KEYS, default=str).decode(),
              file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("railcase_log_renderer", default=None)
_level: ContextVar[int | None] = ContextVar("railcase_log_level", default=None)


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches settings field
    level: str | None = None,
    *,
    output: TextIO | None = None,
) -> LogRenderer:
    """Configure railcase logging. Format: "console" (human), "json" (machine), "none".

    Arguments left as None fall back to ``get_settings().logging``.
    """
    settings = get_settings()
    format = format or settings.logging.format  # noqa: A001
    _level.set(getattr(logging, (level or settings.effective_log_level).upper(), logging.INFO))
    match format:
        case "console":
            renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr,
                                                    show_timestamp=settings.logging.include_timestamps)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _renderer.set(renderer)
    return renderer


def reset_logging() -> None:
    """Drop explicit configuration so settings apply again."""
    _renderer.set(None)
    _level.set(None)


def get_logger(name: str | None = None, **initial_context: Any) -> BoundLogger:
    """Get a structured logger. Name is added to context as 'logger'.

    The level is resolved on every call, so module-level loggers follow later
    ``configure_logging`` calls.
    """
    return BoundLogger(context={**initial_context, **({"logger": name} if name else {})})


def _get_level() -> int:
    if (level := _level.get()) is None:
        level = getattr(logging, get_settings().effective_log_level, logging.INFO)
    return level


def _get_renderer() -> LogRenderer:
    if (renderer := _renderer.get()) is None:
        settings = get_settings().logging
        match settings.format:
            case "json": renderer = JsonRenderer()
            case "none": renderer = NoOpRenderer()
            case _: renderer = ConsoleRenderer(show_timestamp=settings.include_timestamps)
        _renderer.set(renderer)
    return renderer
