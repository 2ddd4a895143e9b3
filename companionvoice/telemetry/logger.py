"""Structured event logging for voice profile operations.

Responsibilities:
- Emit concise, deterministic component-level log lines through `loguru`.
- Keep each logger's sink isolated so tests and the CLI can capture output.
"""

from __future__ import annotations

from itertools import count
import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_LOGGER_IDS = count(1)
_default_logger: EventLogger | None = None
_LOGURU_DEFAULT_HANDLER_ID = 0


def _remove_loguru_default_handler() -> None:
    """Drop loguru's unfiltered stderr handler so only `EventLogger` sinks emit."""

    try:
        _loguru_logger.remove(_LOGURU_DEFAULT_HANDLER_ID)
    except ValueError:
        pass


_remove_loguru_default_handler()


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class EventLogger:
    """Emit deterministic event lines for registry, store, and inference activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Register an isolated `loguru` handler writing to `sink`."""

        self._logger_id = next(_LOGGER_IDS)
        self._logger = _loguru_logger.bind(voice_logger_id=self._logger_id)
        self._handler_id = _loguru_logger.add(
            sink or sys.stderr,
            format="{message}",
            level=level.upper(),
            colorize=False,
            filter=self._owns_record,
        )

    def _owns_record(self, record: dict) -> bool:
        return record["extra"].get("voice_logger_id") == self._logger_id

    def _emit(self, level: str, component: str, event: str, **context: object) -> None:
        """Emit one structured log line."""

        line = (
            f"[voice] level={level} component={component} "
            f"event={event}{_format_context(context)}"
        )
        self._logger.log(level, line)

    def debug(self, component: str, event: str, **context: object) -> None:
        self._emit("DEBUG", component, event, **context)

    def info(self, component: str, event: str, **context: object) -> None:
        self._emit("INFO", component, event, **context)

    def warning(self, component: str, event: str, **context: object) -> None:
        self._emit("WARNING", component, event, **context)

    def error(self, component: str, event: str, **context: object) -> None:
        """Emit a failure event; context must not carry profile payloads."""

        self._emit("ERROR", component, event, **context)

    def close(self) -> None:
        """Detach this logger's handler from `loguru`."""

        _loguru_logger.remove(self._handler_id)


def default_logger() -> EventLogger:
    """Return the shared stderr logger used when no logger is injected."""

    global _default_logger
    if _default_logger is None:
        _default_logger = EventLogger(level="WARNING")
    return _default_logger
