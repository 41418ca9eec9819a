"""Structured logging: ReportLogger protocol, ContextLogger, StdlibLoggerAdapter."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Protocol, runtime_checkable

_LEVELS = {
    "trace": 0,
    "debug": 10,
    "info": 20,
    "warn": 30,
    "error": 40,
}


@runtime_checkable
class ReportLogger(Protocol):
    """Logging capability injected into the registry."""

    def trace(self, message: str, extra: dict[str, Any] | None = None) -> None: ...

    def debug(self, message: str, extra: dict[str, Any] | None = None) -> None: ...

    def info(self, message: str, extra: dict[str, Any] | None = None) -> None: ...

    def error(self, message: str, extra: dict[str, Any] | None = None) -> None: ...


class ContextLogger:
    """Standalone structured logger that stamps every entry with the scan context."""

    def __init__(
        self,
        name: str,
        output_format: str = "json",
        level: str = "info",
        output: Any = None,
    ) -> None:
        self._name = name
        self._output_format = output_format
        self._level = level
        self._level_value = _LEVELS.get(level, 20)
        self._output = output if output is not None else sys.stderr
        self._base: str | None = None
        self._output_path: str | None = None

    @classmethod
    def from_config(cls, config: Any, name: str, **kwargs: Any) -> ContextLogger:
        """Create a logger that auto-injects the resolved base and output paths."""
        logger = cls(name=name, **kwargs)
        logger._base = str(config.resolved_base)
        logger._output_path = str(config.resolved_output)
        return logger

    def _emit(self, level_name: str, message: str, extra: dict[str, Any] | None) -> None:
        level_value = _LEVELS.get(level_name, 20)
        if level_value < self._level_value:
            return

        now = datetime.now(timezone.utc)
        entry = {
            "timestamp": now.isoformat(),
            "level": level_name,
            "message": message,
            "base": self._base,
            "output": self._output_path,
            "logger": self._name,
            "extra": extra,
        }

        if self._output_format == "json":
            self._output.write(json.dumps(entry, default=str) + "\n")
        else:
            ts = now.strftime("%Y-%m-%d %H:%M:%S")
            lvl = level_name.upper()
            extras_str = ""
            if extra:
                extras_str = " " + " ".join(f"{k}={v}" for k, v in extra.items())
            self._output.write(f"{ts} [{lvl}] [{self._name}] {message}{extras_str}\n")

    def trace(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._emit("trace", message, extra)

    def debug(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._emit("debug", message, extra)

    def info(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._emit("info", message, extra)

    def warn(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._emit("warn", message, extra)

    def error(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._emit("error", message, extra)


class StdlibLoggerAdapter:
    """Expose a :class:`logging.Logger` through the ReportLogger interface.

    ``trace`` has no stdlib level and is logged at DEBUG.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, message: str, extra: dict[str, Any] | None) -> None:
        if extra:
            self._logger.log(level, "%s %s", message, extra)
        else:
            self._logger.log(level, "%s", message)

    def trace(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._log(logging.DEBUG, message, extra)

    def debug(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._log(logging.INFO, message, extra)

    def warn(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, extra: dict[str, Any] | None = None) -> None:
        self._log(logging.ERROR, message, extra)


__all__ = [
    "ContextLogger",
    "ReportLogger",
    "StdlibLoggerAdapter",
]
