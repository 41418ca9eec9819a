"""Error hierarchy for barrelgen."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "BarrelError",
    "ConfigNotFoundError",
    "ConfigError",
    "NotFoundError",
    "WriteError",
    "ScanError",
    "ErrorCodes",
]


class BarrelError(Exception):
    """Base error for all barrelgen errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(BarrelError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(BarrelError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class NotFoundError(BarrelError):
    """Raised when the base directory or the output file does not exist.

    ``kind`` is either ``"base"`` or ``"output"`` and selects the error code.
    """

    def __init__(self, path: str, kind: str = "base", **kwargs: Any) -> None:
        if kind == "output":
            code = "OUTPUT_NOT_FOUND"
            message = f"Unable to find {path} check your [output] and [base] options"
        else:
            code = "BASE_NOT_FOUND"
            message = f"Unable to find {path} check your [base] option"
        super().__init__(
            code=code,
            message=message,
            details={"path": path, "kind": kind},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path that could not be found."""
        return self.details["path"]

    @property
    def kind(self) -> str:
        """Which configured location was missing: 'base' or 'output'."""
        return self.details["kind"]


class WriteError(BarrelError):
    """Raised when the generated barrel file cannot be written."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="WRITE_FAILED",
            message=f"Error writing '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        return self.details["path"]


class ScanError(BarrelError):
    """Raised when a directory cannot be read during a scan."""

    def __init__(self, directory: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="SCAN_FAILED",
            message=f"Failed to scan directory '{directory}': {reason}",
            details={"directory": directory, "reason": reason},
            **kwargs,
        )

    @property
    def directory(self) -> str:
        return self.details["directory"]


class ErrorCodes:
    """All barrelgen error codes as constants.

    Example:
        if registry.last_error.code == ErrorCodes.BASE_NOT_FOUND:
            fix_base_setting()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    BASE_NOT_FOUND = "BASE_NOT_FOUND"
    OUTPUT_NOT_FOUND = "OUTPUT_NOT_FOUND"
    WRITE_FAILED = "WRITE_FAILED"
    SCAN_FAILED = "SCAN_FAILED"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
