"""barrelgen - keep a component barrel file in sync with the directory tree."""

from __future__ import annotations

# Core
from barrelgen.registry import Registry
from barrelgen.scanner import scan_components
from barrelgen.generator import derive_entries, derive_entry, render_barrel, write_barrel
from barrelgen.hooks import BuildHooks

# Types
from barrelgen.types import ChangeReport, ComponentEntry

# Config
from barrelgen.config import BarrelConfig, load_config

# Errors
from barrelgen.errors import (
    BarrelError,
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    NotFoundError,
    ScanError,
    WriteError,
)

# Observability
from barrelgen.observability import ContextLogger, ReportLogger, StdlibLoggerAdapter

__version__ = "0.1.0"

__all__ = [
    # Core
    "Registry",
    "BuildHooks",
    "scan_components",
    "derive_entry",
    "derive_entries",
    "render_barrel",
    "write_barrel",
    # Types
    "ComponentEntry",
    "ChangeReport",
    # Config
    "BarrelConfig",
    "load_config",
    # Errors
    "ErrorCodes",
    "BarrelError",
    "ConfigError",
    "ConfigNotFoundError",
    "NotFoundError",
    "ScanError",
    "WriteError",
    # Observability
    "ContextLogger",
    "ReportLogger",
    "StdlibLoggerAdapter",
]
