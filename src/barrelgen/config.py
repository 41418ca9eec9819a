"""Configuration model and loading."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict, Field

from barrelgen.errors import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

__all__ = [
    "BarrelConfig",
    "DEFAULT_BASE",
    "DEFAULT_HEADER",
    "DEFAULT_OUTPUT",
    "DEFAULT_PATTERN",
    "load_config",
]

DEFAULT_BASE = "./src/components"
DEFAULT_OUTPUT = "index.ts"
DEFAULT_HEADER = "// @generated\n// This file is automatically generated and should not be edited.\n\n"
DEFAULT_PATTERN = r"\.?/.+/index\.tsx$"


class BarrelConfig(BaseModel):
    """Immutable barrel generation settings.

    ``base`` is resolved against ``context`` and ``output`` against the
    resolved base. To change a setting build a new config with
    :meth:`with_options`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    base: Path = Path(DEFAULT_BASE)
    output: str = DEFAULT_OUTPUT
    header: str = DEFAULT_HEADER
    pattern: re.Pattern = Field(default_factory=lambda: re.compile(DEFAULT_PATTERN))
    recursive: bool = True
    follow_symlinks: bool = True
    context: Path = Field(default_factory=Path.cwd)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> BarrelConfig:
        """Validate a plain mapping into a config.

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type.
        """
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            raise ConfigError(
                message=f"Invalid barrel configuration: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
                cause=e,
            ) from e

    def with_options(self, **changes: Any) -> BarrelConfig:
        """Return a new validated config with ``changes`` applied."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return type(self).from_mapping(data)

    @property
    def resolved_base(self) -> Path:
        return (self.context / self.base).resolve()

    @property
    def resolved_output(self) -> Path:
        return (self.resolved_base / self.output).resolve()


def load_config(config_path: Path | str, **overrides: Any) -> BarrelConfig:
    """Load a YAML config file into a :class:`BarrelConfig`.

    Relative ``base`` values are resolved against the config file's
    directory unless ``context`` is given explicitly. Keyword overrides are
    applied on top of the file contents.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be read or is not a valid YAML mapping
            of known keys.
    """
    config_path = Path(config_path)
    try:
        content = config_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigNotFoundError(config_path=str(config_path)) from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(message=f"Cannot read config file {config_path}: {e}", cause=e) from e
    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in config file: {config_path}", cause=e) from e

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, dict):
        raise ConfigError(message=f"Config file must be a YAML mapping: {config_path}")

    data: dict[str, Any] = {"context": config_path.resolve().parent}
    data.update(parsed)
    data.update({k: v for k, v in overrides.items() if v is not None})
    logger.debug("Loaded config from %s: %s", config_path, sorted(parsed))
    return BarrelConfig.from_mapping(data)
