"""Adapter mapping build-tool lifecycle callbacks onto the registry."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from barrelgen.config import BarrelConfig
from barrelgen.observability.context_logger import ReportLogger
from barrelgen.registry import Registry
from barrelgen.types import ChangeReport, ComponentEntry

__all__ = ["BuildHooks"]


class BuildHooks:
    """Wraps a Registry behind the three lifecycle points a build host calls.

    Usage::

        hooks = BuildHooks(BarrelConfig(base="src/components"))
        hooks.on_environment_init(logger=host_logger, context=project_root)
        hooks.on_build_start(done)
    """

    def __init__(
        self,
        config: BarrelConfig | None = None,
        registry: Registry | None = None,
    ) -> None:
        if registry is None:
            registry = Registry(config=config)
        elif config is not None:
            registry.configure(config=config)
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry

    def on_environment_init(
        self,
        logger: ReportLogger | None = None,
        context: Path | str | None = None,
    ) -> list[ComponentEntry]:
        """Inject host logger and working directory, then run the first scan."""
        config = self._registry.config
        if context is not None:
            config = config.with_options(context=context)
        self._registry.configure(config=config, logger=logger)
        self._registry.logger.info("Barrel generation start")
        return self._registry.initial_scan()

    def on_build_start(self, done: Callable[[], None]) -> ChangeReport:
        """Regenerate when the component set changed, then signal ``done``."""
        try:
            report = self._registry.detect_changes()
            if report.changed:
                self._registry.regenerate()
        finally:
            done()
        return report

    def on_watch_rebuild(self, done: Callable[[], None]) -> ChangeReport:
        """Same as :meth:`on_build_start`, for watch-mode rebuilds."""
        return self.on_build_start(done)
