"""Component registry: tracks matched entry files and regenerates the barrel."""

from __future__ import annotations

import traceback
from collections import Counter
from pathlib import Path

from barrelgen.config import BarrelConfig
from barrelgen.errors import BarrelError, NotFoundError, ScanError, WriteError
from barrelgen.generator import derive_entries, derive_entry, render_barrel, write_barrel
from barrelgen.observability.context_logger import ContextLogger, ReportLogger
from barrelgen.scanner import scan_components
from barrelgen.types import ChangeReport, ComponentEntry

__all__ = ["Registry"]


class Registry:
    """Holds the last known set of component files and keeps the barrel in sync.

    All filesystem errors are caught here, reported through the injected
    logger and turned into an empty result. The last one is kept in
    :attr:`last_error` until the next successful run.
    """

    def __init__(
        self,
        config: BarrelConfig | None = None,
        logger: ReportLogger | None = None,
    ) -> None:
        """Initialize the Registry.

        Args:
            config: Barrel settings. Defaults to ``BarrelConfig()``.
            logger: Reporting logger. Defaults to a text ContextLogger on stderr.
        """
        self._config = config if config is not None else BarrelConfig()
        self._logger: ReportLogger = (
            logger if logger is not None else ContextLogger(name="barrelgen", output_format="text")
        )
        self._keys: list[Path] = []
        self._last_error: BarrelError | None = None

    # ----- Configuration -----

    def configure(
        self,
        config: BarrelConfig | None = None,
        logger: ReportLogger | None = None,
    ) -> None:
        """Replace the config and/or the logger. Known keys are kept."""
        if config is not None:
            self._config = config
        if logger is not None:
            self._logger = logger

    @property
    def config(self) -> BarrelConfig:
        return self._config

    @property
    def logger(self) -> ReportLogger:
        return self._logger

    @property
    def base_path(self) -> Path:
        """Base directory resolved against the config context."""
        return self._config.resolved_base

    @property
    def output_path(self) -> Path:
        """Output file resolved against the base directory."""
        return self._config.resolved_output

    # ----- State -----

    @property
    def keys(self) -> list[Path]:
        """Copy of the component files found by the last successful run."""
        return list(self._keys)

    @property
    def entries(self) -> list[ComponentEntry]:
        return [derive_entry(key) for key in self._keys]

    @property
    def count(self) -> int:
        return len(self._keys)

    @property
    def last_error(self) -> BarrelError | None:
        return self._last_error

    # ----- Lifecycle -----

    def initial_scan(self) -> list[ComponentEntry]:
        """Scan the base directory and write the barrel file for the first time.

        Returns:
            The entries written, or an empty list if an error was reported.
        """
        return self._generate()

    def regenerate(self) -> list[ComponentEntry]:
        """Rescan and rewrite the barrel file. Same behavior as :meth:`initial_scan`."""
        return self._generate()

    def render(self) -> str | None:
        """Scan and render the barrel content without writing it.

        The base and output guards apply as for :meth:`initial_scan`, and
        the known keys are left untouched.

        Returns:
            The content the barrel file should have, or None if an error was reported.
        """
        prepared = self._prepare()
        if prepared is None:
            return None
        _, _, content = prepared
        self._last_error = None
        return content

    def detect_changes(self) -> ChangeReport:
        """Check whether the component set differs from the known keys.

        Every known key is checked for existence first. Only when none is
        missing is the base directory rescanned and compared against the keys,
        ignoring order. Neither step modifies the keys or writes the output.
        """
        self._logger.info("Running change check")
        missing: list[Path] = []
        for entry in self.entries:
            if self._key_exists(entry.path):
                self._logger.debug(f"✓ {entry.import_specifier}")
            else:
                missing.append(entry.path)
                self._logger.info(
                    "Detected component change",
                    extra={"path": str(entry.path), "import": entry.import_specifier},
                )

        changed = bool(missing)
        if not changed:
            self._logger.info("Checking files", extra={"base": str(self.base_path)})
            try:
                current = self._scan()
            except ScanError as e:
                self._report(e)
                changed = True
            else:
                changed = Counter(current) != Counter(self._keys)

        if changed:
            self._logger.info("Changes detected")
        else:
            self._logger.info("No changes")
        return ChangeReport(changed=changed, keys=list(self._keys), missing=missing)

    # ----- Internals -----

    def _scan(self) -> list[Path]:
        return scan_components(
            self.base_path,
            self._config.pattern,
            recursive=self._config.recursive,
            follow_symlinks=self._config.follow_symlinks,
        )

    def _key_exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError as e:
            self._logger.debug("Cannot stat component file", extra={"path": str(path), "reason": str(e)})
            return False

    @staticmethod
    def _missing(path: Path, kind: str) -> NotFoundError | None:
        """Return a NotFoundError if ``path`` is absent or cannot be checked."""
        try:
            if path.exists():
                return None
        except OSError as e:
            return NotFoundError(path=str(path), kind=kind, cause=e)
        return NotFoundError(path=str(path), kind=kind)

    def _prepare(self) -> tuple[list[Path], list[ComponentEntry], str] | None:
        base = self.base_path
        output = self.output_path
        self._logger.info("Scanning components", extra={"base": str(base)})

        for path, kind in ((base, "base"), (output, "output")):
            error = self._missing(path, kind)
            if error is not None:
                self._report(error)
                return None

        try:
            keys = self._scan()
        except ScanError as e:
            self._report(e)
            return None
        entries = derive_entries(keys)
        return keys, entries, render_barrel(self._config.header, entries)

    def _generate(self) -> list[ComponentEntry]:
        prepared = self._prepare()
        if prepared is None:
            return []
        keys, entries, content = prepared
        output = self.output_path

        try:
            write_barrel(output, content)
        except WriteError as e:
            # keys stay at their previous value on failure
            return self._report(e)

        self._keys = keys
        self._last_error = None
        self._logger.info(f"Generated barrel: {len(keys)} components written to {output}")
        return entries

    def _report(self, error: BarrelError) -> list[ComponentEntry]:
        self._last_error = error
        self._logger.error(str(error), extra=error.details)
        self._logger.trace("".join(traceback.format_exception(type(error), error, error.__traceback__)))
        return []
