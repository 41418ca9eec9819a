"""Directory scanner for discovering component entry files."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from barrelgen.errors import ScanError

logger = logging.getLogger(__name__)

__all__ = ["scan_components"]


def scan_components(
    directory: Path | str,
    pattern: re.Pattern[str] | str,
    recursive: bool = True,
    follow_symlinks: bool = True,
) -> list[Path]:
    """Scan a directory for files whose full path matches ``pattern``.

    Entries are visited in name order so repeated scans of an unchanged
    tree return the same list. Paths are tested in POSIX form, so patterns
    are written with ``/`` separators on every platform.

    Args:
        directory: Directory to scan.
        pattern: Regular expression searched against each file's absolute path.
        recursive: Descend into subdirectories. When False only files at the
            top level can match.
        follow_symlinks: Follow symlinked directories. Each real directory is
            visited at most once.

    Returns:
        Absolute paths of the matching files.

    Raises:
        ScanError: If ``directory`` or any subdirectory cannot be read.
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    root = Path(directory).resolve()

    visited_real_paths: set[Path] = set()
    results: list[Path] = []

    def _scan_dir(dir_path: Path) -> None:
        try:
            real = dir_path.resolve()
        except OSError as e:
            raise ScanError(directory=str(dir_path), reason=str(e), cause=e) from e
        if real in visited_real_paths:
            logger.warning("Directory %s -> %s already visited, skipping", dir_path, real)
            return
        visited_real_paths.add(real)

        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise ScanError(directory=str(dir_path), reason=str(e), cause=e) from e

        for entry in entries:
            entry_path = Path(entry.path)
            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
                is_file = entry.is_file(follow_symlinks=follow_symlinks)
            except OSError as e:
                raise ScanError(directory=str(dir_path), reason=str(e), cause=e) from e

            if is_dir:
                if not recursive:
                    continue
                _scan_dir(entry_path)
            elif is_file:
                if pattern.search(entry_path.as_posix()) is None:
                    continue
                logger.debug("Matched component file %s", entry_path)
                results.append(entry_path)

    _scan_dir(root)
    return results
