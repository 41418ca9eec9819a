"""Barrel file generation: entry derivation, rendering and writing."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path, PurePath
from typing import Iterable

from barrelgen.errors import WriteError
from barrelgen.types import ComponentEntry

logger = logging.getLogger(__name__)

__all__ = [
    "derive_entry",
    "derive_entries",
    "render_export",
    "render_barrel",
    "write_barrel",
]


def derive_entry(path: Path | str) -> ComponentEntry:
    """Derive the export name and import specifier for a matched file.

    The component name is the directory containing the file, and the
    import specifier is ``./<grandparent>/<parent>``. Paths that do not
    follow the ``.../<component>/<entryfile>`` shape still produce an
    entry, it just may not be useful.
    """
    pure = PurePath(path)
    parent = pure.parent
    component_name = parent.name
    segments = [name for name in (parent.parent.name, component_name) if name]
    return ComponentEntry(
        path=Path(path),
        component_name=component_name,
        import_specifier="./" + "/".join(segments),
    )


def derive_entries(keys: Iterable[Path | str]) -> list[ComponentEntry]:
    """Derive entries for every key, in order. Duplicate names are logged."""
    entries = [derive_entry(key) for key in keys]
    seen: dict[str, Path] = {}
    for entry in entries:
        if entry.component_name in seen:
            logger.warning(
                "Duplicate component name '%s' at %s, already found at %s",
                entry.component_name,
                entry.path,
                seen[entry.component_name],
            )
            continue
        seen[entry.component_name] = entry.path
    return entries


def render_export(entry: ComponentEntry) -> str:
    """Render a single re-export line, newline included."""
    return f"export {{ default as {entry.component_name} }} from '{entry.import_specifier}'\n"


def render_barrel(header: str, entries: Iterable[ComponentEntry]) -> str:
    """Render the full barrel file: header verbatim, then one export per entry."""
    return header + "".join(render_export(entry) for entry in entries)


def write_barrel(output_path: Path, content: str) -> None:
    """Write barrel content as UTF-8 with ``\\n`` line endings.

    Content goes to a temporary file in the same directory which then
    replaces ``output_path``, so a failed write leaves the old file intact.
    An existing file keeps its permission bits.

    Raises:
        WriteError: If the file cannot be written.
    """
    output_path = Path(output_path)
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            fh.write(content)
        if output_path.exists():
            shutil.copymode(output_path, tmp_name)
        os.replace(tmp_name, output_path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(path=str(output_path), reason=str(e), cause=e) from e
