"""Value types: ComponentEntry, ChangeReport."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "ComponentEntry",
    "ChangeReport",
]


@dataclass(frozen=True)
class ComponentEntry:
    """Derived view over one matched component entry file.

    Attributes:
        path: Absolute path of the matched file.
        component_name: Name the component is re-exported under.
        import_specifier: Relative module path used in the export statement.
    """

    path: Path
    component_name: str
    import_specifier: str


@dataclass(frozen=True)
class ChangeReport:
    """Outcome of a change-detection pass."""

    changed: bool
    keys: list[Path] = field(default_factory=list)
    missing: list[Path] = field(default_factory=list)
