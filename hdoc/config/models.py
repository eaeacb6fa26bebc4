"""Typed dataclasses describing the hdoc project configuration tree."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

LeafValue = str | int | float | bool


class ProjectConfigError(ValueError):
    """Raised when ``.doc-config.json`` is malformed or holds unsupported values."""


@dc.dataclass(frozen=True, slots=True)
class ConfigLeaf:
    """Terminal configuration value mapped to exactly one CSS declaration."""

    key: str
    value: LeafValue
    is_branch: typ.ClassVar[bool] = False

    @property
    def text(self) -> str:
        """Return the value spelled the way JSON spells it."""
        match self.value:
            case bool():
                return "true" if self.value else "false"
            case float() if self.value.is_integer():
                return str(int(self.value))
            case _:
                return str(self.value)


@dc.dataclass(frozen=True, slots=True)
class ConfigBranch:
    """Nested mapping node; children keep the source insertion order."""

    key: str
    children: tuple[ConfigNode, ...] = ()
    is_branch: typ.ClassVar[bool] = True

    def get(self, key: str) -> ConfigNode | None:
        """Return the direct child named ``key`` or ``None``."""
        for child in self.children:
            if child.key == key:
                return child
        return None


ConfigNode = ConfigLeaf | ConfigBranch


@dc.dataclass(slots=True)
class ProjectConfig:
    """Fully parsed ``.doc-config.json`` document.

    Attributes
    ----------
    global_tree : ConfigBranch
        Document-wide settings from the ``global`` key.
    pages : dict[str, ConfigBranch]
        Page-scoped override trees keyed by page identifier (``"01"``).
    raw : dict[str, Any]
        The decoded JSON mapping, kept for the ``config`` command.
    """

    global_tree: ConfigBranch
    pages: dict[str, ConfigBranch]
    raw: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class ExportOptions:
    """Normalized page-size options handed to the PDF renderer."""

    size: str = "A4"
    orientation: str = "portrait"

    @property
    def landscape(self) -> bool:
        """Return ``True`` when the document should be printed landscape."""
        return self.orientation == "landscape"


__all__ = [
    "ConfigBranch",
    "ConfigLeaf",
    "ConfigNode",
    "ExportOptions",
    "LeafValue",
    "ProjectConfig",
    "ProjectConfigError",
]
