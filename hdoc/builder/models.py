"""Shared dataclasses and errors used by the document build pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from hdoc._constants import (
    COMPONENTS_DIRNAME,
    CONFIG_FILENAME,
    OUTPUT_PATH,
    PAGES_DIRNAME,
    STYLESHEET_PATH,
)


class ProjectStateError(RuntimeError):
    """Raised when required project directories or files are missing."""


class NoPagesFoundError(ProjectStateError):
    """Raised when the pages directory holds no numerically named page files."""


@dc.dataclass(frozen=True, slots=True)
class PageFile:
    """A numbered page fragment such as ``pages/02.html``.

    Attributes
    ----------
    name : str
        Filename, used as the page's identity during include resolution.
    number : int
        Integer value of the numeric stem; the ordering key.
    stem : str
        Numeric stem as written (``"02"``), matching ``pages`` config keys.
    path : Path
        Location of the fragment on disk.
    """

    name: str
    number: int
    stem: str
    path: Path


@dc.dataclass(frozen=True, slots=True)
class Placeholder:
    """One ``{{> name }}`` occurrence found while scanning content."""

    text: str
    name: str
    start: int


@dc.dataclass(frozen=True, slots=True)
class CSSDeclaration:
    """A single ``--property: value;`` custom-property declaration."""

    name: str
    value: str

    def render(self) -> str:
        """Return the declaration as CSS text."""
        return f"{self.name}: {self.value};"


@dc.dataclass(frozen=True, slots=True)
class ScopeBlock:
    """A CSS rule body holding generated declarations for one selector."""

    selector: str
    comment: str
    declarations: tuple[CSSDeclaration, ...]


@dc.dataclass(frozen=True, slots=True)
class AssembledPages:
    """Ordered page identifiers and the concatenated include-resolved body."""

    pages: tuple[PageFile, ...]
    body: str


@dc.dataclass(frozen=True, slots=True)
class BuildResult:
    """Everything produced by one build, before it is written to disk."""

    pages: tuple[PageFile, ...]
    body: str
    css: str
    html: str


@dc.dataclass(frozen=True, slots=True)
class ProjectPaths:
    """Filesystem locations making up an hdoc project."""

    root: Path
    config: Path
    pages: Path
    components: Path
    stylesheet: Path
    output: Path

    @classmethod
    def from_root(cls, root: Path) -> ProjectPaths:
        """Resolve the conventional project layout beneath ``root``."""
        return cls(
            root=root,
            config=root / CONFIG_FILENAME,
            pages=root / PAGES_DIRNAME,
            components=root / COMPONENTS_DIRNAME,
            stylesheet=root / STYLESHEET_PATH,
            output=root / OUTPUT_PATH,
        )


__all__ = [
    "AssembledPages",
    "BuildResult",
    "CSSDeclaration",
    "NoPagesFoundError",
    "PageFile",
    "Placeholder",
    "ProjectPaths",
    "ProjectStateError",
    "ScopeBlock",
]
