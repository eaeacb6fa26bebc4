"""Include resolution, page assembly, and CSS generation for hdoc documents."""

from .composer import DocumentComposer
from .css import flatten_tree, kebab_case, render_css
from .document_builder import DocumentBuilder
from .includes import IncludeResolver, scan_placeholders, substitute_placeholders
from .models import (
    AssembledPages,
    BuildResult,
    CSSDeclaration,
    NoPagesFoundError,
    PageFile,
    Placeholder,
    ProjectPaths,
    ProjectStateError,
    ScopeBlock,
)
from .pages import assemble_pages, discover_pages

__all__ = [
    "AssembledPages",
    "BuildResult",
    "CSSDeclaration",
    "DocumentBuilder",
    "DocumentComposer",
    "IncludeResolver",
    "NoPagesFoundError",
    "PageFile",
    "Placeholder",
    "ProjectPaths",
    "ProjectStateError",
    "ScopeBlock",
    "assemble_pages",
    "discover_pages",
    "flatten_tree",
    "kebab_case",
    "render_css",
    "scan_placeholders",
    "substitute_placeholders",
]
