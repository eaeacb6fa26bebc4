"""Derive PDF page options from the project configuration.

The PDF renderer itself is an external collaborator; this module only turns
the ``global.page`` subtree into the ``size``/``orientation`` pair it expects.

Example
-------
>>> from hdoc.config import build_project_config
>>> config = build_project_config(
...     {"global": {"page": {"size": "Letter", "orientation": "landscape"}}}
... )
>>> options = resolve_export_options(config)
>>> options.size, options.landscape
('Letter', True)
"""

from __future__ import annotations

import typing as typ

from hdoc.config import ExportOptions

if typ.TYPE_CHECKING:
    from hdoc.config import ConfigBranch, ConfigLeaf, ConfigNode, ProjectConfig

DEFAULT_PAGE_SIZE = "A4"


def resolve_export_options(config: ProjectConfig) -> ExportOptions:
    """Return normalized page options, defaulting to portrait A4."""
    node = config.global_tree.get("page")
    if node is None or not node.is_branch:
        return ExportOptions(size=DEFAULT_PAGE_SIZE, orientation="portrait")

    page = typ.cast("ConfigBranch", node)
    size = _leaf_text(page.get("size")) or DEFAULT_PAGE_SIZE
    orientation = _leaf_text(page.get("orientation"))
    return ExportOptions(
        size=size,
        orientation="landscape" if orientation == "landscape" else "portrait",
    )


def _leaf_text(node: ConfigNode | None) -> str | None:
    if node is None or node.is_branch:
        return None
    return typ.cast("ConfigLeaf", node).text


__all__ = ["DEFAULT_PAGE_SIZE", "resolve_export_options"]
