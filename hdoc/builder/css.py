"""Flatten configuration trees into CSS custom-property declarations.

Every leaf of the ``global`` tree becomes one declaration in a ``:root``
block, and every leaf of a page override tree becomes one declaration in a
``.page-<id>`` block. Property names join the kebab-cased key path with
hyphens: ``{"typography": {"fontSize": "16pt"}}`` yields
``--typography-font-size: 16pt;``.

Example
-------
>>> from hdoc.config import build_project_config
>>> config = build_project_config({"global": {"typography": {"fontSize": "16pt"}}})
>>> print(render_css(config).rstrip())
/* Generated CSS Variables */
:root {
  --typography-font-size: 16pt;
}
"""

from __future__ import annotations

import re
import typing as typ

from hdoc.builder.models import CSSDeclaration, ScopeBlock

if typ.TYPE_CHECKING:
    from hdoc.config import ConfigBranch, ConfigLeaf, ProjectConfig

CAMEL_BOUNDARY_PATTERN = re.compile(r"([a-z])([A-Z])")
CSS_HEADER = "/* Generated CSS Variables */"
ROOT_SELECTOR = ":root"
DECLARATION_INDENT = "  "


def kebab_case(key: str) -> str:
    """Split lower-to-upper camel boundaries with hyphens and lowercase the result.

    >>> kebab_case("fontSize")
    'font-size'
    >>> kebab_case("A4")
    'a4'
    """
    return CAMEL_BOUNDARY_PATTERN.sub(r"\1-\2", key).lower()


def page_selector(page_id: str) -> str:
    """Return the class selector scoping variables to one page."""
    return f".page-{page_id}"


def flatten_tree(
    branch: ConfigBranch, prefix: tuple[str, ...] = ()
) -> list[CSSDeclaration]:
    """Return one declaration per leaf beneath ``branch`` in key order."""
    declarations: list[CSSDeclaration] = []
    for node in branch.children:
        path = (*prefix, kebab_case(node.key))
        if node.is_branch:
            declarations.extend(flatten_tree(typ.cast("ConfigBranch", node), path))
        else:
            leaf = typ.cast("ConfigLeaf", node)
            declarations.append(
                CSSDeclaration(name=f"--{'-'.join(path)}", value=leaf.text)
            )
    return declarations


def build_scope_blocks(config: ProjectConfig) -> list[ScopeBlock]:
    """Return the root block followed by one block per configured page."""
    blocks = [
        ScopeBlock(
            selector=ROOT_SELECTOR,
            comment="",
            declarations=tuple(flatten_tree(config.global_tree)),
        )
    ]
    for page_id, tree in config.pages.items():
        blocks.append(
            ScopeBlock(
                selector=page_selector(page_id),
                comment=f"/* Page {page_id} specific styles */",
                declarations=tuple(flatten_tree(tree)),
            )
        )
    return blocks


def render_scope_block(block: ScopeBlock) -> str:
    """Render a scope block as CSS text followed by a blank line."""
    lines = [block.comment] if block.comment else []
    lines.append(f"{block.selector} {{")
    lines.extend(
        f"{DECLARATION_INDENT}{declaration.render()}"
        for declaration in block.declarations
    )
    lines.append("}")
    return "\n".join(lines) + "\n\n"


def render_css(config: ProjectConfig) -> str:
    """Generate the complete custom-property stylesheet for ``config``."""
    blocks = build_scope_blocks(config)
    return f"{CSS_HEADER}\n" + "".join(render_scope_block(block) for block in blocks)


__all__ = [
    "build_scope_blocks",
    "flatten_tree",
    "kebab_case",
    "page_selector",
    "render_css",
    "render_scope_block",
]
