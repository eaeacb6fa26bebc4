r"""Expand ``{{> component }}`` include placeholders.

Resolution runs in three steps. :func:`scan_placeholders` finds every
placeholder occurrence. :class:`IncludeResolver` then expands each distinct
placeholder concurrently, recursing into component files with an ancestor set
that grows by one name per level. Finally the expansions are substituted back
into the text in a single pass keyed by placeholder text, so duplicate
placeholders always share one expansion and the output does not depend on the
order in which reads complete.

Missing components keep their placeholder verbatim; circular includes are
replaced with an empty string. Both cases log a warning and the build carries
on.

Example
-------
>>> import asyncio
>>> from pathlib import Path
>>> resolver = IncludeResolver(Path("components"))
>>> asyncio.run(resolver.resolve("{{> header.html }}<h1>Hi</h1>"))  # doctest: +SKIP
'<header>My Header</header><h1>Hi</h1>'
"""

from __future__ import annotations

import asyncio
import logging
import re
import typing as typ

from hdoc.builder.models import Placeholder

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

INCLUDE_PATTERN = re.compile(r"{{>\s*([A-Za-z0-9_.-]+)\s*}}")


def scan_placeholders(content: str) -> list[Placeholder]:
    """Return every include placeholder in ``content`` in document order."""
    return [
        Placeholder(text=match.group(0), name=match.group(1), start=match.start())
        for match in INCLUDE_PATTERN.finditer(content)
    ]


def substitute_placeholders(content: str, expansions: typ.Mapping[str, str]) -> str:
    """Replace each placeholder with the expansion recorded for its text.

    Placeholders absent from ``expansions`` are left untouched. Replacement
    text is never rescanned.
    """
    if not expansions:
        return content

    def _repl(match: re.Match[str]) -> str:
        return expansions.get(match.group(0), match.group(0))

    return INCLUDE_PATTERN.sub(_repl, content)


class IncludeResolver:
    """Recursively expand include placeholders against a component directory."""

    def __init__(self, components_dir: Path) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        components_dir : Path
            Directory that placeholder names are joined onto. It need not
            exist; every lookup then reports a missing component.
        """
        self.components_dir = components_dir

    async def resolve(
        self, content: str, ancestors: frozenset[str] = frozenset()
    ) -> str:
        """Return ``content`` with every placeholder fully expanded.

        Parameters
        ----------
        content : str
            Page or component markup that may contain placeholders.
        ancestors : frozenset[str]
            Names already being expanded on the current path. A placeholder
            naming one of them is a cycle.

        Returns
        -------
        str
            The expanded markup.
        """
        placeholders = scan_placeholders(content)
        if not placeholders:
            return content

        distinct = {item.text: item.name for item in placeholders}
        expansions = await asyncio.gather(
            *(self._expand(text, name, ancestors) for text, name in distinct.items())
        )
        resolved = dict(zip(distinct, expansions, strict=True))
        return substitute_placeholders(content, resolved)

    async def _expand(self, text: str, name: str, ancestors: frozenset[str]) -> str:
        if name in ancestors:
            logger.warning(
                "Circular include detected: %s was already included. Skipping.", name
            )
            return ""

        component_path = self.components_dir / name
        if not await asyncio.to_thread(component_path.is_file):
            logger.warning("Component not found: %s. Leaving placeholder.", name)
            return text

        logger.debug("Including component %s", component_path)
        component = await asyncio.to_thread(component_path.read_text, encoding="utf-8")
        return await self.resolve(component, ancestors | {name})


__all__ = [
    "INCLUDE_PATTERN",
    "IncludeResolver",
    "scan_placeholders",
    "substitute_placeholders",
]
