"""Discover numbered page fragments and assemble them into one body."""

from __future__ import annotations

import asyncio
import logging
import re
import typing as typ

from hdoc._constants import PAGE_FILE_PATTERN
from hdoc.builder.models import (
    AssembledPages,
    NoPagesFoundError,
    PageFile,
    ProjectStateError,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from hdoc.builder.includes import IncludeResolver

logger = logging.getLogger(__name__)


def discover_pages(
    pages_dir: Path, *, pattern: re.Pattern[str] = PAGE_FILE_PATTERN
) -> list[PageFile]:
    """Return the page files in ``pages_dir`` sorted by their numeric stem.

    Only regular files whose whole name matches ``pattern`` are kept, so
    ``notes.html``, ``01.html.bak`` and subdirectories are ignored. Sorting is
    numeric: ``9.html`` precedes ``10.html``.

    Raises
    ------
    ProjectStateError
        If ``pages_dir`` does not exist.
    NoPagesFoundError
        If no entry matches ``pattern``.
    """
    if not pages_dir.is_dir():
        msg = "Pages directory not found"
        raise ProjectStateError(msg)

    pages: list[PageFile] = []
    for entry in pages_dir.iterdir():
        match = pattern.match(entry.name)
        if match is None or not entry.is_file():
            continue
        stem = match.group(1)
        pages.append(PageFile(name=entry.name, number=int(stem), stem=stem, path=entry))

    if not pages:
        msg = "No page files found (format: 01.html, 02.html, etc.)"
        raise NoPagesFoundError(msg)

    # Equal numbers ("1.html", "01.html") fall back to the name for a stable order.
    pages.sort(key=lambda page: (page.number, page.name))
    return pages


async def assemble_pages(
    pages: typ.Sequence[PageFile], resolver: IncludeResolver
) -> AssembledPages:
    """Resolve includes in each page and join them, one line break after each.

    Every page starts resolution with an ancestor set holding only its own
    filename, so components shared between pages are never mistaken for
    cycles.
    """
    contents = await asyncio.gather(*(_render_page(page, resolver) for page in pages))
    body = "".join(f"{content}\n" for content in contents)
    return AssembledPages(pages=tuple(pages), body=body)


async def _render_page(page: PageFile, resolver: IncludeResolver) -> str:
    logger.debug("Reading page %s", page.path)
    content = await asyncio.to_thread(page.path.read_text, encoding="utf-8")
    return await resolver.resolve(content, frozenset({page.name}))


__all__ = ["assemble_pages", "discover_pages"]
