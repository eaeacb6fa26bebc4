"""High-level orchestration for building ``dist/document.html``.

This module coordinates the pieces of a build: loading ``.doc-config.json``,
discovering and assembling the numbered pages with their component includes,
generating the custom-property stylesheet, and wrapping everything in the HTML
shell. It exposes :class:`DocumentBuilder`, whose ``build`` coroutine only
reads from disk and whose ``run`` method writes the output once, after the
whole document has been assembled.

Example
-------
>>> from pathlib import Path
>>> from hdoc.builder import DocumentBuilder, ProjectPaths
>>> paths = ProjectPaths.from_root(Path("my-document"))
>>> DocumentBuilder(paths).run()  # doctest: +SKIP
PosixPath('my-document/dist/document.html')
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ

from hdoc.builder.composer import DocumentComposer
from hdoc.builder.css import render_css
from hdoc.builder.includes import IncludeResolver
from hdoc.builder.models import BuildResult
from hdoc.builder.pages import assemble_pages, discover_pages
from hdoc.config import load_project_config

if typ.TYPE_CHECKING:
    from pathlib import Path

    from hdoc.builder.models import ProjectPaths

logger = logging.getLogger(__name__)


class DocumentBuilder:
    """Assemble a project's pages, components, and config into one document."""

    def __init__(
        self, paths: ProjectPaths, *, composer: DocumentComposer | None = None
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        paths : ProjectPaths
            Locations of the config file, pages, components, static
            stylesheet, and output document.
        composer : DocumentComposer, optional
            HTML shell renderer; defaults to the packaged template.
        """
        self.paths = paths
        self.composer = composer or DocumentComposer()
        self.resolver = IncludeResolver(paths.components)

    async def build(self) -> BuildResult:
        """Produce the document in memory without writing anything.

        Returns
        -------
        BuildResult
            Ordered pages, assembled body, generated CSS, and final HTML.

        Raises
        ------
        FileNotFoundError
            If the project has no ``.doc-config.json``.
        ProjectStateError
            If the pages directory is missing.
        NoPagesFoundError
            If the pages directory contains no numbered page files.
        ProjectConfigError
            If the configuration is malformed.
        """
        config = await asyncio.to_thread(load_project_config, self.paths.config)
        pages = await asyncio.to_thread(discover_pages, self.paths.pages)
        logger.info(
            "Found %d pages: %s", len(pages), ", ".join(page.name for page in pages)
        )

        assembled, stylesheet = await asyncio.gather(
            assemble_pages(pages, self.resolver), self._read_stylesheet()
        )
        css = render_css(config)
        html = self.composer.compose(
            css=css, stylesheet=stylesheet, body=assembled.body
        )
        return BuildResult(
            pages=assembled.pages, body=assembled.body, css=css, html=html
        )

    def run(self) -> Path:
        """Build the document and write it to the output path.

        Returns
        -------
        Path
            Location of the written HTML document.

        Notes
        -----
        The output file is written exactly once, after the build succeeds, so
        a failing build leaves any earlier output untouched.
        """
        result = asyncio.run(self.build())
        output_path = self.paths.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.html, encoding="utf-8")
        logger.info("Document built: %s", output_path)
        return output_path

    async def _read_stylesheet(self) -> str:
        stylesheet = self.paths.stylesheet
        if not await asyncio.to_thread(stylesheet.is_file):
            return ""
        return await asyncio.to_thread(stylesheet.read_text, encoding="utf-8")


__all__ = ["DocumentBuilder"]
