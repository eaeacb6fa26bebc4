"""Shared fixtures for building throwaway hdoc projects on disk."""

from __future__ import annotations

import json
import logging
import typing as typ

import pytest

from hdoc.builder import ProjectPaths

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


@pytest.fixture(autouse=True)
def _reset_hdoc_logger() -> cabc.Iterator[None]:
    """Drop handlers installed by CLI tests so they do not leak between tests."""
    yield
    package_logger = logging.getLogger("hdoc")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_project(tmp_path: Path) -> typ.Callable[..., ProjectPaths]:
    """Return a factory writing a project tree beneath ``tmp_path``.

    ``pages`` and ``components`` map filenames to contents; passing ``None``
    skips creating the directory altogether.
    """

    def _make(
        *,
        config: cabc.Mapping[str, typ.Any] | None = None,
        pages: cabc.Mapping[str, str] | None = None,
        components: cabc.Mapping[str, str] | None = None,
        stylesheet: str | None = None,
    ) -> ProjectPaths:
        paths = ProjectPaths.from_root(tmp_path)
        if config is not None:
            paths.config.write_text(json.dumps(config), encoding="utf-8")
        if pages is not None:
            paths.pages.mkdir(parents=True, exist_ok=True)
            for name, content in pages.items():
                (paths.pages / name).write_text(content, encoding="utf-8")
        if components is not None:
            paths.components.mkdir(parents=True, exist_ok=True)
            for name, content in components.items():
                (paths.components / name).write_text(content, encoding="utf-8")
        if stylesheet is not None:
            paths.stylesheet.parent.mkdir(parents=True, exist_ok=True)
            paths.stylesheet.write_text(stylesheet, encoding="utf-8")
        return paths

    return _make
