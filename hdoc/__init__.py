"""Assemble multi-page HTML documents from numbered page fragments.

This package exposes the CLI entry points used by the ``hdoc`` console script
to build ``dist/document.html`` from a project's ``pages/`` directory,
``components/`` includes, and ``.doc-config.json`` styling tree.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from hdoc import main
>>> main()  # doctest: +SKIP
>>> from hdoc import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
