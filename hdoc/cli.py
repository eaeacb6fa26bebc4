"""Cyclopts CLI entrypoint for building hdoc documents.

The ``hdoc`` console script defined here assembles ``dist/document.html`` from
a project's numbered pages, component includes, and ``.doc-config.json``, and
reads or updates individual configuration values. Typical usage is running
``hdoc build`` from the project directory after editing pages, and
``hdoc config global.page.size Letter`` to tweak styling.

Examples
--------
Build the project in the current directory:

>>> from hdoc.cli import main
>>> main()  # doctest: +SKIP

Show a single configuration value:

>>> from hdoc.cli import app
>>> app(["config", "global.typography.fontSize"])  # doctest: +SKIP
global.typography.fontSize: "12pt"
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._logging import configure_logging
from .builder import DocumentBuilder, ProjectPaths, ProjectStateError
from .config import (
    ProjectConfigError,
    decode_config,
    format_value,
    get_config_value,
    save_project_config,
    set_config_value,
)

DEFAULT_PROJECT = Path()

app = App(
    name="hdoc",
    help="HTML-based document builder with page-based architecture.",
    config=cyclopts.config.Env("HDOC_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _fail(message: str) -> typ.NoReturn:
    print(message, file=sys.stderr)
    raise SystemExit(1)


@app.command(help="Build dist/document.html from the numbered pages.")
def build(
    *,
    project: typ.Annotated[
        Path, Parameter(help="Project root directory", env_var="HDOC_PROJECT")
    ] = DEFAULT_PROJECT,
    verbose: typ.Annotated[
        bool, Parameter(help="Also log debug messages such as component reads")
    ] = False,
) -> None:
    """Build the document for the project rooted at ``project``.

    Parameters
    ----------
    project : Path, optional
        Directory holding ``.doc-config.json``, ``pages/``, ``components/``,
        and ``assets/styles/main.css``. Defaults to the working directory.
    verbose : bool, optional
        Lower the log level to ``DEBUG``.

    Returns
    -------
    None
        Writes the document and prints its path.

    Raises
    ------
    SystemExit
        With status 1 when the project is incomplete, the configuration is
        malformed, or a file cannot be read; nothing is written in that case.
    """
    configure_logging(logging.DEBUG if verbose else logging.INFO)
    builder = DocumentBuilder(ProjectPaths.from_root(project))
    try:
        output_path = builder.run()
    except (
        OSError, UnicodeDecodeError, ProjectConfigError, ProjectStateError
    ) as exc:
        _fail(f"Build failed: {exc}")
    print(f"wrote {_format_path(output_path)}")


@app.command(help="Show or update values in .doc-config.json.")
def config(
    key: typ.Annotated[
        str | None, Parameter(help="Dotted configuration key, e.g. global.page.size")
    ] = None,
    value: typ.Annotated[
        str | None, Parameter(help="New value; parsed as JSON when possible")
    ] = None,
    *,
    project: typ.Annotated[
        Path, Parameter(help="Project root directory", env_var="HDOC_PROJECT")
    ] = DEFAULT_PROJECT,
) -> None:
    """Print the whole configuration, one value, or set a value.

    Parameters
    ----------
    key : str or None, optional
        Dotted path into the configuration. When omitted the whole file is
        printed.
    value : str or None, optional
        Replacement value for ``key``. JSON literals (numbers, booleans,
        objects) are stored as such; anything else is stored as a string.
    project : Path, optional
        Project root directory holding ``.doc-config.json``.
    """
    config_path = ProjectPaths.from_root(project).config
    if not config_path.exists():
        _fail(f"No {config_path.name} found. Are you in an hdoc project directory?")
    try:
        raw = decode_config(config_path.read_bytes(), source=config_path)
    except (OSError, ProjectConfigError) as exc:
        _fail(f"Config error: {exc}")

    if key is None:
        print(format_value(raw, indent=2))
        return

    if value is None:
        try:
            current = get_config_value(raw, key)
        except KeyError:
            _fail(f"Key '{key}' not found")
        print(f"{key}: {format_value(current)}")
        return

    set_config_value(raw, key, value)
    try:
        save_project_config(config_path, raw)
    except OSError as exc:
        _fail(f"Config error: {exc}")
    print(f"Set {key} = {value}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``hdoc`` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
