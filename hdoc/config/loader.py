"""Load ``.doc-config.json`` into typed configuration trees."""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json

from .models import (
    ConfigBranch,
    ConfigLeaf,
    ConfigNode,
    ProjectConfig,
    ProjectConfigError,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_project_config(path: Path) -> ProjectConfig:
    """Load the JSON configuration describing global and per-page styling.

    Parameters
    ----------
    path : Path
        Filesystem path to the project's ``.doc-config.json``.

    Returns
    -------
    ProjectConfig
        Parsed configuration with ``global`` and ``pages`` converted into
        :class:`ConfigBranch` trees that preserve key order.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ProjectConfigError
        If the file is not valid JSON, the top level is not an object, or a
        leaf holds a list or ``null``.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_project_config(Path(".doc-config.json"))  # doctest: +SKIP
    >>> [child.key for child in config.global_tree.children]  # doctest: +SKIP
    ['page', 'typography', 'layout']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    raw = decode_config(path.read_bytes(), source=path)
    return build_project_config(raw)


def decode_config(
    payload: bytes, *, source: Path | str = "<config>"
) -> dict[str, typ.Any]:
    """Decode raw JSON bytes into an ordered mapping."""
    try:
        loaded = msgspec.json.decode(payload)
    except msgspec.DecodeError as exc:
        msg = f"Invalid JSON in '{source}': {exc}"
        raise ProjectConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level configuration must be a JSON object."
        raise ProjectConfigError(msg)
    return loaded


def build_project_config(raw: typ.Mapping[str, typ.Any]) -> ProjectConfig:
    """Convert a decoded mapping into a :class:`ProjectConfig`."""
    global_raw = raw.get("global", {})
    if not isinstance(global_raw, dict):
        msg = "'global' must be a JSON object."
        raise ProjectConfigError(msg)

    pages_raw = raw.get("pages", {})
    if not isinstance(pages_raw, dict):
        msg = "'pages' must be a JSON object keyed by page number."
        raise ProjectConfigError(msg)

    pages: dict[str, ConfigBranch] = {}
    for page_id, payload in pages_raw.items():
        if not isinstance(payload, dict):
            msg = f"Page '{page_id}' configuration must be a JSON object."
            raise ProjectConfigError(msg)
        pages[page_id] = _build_branch(page_id, payload, path=("pages", page_id))

    return ProjectConfig(
        global_tree=_build_branch("global", global_raw, path=("global",)),
        pages=pages,
        raw=dict(raw),
    )


def _build_branch(
    key: str, payload: typ.Mapping[str, typ.Any], *, path: tuple[str, ...]
) -> ConfigBranch:
    children = tuple(
        _build_node(child_key, value, path=(*path, child_key))
        for child_key, value in payload.items()
    )
    return ConfigBranch(key=key, children=children)


def _build_node(key: str, value: object, *, path: tuple[str, ...]) -> ConfigNode:
    match value:
        case dict():
            return _build_branch(key, value, path=path)
        case bool() | int() | float() | str():
            return ConfigLeaf(key=key, value=value)
        case list():
            msg = f"Unsupported list value at '{'.'.join(path)}'; expected a scalar."
            raise ProjectConfigError(msg)
        case None:
            msg = f"Unsupported null value at '{'.'.join(path)}'; expected a scalar."
            raise ProjectConfigError(msg)
        case _:  # pragma: no cover - msgspec only yields JSON types
            msg = f"Unsupported value at '{'.'.join(path)}': {value!r}"
            raise ProjectConfigError(msg)


__all__ = ["build_project_config", "decode_config", "load_project_config"]
