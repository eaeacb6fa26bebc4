"""Dotted-key helpers backing the ``hdoc config`` command."""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json

if typ.TYPE_CHECKING:
    from pathlib import Path


def get_config_value(raw: typ.Mapping[str, typ.Any], dotted_key: str) -> typ.Any:
    """Return the value stored under ``dotted_key`` (for example ``global.page.size``).

    Raises
    ------
    KeyError
        If any segment of the key path is missing or crosses a scalar.
    """
    current: typ.Any = raw
    for segment in dotted_key.split("."):
        if not isinstance(current, dict) or segment not in current:
            raise KeyError(dotted_key)
        current = current[segment]
    return current


def set_config_value(raw: dict[str, typ.Any], dotted_key: str, text: str) -> typ.Any:
    """Store ``text`` under ``dotted_key``, creating intermediate objects.

    The text is decoded as JSON when possible so ``12`` becomes a number and
    ``true`` a boolean; anything else is stored as the literal string. The
    stored value is returned.
    """
    *parents, leaf = dotted_key.split(".")
    target = raw
    for segment in parents:
        child = target.get(segment)
        if not isinstance(child, dict):
            child = {}
            target[segment] = child
        target = child
    value = _parse_value(text)
    target[leaf] = value
    return value


def save_project_config(path: Path, raw: typ.Mapping[str, typ.Any]) -> None:
    """Write ``raw`` back to ``path`` as indented JSON."""
    encoded = msgspec.json.format(msgspec.json.encode(raw), indent=2)
    path.write_bytes(encoded + b"\n")


def format_value(value: typ.Any, *, indent: int = 0) -> str:
    """Return ``value`` serialized as JSON text."""
    encoded = msgspec.json.encode(value)
    if indent:
        encoded = msgspec.json.format(encoded, indent=indent)
    return encoded.decode("utf-8")


def _parse_value(text: str) -> typ.Any:
    try:
        return msgspec.json.decode(text.encode("utf-8"))
    except msgspec.DecodeError:
        return text


__all__ = [
    "format_value",
    "get_config_value",
    "save_project_config",
    "set_config_value",
]
