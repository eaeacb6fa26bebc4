"""Unit tests for loading, editing, and interpreting ``.doc-config.json``."""

from __future__ import annotations

import json
import typing as typ

import pytest

from hdoc.config import (
    ConfigBranch,
    ConfigLeaf,
    ProjectConfigError,
    build_project_config,
    get_config_value,
    load_project_config,
    save_project_config,
    set_config_value,
)
from hdoc.export import resolve_export_options

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_missing_config_file_raises(tmp_path: Path) -> None:
    """A project without a config file cannot be loaded."""
    with pytest.raises(FileNotFoundError, match="not found"):
        load_project_config(tmp_path / ".doc-config.json")


def test_invalid_json_raises_config_error(tmp_path: Path) -> None:
    """Decoder failures surface as ProjectConfigError."""
    path = tmp_path / ".doc-config.json"
    path.write_text("{ not json", encoding="utf-8")
    with pytest.raises(ProjectConfigError, match="Invalid JSON"):
        load_project_config(path)


def test_top_level_must_be_an_object(tmp_path: Path) -> None:
    """Arrays at the top level are rejected."""
    path = tmp_path / ".doc-config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ProjectConfigError, match="must be a JSON object"):
        load_project_config(path)


def test_loader_builds_tagged_tree(tmp_path: Path) -> None:
    """Branches and leaves carry an explicit discriminator and keep order."""
    path = tmp_path / ".doc-config.json"
    path.write_text(
        json.dumps(
            {
                "global": {"typography": {"fontSize": "12pt"}, "draft": False},
                "pages": {"01": {"layout": {"spacing": "2em"}}},
            }
        ),
        encoding="utf-8",
    )
    config = load_project_config(path)
    typography, draft = config.global_tree.children
    assert isinstance(typography, ConfigBranch), "expected a branch for typography"
    assert typography.is_branch, "expected branch discriminator to be True"
    assert isinstance(draft, ConfigLeaf), "expected a leaf for draft"
    assert not draft.is_branch, "expected leaf discriminator to be False"
    assert draft.text == "false", f"unexpected leaf text: {draft.text!r}"
    assert list(config.pages) == ["01"], f"unexpected pages: {list(config.pages)!r}"


def test_missing_sections_default_to_empty_trees() -> None:
    """Both ``global`` and ``pages`` are optional."""
    config = build_project_config({})
    assert config.global_tree.children == (), "expected an empty global tree"
    assert config.pages == {}, "expected no page overrides"


@pytest.mark.parametrize(
    ("payload", "fragment"),
    [
        ({"global": {"fonts": ["Arial", "serif"]}}, "global.fonts"),
        ({"global": {"page": {"size": None}}}, "global.page.size"),
        ({"pages": {"01": {"grid": [1, 2]}}}, "pages.01.grid"),
    ],
)
def test_unsupported_leaves_fail_fast(
    payload: dict[str, typ.Any], fragment: str
) -> None:
    """Lists and nulls are rejected with the offending key path."""
    with pytest.raises(ProjectConfigError, match=fragment):
        build_project_config(payload)


@pytest.mark.parametrize(
    ("payload", "fragment"),
    [
        ({"global": None}, "'global'"),
        ({"global": False}, "'global'"),
        ({"pages": None}, "'pages'"),
        ({"pages": ["01"]}, "'pages'"),
    ],
)
def test_present_sections_must_be_objects(
    payload: dict[str, typ.Any], fragment: str
) -> None:
    """Only an absent section defaults to an empty tree."""
    with pytest.raises(ProjectConfigError, match=fragment):
        build_project_config(payload)


def test_page_entries_must_be_objects() -> None:
    """A scalar page override is a configuration error."""
    with pytest.raises(ProjectConfigError, match="Page '01'"):
        build_project_config({"pages": {"01": "portrait"}})


def test_get_config_value_walks_dotted_keys() -> None:
    """Dotted keys address nested values."""
    raw = {"global": {"page": {"size": "A4"}}}
    assert get_config_value(raw, "global.page.size") == "A4", "expected nested lookup"
    with pytest.raises(KeyError):
        get_config_value(raw, "global.page.size.extra")
    with pytest.raises(KeyError):
        get_config_value(raw, "global.missing")


def test_set_config_value_parses_json_and_creates_parents() -> None:
    """JSON literals are decoded; other text is stored as a string."""
    raw: dict[str, typ.Any] = {"global": {}}
    assert set_config_value(raw, "global.layout.columns", "2") == 2, (
        "expected numeric text to decode as a number"
    )
    set_config_value(raw, "global.page.size", "Letter")
    set_config_value(raw, "global.page.draft", "true")
    assert raw == {
        "global": {
            "layout": {"columns": 2},
            "page": {"size": "Letter", "draft": True},
        }
    }, f"unexpected config: {raw!r}"


def test_save_project_config_round_trips(tmp_path: Path) -> None:
    """Saved configs are indented JSON that loads back unchanged."""
    path = tmp_path / ".doc-config.json"
    raw = {"global": {"typography": {"fontSize": "12pt"}}, "pages": {}}
    save_project_config(path, raw)
    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n"), "expected a trailing newline"
    assert '\n  "global": {' in text, f"expected 2-space indentation, got {text!r}"
    assert load_project_config(path).raw == raw, "expected saved config to load back"


def test_export_options_default_to_portrait_a4() -> None:
    """Without ``global.page`` the renderer gets portrait A4."""
    options = resolve_export_options(build_project_config({}))
    assert (options.size, options.orientation, options.landscape) == (
        "A4",
        "portrait",
        False,
    ), f"unexpected options: {options!r}"


def test_export_options_read_global_page() -> None:
    """Size is passed through and only ``landscape`` flips the orientation."""
    landscape = resolve_export_options(
        build_project_config(
            {"global": {"page": {"size": "Letter", "orientation": "landscape"}}}
        )
    )
    assert landscape.size == "Letter", f"unexpected size: {landscape.size!r}"
    assert landscape.landscape, "expected landscape orientation"

    other = resolve_export_options(
        build_project_config({"global": {"page": {"orientation": "sideways"}}})
    )
    assert other.orientation == "portrait", (
        f"unknown orientations should normalize to portrait, got {other.orientation!r}"
    )
    assert other.size == "A4", "expected default size when none is configured"
