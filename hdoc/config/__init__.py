"""Load and edit the hdoc project configuration.

This subpackage parses a project's ``.doc-config.json``, converts the
``global`` and ``pages`` trees into tagged :class:`ConfigBranch` /
:class:`ConfigLeaf` nodes, and offers dotted-key helpers used by the
``hdoc config`` command. The primary entry point is
:func:`load_project_config`.

Examples
--------
>>> from pathlib import Path
>>> from hdoc.config import load_project_config
>>> config = load_project_config(Path(".doc-config.json"))  # doctest: +SKIP
>>> sorted(config.pages)  # doctest: +SKIP
['01']
"""

from .helpers import (
    format_value,
    get_config_value,
    save_project_config,
    set_config_value,
)
from .loader import build_project_config, decode_config, load_project_config
from .models import (
    ConfigBranch,
    ConfigLeaf,
    ConfigNode,
    ExportOptions,
    LeafValue,
    ProjectConfig,
    ProjectConfigError,
)

__all__ = [
    "ConfigBranch",
    "ConfigLeaf",
    "ConfigNode",
    "ExportOptions",
    "LeafValue",
    "ProjectConfig",
    "ProjectConfigError",
    "build_project_config",
    "decode_config",
    "format_value",
    "get_config_value",
    "load_project_config",
    "save_project_config",
    "set_config_value",
]
