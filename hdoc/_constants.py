"""Common literal values used across hdoc.

These constants keep filenames and directory names centralized so the builder,
the CLI, and tests can import the same values without drifting. Intended for
internal use within the hdoc package.

Examples
--------
>>> from hdoc import _constants
>>> _constants.CONFIG_FILENAME
'.doc-config.json'
>>> bool(_constants.PAGE_FILE_PATTERN.match("10.html"))
True
"""

import re

CONFIG_FILENAME = ".doc-config.json"
PAGES_DIRNAME = "pages"
COMPONENTS_DIRNAME = "components"
STYLESHEET_PATH = "assets/styles/main.css"
OUTPUT_PATH = "dist/document.html"
PAGE_EXTENSION = "html"
PAGE_FILE_PATTERN = re.compile(rf"^(\d+)\.{PAGE_EXTENSION}$")
