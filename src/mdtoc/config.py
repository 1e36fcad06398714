"""Local configuration for mdtoc."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_SETTINGS_FILE = ".mdtoc.json"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_TOC_HEADING = "## Table of Contents"
MARKDOWN_SUFFIX = ".md"

NO_HEADERS_IN_RANGE_MESSAGE = "No headers found in the specified range"

# Settings file consulted by the CLI when --settings is not given.
MDTOC_SETTINGS_PATH = Path(os.getenv("MDTOC_SETTINGS_PATH", DEFAULT_SETTINGS_FILE)).expanduser()
MDTOC_LOG_LEVEL = os.getenv("MDTOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MDTOC_TOC_HEADING = os.getenv("MDTOC_TOC_HEADING", DEFAULT_TOC_HEADING)
