"""Configuration for the mdtoc server."""

from __future__ import annotations

import os

DEFAULT_MAX_CONTENT_SIZE = 5 * 1024 * 1024

# Largest document, in characters, accepted by the API.
MAX_CONTENT_SIZE = int(os.getenv("MDTOC_MAX_CONTENT_SIZE", str(DEFAULT_MAX_CONTENT_SIZE)))
