"""Local configuration for hyprdocs."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_SOURCES_DIR = "sources"
DEFAULT_LINK_BASE = "https://wiki.hyprland.org/Configuring/"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_MARKUP_DEPTH = 100

# Directory holding the bundled documentation pages (*.md / *.html).
HYPRDOCS_SOURCES_PATH = Path(os.getenv("HYPRDOCS_SOURCES_PATH", DEFAULT_SOURCES_DIR)).expanduser().resolve()
HYPRDOCS_LINK_BASE = os.getenv("HYPRDOCS_LINK_BASE", DEFAULT_LINK_BASE)
HYPRDOCS_DEBUG = os.getenv("HYPRDOCS_DEBUG", "") != ""
HYPRDOCS_LOG_LEVEL = os.getenv("HYPRDOCS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
# Subtrees nested deeper than this are not serialized into node markup.
HYPRDOCS_MAX_MARKUP_DEPTH = int(os.getenv("HYPRDOCS_MAX_MARKUP_DEPTH", str(DEFAULT_MAX_MARKUP_DEPTH)))
