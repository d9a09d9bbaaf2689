"""Configuration constants and paths for blogpack."""

import os
from pathlib import Path

# Persistence slot for the explicit theme choice. The same key is used by the
# server-side resolver and by the inline bootstrap script (localStorage).
THEME_STORAGE_KEY = os.getenv("BLOGPACK_THEME_KEY", "preferred-theme")

# Preference file used by the CLI when no --prefs path is given
PREFS_PATH = Path(
    os.getenv("BLOGPACK_PREFS_PATH", Path.home() / ".blogpack" / "preferences.json")
)

# System color-scheme signal for non-browser runs: "dark", "light" or unset
SYSTEM_THEME = os.getenv("BLOGPACK_SYSTEM_THEME", "")

# Site defaults
SITE_TITLE = os.getenv("BLOGPACK_SITE_TITLE", "Blog")
SITE_SUBTITLE = os.getenv("BLOGPACK_SITE_SUBTITLE", "")

# Manifest versioning
GENERATOR_VERSION = "0.1.0"
SCHEMA_VERSION = 1

# Markdown extensions passed to the renderer
MARKDOWN_EXTENSIONS = ["extra", "toc"]

# Token counting model
TIKTOKEN_ENCODING = "cl100k_base"
