"""Root conftest — shared test configuration."""

import os

# Deterministic settings regardless of the developer's .env
os.environ.setdefault("THEME_PRIMARY", "41 40% 60%")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.pop("ICON_LIBRARY_PATH", None)
