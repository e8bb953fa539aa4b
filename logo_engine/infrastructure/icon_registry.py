"""Icon Registry — in-memory theme-icon and library-icon lookup backed by a JSON library file.

Invariants:
    - Implements core.registry_protocols.IconRegistry structurally (no inheritance)
    - Unknown ids return None; the renderer falls back to path conventions
    - File errors (missing, unreadable, malformed JSON) mapped to IconLibraryError (core/errors.py)

Design Decisions:
    - Library loaded once per process via get_icon_registry() (lru_cache), mirrors get_settings()
    - Library file format: {"icons": {"artist/name": {"name", "artist", "tags", "path"}}}
"""

import json
import logging
from functools import lru_cache
from pathlib import Path

from logo_engine.config import get_settings
from logo_engine.core.errors import IconLibraryError
from logo_engine.core.registry_protocols import LibraryIcon

logger = logging.getLogger(__name__)


class StaticIconRegistry:
    """Icon lookup over a fixed set of theme ids and library entries."""

    def __init__(
        self,
        theme_icon_ids: list[str] | None = None,
        library: dict[str, dict] | None = None,
        theme_icon_base_path: str = "/icons/theme-icons",
        library_icon_base_path: str = "/icons/game-icons.net",
    ):
        self._theme_icon_ids = frozenset(theme_icon_ids or ())
        self._library = dict(library or {})
        self._theme_base = theme_icon_base_path.rstrip("/")
        self._library_base = library_icon_base_path.rstrip("/")

    def __len__(self) -> int:
        return len(self._library)

    def resolve_theme_icon(self, preset_id: str) -> str | None:
        if preset_id not in self._theme_icon_ids:
            return None
        return f"{self._theme_base}/{preset_id}.svg"

    def resolve_library_icon(self, icon_id: str) -> LibraryIcon | None:
        entry = self._library.get(icon_id)
        if entry is None:
            return None
        path = entry.get("path") or icon_id
        return LibraryIcon(
            uri=f"{self._library_base}/{path}.svg",
            artist=entry.get("artist") or path.split("/", 1)[0],
        )


def load_icon_library(location: str) -> dict[str, dict]:
    """Read the icon map out of a library JSON file."""
    try:
        raw = Path(location).read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Icon library unreadable: {e}", extra={"path": location})
        raise IconLibraryError("file unreadable", location)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error(f"Icon library malformed: {e}", extra={"path": location})
        raise IconLibraryError("malformed JSON", location)
    icons = data.get("icons") if isinstance(data, dict) else None
    if not isinstance(icons, dict):
        raise IconLibraryError("missing 'icons' mapping", location)
    return {k: v for k, v in icons.items() if isinstance(v, dict)}


def build_icon_registry(settings=None) -> StaticIconRegistry:
    settings = settings or get_settings()
    library = {}
    if settings.icon_library_path:
        library = load_icon_library(settings.icon_library_path)
        logger.info(f"Loaded {len(library)} library icons")
    return StaticIconRegistry(
        theme_icon_ids=settings.theme_icon_ids,
        library=library,
        theme_icon_base_path=settings.theme_icon_base_path,
        library_icon_base_path=settings.library_icon_base_path,
    )


@lru_cache
def get_icon_registry() -> StaticIconRegistry:
    return build_icon_registry()
