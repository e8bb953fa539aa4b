"""Icon Paths — source type + path/id → drawable URI.

Invariants:
    - resolve_icon_uri is total for every source with a path: an unknown id yields the
      deterministic convention path, never an error
    - custom-image paths are opaque URIs and pass through untouched
"""

import logging

from logo_engine.core.domain_types import SourceType
from logo_engine.core.registry_protocols import IconRegistry

logger = logging.getLogger(__name__)

THEME_ICON_BASE: str = "/icons/theme-icons"
LIBRARY_ICON_BASE: str = "/icons/game-icons.net"


def default_icon_uri(source_type: SourceType, path: str) -> str:
    if source_type == SourceType.THEME_ICON:
        return f"{THEME_ICON_BASE}/{path}.svg"
    if source_type == SourceType.LIBRARY_ICON:
        return f"{LIBRARY_ICON_BASE}/{path}.svg"
    return path


def resolve_icon_uri(
    source_type: SourceType, path: str, registry: IconRegistry | None = None,
) -> str:
    """Ask the registry first, then fall back to the path convention."""
    if source_type == SourceType.CUSTOM_IMAGE or registry is None:
        return default_icon_uri(source_type, path)
    uri = None
    if source_type == SourceType.THEME_ICON:
        uri = registry.resolve_theme_icon(path)
    elif source_type == SourceType.LIBRARY_ICON:
        icon = registry.resolve_library_icon(path)
        uri = icon.uri if icon else None
    if not uri:
        logger.debug("Icon %r not in registry, using default path", path)
        return default_icon_uri(source_type, path)
    return uri


def resolve_library_artist(icon_id: str, registry: IconRegistry | None = None) -> str | None:
    """Attribution for a library icon, when the registry knows it."""
    if registry is None:
        return None
    icon = registry.resolve_library_icon(icon_id)
    return icon.artist if icon else None
