"""Boundary Protocols — contracts between the core and icon registries.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - Registries may return None for unknown ids; the core falls back to path conventions
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: registries are in-memory lookups, and render must stay pure
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class LibraryIcon:
    """Resolved library icon with attribution."""
    uri: str
    artist: str


class IconRegistry(Protocol):
    """Contract for theme-icon and library-icon lookup: implemented by shell."""
    def resolve_theme_icon(self, preset_id: str) -> str | None: ...
    def resolve_library_icon(self, icon_id: str) -> LibraryIcon | None: ...
