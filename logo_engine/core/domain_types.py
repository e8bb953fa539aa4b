"""Domain Types — closed vocabularies and display-size tables for logo rendering.

Invariants:
    - All valid states encoded as Enums: no raw string matching in domain logic
    - Enum values equal the strings already persisted in stored configurations
    - Every FrameStyle has a natural shape (lookup is total)
    - Size tables cover every DisplaySize member

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: storage boundary is JSON)
    - Size tables as module constants over per-call computation: renderer output must be
      identical across contexts for the same (config, size)
"""

from enum import Enum


# ─── Source / Shape / Frame / Glow ───────────────────────────────

class SourceType(str, Enum):
    """How `path` is interpreted: a tagged variant, never a class hierarchy."""
    NONE = "none"
    THEME_ICON = "theme-icon"
    LIBRARY_ICON = "library-icon"
    CUSTOM_IMAGE = "custom-image"


class Shape(str, Enum):
    """Clip region applied to logo content."""
    NONE = "none"
    CIRCLE = "circle"
    SQUARE = "square"
    ROUNDED = "rounded"


class FrameStyle(str, Enum):
    """Decorative border styles. Adding a style means adding a motif builder."""
    NONE = "none"
    SIMPLE = "simple"
    ORNATE = "ornate"
    CELTIC = "celtic"
    CHAIN = "chain"
    RUNIC = "runic"
    THORNS = "thorns"
    DRAGON = "dragon"


class GlowIntensity(str, Enum):
    """Glow presets: pulse is the only animated one."""
    NONE = "none"
    SOFT = "soft"
    MEDIUM = "medium"
    INTENSE = "intense"
    PULSE = "pulse"


class ColorMode(str, Enum):
    """Authoring state of a tri-state color field."""
    UNSET = "unset"
    THEME = "theme"
    EXPLICIT = "explicit"


class DisplaySize(str, Enum):
    """Target render sizes, thumbnail (xs) through large preview (xl)."""
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"

    @classmethod
    def parse(cls, label: str | None) -> "DisplaySize":
        """Accept enum values or long-form labels ("large"); unknown → LG."""
        if not label:
            return cls.LG
        key = label.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _SIZE_ALIASES.get(key, cls.LG)


_SIZE_ALIASES: dict[str, DisplaySize] = {
    "extra-small": DisplaySize.XS,
    "small": DisplaySize.SM,
    "medium": DisplaySize.MD,
    "large": DisplaySize.LG,
    "extra-large": DisplaySize.XL,
}


# ─── Size Tables (pixels) ────────────────────────────────────────

CONTENT_SIZE_PX: dict[DisplaySize, int] = {
    DisplaySize.XS: 24, DisplaySize.SM: 48, DisplaySize.MD: 80,
    DisplaySize.LG: 128, DisplaySize.XL: 192,
}
OUTER_SIZE_PX: dict[DisplaySize, int] = {
    DisplaySize.XS: 32, DisplaySize.SM: 56, DisplaySize.MD: 96,
    DisplaySize.LG: 160, DisplaySize.XL: 224,
}
# Icon sources only: custom images fill edge-to-edge
ICON_PADDING_PX: dict[DisplaySize, int] = {
    DisplaySize.XS: 2, DisplaySize.SM: 4, DisplaySize.MD: 6,
    DisplaySize.LG: 8, DisplaySize.XL: 12,
}
ROUNDED_RADIUS_PX: dict[DisplaySize, int] = {
    DisplaySize.XS: 2, DisplaySize.SM: 6, DisplaySize.MD: 8,
    DisplaySize.LG: 12, DisplaySize.XL: 16,
}


# ─── Frame Natural Shapes ────────────────────────────────────────

FRAME_NATURAL_SHAPE: dict[FrameStyle, Shape] = {
    style: Shape.CIRCLE for style in FrameStyle
}


# ─── Limits ──────────────────────────────────────────────────────

MAX_HISTORY_ENTRIES: int = 5
THEME_COLOR_MARKER: str = "__theme__"
