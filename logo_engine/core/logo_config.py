"""Logo Configuration — the root value type and its history snapshot.

Invariants:
    - LogoConfiguration and HistoryEntry are frozen; every edit is a functional update
    - history is a tuple, most recent first, never longer than MAX_HISTORY_ENTRIES
    - Construction never raises on domain-invalid combinations (e.g. missing path):
      validity is reported by validate_config, and render degrades to a placeholder

Design Decisions:
    - Source as SourceType tag + path over a class per source (ADR: tagged variant)
    - Color fields hold ColorSetting, not strings (ADR: marker string only at storage boundary)
"""

from dataclasses import dataclass, replace

from logo_engine.core.color_resolver import ColorSetting, UNSET
from logo_engine.core.crop import CropSettings
from logo_engine.core.domain_types import (
    FrameStyle, GlowIntensity, Shape, SourceType,
)


@dataclass(frozen=True)
class HistoryEntry:
    """Frozen snapshot of a previously active configuration."""
    source_type: SourceType
    path: str
    saved_at: str
    artist: str | None = None
    shape: Shape = Shape.NONE
    frame: FrameStyle = FrameStyle.NONE
    icon_color: ColorSetting = UNSET
    frame_color: ColorSetting = UNSET
    glow: GlowIntensity = GlowIntensity.NONE
    glow_color: ColorSetting = UNSET
    crop: CropSettings | None = None

    @property
    def dedup_key(self) -> tuple:
        return (self.source_type, self.path, self.shape, self.frame, self.glow)


@dataclass(frozen=True)
class LogoConfiguration:
    source_type: SourceType = SourceType.NONE
    path: str | None = None
    artist: str | None = None
    shape: Shape = Shape.NONE
    frame: FrameStyle = FrameStyle.NONE
    icon_color: ColorSetting = UNSET
    frame_color: ColorSetting = UNSET
    glow: GlowIntensity = GlowIntensity.NONE
    glow_color: ColorSetting = UNSET
    crop: CropSettings | None = None
    history: tuple[HistoryEntry, ...] = ()

    @property
    def has_source(self) -> bool:
        """True when there is something to draw (and to remember)."""
        return self.source_type != SourceType.NONE and bool(self.path)

    @property
    def dedup_key(self) -> tuple:
        return (self.source_type, self.path, self.shape, self.frame, self.glow)

    def with_changes(self, **changes) -> "LogoConfiguration":
        """Functional update; crop values are clamped on every mutation."""
        crop = changes.get("crop")
        if crop is not None:
            changes["crop"] = crop.clamped()
        return replace(self, **changes)
