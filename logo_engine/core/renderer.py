"""Renderer — composition root: (LogoConfiguration, size, theme primary) → DrawInstructions.

Invariants:
    - render is PURE and deterministic for a given (config, size, theme_primary, registry)
    - No source (type none or missing path) yields PLACEHOLDER-style instructions that ignore
      every other field, never a partially-populated bundle
    - custom-image content is never tinted and never padded (fills edge-to-edge)
    - Layers are ordered outermost → innermost: glow wraps everything, the frame sits
      behind/around, clipped content is drawn on top; the glow is never clipped by the
      content's own clip path

Design Decisions:
    - DrawInstructions is declarative (CSS-ready strings + geometry), not pixels
      (ADR: one description for thumbnails, previews and saved-theme cards)
    - Registry injected as an optional Protocol; absent registry → path conventions only
"""

from dataclasses import asdict, dataclass
from enum import Enum

from logo_engine.core.color_resolver import (
    resolve_frame_color, resolve_glow_color, resolve_icon_color,
)
from logo_engine.core.colors import HslColor
from logo_engine.core.crop import CropTransform, IDENTITY_TRANSFORM, compute_crop_transform
from logo_engine.core.domain_types import (
    CONTENT_SIZE_PX, DisplaySize, FrameStyle, GlowIntensity, ICON_PADDING_PX,
    OUTER_SIZE_PX, Shape, SourceType,
)
from logo_engine.core.frame_compositor import compose_frame
from logo_engine.core.frame_geometry import FrameGeometry
from logo_engine.core.glow import GlowFilter, compute_glow
from logo_engine.core.icon_paths import resolve_icon_uri, resolve_library_artist
from logo_engine.core.logo_config import LogoConfiguration
from logo_engine.core.registry_protocols import IconRegistry
from logo_engine.core.shape_clip import ClipGeometry, effective_shape, shape_clip_path


PLACEHOLDER_LABEL: str = "No Logo"
PLACEHOLDER_BACKGROUND: str = "hsl(0 0% 50% / 0.15)"
PLACEHOLDER_CLIP = ClipGeometry(kind="inset", radius_px=8, css="inset(0 round 8px)")


@dataclass(frozen=True)
class DrawInstructions:
    size: DisplaySize
    outer_px: int
    content_px: int
    transform: CropTransform
    clip_path: ClipGeometry
    placeholder: bool = False
    source_type: SourceType = SourceType.NONE
    content_kind: str = "placeholder"  # "placeholder" | "mask" | "image"
    uri: str | None = None
    background_color: str | None = None
    padding_px: int = 0
    frame: FrameGeometry | None = None
    glow: GlowFilter | None = None
    layers: tuple[str, ...] = ("content",)
    label: str | None = None
    artist: str | None = None


def placeholder_instructions(size: DisplaySize = DisplaySize.LG) -> DrawInstructions:
    """The fixed empty-state bundle; depends on nothing but the size."""
    return DrawInstructions(
        size=size,
        outer_px=OUTER_SIZE_PX[size],
        content_px=CONTENT_SIZE_PX[size],
        transform=IDENTITY_TRANSFORM,
        clip_path=PLACEHOLDER_CLIP,
        placeholder=True,
        background_color=PLACEHOLDER_BACKGROUND,
        label=PLACEHOLDER_LABEL,
    )


def _layers(frame: FrameGeometry | None, glow: GlowFilter | None) -> tuple[str, ...]:
    layers = []
    if glow is not None:
        layers.append("glow")
    if frame is not None:
        layers.append("frame")
    layers.append("content")
    return tuple(layers)


def render(
    config: LogoConfiguration,
    size: DisplaySize,
    theme_primary: HslColor,
    registry: IconRegistry | None = None,
) -> DrawInstructions:
    """Compute the full draw bundle for one configuration at one display size."""
    if not config.has_source:
        return placeholder_instructions(size)

    is_image = config.source_type == SourceType.CUSTOM_IMAGE
    uri = resolve_icon_uri(config.source_type, config.path, registry)

    background = None
    if not is_image:
        background = resolve_icon_color(config.icon_color, theme_primary).css

    clip_shape = effective_shape(config.shape, config.frame)
    frame = None
    if config.frame != FrameStyle.NONE:
        frame_color = resolve_frame_color(config.frame_color, config.frame, theme_primary)
        frame = compose_frame(config.frame, frame_color, config.shape)

    glow = None
    if config.glow != GlowIntensity.NONE:
        glow_color = resolve_glow_color(
            config.glow_color, config.frame_color, config.frame, theme_primary,
        )
        glow = compute_glow(config.glow, glow_color)

    artist = None
    if config.source_type == SourceType.LIBRARY_ICON:
        artist = config.artist or resolve_library_artist(config.path, registry)

    padding = 0
    if not is_image and config.shape != Shape.NONE:
        padding = ICON_PADDING_PX[size]

    return DrawInstructions(
        size=size,
        outer_px=OUTER_SIZE_PX[size],
        content_px=CONTENT_SIZE_PX[size],
        transform=compute_crop_transform(config.crop),
        clip_path=shape_clip_path(clip_shape, size),
        source_type=config.source_type,
        content_kind="image" if is_image else "mask",
        uri=uri,
        background_color=background,
        padding_px=padding,
        frame=frame,
        glow=glow,
        layers=_layers(frame, glow),
        artist=artist,
    )


# ─── Theme binding ───────────────────────────────────────────────

def effective_config_for_theme(
    config: LogoConfiguration, active_preset_id: str | None,
) -> LogoConfiguration:
    """A theme-icon logo tracks the active theme preset rather than the stored id."""
    if (
        config.source_type == SourceType.THEME_ICON
        and active_preset_id
        and config.path != active_preset_id
    ):
        return config.with_changes(path=active_preset_id)
    return config


# ─── Serialization ───────────────────────────────────────────────

def _json_safe(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


def instructions_to_dict(instructions: DrawInstructions) -> dict:
    """JSON-safe dict; None-valued fields are omitted, derived CSS strings included."""
    data = _json_safe(asdict(instructions))
    data["transform"]["css_transform"] = instructions.transform.css_transform
    data["transform"]["css_origin"] = instructions.transform.css_origin
    return data
