"""Logo Actions — every editing interaction as a pure (config, ...) → config function.

Invariants:
    - No action mutates its input; each returns a new LogoConfiguration
    - Source-committing actions (theme icon, library icon, upload, clear) push the CURRENT
      configuration onto history before switching
    - Cosmetic actions (shape, frame, glow, colors, crop) never touch history
    - revert restores a history entry and leaves history unchanged
"""

from logo_engine.core.color_resolver import ColorSetting, UNSET
from logo_engine.core.crop import CropSettings, DEFAULT_CROP
from logo_engine.core.domain_types import (
    FrameStyle, GlowIntensity, Shape, SourceType,
)
from logo_engine.core.history import push_history, revert_to_history
from logo_engine.core.logo_config import HistoryEntry, LogoConfiguration


# ─── Source changes (history-worthy) ─────────────────────────────

def _commit_source(
    config: LogoConfiguration, saved_at: str | None, **changes,
) -> LogoConfiguration:
    history = push_history(config.history, config, saved_at)
    return config.with_changes(history=history, **changes)


def select_theme_icon(
    config: LogoConfiguration, preset_id: str, saved_at: str | None = None,
) -> LogoConfiguration:
    return _commit_source(
        config, saved_at,
        source_type=SourceType.THEME_ICON, path=preset_id, artist=None,
    )


def select_library_icon(
    config: LogoConfiguration,
    icon_id: str,
    artist: str | None = None,
    saved_at: str | None = None,
) -> LogoConfiguration:
    return _commit_source(
        config, saved_at,
        source_type=SourceType.LIBRARY_ICON, path=icon_id, artist=artist or None,
    )


def upload_custom_image(
    config: LogoConfiguration, uri: str, saved_at: str | None = None,
) -> LogoConfiguration:
    """Point at a freshly uploaded image; the crop starts centred at zoom 1."""
    return _commit_source(
        config, saved_at,
        source_type=SourceType.CUSTOM_IMAGE, path=uri, artist=None, crop=DEFAULT_CROP,
    )


def clear_logo(config: LogoConfiguration, saved_at: str | None = None) -> LogoConfiguration:
    """Drop the source and every color/glow/crop setting; only shape and frame survive."""
    return LogoConfiguration(
        shape=config.shape,
        frame=config.frame,
        history=push_history(config.history, config, saved_at),
    )


# ─── Cosmetic changes ────────────────────────────────────────────

def set_shape(config: LogoConfiguration, shape: Shape) -> LogoConfiguration:
    return config.with_changes(shape=shape)


def set_frame(config: LogoConfiguration, frame: FrameStyle) -> LogoConfiguration:
    return config.with_changes(frame=frame)


def set_glow(config: LogoConfiguration, glow: GlowIntensity) -> LogoConfiguration:
    return config.with_changes(glow=glow)


def set_icon_color(
    config: LogoConfiguration, setting: ColorSetting = UNSET,
) -> LogoConfiguration:
    return config.with_changes(icon_color=setting)


def set_frame_color(
    config: LogoConfiguration, setting: ColorSetting = UNSET,
) -> LogoConfiguration:
    return config.with_changes(frame_color=setting)


def set_glow_color(
    config: LogoConfiguration, setting: ColorSetting = UNSET,
) -> LogoConfiguration:
    return config.with_changes(glow_color=setting)


def set_crop(config: LogoConfiguration, crop: CropSettings | None) -> LogoConfiguration:
    return config.with_changes(crop=crop)


# ─── History ─────────────────────────────────────────────────────

def revert(config: LogoConfiguration, entry: HistoryEntry) -> LogoConfiguration:
    return revert_to_history(entry, config.history)
