"""Logo Snapshot — serialization / deserialization for LogoConfiguration and HistoryEntry.

Invariants:
    - to_snapshot produces a JSON-safe dict (no Enums, no dataclasses, no None values)
    - Optional fields are omitted entirely rather than written as null
    - from_snapshot never raises on malformed data: unknown enum values fall back to defaults,
      malformed colors degrade to neutral gray, crop values clamp, history truncates
    - Key names and enum values match previously stored configurations byte-for-byte
      ("type", "iconColor", "__theme__", "theme-icon", ...)

Design Decisions:
    - Stored key names kept for backward compatibility; "sourceType" accepted as an alias
    - Legacy theme fields (logo + logoType) migrated here, in the pure layer, so every shell
      sees the same configuration
"""

from enum import Enum
from typing import Any, TypeVar

from logo_engine.core.color_resolver import ColorSetting
from logo_engine.core.crop import CropSettings
from logo_engine.core.domain_types import (
    FrameStyle, GlowIntensity, MAX_HISTORY_ENTRIES, Shape, SourceType,
)
from logo_engine.core.logo_config import HistoryEntry, LogoConfiguration

E = TypeVar("E", bound=Enum)

_COLOR_KEYS: tuple[tuple[str, str], ...] = (
    ("icon_color", "iconColor"),
    ("frame_color", "frameColor"),
    ("glow_color", "glowColor"),
)


def _enum(enum_cls: type[E], raw: Any, default: E) -> E:
    try:
        return enum_cls(raw)
    except (TypeError, ValueError):
        return default


def _crop_from(raw: Any) -> CropSettings | None:
    if not isinstance(raw, dict):
        return None
    try:
        return CropSettings(
            x=float(raw.get("x", 50)),
            y=float(raw.get("y", 50)),
            zoom=float(raw.get("zoom", 1)),
        ).clamped()
    except (TypeError, ValueError):
        return None


def _optional_str(raw: Any) -> str | None:
    return raw if isinstance(raw, str) and raw else None


# ─── Serialize ───────────────────────────────────────────────────

def _serialize_cosmetics(source: LogoConfiguration | HistoryEntry) -> dict:
    """Shared fields of configs and history entries, None-free."""
    data: dict[str, Any] = {}
    if source.artist:
        data["artist"] = source.artist
    for attr, key in _COLOR_KEYS:
        stored = getattr(source, attr).to_storage()
        if stored is not None:
            data[key] = stored
    if source.crop is not None:
        data["cropSettings"] = source.crop.to_dict()
    return data


def history_entry_to_snapshot(entry: HistoryEntry) -> dict:
    data = {
        "type": entry.source_type.value,
        "path": entry.path,
        "shape": entry.shape.value,
        "frame": entry.frame.value,
        "savedAt": entry.saved_at,
        **_serialize_cosmetics(entry),
    }
    if entry.glow != GlowIntensity.NONE:
        data["glow"] = entry.glow.value
    return data


def config_to_snapshot(config: LogoConfiguration) -> dict:
    """Serialize to the stored JSON shape. Pure, no IO."""
    data: dict[str, Any] = {"type": config.source_type.value}
    if config.path:
        data["path"] = config.path
    data["shape"] = config.shape.value
    data["frame"] = config.frame.value
    if config.glow != GlowIntensity.NONE:
        data["glow"] = config.glow.value
    data.update(_serialize_cosmetics(config))
    if config.history:
        data["history"] = [history_entry_to_snapshot(e) for e in config.history]
    return data


# ─── Deserialize ─────────────────────────────────────────────────

def _cosmetic_fields(data: dict) -> dict:
    fields: dict[str, Any] = {
        "artist": _optional_str(data.get("artist")),
        "shape": _enum(Shape, data.get("shape"), Shape.NONE),
        "frame": _enum(FrameStyle, data.get("frame"), FrameStyle.NONE),
        "glow": _enum(GlowIntensity, data.get("glow"), GlowIntensity.NONE),
        "crop": _crop_from(data.get("cropSettings")),
    }
    for attr, key in _COLOR_KEYS:
        fields[attr] = ColorSetting.from_storage(data.get(key))
    return fields


def _source_type(data: dict) -> SourceType:
    raw = data.get("type", data.get("sourceType"))
    return _enum(SourceType, raw, SourceType.NONE)


def history_entry_from_snapshot(data: dict) -> HistoryEntry | None:
    """Rebuild one entry; entries without a usable source are dropped (None)."""
    if not isinstance(data, dict):
        return None
    source_type = _source_type(data)
    path = _optional_str(data.get("path"))
    if source_type == SourceType.NONE or path is None:
        return None
    return HistoryEntry(
        source_type=source_type,
        path=path,
        saved_at=str(data.get("savedAt") or ""),
        **_cosmetic_fields(data),
    )


def config_from_snapshot(data: dict | None) -> LogoConfiguration:
    """Reconstruct a configuration from stored data. Pure, no IO."""
    if not data:
        return LogoConfiguration()
    raw_history = data.get("history")
    if not isinstance(raw_history, list):
        raw_history = []
    entries = tuple(
        entry for entry in map(history_entry_from_snapshot, raw_history)
        if entry is not None
    )
    return LogoConfiguration(
        source_type=_source_type(data),
        path=_optional_str(data.get("path")),
        history=entries[:MAX_HISTORY_ENTRIES],
        **_cosmetic_fields(data),
    )


def config_from_legacy_theme(theme: dict | None, active_preset_id: str) -> LogoConfiguration:
    """Migrate theme settings that predate structured logo configs.

    Precedence: an existing logoConfig, then legacy logo + logoType, then the
    active preset's theme icon.
    """
    theme = theme or {}
    if isinstance(theme.get("logoConfig"), dict):
        return config_from_snapshot(theme["logoConfig"])
    legacy_path = _optional_str(theme.get("logo"))
    legacy_type = theme.get("logoType")
    if legacy_path and legacy_type in (
        SourceType.THEME_ICON.value, SourceType.CUSTOM_IMAGE.value,
    ):
        return LogoConfiguration(source_type=SourceType(legacy_type), path=legacy_path)
    return LogoConfiguration(source_type=SourceType.THEME_ICON, path=active_preset_id)
