"""Logo Snapshot — verifies the stored JSON shape and tolerant loading.

Tests:
    - Optional fields omitted, never None; stored key names and marker preserved
    - Loading tolerates unknown enums, bad colors, out-of-range crops, long history
    - Legacy theme fields migrate in precedence order
"""

from logo_engine.core.color_resolver import ColorSetting, THEME, UNSET
from logo_engine.core.colors import NEUTRAL_GRAY
from logo_engine.core.crop import CropSettings
from logo_engine.core.domain_types import FrameStyle, GlowIntensity, Shape, SourceType
from logo_engine.core.history import push_history
from logo_engine.core.logo_config import LogoConfiguration
from logo_engine.core.logo_snapshot import (
    config_from_legacy_theme, config_from_snapshot, config_to_snapshot,
)


def _walk(value):
    if isinstance(value, dict):
        for v in value.values():
            yield from _walk(v)
    elif isinstance(value, list):
        for v in value:
            yield from _walk(v)
    else:
        yield value


def test_default_config_snapshot_is_minimal():
    assert config_to_snapshot(LogoConfiguration()) == {
        "type": "none", "shape": "none", "frame": "none",
    }


def test_snapshot_uses_stored_keys_and_marker():
    config = LogoConfiguration(
        source_type=SourceType.LIBRARY_ICON, path="lorc/sword", artist="lorc",
        frame=FrameStyle.SIMPLE, frame_color=THEME,
        icon_color=ColorSetting.explicit("0 0% 40%"), glow=GlowIntensity.SOFT,
        crop=CropSettings(20, 30, 1.5),
    )
    assert config_to_snapshot(config) == {
        "type": "library-icon", "path": "lorc/sword", "artist": "lorc",
        "shape": "none", "frame": "simple", "glow": "soft",
        "iconColor": "0 0% 40%", "frameColor": "__theme__",
        "cropSettings": {"x": 20, "y": 30, "zoom": 1.5},
    }


def test_snapshot_with_history_has_no_none_values():
    config = LogoConfiguration(source_type=SourceType.THEME_ICON, path="arcane")
    config = config.with_changes(
        history=push_history((), config, "2026-01-01T00:00:00Z"),
    )
    data = config_to_snapshot(config)
    assert data["history"] == [{
        "type": "theme-icon", "path": "arcane", "shape": "none", "frame": "none",
        "savedAt": "2026-01-01T00:00:00Z",
    }]
    assert None not in list(_walk(data))


def test_roundtrip_preserves_configuration():
    config = LogoConfiguration(
        source_type=SourceType.CUSTOM_IMAGE, path="https://cdn/logo.png",
        shape=Shape.ROUNDED, frame=FrameStyle.DRAGON, glow=GlowIntensity.PULSE,
        glow_color=THEME, crop=CropSettings(10, 90, 3),
    )
    config = config.with_changes(history=push_history((), config, "2026-01-01T00:00:00Z"))
    assert config_from_snapshot(config_to_snapshot(config)) == config


def test_loading_is_tolerant():
    config = config_from_snapshot({
        "type": "hologram", "path": "", "shape": "hexagon", "frame": "ornate",
        "glow": 7, "iconColor": "puce", "frameColor": "", "cropSettings": {"x": -5, "zoom": 10},
        "history": "not-a-list",
    })
    assert config.source_type is SourceType.NONE
    assert config.path is None
    assert config.shape is Shape.NONE
    assert config.frame is FrameStyle.ORNATE
    assert config.glow is GlowIntensity.NONE
    assert config.icon_color.value == NEUTRAL_GRAY
    assert config.frame_color == UNSET
    assert config.crop == CropSettings(0, 50, 3)
    assert config.history == ()


def test_loading_accepts_source_type_alias():
    config = config_from_snapshot({"sourceType": "theme-icon", "path": "arcane"})
    assert config.source_type is SourceType.THEME_ICON


def test_loading_truncates_history_and_drops_sourceless_entries():
    entries = [{"type": "library-icon", "path": f"a/{i}", "savedAt": "t"} for i in range(7)]
    entries.insert(0, {"type": "none"})
    config = config_from_snapshot({"type": "none", "history": entries})
    assert [e.path for e in config.history] == [f"a/{i}" for i in range(5)]


def test_empty_snapshot_is_default():
    assert config_from_snapshot(None) == LogoConfiguration()
    assert config_from_snapshot({}) == LogoConfiguration()


def test_legacy_prefers_logo_config():
    theme = {
        "logoConfig": {"type": "library-icon", "path": "lorc/sword"},
        "logo": "https://cdn/old.png", "logoType": "custom-image",
    }
    assert config_from_legacy_theme(theme, "arcane").path == "lorc/sword"


def test_legacy_logo_fields_migrate():
    config = config_from_legacy_theme(
        {"logo": "https://cdn/old.png", "logoType": "custom-image"}, "arcane",
    )
    assert config.source_type is SourceType.CUSTOM_IMAGE
    assert config.path == "https://cdn/old.png"


def test_legacy_defaults_to_active_preset_icon():
    config = config_from_legacy_theme(None, "arcane")
    assert (config.source_type, config.path) == (SourceType.THEME_ICON, "arcane")
    assert config_from_legacy_theme({"logo": "x", "logoType": "bogus"}, "emerald").path == "emerald"
