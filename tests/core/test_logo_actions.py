"""Logo Actions — verifies editing interactions as functional updates.

Tests:
    - Source changes push the previous configuration; cosmetic changes never do
    - Upload resets crop; clear keeps only shape, frame and history
    - A sixth upload over a full history evicts exactly the oldest entry
    - revert keeps history unchanged
"""

from logo_engine.core import logo_actions as actions
from logo_engine.core.color_resolver import ColorSetting, THEME
from logo_engine.core.crop import CropSettings, DEFAULT_CROP
from logo_engine.core.domain_types import FrameStyle, GlowIntensity, Shape, SourceType
from logo_engine.core.logo_config import LogoConfiguration

T = "2026-01-01T00:00:00Z"


def _library(path="lorc/sword"):
    return actions.select_library_icon(LogoConfiguration(), path, "lorc", saved_at=T)


def test_first_source_from_empty_does_not_push():
    config = _library()
    assert (config.source_type, config.path, config.artist) == (
        SourceType.LIBRARY_ICON, "lorc/sword", "lorc",
    )
    assert config.history == ()


def test_switching_source_pushes_previous():
    config = actions.select_theme_icon(_library(), "arcane", saved_at=T)
    assert config.source_type is SourceType.THEME_ICON
    assert config.artist is None
    assert [e.path for e in config.history] == ["lorc/sword"]


def test_cosmetic_actions_never_touch_history():
    config = actions.select_theme_icon(_library(), "arcane", saved_at=T)
    before = config.history
    config = actions.set_shape(config, Shape.CIRCLE)
    config = actions.set_frame(config, FrameStyle.THORNS)
    config = actions.set_glow(config, GlowIntensity.INTENSE)
    config = actions.set_icon_color(config, ColorSetting.explicit("1 2% 3%"))
    config = actions.set_frame_color(config, THEME)
    config = actions.set_glow_color(config, THEME)
    config = actions.set_crop(config, CropSettings(10, 10, 2))
    assert config.history is before
    assert config.frame is FrameStyle.THORNS
    assert config.frame_color == THEME


def test_actions_do_not_mutate_input():
    original = _library()
    actions.set_shape(original, Shape.SQUARE)
    assert original.shape is Shape.NONE


def test_upload_resets_crop():
    config = actions.set_crop(_library(), CropSettings(0, 0, 3))
    config = actions.upload_custom_image(config, "https://cdn/new.png", saved_at=T)
    assert config.crop == DEFAULT_CROP
    assert config.history[0].crop == CropSettings(0, 0, 3)


def test_set_crop_clamps():
    assert actions.set_crop(_library(), CropSettings(-10, 500, 0)).crop == CropSettings(0, 100, 1)


def test_sixth_upload_evicts_oldest():
    config = LogoConfiguration()
    for i in range(6):
        config = actions.upload_custom_image(config, f"https://cdn/{i}.png", saved_at=T)
    assert [e.path for e in config.history] == [f"https://cdn/{i}.png" for i in (4, 3, 2, 1, 0)]
    config = actions.upload_custom_image(config, "https://cdn/6.png", saved_at=T)
    assert len(config.history) == 5
    assert config.history[0].path == "https://cdn/5.png"
    assert "https://cdn/0.png" not in [e.path for e in config.history]


def test_clear_keeps_shape_and_frame_only():
    config = actions.set_shape(_library(), Shape.ROUNDED)
    config = actions.set_frame(config, FrameStyle.CELTIC)
    config = actions.set_glow(config, GlowIntensity.SOFT)
    config = actions.set_icon_color(config, THEME)
    cleared = actions.clear_logo(config, saved_at=T)
    assert cleared.source_type is SourceType.NONE
    assert cleared.path is None
    assert (cleared.shape, cleared.frame) == (Shape.ROUNDED, FrameStyle.CELTIC)
    assert cleared.glow is GlowIntensity.NONE
    assert not cleared.icon_color.is_set
    assert cleared.history[0].path == "lorc/sword"


def test_revert_keeps_history():
    config = actions.select_theme_icon(_library(), "arcane", saved_at=T)
    reverted = actions.revert(config, config.history[0])
    assert reverted.path == "lorc/sword"
    assert reverted.history == config.history
