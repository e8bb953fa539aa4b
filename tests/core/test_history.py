"""History Manager — verifies bound, dedup, snapshots and revert.

Tests:
    - Six distinct pushes leave five entries, oldest evicted, newest first
    - Pushing the same state twice in a row leaves one entry
    - Configs without a source are never remembered
    - Revert rebuilds every cosmetic field and keeps history unchanged
"""

from logo_engine.core.color_resolver import ColorSetting, THEME
from logo_engine.core.crop import CropSettings
from logo_engine.core.domain_types import FrameStyle, GlowIntensity, Shape, SourceType
from logo_engine.core.history import (
    HistoryLog, previous_uploads, push_history, revert_to_history, snapshot_entry,
)
from logo_engine.core.logo_config import LogoConfiguration

SAVED_AT = "2026-01-01T00:00:00Z"


def _icon(path: str, **kw) -> LogoConfiguration:
    return LogoConfiguration(source_type=SourceType.LIBRARY_ICON, path=path, **kw)


def test_six_distinct_pushes_keep_five_newest_first():
    history = ()
    for i in range(6):
        history = push_history(history, _icon(f"lorc/icon-{i}"), SAVED_AT)
    assert len(history) == 5
    assert [e.path for e in history] == [f"lorc/icon-{i}" for i in (5, 4, 3, 2, 1)]


def test_same_state_twice_is_one_entry():
    config = _icon("lorc/sword")
    history = push_history((), config, SAVED_AT)
    history = push_history(history, config, "2026-01-02T00:00:00Z")
    assert len(history) == 1
    assert history[0].saved_at == SAVED_AT


def test_cosmetic_change_is_a_new_entry():
    history = push_history((), _icon("lorc/sword"), SAVED_AT)
    history = push_history(history, _icon("lorc/sword", frame=FrameStyle.RUNIC), SAVED_AT)
    assert len(history) == 2


def test_color_only_difference_is_deduplicated():
    history = push_history((), _icon("lorc/sword"), SAVED_AT)
    history = push_history(history, _icon("lorc/sword", icon_color=THEME), SAVED_AT)
    assert len(history) == 1


def test_non_consecutive_duplicates_are_kept():
    history = ()
    for path in ("a/x", "b/y", "a/x"):
        history = push_history(history, _icon(path), SAVED_AT)
    assert [e.path for e in history] == ["a/x", "b/y", "a/x"]


def test_no_source_is_a_noop():
    existing = push_history((), _icon("lorc/sword"), SAVED_AT)
    assert push_history(existing, LogoConfiguration(), SAVED_AT) is existing
    assert push_history(existing, LogoConfiguration(source_type=SourceType.LIBRARY_ICON)) is existing


def test_snapshot_freezes_every_cosmetic_field():
    config = _icon(
        "lorc/sword", artist="lorc", shape=Shape.ROUNDED, frame=FrameStyle.CHAIN,
        icon_color=ColorSetting.explicit("10 20% 30%"), frame_color=THEME,
        glow=GlowIntensity.PULSE, glow_color=ColorSetting.explicit("200 50% 50%"),
        crop=CropSettings(30, 70, 2),
    )
    entry = snapshot_entry(config, SAVED_AT)
    assert entry.artist == "lorc"
    assert entry.shape is Shape.ROUNDED
    assert entry.frame_color == THEME
    assert entry.glow is GlowIntensity.PULSE
    assert entry.crop == CropSettings(30, 70, 2)


def test_snapshot_timestamp_defaults_to_now_utc():
    assert snapshot_entry(_icon("a/b")).saved_at.endswith("Z")


def test_revert_rebuilds_config_and_keeps_history():
    original = _icon("lorc/sword", shape=Shape.CIRCLE, glow=GlowIntensity.SOFT)
    history = push_history((), original, SAVED_AT)
    history = push_history(history, _icon("lorc/axe"), SAVED_AT)
    reverted = revert_to_history(history[1], history)
    assert reverted.path == "lorc/sword"
    assert reverted.shape is Shape.CIRCLE
    assert reverted.glow is GlowIntensity.SOFT
    assert reverted.history == history


def test_history_log_truncates_and_exposes_head():
    entries = tuple(snapshot_entry(_icon(f"a/{i}"), SAVED_AT) for i in range(7))
    log = HistoryLog(entries)
    assert len(log) == 5
    assert log.head.path == "a/0"
    assert HistoryLog().head is None


def test_previous_uploads_filters_custom_images():
    history = push_history((), _icon("lorc/sword"), SAVED_AT)
    upload = LogoConfiguration(source_type=SourceType.CUSTOM_IMAGE, path="https://cdn/x.png")
    history = push_history(history, upload, SAVED_AT)
    assert [e.path for e in previous_uploads(history)] == ["https://cdn/x.png"]
