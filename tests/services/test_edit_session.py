"""Logo Edit Session — verifies local crop responsiveness and debounced propagation.

Invariants:
    - Drags update local_crop immediately but the configuration only after the window
    - A source change cancels a pending drag so the reset crop survives
    - Closing the session drops pending updates; later actions, drags and zooms are ignored
    - on_change fires once per configuration replacement
"""

import asyncio

from logo_engine.core import logo_actions as actions
from logo_engine.core.colors import HslColor
from logo_engine.core.crop import CropSettings, DEFAULT_CROP
from logo_engine.core.domain_types import DisplaySize, FrameStyle, SourceType
from logo_engine.core.logo_config import LogoConfiguration
from logo_engine.services.edit_session import LogoEditSession

WINDOW_MS = 20
WAIT = WINDOW_MS / 1000 * 3


def _image_config() -> LogoConfiguration:
    return LogoConfiguration(
        source_type=SourceType.CUSTOM_IMAGE, path="https://cdn/x.png", crop=DEFAULT_CROP,
    )


async def test_drag_is_local_until_window_elapses():
    session = LogoEditSession(_image_config(), debounce_ms=WINDOW_MS)
    session.drag(10, -20)
    session.drag(10, -20)
    assert session.local_crop == CropSettings(40, 70, 1)
    assert session.config.crop == DEFAULT_CROP
    await asyncio.sleep(WAIT)
    assert session.config.crop == CropSettings(40, 70, 1)
    session.close()


async def test_preview_uses_local_crop():
    session = LogoEditSession(_image_config(), debounce_ms=WINDOW_MS)
    session.zoom(2)
    preview = session.render(DisplaySize.LG, HslColor(41, 40, 60))
    assert preview.transform.scale == 2
    assert session.config.crop.zoom == 1
    session.close()


async def test_source_change_cancels_pending_drag():
    session = LogoEditSession(_image_config(), debounce_ms=WINDOW_MS)
    session.drag(40, 40)
    session.apply(actions.upload_custom_image, "https://cdn/new.png")
    await asyncio.sleep(WAIT)
    assert session.config.path == "https://cdn/new.png"
    assert session.config.crop == DEFAULT_CROP
    assert session.local_crop == DEFAULT_CROP
    session.close()


async def test_close_drops_pending_drag_and_freezes_config():
    async with LogoEditSession(_image_config(), debounce_ms=WINDOW_MS) as session:
        session.drag(40, 40)
    await asyncio.sleep(WAIT)
    assert session.config.crop == DEFAULT_CROP
    session.apply(actions.set_frame, FrameStyle.RUNIC)
    assert session.config.frame is FrameStyle.NONE


async def test_on_change_fires_per_replacement():
    changes = []
    session = LogoEditSession(_image_config(), debounce_ms=WINDOW_MS, on_change=changes.append)
    session.apply(actions.set_frame, FrameStyle.RUNIC)
    session.apply(actions.set_frame, FrameStyle.RUNIC)
    for _ in range(4):
        session.drag(2, 0)
    await asyncio.sleep(WAIT)
    assert len(changes) == 2
    assert changes[-1].crop == CropSettings(46, 50, 1)
    session.close()


async def test_flush_propagates_immediately():
    session = LogoEditSession(_image_config(), debounce_ms=WINDOW_MS)
    session.drag(-20, 0)
    session.flush()
    assert session.config.crop == CropSettings(60, 50, 1)
    session.close()


async def test_from_settings_uses_configured_window():
    async with LogoEditSession.from_settings(_image_config()) as session:
        assert session._debouncer._delay == 0.05
        session.drag(-20, 0)
        assert session.config.crop == DEFAULT_CROP
        session.flush()
        assert session.config.crop == CropSettings(60, 50, 1)
    assert session.closed


async def test_drag_and_zoom_after_close_leave_local_crop_alone():
    session = LogoEditSession(_image_config(), debounce_ms=WINDOW_MS)
    session.close()
    assert session.drag(40, 40) == DEFAULT_CROP
    assert session.zoom(2.5) == DEFAULT_CROP
    assert session.local_crop == DEFAULT_CROP
    await asyncio.sleep(WAIT)
    assert session.config.crop == DEFAULT_CROP
