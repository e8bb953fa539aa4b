"""Logo Edit Session — owns the single configuration value of one editing session.

Invariants:
    - The session's configuration is only ever replaced, never mutated
    - Crop drags update local_crop immediately; the configuration sees only the final value
      of a burst, after the debounce window
    - Any non-crop action cancels a pending crop propagation first, so an older drag can
      never overwrite the crop a new source just reset
    - close() cancels the timer unconditionally; after it the configuration is frozen

Design Decisions:
    - Actions are the pure functions of core.logo_actions, applied through apply()
      (ADR: impureim sandwich, the session only holds state)
    - on_change hook lets a surrounding shell persist configurations without the session
      knowing about storage
"""

import logging
from typing import Callable

from logo_engine.config import get_settings
from logo_engine.core.colors import HslColor
from logo_engine.core.crop import CropSettings, apply_drag, set_zoom
from logo_engine.core.domain_types import DisplaySize
from logo_engine.core.logo_actions import set_crop
from logo_engine.core.logo_config import LogoConfiguration
from logo_engine.core.registry_protocols import IconRegistry
from logo_engine.core.renderer import DrawInstructions, render
from logo_engine.services.crop_debounce import CropDebouncer

logger = logging.getLogger(__name__)


class LogoEditSession:
    """Editing state holder: current configuration + debounced crop propagation."""

    def __init__(
        self,
        config: LogoConfiguration | None = None,
        debounce_ms: int = 50,
        on_change: Callable[[LogoConfiguration], None] | None = None,
    ):
        self.config = config or LogoConfiguration()
        self.local_crop: CropSettings | None = self.config.crop
        self._on_change = on_change
        self._debouncer = CropDebouncer(self._propagate_crop, debounce_ms)

    @classmethod
    def from_settings(
        cls,
        config: LogoConfiguration | None = None,
        on_change: Callable[[LogoConfiguration], None] | None = None,
    ) -> "LogoEditSession":
        return cls(config, get_settings().crop_debounce_ms, on_change)

    async def __aenter__(self) -> "LogoEditSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._debouncer.closed

    # ─── Actions ─────────────────────────────────────────────────

    def apply(self, action: Callable[..., LogoConfiguration], *args, **kwargs) -> LogoConfiguration:
        """Run a pure action against the current configuration and adopt the result."""
        if self.closed:
            logger.debug("Action after close ignored")
            return self.config
        self._debouncer.cancel()
        self._replace(action(self.config, *args, **kwargs))
        self.local_crop = self.config.crop
        return self.config

    def drag(self, dx: float, dy: float) -> CropSettings:
        """Pan the focal point by a screen-pixel delta."""
        if self.closed:
            return self.local_crop
        self.local_crop = apply_drag(self.local_crop, dx, dy)
        self._debouncer.submit(self.local_crop)
        return self.local_crop

    def zoom(self, zoom: float) -> CropSettings:
        if self.closed:
            return self.local_crop
        self.local_crop = set_zoom(self.local_crop, zoom)
        self._debouncer.submit(self.local_crop)
        return self.local_crop

    def flush(self) -> None:
        self._debouncer.flush()

    def close(self) -> None:
        self._debouncer.close()

    # ─── Rendering ───────────────────────────────────────────────

    def render(
        self,
        size: DisplaySize,
        theme_primary: HslColor,
        registry: IconRegistry | None = None,
    ) -> DrawInstructions:
        """Preview with the local crop, so drags show before they propagate."""
        preview = self.config
        if self.local_crop != self.config.crop:
            preview = set_crop(self.config, self.local_crop)
        return render(preview, size, theme_primary, registry)

    # ─── Internals ───────────────────────────────────────────────

    def _propagate_crop(self, crop: CropSettings) -> None:
        self._replace(set_crop(self.config, crop))

    def _replace(self, config: LogoConfiguration) -> None:
        if config == self.config:
            return
        self.config = config
        logger.debug(
            "Logo configuration changed",
            extra={
                "source_type": config.source_type.value,
                "frame": config.frame.value,
                "glow": config.glow.value,
                "history_length": len(config.history),
            },
        )
        if self._on_change is not None:
            self._on_change(config)
