"""Crop Debouncer — trailing-edge coalescing of crop drag/zoom updates.

Invariants:
    - At most one timer is armed at a time; each submit cancels and re-arms it
    - Only the LAST value submitted within a burst is delivered, exactly once
    - After close(), nothing is ever delivered (no stale update after teardown)

Design Decisions:
    - Explicit cancellable timer resource (asyncio TimerHandle) owned by the edit session,
      instead of closures captured by callbacks
    - Callback is synchronous: delivery only swaps a configuration value
"""

import asyncio
import logging
from typing import Callable

from logo_engine.core.crop import CropSettings

logger = logging.getLogger(__name__)


class CropDebouncer:
    """Delays crop propagation by a fixed window and keeps only the final value."""

    def __init__(
        self, callback: Callable[[CropSettings], None], delay_ms: int = 50,
    ):
        self._callback = callback
        self._delay = max(delay_ms, 0) / 1000
        self._handle: asyncio.TimerHandle | None = None
        self._pending: CropSettings | None = None
        self._closed = False

    @property
    def pending(self) -> CropSettings | None:
        return self._pending

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, crop: CropSettings) -> None:
        """Remember `crop` and restart the window. Must run inside an event loop."""
        if self._closed:
            logger.debug("Crop update after close ignored")
            return
        self._pending = crop
        if self._handle is not None:
            self._handle.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire)

    def flush(self) -> None:
        """Deliver the pending value now instead of waiting for the window."""
        if self._handle is not None:
            self._handle.cancel()
        self._fire()

    def cancel(self) -> None:
        """Drop the pending value without delivering it."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._pending = None

    def close(self) -> None:
        self.cancel()
        self._closed = True

    def _fire(self) -> None:
        self._handle = None
        crop, self._pending = self._pending, None
        if crop is None or self._closed:
            return
        self._callback(crop)
