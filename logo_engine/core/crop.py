"""Crop Transform — normalized pan/zoom state to a scale + translate + origin transform.

Invariants:
    - CropSettings produced by this module always satisfy x,y ∈ [0,100], zoom ∈ [1,3]
    - zoom == 1 yields the identity transform regardless of focal point
    - Absent crop settings yield the identity transform with origin 50/50
    - Out-of-range values are clamped, never rejected; non-finite values reset to the default

Design Decisions:
    - translate = (50 - focal) * (zoom - 1) / zoom keeps the focal point visually stationary
      while zooming
    - Drag deltas are halved and divided by zoom so pan speed feels constant at any zoom
"""

import math
from dataclasses import dataclass

MIN_ZOOM: float = 1.0
MAX_ZOOM: float = 3.0
MIN_POSITION: float = 0.0
MAX_POSITION: float = 100.0
DRAG_SCALE: float = 2.0


def _clamp(value: float, low: float, high: float, default: float) -> float:
    if not math.isfinite(value):
        return default
    return max(low, min(high, value))


def clamp_position(value: float) -> float:
    """Focal coordinate in [0, 100]; NaN and infinities fall back to the center."""
    return _clamp(float(value), MIN_POSITION, MAX_POSITION, 50.0)


def clamp_zoom(value: float) -> float:
    return _clamp(float(value), MIN_ZOOM, MAX_ZOOM, MIN_ZOOM)


@dataclass(frozen=True)
class CropSettings:
    """Focal point (percent) and zoom factor."""
    x: float = 50.0
    y: float = 50.0
    zoom: float = 1.0

    def clamped(self) -> "CropSettings":
        return CropSettings(
            x=clamp_position(self.x),
            y=clamp_position(self.y),
            zoom=clamp_zoom(self.zoom),
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "zoom": self.zoom}


DEFAULT_CROP = CropSettings()


@dataclass(frozen=True)
class CropTransform:
    """CSS-style transform derived from CropSettings. All translate/origin values in percent."""
    scale: float = 1.0
    translate_x_percent: float = 0.0
    translate_y_percent: float = 0.0
    origin_x_percent: float = 50.0
    origin_y_percent: float = 50.0

    @property
    def is_identity(self) -> bool:
        return (
            self.scale == 1.0
            and self.translate_x_percent == 0.0
            and self.translate_y_percent == 0.0
        )

    @property
    def css_transform(self) -> str:
        return (
            f"scale({self.scale:g}) "
            f"translate({self.translate_x_percent:g}%, {self.translate_y_percent:g}%)"
        )

    @property
    def css_origin(self) -> str:
        return f"{self.origin_x_percent:g}% {self.origin_y_percent:g}%"


IDENTITY_TRANSFORM = CropTransform()


def compute_crop_transform(crop: CropSettings | None) -> CropTransform:
    """Scale = zoom, origin = focal point, translate compensates so the focal point holds."""
    if crop is None:
        return IDENTITY_TRANSFORM
    c = crop.clamped()
    factor = (c.zoom - 1) / c.zoom
    # + 0.0 folds -0.0 into 0.0 at the centre point
    return CropTransform(
        scale=c.zoom,
        translate_x_percent=(50 - c.x) * factor + 0.0,
        translate_y_percent=(50 - c.y) * factor + 0.0,
        origin_x_percent=c.x,
        origin_y_percent=c.y,
    )


def apply_drag(
    crop: CropSettings | None, dx_screen: float, dy_screen: float,
) -> CropSettings:
    """Pan by a screen-pixel delta; dragging right moves the focal point left."""
    c = (crop or DEFAULT_CROP).clamped()
    return CropSettings(
        x=c.x - dx_screen / DRAG_SCALE / c.zoom,
        y=c.y - dy_screen / DRAG_SCALE / c.zoom,
        zoom=c.zoom,
    ).clamped()


def set_zoom(crop: CropSettings | None, zoom: float) -> CropSettings:
    c = crop or DEFAULT_CROP
    return CropSettings(x=c.x, y=c.y, zoom=zoom).clamped()


def reset_crop() -> CropSettings:
    return DEFAULT_CROP
