"""Shape Clipper — shape enum to clip geometry.

Invariants:
    - Pure lookup: same (shape, size) always yields the same ClipGeometry
    - none and square clip identically; callers decide about background fills
    - rounded corner radius scales with the display size
"""

from dataclasses import dataclass

from logo_engine.core.domain_types import (
    DisplaySize, FrameStyle, Shape, FRAME_NATURAL_SHAPE, ROUNDED_RADIUS_PX,
)


@dataclass(frozen=True)
class ClipGeometry:
    kind: str  # "circle" | "inset"
    radius_px: int
    css: str


CIRCLE_CLIP = ClipGeometry(kind="circle", radius_px=0, css="circle(50% at 50% 50%)")
INSET_CLIP = ClipGeometry(kind="inset", radius_px=0, css="inset(0)")


def shape_clip_path(shape: Shape, size: DisplaySize = DisplaySize.LG) -> ClipGeometry:
    if shape == Shape.CIRCLE:
        return CIRCLE_CLIP
    if shape == Shape.ROUNDED:
        radius = ROUNDED_RADIUS_PX[size]
        return ClipGeometry(kind="inset", radius_px=radius, css=f"inset(0 round {radius}px)")
    return INSET_CLIP


def natural_shape(frame: FrameStyle) -> Shape:
    return FRAME_NATURAL_SHAPE.get(frame, Shape.CIRCLE)


def effective_shape(shape: Shape, frame: FrameStyle) -> Shape:
    """Shape used for clipping: a framed logo without a shape borrows the frame's natural shape."""
    if shape == Shape.NONE and frame != FrameStyle.NONE:
        return natural_shape(frame)
    return shape
