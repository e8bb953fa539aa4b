"""Shape Clipper — verifies shape → clip lookup.

Tests:
    - circle inscribes, square and none clip identically, rounded radius scales with size
    - A framed logo without a shape borrows the frame's natural shape
"""

from logo_engine.core.domain_types import DisplaySize, FrameStyle, Shape
from logo_engine.core.shape_clip import effective_shape, natural_shape, shape_clip_path


def test_circle_clip():
    assert shape_clip_path(Shape.CIRCLE).css == "circle(50% at 50% 50%)"


def test_square_and_none_are_identical():
    assert shape_clip_path(Shape.SQUARE) == shape_clip_path(Shape.NONE)
    assert shape_clip_path(Shape.NONE).css == "inset(0)"


def test_rounded_radius_scales_with_size():
    assert shape_clip_path(Shape.ROUNDED, DisplaySize.LG).css == "inset(0 round 12px)"
    assert shape_clip_path(Shape.ROUNDED, DisplaySize.XS).radius_px == 2
    assert shape_clip_path(Shape.ROUNDED, DisplaySize.XL).radius_px == 16


def test_natural_shape_is_circle():
    assert natural_shape(FrameStyle.THORNS) is Shape.CIRCLE


def test_effective_shape():
    assert effective_shape(Shape.NONE, FrameStyle.DRAGON) is Shape.CIRCLE
    assert effective_shape(Shape.NONE, FrameStyle.NONE) is Shape.NONE
    assert effective_shape(Shape.ROUNDED, FrameStyle.DRAGON) is Shape.ROUNDED
