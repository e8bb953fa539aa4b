"""Frame Geometry — declarative value types describing a decorative frame.

Invariants:
    - All coordinates live in a 100×100 view box; consumers scale to the outer display size
    - Values are frozen and contain no rendering-backend objects (JSON-safe via asdict)
    - Paint ids are deterministic: "<style>-<role>"
"""

from dataclasses import dataclass

from logo_engine.core.domain_types import FrameStyle, Shape

VIEW_BOX: int = 100


@dataclass(frozen=True)
class GradientStop:
    offset: str
    color: str


@dataclass(frozen=True)
class Mark:
    """A single primitive drawn into the view box or a pattern tile."""
    kind: str  # "path" | "text" | "ellipse" | "rect"
    d: str | None = None
    text: str | None = None
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    rx: float | None = None
    ry: float | None = None
    fill: str = "none"
    stroke: str | None = None
    stroke_width: float | None = None
    opacity: float = 1.0
    font_size: float | None = None
    font_weight: str | None = None
    rotate: tuple[float, float, float] | None = None  # (degrees, cx, cy)


@dataclass(frozen=True)
class Paint:
    """Paint server referenced by rings as url(#id)."""
    id: str
    kind: str  # "linear-gradient" | "pattern"
    stops: tuple[GradientStop, ...] = ()
    tile_width: float = 0.0
    tile_height: float = 0.0
    marks: tuple[Mark, ...] = ()

    @property
    def ref(self) -> str:
        return f"url(#{self.id})"


@dataclass(frozen=True)
class Shadow:
    offset_x: float
    offset_y: float
    blur: float
    spread: float
    color: str
    inset: bool = False


@dataclass(frozen=True)
class Ring:
    """Stroked outline centred `inset` units in from the view box edge."""
    layout: str  # "circle" | "rect"
    inset: float
    stroke_width: float
    stroke: str
    corner_radius: float = 0.0
    line_style: str = "solid"  # "solid" | "double"
    opacity: float = 1.0
    shadow: Shadow | None = None

    @property
    def radius(self) -> float:
        return VIEW_BOX / 2 - self.inset

    @property
    def side(self) -> float:
        return VIEW_BOX - 2 * self.inset


@dataclass(frozen=True)
class ContentRegion:
    """Where wrapped content sits: clipped to `shape`, inset from the outer edge."""
    shape: Shape
    inset: float
    draws_background: bool


@dataclass(frozen=True)
class FrameGeometry:
    style: FrameStyle
    shape: Shape
    layout: str
    rings: tuple[Ring, ...]
    paints: tuple[Paint, ...]
    marks: tuple[Mark, ...]
    content: ContentRegion
    view_box: int = VIEW_BOX

    def paint(self, paint_id: str) -> Paint | None:
        return next((p for p in self.paints if p.id == paint_id), None)
