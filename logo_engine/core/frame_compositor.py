"""Frame Compositor — (frame style, resolved color, shape) → layered frame geometry.

Invariants:
    - compose_frame is PURE and deterministic; FrameStyle.NONE yields None
    - Every motif renders in both layouts: "circle" (ring radius) and "rect" (inset rectangle,
      corner radius only for rounded)
    - Motif stroke/fill patterns do not depend on shape; only ring geometry, chain link tiles
      and corner ornament placement switch on layout
    - shape=none borrows the frame's natural shape for clipping, without a content background
    - An authored (theme or explicit) color replaces every stop of a motif's default palette

Design Decisions:
    - Motifs as a lookup table of pure builders (ADR: adding a style is purely additive)
    - Geometry in a 100×100 view box: one description serves thumbnails and previews
"""

from dataclasses import dataclass
from typing import Callable

from logo_engine.core.color_resolver import ResolvedColor
from logo_engine.core.domain_types import FrameStyle, Shape
from logo_engine.core.frame_geometry import (
    ContentRegion, FrameGeometry, GradientStop, Mark, Paint, Ring, Shadow,
)
from logo_engine.core.shape_clip import effective_shape


@dataclass(frozen=True)
class _MotifContext:
    style: FrameStyle
    color: ResolvedColor
    layout: str
    rounded: bool

    @property
    def is_circle(self) -> bool:
        return self.layout == "circle"

    def tint(self, default_hex: str, alpha: float | None = None) -> str:
        """Authored color when set, else the motif's own default (optionally translucent)."""
        if not self.color.is_default:
            return self.color.color.css(alpha)
        if alpha is None:
            return default_hex
        return f"{default_hex}{round(alpha * 255):02x}"

    def contrast(self, default: str, on_custom: str) -> str:
        return default if self.color.is_default else on_custom

    def radius(self, rounded_radius: float) -> float:
        return rounded_radius if self.rounded else 0.0

    def paint_id(self, role: str) -> str:
        return f"{self.style.value}-{role}"


@dataclass(frozen=True)
class _MotifParts:
    rings: tuple[Ring, ...]
    content_inset: float
    paints: tuple[Paint, ...] = ()
    marks: tuple[Mark, ...] = ()


def _gradient(ctx: _MotifContext, role: str, *default_stops: str) -> Paint:
    offsets = ("0%", "50%", "100%")
    return Paint(
        id=ctx.paint_id(role), kind="linear-gradient",
        stops=tuple(
            GradientStop(offset, ctx.tint(color))
            for offset, color in zip(offsets, default_stops)
        ),
    )


# ─── Motifs ──────────────────────────────────────────────────────

def _simple(ctx: _MotifContext) -> _MotifParts:
    """Plain solid border."""
    return _MotifParts(
        rings=(Ring(ctx.layout, 2, 4, ctx.color.css, ctx.radius(12)),),
        content_inset=0,
    )


_ORNATE_FLOURISHES = (
    "M20,8 Q14,14 8,20", "M80,8 Q86,14 92,20",
    "M20,92 Q14,86 8,80", "M80,92 Q86,86 92,80",
)


def _ornate(ctx: _MotifContext) -> _MotifParts:
    """Gradient ring with corner flourishes."""
    ring = _gradient(ctx, "ring", "#fcd34d", "#eab308", "#d97706")
    marks: tuple[Mark, ...] = ()
    if ctx.is_circle:
        marks = tuple(
            Mark("path", d=d, stroke=ctx.tint("#eab308"), stroke_width=1.5, opacity=0.8)
            for d in _ORNATE_FLOURISHES
        )
    return _MotifParts(
        rings=(Ring(ctx.layout, 4, 6, ring.ref, ctx.radius(12)),),
        paints=(ring,), marks=marks, content_inset=4,
    )


def _celtic(ctx: _MotifContext) -> _MotifParts:
    """Double border with an interwoven knot pattern."""
    knot_color = ctx.tint("#059669")
    knot = Paint(
        id=ctx.paint_id("knot"), kind="pattern", tile_width=12, tile_height=12,
        marks=(
            Mark("path", d="M0,6 Q3,3 6,6 T12,6", stroke=knot_color, stroke_width=1.5),
            Mark("path", d="M6,0 Q9,3 6,6 T6,12", stroke=knot_color, stroke_width=1.5),
        ),
    )
    border = Ring(
        ctx.layout, 2, 4, knot_color, ctx.radius(16), line_style="double",
        shadow=Shadow(0, 0, 0, 2, ctx.tint("#059669", 0.25), inset=True),
    )
    return _MotifParts(
        rings=(border, Ring(ctx.layout, 6, 8, knot.ref, ctx.radius(10), opacity=0.8)),
        paints=(knot,), content_inset=4,
    )


def _chain(ctx: _MotifContext) -> _MotifParts:
    """Solid rail with a chain-link pattern; link shape follows the layout."""
    link_color = ctx.tint("#a1a1aa")
    if ctx.is_circle:
        links = Paint(
            id=ctx.paint_id("links"), kind="pattern", tile_width=10, tile_height=10,
            marks=(Mark("ellipse", x=5, y=5, rx=4, ry=2.5, stroke=link_color, stroke_width=2),),
        )
    else:
        links = Paint(
            id=ctx.paint_id("links"), kind="pattern", tile_width=12, tile_height=12,
            marks=(Mark(
                "rect", x=2, y=4, width=8, height=4, rx=1,
                stroke=link_color, stroke_width=1.5,
            ),),
        )
    rail = Ring(ctx.layout, 5.5, 3, ctx.tint("#71717a"), ctx.radius(12))
    return _MotifParts(
        rings=(rail, Ring(ctx.layout, 5, 10, links.ref, ctx.radius(8))),
        paints=(links,), content_inset=8,
    )


_RUNE_ROWS = (
    ("ᚠᚢᚦᚨᚱᚲ", 50, 9, None),
    ("ᚷᚹᚺᚾᛁᛃ", 50, 97, None),
    ("ᛇᛈᛉᛊ", 6, 54, (-90.0, 6.0, 50.0)),
    ("ᛏᛒᛖᛗ", 94, 54, (90.0, 94.0, 50.0)),
)


def _runic(ctx: _MotifContext) -> _MotifParts:
    """Gradient ring with glyph rows at the four cardinal points."""
    ring = _gradient(ctx, "ring", "#1e3a8a", "#4338ca", "#6b21a8")
    glyph_fill = ctx.contrast("#93c5fd", "white")
    marks = tuple(
        Mark(
            "text", text=text, x=x, y=y, fill=glyph_fill,
            font_size=7, font_weight="bold", rotate=rotate,
        )
        for text, x, y, rotate in _RUNE_ROWS
    )
    return _MotifParts(
        rings=(Ring(ctx.layout, 4, 6, ring.ref, ctx.radius(12)),),
        paints=(ring,), marks=marks, content_inset=4,
    )


def _thorns(ctx: _MotifContext) -> _MotifParts:
    """Thorned vine pattern over a thin border with a drop shadow."""
    vine = Paint(
        id=ctx.paint_id("vine"), kind="pattern", tile_width=14, tile_height=14,
        marks=(
            Mark("path", d="M7,0 L9,5 L14,7 L9,9 L7,14 L5,9 L0,7 L5,5 Z", fill=ctx.tint("#881337")),
            Mark("path", d="M7,3 Q9,7 7,11", stroke=ctx.tint("#9f1239"), stroke_width=0.5),
        ),
    )
    border = Ring(
        ctx.layout, 9, 2, ctx.tint("#9f1239"), ctx.radius(8),
        shadow=Shadow(0, 0, 10, 0, ctx.tint("#881337", 0.25)),
    )
    return _MotifParts(
        rings=(border, Ring(ctx.layout, 6, 12, vine.ref, ctx.radius(8))),
        paints=(vine,), content_inset=8,
    )


_DRAGON_MOTIFS = (
    "M15,10 Q20,15 15,20 Q10,15 15,10", "M85,10 Q90,15 85,20 Q80,15 85,10",
    "M15,80 Q20,85 15,90 Q10,85 15,80", "M85,80 Q90,85 85,90 Q80,85 85,80",
)


def _dragon(ctx: _MotifContext) -> _MotifParts:
    """Gradient ring overlaid with scales, plus corner motifs."""
    ring = _gradient(ctx, "ring", "#7f1d1d", "#991b1b", "#b91c1c")
    scales = Paint(
        id=ctx.paint_id("scales"), kind="pattern", tile_width=10, tile_height=8,
        marks=(Mark(
            "path", d="M0,8 Q5,4 10,8",
            stroke=ctx.contrast("#fca5a5", "rgba(255,255,255,0.4)"),
            stroke_width=1, opacity=0.5,
        ),),
    )
    marks: tuple[Mark, ...] = ()
    if ctx.is_circle:
        fill = ctx.contrast("#fca5a5", "rgba(255,255,255,0.6)")
        marks = tuple(Mark("path", d=d, fill=fill) for d in _DRAGON_MOTIFS)
    return _MotifParts(
        rings=(
            Ring(ctx.layout, 4, 6, ring.ref, ctx.radius(12)),
            Ring(ctx.layout, 4, 6, scales.ref, ctx.radius(12)),
        ),
        paints=(ring, scales), marks=marks, content_inset=4,
    )


FRAME_MOTIFS: dict[FrameStyle, Callable[[_MotifContext], _MotifParts]] = {
    FrameStyle.SIMPLE: _simple,
    FrameStyle.ORNATE: _ornate,
    FrameStyle.CELTIC: _celtic,
    FrameStyle.CHAIN: _chain,
    FrameStyle.RUNIC: _runic,
    FrameStyle.THORNS: _thorns,
    FrameStyle.DRAGON: _dragon,
}


def compose_frame(
    frame: FrameStyle, color: ResolvedColor, shape: Shape,
) -> FrameGeometry | None:
    """Build the frame geometry for a style, or None when no frame is drawn."""
    builder = FRAME_MOTIFS.get(frame)
    if builder is None:
        return None
    clip_shape = effective_shape(shape, frame)
    layout = "circle" if clip_shape == Shape.CIRCLE else "rect"
    ctx = _MotifContext(
        style=frame, color=color, layout=layout,
        rounded=clip_shape == Shape.ROUNDED,
    )
    parts = builder(ctx)
    return FrameGeometry(
        style=frame,
        shape=clip_shape,
        layout=layout,
        rings=parts.rings,
        paints=parts.paints,
        marks=parts.marks,
        content=ContentRegion(
            shape=clip_shape,
            inset=parts.content_inset,
            draws_background=shape != Shape.NONE,
        ),
    )
