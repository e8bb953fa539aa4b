"""Colors — HSL value type and lossless-after-rounding HSL↔Hex conversion.

Invariants:
    - HslColor components are integers: h ∈ [0,360), s,l ∈ [0,100]
    - hsl_to_hex / hex_to_hsl are total: malformed input degrades to neutral gray, never raises
    - Rounding is half-up on every component
    - hex_to_hsl returns an integer triple whose hex converts back to it, so re-encoding a
      converted value is byte-stable in both directions
    - Hex output is lowercase "#rrggbb"

Design Decisions:
    - HSL triple strings ("41 40% 60%") are the authoring format because theme colors are
      stored that way; hex exists only for color-picker round-tripping
    - Half-up rounding over Python's banker's rounding: matches the values already stored
      by picker UIs
"""

import logging
import math
import re
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

NEUTRAL_GRAY_HEX: str = "#888888"
NEUTRAL_GRAY_HSL: str = "0 0% 50%"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_HSL_RE = re.compile(
    r"^\s*(-?\d+(?:\.\d+)?)(?:deg)?\s+(\d+(?:\.\d+)?)%?\s+(\d+(?:\.\d+)?)%?\s*$",
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class HslColor:
    """An integer HSL triple."""
    h: int
    s: int
    l: int  # noqa: E741

    @property
    def triple(self) -> str:
        """Storage form, e.g. "41 40% 60%"."""
        return f"{self.h} {self.s}% {self.l}%"

    def css(self, alpha: float | None = None) -> str:
        """CSS color, optionally with alpha: hsl(41 40% 60% / 0.5)."""
        if alpha is None:
            return f"hsl({self.triple})"
        return f"hsl({self.triple} / {alpha:g})"

    def to_hex(self) -> str:
        return hsl_to_hex(self.triple)

    @classmethod
    def from_hex(cls, value: str) -> "HslColor":
        return _hex_to_color(value)


NEUTRAL_GRAY = HslColor(0, 0, 50)


def parse_hsl(value: str | None) -> HslColor | None:
    """Parse an HSL triple string. Returns None when malformed or out of range."""
    if not isinstance(value, str):
        return None
    match = _HSL_RE.match(value)
    if not match:
        return None
    h, s, l = (float(g) for g in match.groups())
    if not (0 <= s <= 100 and 0 <= l <= 100):
        return None
    return HslColor(
        _round_half_up(h) % 360, _round_half_up(s), _round_half_up(l),
    )


def is_hsl_triple(value: str | None) -> bool:
    return parse_hsl(value) is not None


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _to_rgb(h_deg: float, s_pct: float, l_pct: float) -> tuple[int, int, int]:
    h = (h_deg % 360) / 360
    s = s_pct / 100
    l = l_pct / 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return _round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255)


def _exact_hsl(rgb: tuple[int, int, int]) -> tuple[float, float, float]:
    """Unrounded (degrees, percent, percent) of an 8-bit RGB triple."""
    r, g, b = (c / 255 for c in rgb)
    high = max(r, g, b)
    low = min(r, g, b)
    l = (high + low) / 2  # noqa: E741
    h = s = 0.0

    if high != low:
        d = high - low
        s = d / (2 - high - low) if l > 0.5 else d / (high + low)
        if high == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return h * 360, s * 100, l * 100


def _nearest(exact: tuple[float, float, float]) -> HslColor:
    h, s, l = exact  # noqa: E741
    return HslColor(_round_half_up(h) % 360, _round_half_up(s), _round_half_up(l))


def _reach(rgb: tuple[int, int, int]) -> tuple[int, int]:
    """How far (hue degrees, saturation points) 8-bit rounding can move a grid color."""
    high, low = max(rgb), min(rgb)
    chroma = high - low
    span = 255 - abs(high + low - 255)
    hue = 180 if chroma <= 1 else min(180, math.ceil(120 / (chroma - 1)) + 1)
    sat = 100 if span == 0 else min(100, math.ceil(200 / span) + 1)
    return hue, sat


def _search(
    rgb: tuple[int, int, int],
    exact: tuple[float, float, float],
    start: HslColor,
    hue_reach: int,
    sat_reach: int,
) -> HslColor | None:
    h, s, l = exact  # noqa: E741
    best = None
    for dh in range(-hue_reach, hue_reach + 1):
        hue = (start.h + dh) % 360
        hue_gap = min(abs(hue - h), 360 - abs(hue - h))
        for sat in range(max(start.s - sat_reach, 0), min(start.s + sat_reach, 100) + 1):
            for light in range(max(start.l - 1, 0), min(start.l + 1, 100) + 1):
                if _to_rgb(hue, sat, light) != rgb:
                    continue
                key = (hue_gap ** 2 + (sat - s) ** 2 + (light - l) ** 2, hue, sat, light)
                if best is None or key < best:
                    best = key
    return None if best is None else HslColor(*best[1:])


@lru_cache(maxsize=4096)
def _grid_preimage(rgb: tuple[int, int, int]) -> HslColor | None:
    """Integer HSL triple closest to the exact HSL of `rgb` that converts back to `rgb`."""
    exact = _exact_hsl(rgb)
    start = _nearest(exact)
    if _to_rgb(start.h, start.s, start.l) == rgb:
        return start
    found = _search(rgb, exact, start, 1, 1)
    if found is None:
        hue_reach, sat_reach = _reach(rgb)
        if hue_reach > 1 or sat_reach > 1:
            found = _search(rgb, exact, start, hue_reach, sat_reach)
    return found


def _hex_to_color(value: str) -> HslColor:
    match = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        logger.debug("Malformed hex color %r, using neutral gray", value)
        return NEUTRAL_GRAY

    rgb = tuple(int(part, 16) for part in match.groups())
    color = _grid_preimage(rgb)
    if color is not None:
        return color
    # No integer triple reaches this hex: settle on the grid color its rounding lands on,
    # which is a fixed point of hex -> hsl -> hex.
    nearest = _nearest(_exact_hsl(rgb))
    return _grid_preimage(_to_rgb(nearest.h, nearest.s, nearest.l)) or nearest


def hsl_to_hex(value: str) -> str:
    """Convert "h s% l%" to "#rrggbb". Malformed input → NEUTRAL_GRAY_HEX."""
    match = _HSL_RE.match(value) if isinstance(value, str) else None
    if not match:
        logger.debug("Malformed HSL color %r, using neutral gray", value)
        return NEUTRAL_GRAY_HEX
    h_deg, s_pct, l_pct = (float(g) for g in match.groups())
    if not (0 <= s_pct <= 100 and 0 <= l_pct <= 100):
        logger.debug("Out-of-range HSL color %r, using neutral gray", value)
        return NEUTRAL_GRAY_HEX
    return "#" + "".join(f"{c:02x}" for c in _to_rgb(h_deg, s_pct, l_pct))


def hex_to_hsl(value: str) -> str:
    """Convert "#rrggbb" (hash optional) to "h s% l%". Malformed input → NEUTRAL_GRAY_HSL.

    Picks the integer triple that converts back to the same hex when one exists near the
    exact value; otherwise one whose own hex converts back to it.
    """
    return _hex_to_color(value).triple


def normalize_hex(value: str) -> str:
    """Lowercase "#rrggbb" form, or NEUTRAL_GRAY_HEX when malformed."""
    match = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        return NEUTRAL_GRAY_HEX
    return "#" + "".join(match.groups()).lower()
