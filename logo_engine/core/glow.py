"""Glow Calculator — glow intensity preset + resolved color → drop-shadow parameters.

Invariants:
    - GlowIntensity.NONE yields no glow at all (None), never a zero-strength glow
    - soft < medium < intense strictly on blur, spread and opacity
    - pulse reuses medium's blur/spread at a lower base opacity and is the only animated preset
"""

from dataclasses import dataclass

from logo_engine.core.color_resolver import ResolvedColor
from logo_engine.core.domain_types import GlowIntensity

PULSE_ANIMATION: str = "glow-pulse 2.5s ease-in-out infinite"


@dataclass(frozen=True)
class GlowPreset:
    blur_radius: int
    spread_radius: int
    opacity: float
    animated: bool = False


GLOW_PRESETS: dict[GlowIntensity, GlowPreset] = {
    GlowIntensity.SOFT: GlowPreset(12, 2, 0.4),
    GlowIntensity.MEDIUM: GlowPreset(18, 4, 0.55),
    GlowIntensity.INTENSE: GlowPreset(28, 8, 0.7),
    GlowIntensity.PULSE: GlowPreset(18, 4, 0.5, animated=True),
}


@dataclass(frozen=True)
class GlowFilter:
    intensity: GlowIntensity
    blur_radius: int
    spread_radius: int
    opacity: float
    animated: bool
    color: str
    shadow_color: str
    css_filter: str
    animation: str | None = None


def compute_glow(intensity: GlowIntensity, color: ResolvedColor) -> GlowFilter | None:
    preset = GLOW_PRESETS.get(intensity)
    if preset is None:
        return None
    shadow_color = color.color.css(preset.opacity)
    return GlowFilter(
        intensity=intensity,
        blur_radius=preset.blur_radius,
        spread_radius=preset.spread_radius,
        opacity=preset.opacity,
        animated=preset.animated,
        color=color.css,
        shadow_color=shadow_color,
        css_filter=f"drop-shadow(0 0 {preset.blur_radius}px {shadow_color})",
        animation=PULSE_ANIMATION if preset.animated else None,
    )
