"""Glow Calculator — verifies presets and the pulse variant.

Tests:
    - none yields no glow at all
    - soft < medium < intense on blur, spread and opacity
    - pulse reuses medium's blur/spread at lower opacity and is animated
"""

from logo_engine.core.color_resolver import ResolvedColor
from logo_engine.core.colors import HslColor
from logo_engine.core.domain_types import ColorMode, GlowIntensity
from logo_engine.core.glow import GLOW_PRESETS, PULSE_ANIMATION, compute_glow

COLOR = ResolvedColor(HslColor(41, 40, 60), ColorMode.UNSET)


def test_none_yields_no_glow():
    assert compute_glow(GlowIntensity.NONE, COLOR) is None


def test_presets_strictly_increase():
    soft, medium, intense = (
        GLOW_PRESETS[g] for g in (GlowIntensity.SOFT, GlowIntensity.MEDIUM, GlowIntensity.INTENSE)
    )
    assert soft.blur_radius < medium.blur_radius < intense.blur_radius
    assert soft.spread_radius < medium.spread_radius < intense.spread_radius
    assert soft.opacity < medium.opacity < intense.opacity


def test_pulse_reuses_medium_geometry_at_lower_opacity():
    pulse = compute_glow(GlowIntensity.PULSE, COLOR)
    medium = compute_glow(GlowIntensity.MEDIUM, COLOR)
    assert (pulse.blur_radius, pulse.spread_radius) == (medium.blur_radius, medium.spread_radius)
    assert pulse.opacity < medium.opacity
    assert pulse.animated and not medium.animated
    assert pulse.animation == PULSE_ANIMATION
    assert medium.animation is None


def test_filter_string_applies_alpha():
    glow = compute_glow(GlowIntensity.SOFT, COLOR)
    assert glow.shadow_color == "hsl(41 40% 60% / 0.4)"
    assert glow.css_filter == "drop-shadow(0 0 12px hsl(41 40% 60% / 0.4))"
    assert glow.color == "hsl(41 40% 60%)"
