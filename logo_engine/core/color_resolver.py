"""Color Resolver — tri-state color settings and their fallback chains.

Invariants:
    - ColorSetting has exactly three states; EXPLICIT always carries a well-formed HslColor
    - "__theme__" exists only at the storage boundary (to_storage / from_storage)
    - resolve_* functions are total and pure: every input resolves to a concrete color
    - Frame chain:  explicit → custom | theme → theme primary | unset → style default tint
    - Glow chain:   explicit → custom | theme → theme primary | unset → resolved frame color
                    when a frame is drawn, else theme primary

Design Decisions:
    - Theme-linked as a real variant instead of a sentinel string: a stored custom value can
      never collide with the marker after deserialization
    - ResolvedColor keeps the authoring mode so frame motifs can choose their multi-stop
      default palettes when the frame color is unset
"""

from dataclasses import dataclass

from logo_engine.core.colors import HslColor, NEUTRAL_GRAY, parse_hsl
from logo_engine.core.domain_types import ColorMode, FrameStyle, THEME_COLOR_MARKER


# ─── Frame default tints ─────────────────────────────────────────

FRAME_DEFAULT_HEX: dict[FrameStyle, str] = {
    FrameStyle.SIMPLE: "#666666",
    FrameStyle.ORNATE: "#eab308",
    FrameStyle.CELTIC: "#059669",
    FrameStyle.CHAIN: "#a1a1aa",
    FrameStyle.RUNIC: "#4338ca",
    FrameStyle.THORNS: "#9f1239",
    FrameStyle.DRAGON: "#b91c1c",
}
FALLBACK_FRAME_HEX: str = "#888888"


def frame_default_color(frame: FrameStyle) -> HslColor:
    """Hard-coded default tint of a frame style (neutral for unknown / none)."""
    return HslColor.from_hex(FRAME_DEFAULT_HEX.get(frame, FALLBACK_FRAME_HEX))


# ─── ColorSetting ────────────────────────────────────────────────

@dataclass(frozen=True)
class ColorSetting:
    """Authored color field: unset, theme-linked, or an explicit HSL value."""
    mode: ColorMode = ColorMode.UNSET
    value: HslColor | None = None

    def __post_init__(self):
        if self.mode == ColorMode.EXPLICIT and self.value is None:
            raise ValueError("explicit color setting requires a value")
        if self.mode != ColorMode.EXPLICIT and self.value is not None:
            raise ValueError(f"{self.mode.value} color setting cannot carry a value")

    @classmethod
    def unset(cls) -> "ColorSetting":
        return cls(ColorMode.UNSET)

    @classmethod
    def theme(cls) -> "ColorSetting":
        return cls(ColorMode.THEME)

    @classmethod
    def explicit(cls, value: HslColor | str) -> "ColorSetting":
        """Explicit color; malformed strings degrade to neutral gray."""
        if isinstance(value, str):
            value = parse_hsl(value) or NEUTRAL_GRAY
        return cls(ColorMode.EXPLICIT, value)

    @classmethod
    def from_storage(cls, raw: str | None) -> "ColorSetting":
        """Decode the stored form: absent/empty → unset, marker → theme, else explicit."""
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return cls.unset()
        if raw == THEME_COLOR_MARKER:
            return cls.theme()
        return cls.explicit(raw if isinstance(raw, str) else "")

    def to_storage(self) -> str | None:
        """Encode for storage. None means "omit the field"."""
        if self.mode == ColorMode.THEME:
            return THEME_COLOR_MARKER
        if self.mode == ColorMode.EXPLICIT:
            return self.value.triple
        return None

    @property
    def is_set(self) -> bool:
        return self.mode != ColorMode.UNSET

    @property
    def is_explicit(self) -> bool:
        return self.mode == ColorMode.EXPLICIT


UNSET = ColorSetting.unset()
THEME = ColorSetting.theme()


@dataclass(frozen=True)
class ResolvedColor:
    """A concrete color plus the authoring state it was resolved from."""
    color: HslColor
    mode: ColorMode

    @property
    def css(self) -> str:
        return self.color.css()

    @property
    def is_default(self) -> bool:
        """True when no color was authored (style defaults apply)."""
        return self.mode == ColorMode.UNSET


# ─── Resolution ──────────────────────────────────────────────────

def resolve_color(setting: ColorSetting, fallback: HslColor) -> HslColor:
    """Explicit → itself; theme and unset → fallback."""
    if setting.is_explicit:
        return setting.value
    return fallback


def resolve_icon_color(setting: ColorSetting, theme_primary: HslColor) -> ResolvedColor:
    return ResolvedColor(resolve_color(setting, theme_primary), setting.mode)


def resolve_frame_color(
    setting: ColorSetting, frame: FrameStyle, theme_primary: HslColor,
) -> ResolvedColor:
    """3-way: explicit → custom, theme → theme primary, unset → style default tint."""
    if setting.mode == ColorMode.UNSET:
        return ResolvedColor(frame_default_color(frame), ColorMode.UNSET)
    return ResolvedColor(resolve_color(setting, theme_primary), setting.mode)


def resolve_glow_color(
    glow_setting: ColorSetting,
    frame_setting: ColorSetting,
    frame: FrameStyle,
    theme_primary: HslColor,
) -> ResolvedColor:
    """Glow follows its own setting, else the frame's resolved color, else theme primary."""
    if glow_setting.is_set:
        return ResolvedColor(resolve_color(glow_setting, theme_primary), glow_setting.mode)
    if frame != FrameStyle.NONE:
        frame_color = resolve_frame_color(frame_setting, frame, theme_primary)
        return ResolvedColor(frame_color.color, ColorMode.UNSET)
    if frame_setting.is_explicit:
        return ResolvedColor(frame_setting.value, ColorMode.UNSET)
    return ResolvedColor(theme_primary, ColorMode.UNSET)


# ─── Authoring-mode labels (editing UIs) ─────────────────────────

def icon_color_mode(setting: ColorSetting) -> str:
    """Icon colors offer "theme" or "custom": unset and theme behave identically."""
    return "custom" if setting.is_explicit else "theme"


def frame_color_mode(setting: ColorSetting) -> str:
    return {
        ColorMode.UNSET: "default",
        ColorMode.THEME: "theme",
        ColorMode.EXPLICIT: "custom",
    }[setting.mode]


def glow_color_mode(setting: ColorSetting) -> str:
    return {
        ColorMode.UNSET: "auto",
        ColorMode.THEME: "theme",
        ColorMode.EXPLICIT: "custom",
    }[setting.mode]
