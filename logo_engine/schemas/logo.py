"""Logo Schemas — Pydantic models for the stored configuration shape and API requests.

Invariants:
    - Field aliases equal the stored key names ("type", "iconColor", "cropSettings", ...)
    - Crop values clamp at the boundary, never reject (same rule as the core)
    - Color strings are passed through untouched; malformed values degrade to neutral gray
      when converted to the domain, they never fail validation
    - history longer than 5 entries is truncated, not rejected

Design Decisions:
    - Domain conversion goes through core.logo_snapshot so the API and stored data can
      never disagree on a field (ADR: one serializer)
    - themePrimary IS validated strictly: it is caller-supplied render input, not stored data
    - `strict` on render/push turns invariant errors into a 400 instead of a best-effort result
"""

from pydantic import (
    AliasChoices, BaseModel, ConfigDict, Field, field_validator,
)

from logo_engine.core.colors import is_hsl_triple
from logo_engine.core.crop import CropSettings, clamp_position, clamp_zoom
from logo_engine.core.domain_types import (
    DisplaySize, FrameStyle, GlowIntensity, MAX_HISTORY_ENTRIES, Shape, SourceType,
)
from logo_engine.core.logo_config import LogoConfiguration
from logo_engine.core.logo_snapshot import config_from_snapshot, config_to_snapshot


class _StoredModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CropSettingsPayload(_StoredModel):
    """Focal point and zoom: clamped, never rejected."""
    x: float = 50.0
    y: float = 50.0
    zoom: float = 1.0

    @field_validator("x", "y")
    @classmethod
    def clamp_focal_point(cls, v: float) -> float:
        return clamp_position(v)

    @field_validator("zoom")
    @classmethod
    def clamp_zoom_factor(cls, v: float) -> float:
        return clamp_zoom(v)

    def to_domain(self) -> CropSettings:
        return CropSettings(x=self.x, y=self.y, zoom=self.zoom)


class _CosmeticFields(_StoredModel):
    type: SourceType = Field(
        SourceType.NONE, validation_alias=AliasChoices("type", "sourceType"),
    )
    path: str | None = None
    artist: str | None = None
    shape: Shape = Shape.NONE
    frame: FrameStyle = FrameStyle.NONE
    icon_color: str | None = Field(None, alias="iconColor")
    frame_color: str | None = Field(None, alias="frameColor")
    glow: GlowIntensity = GlowIntensity.NONE
    glow_color: str | None = Field(None, alias="glowColor")
    crop_settings: CropSettingsPayload | None = Field(None, alias="cropSettings")


class HistoryEntryPayload(_CosmeticFields):
    saved_at: str | None = Field(None, alias="savedAt")


class LogoConfigPayload(_CosmeticFields):
    """Stored / transmitted form of a LogoConfiguration."""
    history: list[HistoryEntryPayload] = []

    @field_validator("history")
    @classmethod
    def truncate_history(cls, v: list[HistoryEntryPayload]) -> list[HistoryEntryPayload]:
        return v[:MAX_HISTORY_ENTRIES]

    def to_snapshot(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_domain(self) -> LogoConfiguration:
        return config_from_snapshot(self.to_snapshot())

    @classmethod
    def from_domain(cls, config: LogoConfiguration) -> "LogoConfigPayload":
        return cls.model_validate(config_to_snapshot(config))


# ─── Requests ────────────────────────────────────────────────────

class RenderRequest(_StoredModel):
    config: LogoConfigPayload = LogoConfigPayload()
    size: str = "lg"
    theme_primary: str | None = Field(None, alias="themePrimary")
    active_preset_id: str | None = Field(None, alias="activePresetId")
    strict: bool = False

    @field_validator("theme_primary")
    @classmethod
    def check_theme_primary(cls, v: str | None) -> str | None:
        if v is not None and not is_hsl_triple(v):
            raise ValueError("themePrimary must be an 'h s% l%' triple")
        return v

    @property
    def display_size(self) -> DisplaySize:
        return DisplaySize.parse(self.size)


class ConfigRequest(_StoredModel):
    config: LogoConfigPayload


class HistoryPushRequest(ConfigRequest):
    saved_at: str | None = Field(None, alias="savedAt")
    strict: bool = False


class HistoryRevertRequest(ConfigRequest):
    index: int = Field(ge=0)


class CropTransformRequest(_StoredModel):
    crop_settings: CropSettingsPayload | None = Field(None, alias="cropSettings")


class CropDragRequest(CropTransformRequest):
    dx: float
    dy: float


# ─── Responses ───────────────────────────────────────────────────

class ConfigIssue(BaseModel):
    field: str
    error_code: str
    severity: str
    message: str


class ValidateResponse(BaseModel):
    valid: bool
    issues: list[ConfigIssue]


class CropTransformResponse(_StoredModel):
    scale: float
    translate_x_percent: float = Field(alias="translateXPercent")
    translate_y_percent: float = Field(alias="translateYPercent")
    origin_x_percent: float = Field(alias="originXPercent")
    origin_y_percent: float = Field(alias="originYPercent")
    css_transform: str = Field(alias="cssTransform")
    css_origin: str = Field(alias="cssOrigin")


class ColorConversionResponse(BaseModel):
    input: str
    value: str
