"""Crop Transform — focal point + zoom to CSS transform, and drag updates.

Invariants:
    - Inputs clamp, never reject; outputs always satisfy x,y ∈ [0,100], zoom ∈ [1,3]
    - Absent cropSettings means the identity transform / a drag from the centre
"""

from fastapi import APIRouter

from logo_engine.core.crop import apply_drag, compute_crop_transform
from logo_engine.schemas.logo import (
    CropDragRequest, CropSettingsPayload, CropTransformRequest, CropTransformResponse,
)

router = APIRouter(prefix="/api/v1/logo/crop", tags=["logo-crop"])


@router.post("/transform", response_model=CropTransformResponse)
async def crop_transform(body: CropTransformRequest):
    crop = body.crop_settings.to_domain() if body.crop_settings else None
    t = compute_crop_transform(crop)
    return CropTransformResponse(
        scale=t.scale,
        translate_x_percent=t.translate_x_percent,
        translate_y_percent=t.translate_y_percent,
        origin_x_percent=t.origin_x_percent,
        origin_y_percent=t.origin_y_percent,
        css_transform=t.css_transform,
        css_origin=t.css_origin,
    )


@router.post("/drag", response_model=CropSettingsPayload)
async def crop_drag(body: CropDragRequest):
    """Pan by a screen-pixel delta."""
    crop = body.crop_settings.to_domain() if body.crop_settings else None
    moved = apply_drag(crop, body.dx, body.dy)
    return CropSettingsPayload(x=moved.x, y=moved.y, zoom=moved.zoom)
