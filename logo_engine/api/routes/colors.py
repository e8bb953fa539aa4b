"""Color Conversion — hex ↔ HSL triple for color pickers.

Invariants:
    - Conversions never fail: malformed hex → "0 0% 50%", malformed HSL → "#888888"
"""

from fastapi import APIRouter, Query

from logo_engine.core.colors import hex_to_hsl, hsl_to_hex
from logo_engine.schemas.logo import ColorConversionResponse

router = APIRouter(prefix="/api/v1/colors", tags=["colors"])


@router.get("/hex-to-hsl", response_model=ColorConversionResponse)
async def convert_hex_to_hsl(value: str = Query(..., max_length=32)):
    return ColorConversionResponse(input=value, value=hex_to_hsl(value))


@router.get("/hsl-to-hex", response_model=ColorConversionResponse)
async def convert_hsl_to_hex(value: str = Query(..., max_length=64)):
    return ColorConversionResponse(input=value, value=hsl_to_hex(value))
