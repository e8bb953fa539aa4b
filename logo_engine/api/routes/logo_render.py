"""Logo Rendering — draw instructions and validation for a posted configuration.

Invariants:
    - Rendering never fails on configuration content: missing sources render the
      placeholder, malformed colors render neutral gray
    - themePrimary defaults to the configured theme primary color
    - A theme-icon logo follows activePresetId when one is given
    - strict=true rejects invariant errors with CONFIG_INVALID (400) instead of rendering

Design Decisions:
    - Registry injected via Depends(get_icon_registry): tests override it without patching
"""

import logging

from fastapi import APIRouter, Depends

from logo_engine.config import Settings, get_settings
from logo_engine.core.colors import parse_hsl
from logo_engine.core.registry_protocols import IconRegistry
from logo_engine.core.renderer import (
    effective_config_for_theme, instructions_to_dict, render,
)
from logo_engine.core.validate_config import ensure_valid, is_valid, validate_config
from logo_engine.infrastructure.icon_registry import get_icon_registry
from logo_engine.schemas.logo import ConfigRequest, RenderRequest, ValidateResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/logo", tags=["logo"])


@router.post("/render")
async def render_logo(
    body: RenderRequest,
    settings: Settings = Depends(get_settings),
    registry: IconRegistry = Depends(get_icon_registry),
):
    """Resolve a configuration into declarative draw instructions."""
    config = body.config.to_domain()
    if body.strict:
        ensure_valid(config)
    config = effective_config_for_theme(config, body.active_preset_id)
    theme_primary = parse_hsl(body.theme_primary or settings.theme_primary)
    instructions = render(config, body.display_size, theme_primary, registry)
    logger.info(
        "Rendered logo",
        extra={
            "source_type": config.source_type.value,
            "frame": config.frame.value,
            "glow": config.glow.value,
            "size": instructions.size.value,
        },
    )
    return instructions_to_dict(instructions)


@router.post("/validate", response_model=ValidateResponse)
async def validate_logo(body: ConfigRequest):
    """Report invariant issues; warnings do not make a configuration invalid."""
    config = body.config.to_domain()
    return ValidateResponse(
        valid=is_valid(config),
        issues=validate_config(config),
    )
