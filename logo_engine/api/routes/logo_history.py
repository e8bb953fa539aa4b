"""Logo History — push the current configuration, revert to a previous one.

Invariants:
    - push never fails unless strict=true: a configuration without a source comes back unchanged
    - strict push rejects invariant errors with CONFIG_INVALID (400)
    - revert keeps the posted history untouched
    - An out-of-range revert index is a 404 (HistoryEntryNotFoundError), not a 400
"""

import logging

from fastapi import APIRouter

from logo_engine.core.errors import ErrorContext, HistoryEntryNotFoundError
from logo_engine.core.history import push_history, revert_to_history
from logo_engine.core.validate_config import ensure_valid
from logo_engine.schemas.logo import (
    HistoryPushRequest, HistoryRevertRequest, LogoConfigPayload,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/logo/history", tags=["logo-history"])


@router.post("/push", response_model=LogoConfigPayload, response_model_exclude_none=True)
async def push(body: HistoryPushRequest):
    """Remember the posted configuration at the front of its own history."""
    config = body.config.to_domain()
    if body.strict:
        ensure_valid(config)
    history = push_history(config.history, config, body.saved_at)
    logger.info(
        "History pushed",
        extra={"source_type": config.source_type.value, "history_length": len(history)},
    )
    return LogoConfigPayload.from_domain(config.with_changes(history=history))


@router.post("/revert", response_model=LogoConfigPayload, response_model_exclude_none=True)
async def revert(body: HistoryRevertRequest):
    """Switch to history entry `index`; history itself is unchanged."""
    config = body.config.to_domain()
    if body.index >= len(config.history):
        raise HistoryEntryNotFoundError(
            body.index, len(config.history),
            ErrorContext(source_type=config.source_type.value),
        )
    reverted = revert_to_history(config.history[body.index], config.history)
    return LogoConfigPayload.from_domain(reverted)
