"""Configuration Validation — reports invariant violations of a LogoConfiguration.

Invariants:
    - validate_config is PURE: returns issue descriptors, never raises, never mutates
    - "error" issues break a configuration invariant; "warning" issues are tolerated
      (render still succeeds) but should not be persisted

Design Decisions:
    - Issues as dicts with error_code, same shape the API returns (ADR: no translation layer)
    - Validation separated from construction so a half-edited value can still be previewed
    - ensure_valid is the one raising entry point, for callers that opt into strict handling
"""

from logo_engine.core.crop import MAX_POSITION, MAX_ZOOM, MIN_POSITION, MIN_ZOOM
from logo_engine.core.domain_types import MAX_HISTORY_ENTRIES, SourceType
from logo_engine.core.errors import ConfigValidationError, ErrorContext
from logo_engine.core.logo_config import LogoConfiguration


def _issue(field: str, code: str, message: str, severity: str = "error") -> dict:
    return {
        "field": field,
        "error_code": code,
        "severity": severity,
        "message": message,
    }


def _check_source(config: LogoConfiguration) -> list[dict]:
    issues = []
    if config.source_type != SourceType.NONE and not config.path:
        issues.append(_issue(
            "path", "PATH_REQUIRED",
            f"{config.source_type.value} requires a path",
        ))
    if config.source_type == SourceType.NONE and config.path:
        issues.append(_issue(
            "path", "PATH_WITHOUT_SOURCE",
            "path must be empty when type is none",
        ))
    if config.artist and config.source_type != SourceType.LIBRARY_ICON:
        issues.append(_issue(
            "artist", "ARTIST_IGNORED",
            "artist is only meaningful for library icons", severity="warning",
        ))
    return issues


def _check_crop(config: LogoConfiguration) -> list[dict]:
    crop = config.crop
    if crop is None:
        return []
    issues = []
    if not MIN_ZOOM <= crop.zoom <= MAX_ZOOM:
        issues.append(_issue(
            "cropSettings.zoom", "ZOOM_OUT_OF_RANGE",
            f"zoom {crop.zoom} outside [{MIN_ZOOM:g}, {MAX_ZOOM:g}]",
        ))
    for axis, value in (("x", crop.x), ("y", crop.y)):
        if not MIN_POSITION <= value <= MAX_POSITION:
            issues.append(_issue(
                f"cropSettings.{axis}", "POSITION_OUT_OF_RANGE",
                f"{axis} {value} outside [{MIN_POSITION:g}, {MAX_POSITION:g}]",
            ))
    return issues


def _check_history(config: LogoConfiguration) -> list[dict]:
    issues = []
    if len(config.history) > MAX_HISTORY_ENTRIES:
        issues.append(_issue(
            "history", "HISTORY_TOO_LONG",
            f"history holds {len(config.history)} entries (max {MAX_HISTORY_ENTRIES})",
        ))
    for index, (newer, older) in enumerate(zip(config.history, config.history[1:])):
        if newer.dedup_key == older.dedup_key:
            issues.append(_issue(
                f"history.{index + 1}", "HISTORY_DUPLICATE",
                "consecutive history entries are identical", severity="warning",
            ))
    return issues


def validate_config(config: LogoConfiguration) -> list[dict]:
    """All invariant issues, in field order. Empty list means valid."""
    return _check_source(config) + _check_crop(config) + _check_history(config)


def is_valid(config: LogoConfiguration) -> bool:
    return not any(i["severity"] == "error" for i in validate_config(config))


def ensure_valid(config: LogoConfiguration) -> LogoConfiguration:
    """Return `config` unchanged, or raise ConfigValidationError with its error issues."""
    errors = [i for i in validate_config(config) if i["severity"] == "error"]
    if errors:
        raise ConfigValidationError(
            errors,
            ErrorContext(source_type=config.source_type.value, path=config.path),
        )
    return config
