"""Error Hierarchy — typed, categorized exceptions for the shell's failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Pure rendering functions never raise these: malformed colors, unknown icon ids and
      out-of-range crops degrade to visible defaults instead
    - Request errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with LogoEngineError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EXTERNAL_RESOURCE = "external_resource"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source_type: str | None = None
    path: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class LogoEngineError(Exception):
    """Base exception for all logo engine errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "source_type": self.context.source_type,
                    "path": self.context.path,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class ConfigValidationError(LogoEngineError):
    """Configuration violates an invariant the caller asked to enforce."""
    def __init__(
        self, issues: list[dict], context: ErrorContext | None = None,
    ):
        fields = ", ".join(sorted({i["field"] for i in issues})) or "config"
        super().__init__(
            f"Invalid logo configuration: {fields}",
            "CONFIG_INVALID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.issues = issues

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["issues"] = self.issues
        return response


class ResourceNotFoundError(LogoEngineError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class HistoryEntryNotFoundError(ResourceNotFoundError):
    """Revert requested an index outside the history list."""
    def __init__(self, index: int, length: int, context: ErrorContext | None = None):
        super().__init__("History entry", str(index), context)
        self.code = "HISTORY_ENTRY_NOT_FOUND"
        self.message = f"History entry {index} not found (history holds {length})"
        self.index = index


# ─── Infrastructure Errors (500-level) ──────────────────────────

class IconLibraryError(LogoEngineError):
    """Icon library file missing or unreadable."""
    def __init__(self, message: str, location: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"location": location}
        super().__init__(
            f"Icon library unavailable: {message}",
            "ICON_LIBRARY_ERROR", ErrorCategory.EXTERNAL_RESOURCE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.location = location
