"""Error Hierarchy — verifies codes, statuses and response envelopes."""

from logo_engine.core.errors import (
    ConfigValidationError, ErrorCategory, HistoryEntryNotFoundError,
    IconLibraryError, LogoEngineError, ResourceNotFoundError,
)


def test_history_entry_not_found_is_a_404_resource_error():
    err = HistoryEntryNotFoundError(7, 2)
    assert isinstance(err, ResourceNotFoundError)
    assert err.http_status == 404
    body = err.to_response()["error"]
    assert body["code"] == "HISTORY_ENTRY_NOT_FOUND"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert "7" in body["message"]


def test_config_validation_error_carries_issues():
    issues = [{"field": "path", "error_code": "PATH_REQUIRED", "severity": "error", "message": "m"}]
    err = ConfigValidationError(issues)
    assert err.http_status == 400
    assert err.to_response()["error"]["issues"] == issues
    assert "path" in err.message


def test_icon_library_error_is_critical_503():
    err = IconLibraryError("malformed JSON", "/data/icons.json")
    assert isinstance(err, LogoEngineError)
    assert err.http_status == 503
    assert err.severity.value == "critical"
    assert err.context.debug_info == {"location": "/data/icons.json"}
    assert "debug_info" not in err.to_response()["error"]["context"]
