"""Structured Logging — verifies JSON formatting of logo extras."""

import json
import logging

from logo_engine.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("logo_engine.test", logging.INFO, __file__, 1, "Rendered logo", (), None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_surfaces_extras():
    line = JSONFormatter().format(_record(source_type="library-icon", frame="simple", size="lg"))
    data = json.loads(line)
    assert data["message"] == "Rendered logo"
    assert data["source_type"] == "library-icon"
    assert data["size"] == "lg"
    assert "glow" not in data


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    named = [h for h in logging.root.handlers if h.get_name() == "logo_engine"]
    assert len(named) == 1
    assert isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.INFO
