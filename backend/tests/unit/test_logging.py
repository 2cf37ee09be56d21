"""Tests for JSON log formatting and request correlation."""

from __future__ import annotations

import json
import logging

from seller_service.core.logger import JSONFormatter, ensure_request_id


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("seller_service.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_json_with_known_extras():
    payload = json.loads(JSONFormatter().format(_record(seller_id="s-1", count=2, ignored="x")))

    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["seller_id"] == "s-1"
    assert payload["count"] == 2
    assert "ignored" not in payload


def test_request_id_taken_from_header(app):
    # fresh app context so `g` is not shared with earlier requests
    with app.app_context(), app.test_request_context(headers={"X-Correlation-ID": "abc-123"}):
        assert ensure_request_id() == "abc-123"
        assert ensure_request_id() == "abc-123"


def test_request_id_generated_outside_requests():
    assert ensure_request_id() != ensure_request_id()
