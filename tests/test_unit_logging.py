import json
import logging

from startup911.platform.logging import APP_LOGGER_NAME, JsonFormatter
from startup911.platform.request_context import (
    get_request_id,
    normalize_request_id,
    reset_request_id,
    set_request_id,
)


def _record(**extra):
    record = logging.LogRecord("startup911.matching", logging.INFO, __file__, 1, "kind=%s", ("grant",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_extra_fields_are_included(self):
        payload = json.loads(JsonFormatter().format(_record(kind="grant", status=200, duration_ms=1.5)))
        assert payload["logger"] == "startup911.matching"
        assert payload["message"] == "kind=grant"
        assert payload["kind"] == "grant"
        assert payload["status"] == 200
        assert payload["duration_ms"] == 1.5

    def test_request_id_from_context(self):
        token = set_request_id("req-abc")
        try:
            payload = json.loads(JsonFormatter().format(_record()))
        finally:
            reset_request_id(token)
        assert payload["request_id"] == "req-abc"
        assert get_request_id() is None


class TestNormalizeRequestId:
    def test_keeps_printable_id(self):
        assert normalize_request_id(" req-123 ") == "req-123"

    def test_replaces_unusable_id(self):
        for raw in (None, "", "bad id with spaces", "x" * 65, "<script>"):
            replaced = normalize_request_id(raw)
            assert replaced != raw
            assert len(replaced) == 36


def test_app_logger_name():
    assert APP_LOGGER_NAME == "startup911"
