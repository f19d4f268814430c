# src/ecommerce/tests/test_logging/test_formatters.py
import json
import logging
import sys
import uuid

from ecommerce.core.logging.formatters import ColorFormatter, JsonFormatter


def make_record():
    return logging.LogRecord("ecommerce", logging.INFO, __file__, 10, "hello %s", ("tester",), None)


def test_json_formatter_basic_fields():
    rec = make_record()
    rec.procedure = "sp_Brands"
    rec.request_id = "req-1"
    out = JsonFormatter(env="testing", service="svc").format(rec)
    data = json.loads(out)

    assert data["message"] == "hello tester"
    assert data["level"] == "INFO"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert data["request_id"] == "req-1"
    assert data["procedure"] == "sp_Brands"
    assert "timestamp" in data
    assert "version" in data


def test_json_formatter_non_serializable_extra():
    rec = make_record()
    rec.id = uuid.UUID("7d3c1a9e-4a3f-4c55-9a4e-2a9d1f6b8c01")
    data = json.loads(JsonFormatter(env="dev").format(rec))
    assert data["id"] == "7d3c1a9e-4a3f-4c55-9a4e-2a9d1f6b8c01"


def test_json_formatter_includes_traceback():
    try:
        raise ValueError("boom")
    except ValueError:
        rec = logging.LogRecord("ecommerce", logging.ERROR, __file__, 10, "failed", (), sys.exc_info())
    data = json.loads(JsonFormatter(env="dev").format(rec))
    assert "ValueError: boom" in data["exc_info"]


def test_color_formatter_line():
    rec = make_record()
    rec.request_id = "req-9"
    line = ColorFormatter().format(rec)
    assert "hello tester" in line
    assert "req-9" in line
    assert "INFO" in line
