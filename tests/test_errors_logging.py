import json
import logging
from unittest.mock import patch

from app.logging import JsonFormatter, MaskingFilter, RequestIdFilter
from app.services.store import Store, StoreError
from app.version import API_PREFIX


def test_ok_helper_endpoint(client):
    resp = client.get('/__ok')
    assert resp.status_code == 200
    assert resp.get_json() == {
        'status': 'success',
        'message': 'success',
        'data': {'ping': 'pong'}
    }


def test_404_json_envelope(client):
    resp = client.get('/no/such/route')
    assert resp.status_code == 404
    data = resp.get_json()
    assert data['status'] == 'error'
    assert data['code'] == 404
    assert isinstance(data.get('message'), str)


def test_unexpected_500_json_envelope(client):
    resp = client.get('/__boom')
    assert resp.status_code == 500
    data = resp.get_json()
    assert data['status'] == 'error'
    assert data['code'] == 500
    assert 'boom' not in data['message']


def test_store_error_becomes_502(client, vendor):
    _, headers = vendor
    with patch.object(Store, "list_orders", side_effect=StoreError("connection reset")):
        resp = client.get(f"{API_PREFIX}/vendor/orders", headers=headers)
    assert resp.status_code == 502
    data = resp.get_json()
    assert data['status'] == 'error'
    assert 'connection reset' not in data['message']


def test_request_id_header_and_propagation(client):
    resp = client.get("/__ok", headers={"X-Request-ID": "my-fixed-id-123"})
    assert resp.headers.get("X-Request-ID") == "my-fixed-id-123"
    resp = client.get("/__ok")
    assert len(resp.headers.get("X-Request-ID")) == 32


def test_security_headers(client):
    resp = client.get("/__ok")
    assert resp.headers.get("X-Content-Type-Options") == "nosniff"
    assert resp.headers.get("X-Frame-Options") == "DENY"
    assert resp.headers.get("Referrer-Policy") == "no-referrer"


def test_logs_include_request_id_attribute(client, caplog):
    caplog.set_level("INFO")
    caplog.handler.addFilter(RequestIdFilter())
    resp = client.get("/__log", headers={"X-Request-ID": "rid-abc"})
    assert resp.status_code == 200
    assert any(getattr(r, "request_id", "") == "rid-abc" for r in caplog.records)


def test_sensitive_fields_masked_in_info(app, caplog):
    caplog.set_level("INFO")
    caplog.handler.addFilter(MaskingFilter())
    logging.getLogger("mask_test").info({"email": "user@example.com", "password": "hunter22", "city": "Pune"})
    record = next(r for r in caplog.records if r.name == "mask_test")
    assert record.msg["email"] == "[REDACTED]"
    assert record.msg["password"] == "[REDACTED]"
    assert record.msg["city"] == "Pune"


def test_sensitive_fields_visible_in_debug_outside_production(app, caplog, monkeypatch):
    monkeypatch.setenv("APP_ENV", "development")
    caplog.set_level("DEBUG")
    caplog.handler.addFilter(MaskingFilter())
    logging.getLogger("mask_test_debug").debug({"password": "secret"})
    record = next(r for r in caplog.records if r.name == "mask_test_debug")
    assert record.msg["password"] == "secret"


def test_json_formatter_output():
    record = logging.LogRecord("orders", logging.ERROR, __file__, 1, "order %s failed", ("ORD-1",), None)
    record.request_id = "rid-1"
    out = json.loads(JsonFormatter().format(record))
    assert out["message"] == "order ORD-1 failed"
    assert out["level"] == "ERROR"
    assert out["request_id"] == "rid-1"
    assert out["trace_id"] == "n/a"


def test_traceparent_header(client):
    resp = client.get("/__ok")
    assert resp.status_code == 200
    assert "traceparent" in resp.headers
