"""Unit tests for logging filters and trace context."""

import logging

import pytest

from site_risk.common.log_utils import EndpointFilter, ExtraFieldsFilter
from site_risk.common.tracing import ctx_request, ctx_response, ctx_trace_id


def make_record(message="message"):
    return logging.LogRecord("site_risk", logging.INFO, __file__, 1, message, None, None)


@pytest.fixture
def trace_context():
    tokens = [
        (ctx_trace_id, ctx_trace_id.set("abc-123")),
        (ctx_request, ctx_request.set({"url": "http://test/assess", "method": "POST"})),
        (ctx_response, ctx_response.set({"status_code": 200})),
    ]
    yield
    for var, token in reversed(tokens):
        var.reset(token)


def test_extra_fields_without_context():
    """Test records always carry trace and http fields, empty outside a request."""
    record = make_record()

    assert ExtraFieldsFilter().filter(record)
    assert record.trace == {}
    assert record.http == {}
    assert not hasattr(record, "url")


def test_extra_fields_with_context(trace_context):
    """Test trace and HTTP details from the request context are attached."""
    record = make_record()

    ExtraFieldsFilter().filter(record)

    assert record.trace == {"id": "abc-123"}
    assert record.url == {"full": "http://test/assess"}
    assert record.http == {"request": {"method": "POST"}, "response": {"status_code": 200}}


def test_endpoint_filter():
    """Test access-log lines for the filtered path are dropped."""
    health_filter = EndpointFilter("/health")

    assert not health_filter.filter(make_record('"GET /health HTTP/1.1" 200'))
    assert health_filter.filter(make_record('"POST /assess HTTP/1.1" 200'))
