"""Logging filters for ECS-compatible structured logs.

Referenced from ``logging.json`` / ``logging-dev.json`` and installed by
``site_risk.main.configure_logging``.
"""

import logging

from site_risk.common.tracing import ctx_request, ctx_response, ctx_trace_id


class ExtraFieldsFilter(logging.Filter):
    """Adds trace and HTTP fields to log records.

    - trace.id: CDP request trace id
    - url.full: Full request URL
    - http.request.method / http.response.status_code
    """

    def filter(self, record: logging.LogRecord) -> bool:
        trace_id = ctx_trace_id.get()
        req = ctx_request.get()
        resp = ctx_response.get()

        record.trace = {"id": trace_id} if trace_id else {}

        http = {}
        if req:
            record.url = {"full": req.get("url")}
            http["request"] = {"method": req.get("method")}
        if resp:
            http["response"] = resp
        record.http = http

        return True


class EndpointFilter(logging.Filter):
    """Drops access-log records mentioning ``path`` (e.g. ``/health``)."""

    def __init__(self, path: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._path = path

    def filter(self, record: logging.LogRecord) -> bool:
        return self._path not in record.getMessage()
