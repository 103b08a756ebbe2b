"""Request tracing for the assessment API.

Inbound requests on the CDP platform carry an ``x-cdp-request-id`` header.
The middleware stores it (and basic request/response details) in context
variables so log records emitted while assessing a site can be correlated.
"""

import contextvars
from logging import getLogger

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = getLogger(__name__)

CDP_TRACE_HEADER = "x-cdp-request-id"

ctx_trace_id: contextvars.ContextVar[str] = contextvars.ContextVar("trace_id", default="")
ctx_request: contextvars.ContextVar[dict | None] = contextvars.ContextVar("request", default=None)
ctx_response: contextvars.ContextVar[dict | None] = contextvars.ContextVar(
    "response", default=None
)


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Propagate the CDP trace id into the request context.

    The trace id is echoed back on the response so API clients can quote it
    when reporting a problem with an assessment.
    """

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get(CDP_TRACE_HEADER)
        if trace_id:
            ctx_trace_id.set(trace_id)

        ctx_request.set({"url": str(request.url), "method": request.method})

        response = await call_next(request)
        ctx_response.set({"status_code": response.status_code})
        if trace_id:
            response.headers[CDP_TRACE_HEADER] = trace_id
        return response
