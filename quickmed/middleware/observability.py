import uuid
from contextvars import ContextVar
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

CORRELATION_HEADER = "X-Correlation-ID"
NO_CORRELATION = "N/A"

# Copied into asyncio.to_thread workers, so gateway calls see the request's id
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default=NO_CORRELATION)

class TracingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        request.state.correlation_id = correlation_id
        token = _correlation_id.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            _correlation_id.reset(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response

def get_correlation_id(request: Request) -> str:
    return getattr(request.state, "correlation_id", NO_CORRELATION)

def current_correlation_id() -> str:
    """Correlation id of the request being served, or N/A outside a request."""
    return _correlation_id.get()
