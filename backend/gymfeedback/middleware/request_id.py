
import uuid
import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

HEADER = "X-Request-ID"

class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag every log line of a request with its id, echoing the caller's if given."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
        response.headers[HEADER] = request_id
        return response
