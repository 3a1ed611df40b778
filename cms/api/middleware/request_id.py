"""
Request correlation for logs.

Accepts or generates an X-Request-ID, echoes it on the response, and exposes
it together with the signed-in user to every log record written while the
request runs.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from cms.kernel.session.access_guard import SessionContext
from cms.logging_config import get_logger, request_id_var, user_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

SLOW_REQUEST_MS = 1000


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Must sit inside SessionMiddleware so the session is already decoded."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        user = None
        if "session" in request.scope:
            user = SessionContext(request.session).identity

        id_token = request_id_var.set(request_id)
        user_token = user_var.set(user)
        try:
            start = time.perf_counter()
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - start) * 1000, 1)

            response.headers[REQUEST_ID_HEADER] = request_id

            fields = {
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            }
            if duration_ms > SLOW_REQUEST_MS:
                logger.warning("Slow request", extra=fields)
            else:
                logger.debug("Request handled", extra=fields)

            return response
        finally:
            user_var.reset(user_token)
            request_id_var.reset(id_token)
