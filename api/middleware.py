"""Request-scoped middleware for API requests."""

import logging
import re
import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from api.base import error_response, ErrorCodes
from utils.request_context import request_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Accept caller-supplied IDs only if they look like IDs
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Assigns a request ID to every request.

    Reuses a well-formed incoming X-Request-ID so a front-end can correlate
    its own logs; otherwise generates one. The ID is echoed in the response
    header and in the response envelope's meta, including on 500 responses
    for exceptions no handler claimed.
    """

    async def dispatch(self, request: Request, call_next):
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        request_id = incoming if _REQUEST_ID_PATTERN.match(incoming) else str(uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        with request_context(request_id):
            try:
                response = await call_next(request)
            except Exception:
                logger.exception(f"Unhandled exception [{request_id}]")
                response = JSONResponse(
                    status_code=500,
                    content=error_response(
                        ErrorCodes.INTERNAL_ERROR, "An internal error occurred"
                    ).model_dump(mode="json"),
                )
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {elapsed_ms:.1f}ms [{request_id}]"
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
