"""
MiniCRM Backend — Access Log Middleware
=========================================

What:  Tags each request with a correlation id and writes one access line
       naming the route that served it.
How:   The id comes from the client's X-Request-ID header or a fresh short
       uuid; it is stored in `request_id_var` for the error handlers and
       echoed on the response. After the handler runs, the matched route
       template (e.g. `/api/companies/{company_id:int}`) is read back from
       the ASGI scope, so access lines group by endpoint rather than by id.

Requests that match no route (404 fall-through, OPTIONS preflights) are
logged with their raw path and `route=None`.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("minicrm.access")

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def route_template(request: Request) -> Optional[str]:
    """Path template of the route the router matched, if any."""
    route = request.scope.get("route")
    return getattr(route, "path", None)


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class AccessLogMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        request_id_var.set(rid)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "[%s] %s %s failed after %.1fms",
                rid, request.method, request.url.path,
                (time.perf_counter() - started) * 1000,
            )
            raise

        template = route_template(request)
        status = response.status_code
        logger.log(
            _level_for(status),
            "[%s] %s %s -> %d (%.1fms)",
            rid,
            request.method,
            template or request.url.path,
            status,
            (time.perf_counter() - started) * 1000,
            extra={"request_id": rid, "route": template, "status": status},
        )

        response.headers[REQUEST_ID_HEADER] = rid
        return response
