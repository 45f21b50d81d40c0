"""
MiniCRM Backend — CORS Headers Middleware
===========================================

What:  Adds the three cross-origin headers to every response and answers
       every OPTIONS request itself.
How:   OPTIONS short-circuits before routing with an empty 200 response,
       whatever the path. Any other request runs normally and the headers
       are set on its response.

Headers (defaults, see Settings.cors_headers):
    Access-Control-Allow-Origin:  *
    Access-Control-Allow-Methods: GET, POST, PUT, DELETE, OPTIONS
    Access-Control-Allow-Headers: Content-Type

Starlette's CORSMiddleware only answers preflights that carry an Origin and
Access-Control-Request-Method, and only adds Allow-Origin to simple
responses. This API sends the full set unconditionally.
"""

import logging
from typing import Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from minicrm.config import settings

logger = logging.getLogger(__name__)


class CORSHeadersMiddleware(BaseHTTPMiddleware):

    def __init__(self, app, headers: Optional[Dict[str, str]] = None, **kwargs):
        super().__init__(app, **kwargs)
        self.headers = headers if headers is not None else settings.cors_headers

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            logger.debug("Preflight for %s", request.url.path)
            return Response(status_code=200, headers=self.headers)

        response = await call_next(request)
        response.headers.update(self.headers)
        return response
