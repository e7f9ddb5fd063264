"""API key authentication middleware.

Requires ``Authorization: ApiKey <key>`` on protected paths (see
``apikey_auth.services.auth_config``).
"""

from __future__ import annotations

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from apikey_auth.services.auth import (
    AuthError,
    auth_error_headers,
    auth_error_status,
    get_api_key,
)
from apikey_auth.services.auth_config import auth_enabled, is_protected_path

logger = logging.getLogger(__name__)


class APIKeyAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        if not auth_enabled() or not is_protected_path(path):
            return await call_next(request)

        # CORS preflight never carries credentials
        if request.method == "OPTIONS":
            return await call_next(request)

        try:
            api_key = get_api_key(request.headers)
        except AuthError as exc:
            logger.warning("Rejected %s %s: %s", request.method, path, exc.kind.value)
            return JSONResponse(
                status_code=auth_error_status(exc),
                content={"detail": str(exc), "error": exc.kind.value},
                headers=auth_error_headers(exc),
            )

        request.state.api_key = api_key
        return await call_next(request)
