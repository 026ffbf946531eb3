"""Audit logging middleware — records every state-changing request."""


import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app.audit")

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

class AuditMiddleware(BaseHTTPMiddleware):
    """Logs all write operations, successful or rejected, with their duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if request.method in _WRITE_METHODS:
            self._record(request, response.status_code, duration_ms)

        return response

    @staticmethod
    def _record(request: Request, status_code: int, duration_ms: int) -> None:
        # Infer entity from path  e.g. /api/v1/jobs/12 -> ("job", "12")
        parts = [p for p in request.url.path.strip("/").split("/") if p]
        if parts and parts[-1].isdigit() and len(parts) >= 2:
            entity_type, entity_id = parts[-2], parts[-1]
        else:
            entity_type, entity_id = (parts[-1] if parts else "unknown"), None

        level = logging.WARNING if status_code >= 400 else logging.INFO
        logger.log(
            level,
            "%s %s -> %d (%dms) entity=%s id=%s client=%s",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
            entity_type.rstrip("s"),  # simple singularize
            entity_id,
            request.client.host if request.client else None,
        )
