"""
Employee API: Access Middleware
==================================

What:  Per-request correlation ID plus one access-log line describing the
       employee operation that was served.
How:   Takes the client's X-Request-ID (or a short UUID), publishes it through
       a ContextVar for the exception handlers, then times the downstream call
       and logs which employee operation ran, on which id, with what status.
Who:   Applied to every request by create_app(); knows the employees prefix
       so it can name the operation.

Operation names:
    GET    {prefix}/      → list
    POST   {prefix}/      → create
    GET    {prefix}/{id}  → get
    PUT    {prefix}/{id}  → update
    DELETE {prefix}/{id}  → delete
    anything else         → logged without an operation, /health not at all

Privacy:
    Request bodies are never logged (they carry names and email addresses).
"""

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger("employee_api.access")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_COLLECTION_OPERATIONS = {"GET": "list", "POST": "create"}
_ITEM_OPERATIONS = {"GET": "get", "PUT": "update", "DELETE": "delete"}


def describe_employee_request(
    method: str, path: str, prefix: str
) -> Tuple[Optional[str], Optional[str]]:
    """
    Name the employee operation a request targets.

    Returns:
        (operation, employee_id): either may be None. The id is the raw path
        segment; the route decides whether it is a valid integer.
    """
    if path != prefix and not path.startswith(prefix + "/"):
        return None, None

    remainder = path[len(prefix):].strip("/")
    if not remainder:
        return _COLLECTION_OPERATIONS.get(method), None
    if "/" in remainder:
        return None, None
    return _ITEM_OPERATIONS.get(method), remainder


class AccessMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Use the client-sent X-Request-ID header if present, otherwise the
           first 8 characters of a UUID4
        2. Store it in request_id_var and echo it in the response header
        3. Log method, path, operation, employee id, status and duration at
           ERROR for 5xx, WARNING for 4xx, INFO otherwise
    """

    def __init__(self, app: ASGIApp, employees_prefix: str = "/api/employees"):
        super().__init__(app)
        self.employees_prefix = employees_prefix

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        request_id_var.set(rid)

        method = request.method
        path = request.url.path
        start_time = time.perf_counter()

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        if path != "/health":
            duration_ms = (time.perf_counter() - start_time) * 1000
            operation, employee_id = describe_employee_request(
                method, path, self.employees_prefix
            )
            self._log(rid, method, path, operation, employee_id, response.status_code, duration_ms)

        return response

    @staticmethod
    def _log(
        rid: str,
        method: str,
        path: str,
        operation: Optional[str],
        employee_id: Optional[str],
        status: int,
        duration_ms: float,
    ) -> None:
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        target = ""
        if operation:
            target = f" employee {operation}" + (f" id={employee_id}" if employee_id else "")

        logger.log(
            log_level,
            "[%s] %s %s%s -> %d (%.1fms)",
            rid,
            method,
            path,
            target,
            status,
            duration_ms,
            extra={
                "request_id": rid,
                "operation": operation,
                "employee_id": employee_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
