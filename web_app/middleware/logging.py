"""Request logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable, Optional


class LoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request: method, path, status, duration and client.

    5xx responses are logged at WARNING. A request whose handler raised is
    logged at ERROR before the exception propagates.
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("shortlink.web")

    def _log(self, level: int, request: Request, status_code: int, started: float):
        client_ip = request.client.host if request.client else "unknown"
        duration_ms = (time.perf_counter() - started) * 1000
        self.logger.log(
            level,
            f"{request.method} {request.url.path} -> {status_code} "
            f"in {duration_ms:.2f}ms from {client_ip}",
            extra={"status_code": status_code, "duration_ms": round(duration_ms, 2)},
        )

    async def dispatch(self, request: Request, call_next: Callable):
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            # The server error handler renders the 500 further out
            self._log(logging.ERROR, request, 500, started)
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        self._log(level, request, response.status_code, started)

        return response
