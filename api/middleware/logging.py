import logging
from datetime import datetime, timezone
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("api.access")


def common_log_line(request: Request, status: int, size: Optional[str], now: datetime) -> str:
    """One access line in Apache common log format."""
    remote = request.client.host if request.client else "-"
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    timestamp = now.strftime("%d/%b/%Y:%H:%M:%S %z")
    return f'{remote} - - [{timestamp}] "{request.method} {path} HTTP/{http_version}" {status} {size or "-"}'


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            response = await call_next(request)
        except Exception:
            # the catch-all handler outside this middleware answers with a 500
            logger.error("%s", common_log_line(request, 500, None, datetime.now(timezone.utc)))
            raise

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        line = common_log_line(request, status, response.headers.get("content-length"), datetime.now(timezone.utc))
        logger.log(log_level, "%s", line)
        return response
