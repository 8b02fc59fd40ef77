import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One log line per request with status, latency and, when a catalog error
    was translated, its error code (set on ``request.state`` by the handler).
    """

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        client = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error on {route} from {client}")
            raise

        elapsed = time.perf_counter() - start_time
        error_code = getattr(request.state, "error_code", None)

        message = f"{route} -> {response.status_code} in {elapsed:.3f}s client={client}"
        if error_code:
            message += f" error_code={error_code}"

        if response.status_code >= 500 or elapsed > SLOW_REQUEST_SECONDS:
            logger.warning(message)
        else:
            logger.info(message)

        response.headers["X-Process-Time"] = f"{elapsed:.6f}"
        return response
