"""
Middleware de logging pour FastAPI
"""
import logging
import time
from typing import Callable, Iterable, Optional
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_PATHS = ("/health", "/favicon.ico")


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logge chaque requête avec son statut et sa durée,
    et ajoute l'en-tête X-Process-Time
    """

    def __init__(self, app: ASGIApp, excluded_paths: Optional[Iterable[str]] = None):
        super().__init__(app)
        self.excluded_paths = tuple(excluded_paths or DEFAULT_EXCLUDED_PATHS)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        should_log = not any(path.startswith(excluded) for excluded in self.excluded_paths)

        if should_log:
            client_ip = request.client.host if request.client else "unknown"
            logger.info("→ %s %s from %s", request.method, path, client_ip)

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "❌ Error processing %s %s: %s",
                request.method,
                path,
                str(e),
                exc_info=True
            )
            raise

        process_time = time.perf_counter() - start_time

        if should_log:
            log = logger.error if response.status_code >= 400 else logger.info
            log(
                "← %s %s → %d (%.3fs)",
                request.method,
                path,
                response.status_code,
                process_time
            )

        response.headers["X-Process-Time"] = f"{process_time:.3f}"

        return response
