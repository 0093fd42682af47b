"""
Application middleware and error handlers
Handles CORS, request logging and domain error responses
"""

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from typing import Callable
import time
import uuid
import logging

from .config import Settings
from .exceptions import StorefrontException

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log all requests and responses"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        client = request.client.host if request.client else "unknown"

        logger.info(f"Request: {request.method} {request.url.path} from {client}")

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(f"Request failed: {str(e)} Time: {process_time:.3f}s")
            raise

        process_time = time.time() - start_time
        logger.info(
            f"Response: {response.status_code} "
            f"Time: {process_time:.3f}s "
            f"Request ID: {request_id}"
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.3f}"
        return response


async def storefront_exception_handler(request: Request, exc: StorefrontException) -> JSONResponse:
    """Render domain errors as {"error": {...}}"""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} on {request.url.path}: {exc.detail}")
    else:
        logger.warning(f"{exc.error_code} on {request.url.path}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.to_dict()},
        headers=exc.headers,
    )


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Install middleware and exception handlers"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_exception_handler(StorefrontException, storefront_exception_handler)
