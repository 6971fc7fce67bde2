"""
Request logging and error handlers for the chat API
"""

import logging
import time
from uuid import uuid4

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from exceptions import ChatbotError, MissingMessageError

logger = logging.getLogger(__name__)

SERVER_ERROR = {"error": "Server error"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info("Request started %s %s [%s]", request.method, request.url.path, request_id)
        start_time = time.time()

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            # Traceback is logged once, by general_exception_handler
            logger.error(
                "Request failed %s %s in %.4fs [%s]: %s",
                request.method,
                request.url.path,
                time.time() - start_time,
                request_id,
                exc,
            )
            raise

        process_time = time.time() - start_time

        logger.info(
            "Request completed %s %s -> %d in %.4fs [%s]",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
            request_id,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed chat bodies are reported the same way as a missing message."""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=MissingMessageError().to_dict(),
    )


async def chatbot_exception_handler(request: Request, exc: ChatbotError):
    if exc.http_status >= 500:
        logger.error(f"Chat failed on {request.url}: {exc}")
        return JSONResponse(status_code=exc.http_status, content=SERVER_ERROR)

    logger.warning(f"Rejected request on {request.url}: {exc}")
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def general_exception_handler(request: Request, exc: Exception):
    """
    Handle unexpected errors, keeping details out of the response.

    Starlette re-raises the exception after this handler runs, so the server
    may print the traceback a second time.
    """
    logger.exception(f"Unexpected error on {request.url}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=SERVER_ERROR,
    )
