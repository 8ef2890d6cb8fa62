"""
HTTP middleware chain.

Registration order in ``main.create_app`` makes the chain, outermost first:

    CORS -> RequestLoggingMiddleware -> ExceptionHandlingMiddleware -> routes

The exception translator turns every failure raised by a handler into an
enveloped response, and the request logger wraps it, so the status code it
records is always the translated one.
"""

import time
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from .errors import ErrorResponse, InvalidArgumentError, InvalidOperationError
from .logging_config import generate_request_id, get_logger, get_request_id, set_request_context

logger = get_logger(__name__)

# (method, path, status_code, elapsed_milliseconds)
RequestRecorder = Callable[[str, str, Optional[int], int], None]

STATUS_BY_ERROR = (
    (InvalidArgumentError, 400),
    (InvalidOperationError, 404),
)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(
        status_code=status_code,
        message=message,
        details=details,
        trace_id=get_request_id() or generate_request_id(),
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """Single error boundary: InvalidArgument -> 400, InvalidOperation -> 404, else 500."""

    def __init__(self, app, expose_details: bool = False):
        super().__init__(app)
        self.expose_details = expose_details

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self.translate(request, exc)

    def translate(self, request: Request, exc: Exception) -> JSONResponse:
        for error_type, status_code in STATUS_BY_ERROR:
            if isinstance(exc, error_type):
                logger.warning(
                    f"{error_type.__name__}: {exc}",
                    extra={'extra_fields': {
                        'method': request.method,
                        'path': request.url.path,
                        'status_code': status_code,
                    }}
                )
                return error_response(status_code, exc.message, exc.details)

        logger.error(
            f"Unhandled exception: {request.method} {request.url.path}",
            exc_info=exc,
            extra={'extra_fields': {'method': request.method, 'path': request.url.path}}
        )
        details = str(exc) if self.expose_details else None
        return error_response(500, UNEXPECTED_ERROR_MESSAGE, details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Undecodable bodies and path values are caller errors: 400 with a field summary."""
    problems = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return error_response(400, "Invalid argument provided", "; ".join(problems))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Times every request, emits one structured log line and records one
    RequestLog entry through ``recorder`` whatever the outcome.
    """

    def __init__(self, app, recorder: Optional[RequestRecorder] = None):
        super().__init__(app)
        self.recorder = recorder

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get('X-Request-ID') or generate_request_id()
        set_request_context(
            request_id=request_id,
            correlation_id=request.headers.get('X-Correlation-ID'),
        )
        request.state.request_id = request_id

        method = request.method
        path = request.url.path
        status_code: Optional[int] = None
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers['X-Request-ID'] = request_id
            return response
        except Exception:
            status_code = 500
            logger.error(f"Request failed: {method} {path}", exc_info=True)
            raise
        finally:
            elapsed_ms = int((time.perf_counter() - start_time) * 1000)
            logger.info(
                f"Request completed: {method} {path} - Status: {status_code} - Duration: {elapsed_ms}ms",
                extra={
                    'extra_fields': {
                        'method': method,
                        'path': path,
                        'status_code': status_code,
                    },
                    'duration_ms': elapsed_ms,
                }
            )
            await self._record(method, path, status_code, elapsed_ms)

    async def _record(self, method: str, path: str, status_code: Optional[int], elapsed_ms: int) -> None:
        if self.recorder is None:
            return
        try:
            await run_in_threadpool(self.recorder, method, path, status_code, elapsed_ms)
        except Exception:
            logger.exception(f"Failed to persist request log for {method} {path}")
