"""Error Handlers: global exception handlers rendering {"error": {"message", "status"}}.

Invariants:
    - PostboardError → its own http_status and message
    - Starlette HTTPException → its status, its detail
    - Unmatched route, including a known path with an unrouted method → 404 "Not Found"
    - RequestValidationError → 500, message lists the offending fields
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from postboard.core.errors import PostboardError, error_body

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_postboard_error_handler(app)
    _register_http_exception_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _log_extra(request: Request, status_code: int, code: str | None = None) -> dict:
    return {
        "error_code": code,
        "path": request.url.path,
        "method": request.method,
        "status": status_code,
    }


def _register_postboard_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PostboardError)
    async def postboard_error_handler(request: Request, exc: PostboardError):
        """Handle all domain/infrastructure errors."""
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level, f"PostboardError: {exc.message}",
            extra=_log_extra(request, exc.http_status, exc.code),
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_exception_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Unmatched routes land here; a known path with another method is unmatched too."""
        status_code = exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR
        if status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return _not_found(request)
        logger.warning(
            f"HTTP {status_code} on {request.url.path}",
            extra=_log_extra(request, status_code),
        )
        return JSONResponse(
            status_code=status_code,
            content=error_body(str(exc.detail), status_code),
            headers=getattr(exc, "headers", None),
        )


def _not_found(request: Request) -> JSONResponse:
    logger.warning(
        f"HTTP 404 on {request.method} {request.url.path}",
        extra=_log_extra(request, status.HTTP_404_NOT_FOUND),
    )
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body("Not Found", status.HTTP_404_NOT_FOUND),
    )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Coercion failures are not distinguished from other unhandled errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra=_log_extra(request, 500, "VALIDATION_ERROR"),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                _build_validation_message(exc),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra=_log_extra(request, 500, "INTERNAL_ERROR"),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                "Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )


def _build_validation_message(exc: RequestValidationError) -> str:
    """One line: 'Invalid request data: body.content: Field required; ...'."""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return f"Invalid request data: {details}"
