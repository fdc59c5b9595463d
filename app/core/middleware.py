from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import time
import logging

from app.config.settings import settings
from app.shared.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

MAX_LOG_LINE = 80

# Recurso de la URL -> nombre usado en mensajes de validación
RESOURCE_NAMES = {
    "products": "product",
    "customers": "customer",
    "suppliers": "supplier",
    "transactions": "transaction",
}


def _error_response(status_code: int, message: str, errors=None, headers=None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers=headers
    )


def _resource_name(path: str) -> str:
    parts = [p for p in path.split("/") if p]
    if len(parts) >= 2 and parts[0] == "api":
        return RESOURCE_NAMES.get(parts[1], "request")
    return "request"


def format_log_line(method: str, path: str, status_code: int, duration_ms: int) -> str:
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if len(line) > MAX_LOG_LINE:
        line = line[:MAX_LOG_LINE - 1] + "…"
    return line


def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        if request.url.path.startswith("/api"):
            duration_ms = int((time.time() - start_time) * 1000)
            logger.info(format_log_line(
                request.method, request.url.path, response.status_code, duration_ms
            ))

        return response


def setup_exception_handlers(app: FastAPI):
    """Todas las respuestas de error usan el formato ErrorResponse"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": error.get("msg", ""),
                "type": error.get("type", "")
            }
            for error in exc.errors()
        ]
        logger.warning(f"Validation error on {request.method} {request.url.path}: {errors}")
        return _error_response(
            400,
            f"Invalid {_resource_name(request.url.path)} data",
            errors=errors
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(
            exc.status_code,
            str(exc.detail),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(500, "Internal Server Error")
