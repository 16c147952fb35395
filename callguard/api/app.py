"""FastAPI application factory.

Creates and configures the application with middleware, exception handlers
and route registration.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from callguard import __version__
from callguard.api.dependencies import get_settings
from callguard.api.exceptions import CallguardAPIError
from callguard.api.middleware.context import RequestContextMiddleware
from callguard.api.models.errors import ErrorBody, ErrorCode, ErrorDetail, ErrorResponse
from callguard.api.routes import register_routes
from callguard.config.settings import Settings
from callguard.errors import (
    AccessDeniedError,
    BillingError,
    CallguardError,
    ConfigurationError,
    DecryptionError,
)
from callguard.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)

# Library error -> (status, code, message shown when details are hidden)
LIBRARY_ERRORS: list[tuple[type[CallguardError], int, ErrorCode, str]] = [
    (AccessDeniedError, 403, ErrorCode.ACCESS_DENIED, "Access denied"),
    (DecryptionError, 400, ErrorCode.DECRYPTION_FAILED, "Decryption failed"),
    (ConfigurationError, 500, ErrorCode.CONFIGURATION_ERROR, "Content encryption is not configured"),
    (BillingError, 400, ErrorCode.INVALID_REQUEST, "Invalid billing request"),
]


def _error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    details: list[ErrorDetail] | None = None,
) -> JSONResponse:
    response = ErrorResponse(error=ErrorBody(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; loaded from config files and environment
            when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    log_config = settings.observability.logging
    setup_logging(level=log_config.level, format=log_config.format, redact_pii=log_config.redact_pii)

    app = FastAPI(
        title="callguard API",
        description="Role-based response filtering and content decryption",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )
    app.add_middleware(RequestContextMiddleware)

    _register_exception_handlers(app, expose_details=settings.api.expose_error_details)

    metrics_config = settings.observability.metrics
    register_routes(app, metrics_enabled=metrics_config.enabled, metrics_path=metrics_config.path)

    logger.info("app_created", environment=settings.environment)

    return app


def _register_exception_handlers(app: FastAPI, *, expose_details: bool) -> None:
    """Register global exception handlers."""

    @app.exception_handler(CallguardAPIError)
    async def api_error_handler(request: Request, exc: CallguardAPIError) -> JSONResponse:
        logger.warning(
            "api_error",
            error_code=exc.error_code.value,
            message=exc.message,
            path=request.url.path,
        )
        return _error_response(exc.status_code, exc.error_code, exc.message)

    @app.exception_handler(CallguardError)
    async def library_error_handler(request: Request, exc: CallguardError) -> JSONResponse:
        for error_type, status_code, code, safe_message in LIBRARY_ERRORS:
            if isinstance(exc, error_type):
                break
        else:
            status_code, code, safe_message = 500, ErrorCode.INTERNAL_ERROR, "Internal server error"

        log = logger.error if status_code >= 500 else logger.warning
        log("library_error", error_code=code.value, message=exc.message, path=request.url.path)

        return _error_response(status_code, code, exc.message if expose_details else safe_message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            ErrorDetail(field=".".join(str(loc) for loc in error["loc"]), message=error["msg"])
            for error in exc.errors()
        ]
        logger.warning("validation_error", error_count=len(details), path=request.url.path)
        return _error_response(
            400, ErrorCode.INVALID_REQUEST, "Request validation failed", details
        )
