from fastapi import Request
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
import logging

logger = logging.getLogger(__name__)

class MovieNightException(Exception):
    """Base exception for the application"""
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

class ClientError(MovieNightException):
    """Malformed or incomplete request"""
    status_code = 400
    message = "Bad Request"

class InvalidRequest(ClientError):
    pass

class ServiceError(MovieNightException):
    """Store unavailable or unexpected failure. The message is always generic."""
    status_code = 500
    message = "Internal Server Error"

async def movienight_exception_handler(request: Request, exc: MovieNightException):
    """
    Map the application error taxonomy to JSON responses.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    if exc.status_code >= 500:
        logger.error(
            "Service error",
            extra={"request_id": request_id, "path": request.url.path},
            exc_info=exc.__cause__ or exc
        )
    else:
        logger.info(f"Client error: {exc.message}", extra={"request_id": request_id, "path": request.url.path})

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "request_id": request_id},
    )

async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all exception handler to execute last (if registered appropriately).
    Returns 500 JSON response and hides internal error details.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    logger.error(
        "Unhandled exception occurred",
        extra={"request_id": request_id, "path": request.url.path},
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "request_id": request_id},
    )

async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Routing errors (404, 405) and any other Starlette HTTPException.
    """
    request_id = getattr(request.state, "request_id", "unknown")

    # Log 5xx errors as errors, 4xx as warnings or info
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})
    else:
        logger.info(f"HTTP {exc.status_code} error", extra={"request_id": request_id, "detail": exc.detail})

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "request_id": request_id},
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handle Pydantic validation errors.
    """
    request_id = getattr(request.state, "request_id", "unknown")
    logger.info("Validation error", extra={"request_id": request_id, "errors": exc.errors()})

    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation Error",
            "details": jsonable_encoder(exc.errors()),
            "request_id": request_id
        },
    )
