from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR, HTTP_503_SERVICE_UNAVAILABLE
from sqlalchemy.exc import SQLAlchemyError, OperationalError
from loguru import logger

def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )

def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred."},
    )

def database_error_handler(request: Request, exc: SQLAlchemyError):
    """
    Handle SQLAlchemy errors raised outside the feedback pipeline.

    The pipeline swallows its own attempt log failures, so this only sees errors
    from routes that read or update feedback logs directly, such as rating.

    Args:
        request: FastAPI request instance
        exc: SQLAlchemyError raised while handling the request

    Returns:
        JSONResponse with 503 when the database is unreachable, 500 otherwise
    """
    logger.error(f"Database error on {request.url.path}: {exc}")

    if isinstance(exc, OperationalError):
        return JSONResponse(
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "error": "Database unavailable",
                "message": "The feedback log store could not be reached",
                "hint": "Please try again later"
            }
        )

    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Database error",
            "message": "The feedback log store rejected the operation",
            "hint": "Please check your data and try again"
        }
    )
