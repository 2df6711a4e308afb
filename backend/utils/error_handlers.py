"""
Error handling decorators and utilities for API endpoints.

Routers stay thin: they call one service method and let this decorator turn
application exceptions into HTTP responses.
"""

from functools import wraps
from typing import Callable
import inspect
import logging

from fastapi import HTTPException

from constants import HTTPStatus
from exceptions import (
    ApplicationError,
    BusinessCardImportError,
    ConfigurationError,
    DatabaseError,
    InvalidArgumentError,
    NotFoundError,
    UnsupportedFileTypeError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Map an exception raised by a service to an HTTPException.

    Not-found becomes 404, store and configuration failures 500, and every
    other failure 400 carrying the error message.
    """
    if isinstance(error, NotFoundError):
        logger.info(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, (ValidationError, InvalidArgumentError, UnsupportedFileTypeError)):
        logger.warning(f"{operation_name} - Invalid input: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)
    if isinstance(error, BusinessCardImportError):
        logger.warning(f"{operation_name} - Import aborted: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)
    if isinstance(error, (DatabaseError, ConfigurationError)):
        logger.error(f"{operation_name} - {type(error).__name__}: {error.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )
    if isinstance(error, ApplicationError):
        logger.warning(f"{operation_name} - Application error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=True)
    return HTTPException(
        status_code=HTTPStatus.BAD_REQUEST,
        detail=f"{operation_name} failed: {error}"
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Export CSV")

    Example:
        @router.get("/export/csv/{id}")
        @handle_api_errors("Export CSV")
        def export_to_csv(...):
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
