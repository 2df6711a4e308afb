"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class InvalidArgumentError(ApplicationError):
    """Raised when an argument names something the API does not support"""

    def __init__(self, argument: str, value: str | None, message: str | None = None):
        details = {"argument": argument, "value": value}
        msg = message or f"Invalid {argument}: '{value}'"
        super().__init__(msg, details)


class UnsupportedFileTypeError(ApplicationError):
    """Raised when an import is requested for an unknown file format"""

    def __init__(self, file_type: str | None):
        details = {"file_type": file_type}
        super().__init__("Unsupported file type.", details)


class NotFoundError(ApplicationError):
    """Raised when a requested record does not exist"""

    def __init__(self, resource: str, identifier: int | str):
        details = {"resource": resource, "id": identifier}
        super().__init__(f"{resource} with id {identifier} not found.", details)


class BusinessCardImportError(ApplicationError):
    """Raised when a parsed record cannot be stored during a bulk import"""

    def __init__(self, record_number: int, message: str, imported_count: int = 0):
        details = {"record_number": record_number, "imported_count": imported_count}
        super().__init__(f"Error importing record {record_number}: {message}", details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
