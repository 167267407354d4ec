# core/exceptions.py
"""Custom exceptions for the Brickset catalog application."""

from typing import Optional, Dict, Any


class BricksetError(Exception):
    """Base exception for all Brickset catalog errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "BRICKSET_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(BricksetError):
    """Raised when there's a configuration problem."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(
            message,
            error_code="CONFIG_ERROR",
            details={"config_key": config_key} if config_key else {}
        )


class DataLoadError(BricksetError):
    """Raised when a resource file is missing or cannot be parsed."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        super().__init__(
            message,
            error_code="DATA_LOAD_ERROR",
            details={"file_path": file_path}
        )
        self.file_path = file_path


class DataNotFoundError(BricksetError):
    """Raised when requested data is not found."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} with ID '{resource_id}' not found",
            error_code="DATA_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ValidationError(BricksetError):
    """Raised when a record does not match the expected shape."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message,
            error_code="VALIDATION_ERROR",
            details={"field": field, "value": repr(value) if value is not None else None}
        )
        self.field = field


class EmptyResultError(BricksetError):
    """Raised when an aggregate is requested over zero matching records."""

    def __init__(self, operation: str, criteria: Optional[Dict[str, Any]] = None):
        super().__init__(
            f"{operation} matched no records",
            error_code="EMPTY_RESULT",
            details={"operation": operation, "criteria": criteria or {}}
        )
        self.operation = operation
