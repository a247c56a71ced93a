"""
Custom exceptions for the restaurant search API.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    MISSING_REQUIRED_PARAMETER = "MISSING_REQUIRED_PARAMETER"
    UPSTREAM_CALL_FAILED = "UPSTREAM_CALL_FAILED"


class LunchRouletteException(Exception):
    """Base exception for the restaurant search API."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class MissingRequiredParameterError(LunchRouletteException):
    """Raised when latitude or longitude is missing from the request."""

    def __init__(self, missing: Optional[list] = None):
        super().__init__(
            message="Latitude and longitude are required.",
            error_code=ErrorCode.MISSING_REQUIRED_PARAMETER,
            details={"missing": missing or []},
            status_code=400
        )


class UpstreamCallFailedError(LunchRouletteException):
    """Raised when the Azure Maps search returns a non-success status."""

    def __init__(self, upstream_status: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message="Azure Maps API call failed.",
            error_code=ErrorCode.UPSTREAM_CALL_FAILED,
            details=details or {"upstream_status": upstream_status},
            status_code=500
        )
        self.upstream_status = upstream_status
