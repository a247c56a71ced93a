"""
Core building blocks for the restaurant search API.
Provides exceptions, error handling, logging and metrics.
"""

from .exceptions import (
    ErrorCode,
    LunchRouletteException,
    MissingRequiredParameterError,
    UpstreamCallFailedError,
)

__all__ = [
    "ErrorCode",
    "LunchRouletteException",
    "MissingRequiredParameterError",
    "UpstreamCallFailedError",
]
