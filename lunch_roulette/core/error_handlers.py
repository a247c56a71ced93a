"""
Error handlers for the FastAPI application.

Only the application's own exceptions are translated here. Anything else is
left to the server's default 500 response.
"""

from fastapi import Request
from fastapi.responses import PlainTextResponse
import logging
import time
from typing import Dict, Any

from lunch_roulette.core.exceptions import LunchRouletteException

logger = logging.getLogger(__name__)


class ErrorHandler:
    """
    Error handling with logging and per-code frequency tracking.
    """

    def __init__(self):
        self.error_counts: Dict[str, int] = {}
        self.last_error_time: Dict[str, float] = {}

    async def handle_lunch_roulette_exception(
        self,
        request: Request,
        exc: LunchRouletteException
    ) -> PlainTextResponse:
        """
        Handle LunchRouletteException with a plain-text body.

        Args:
            request: FastAPI request object
            exc: LunchRouletteException instance

        Returns:
            PlainTextResponse carrying the exception message
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        # Upstream failures are already logged at ERROR by the maps client
        logger.warning(
            f"{exc.error_code.value} in request {request_id}: {exc.message}",
            extra={
                'request_id': request_id,
                'error_code': exc.error_code.value,
                'status_code': exc.status_code,
                'details': exc.details,
                'request_path': request.url.path,
                'request_method': request.method,
            }
        )

        self._track_error(exc.error_code.value)

        return PlainTextResponse(exc.message, status_code=exc.status_code)

    def _track_error(self, error_code: str) -> None:
        """
        Track error frequency for monitoring and alerting.

        Args:
            error_code: Error code to track
        """
        self.error_counts[error_code] = self.error_counts.get(error_code, 0) + 1
        self.last_error_time[error_code] = time.time()

        if self.error_counts[error_code] % 10 == 0:
            logger.warning(
                f"High frequency error detected: {error_code} occurred {self.error_counts[error_code]} times"
            )

    def get_error_statistics(self) -> Dict[str, Any]:
        """
        Get error statistics for monitoring.

        Returns:
            Dictionary with error statistics
        """
        current_time = time.time()

        return {
            'error_counts': dict(self.error_counts),
            'recent_errors': {
                code: count for code, count in self.error_counts.items()
                if current_time - self.last_error_time.get(code, 0) < 3600  # Last hour
            },
            'total_errors': sum(self.error_counts.values())
        }


# Global error handler instance
error_handler = ErrorHandler()


def setup_error_handlers(app):
    """
    Set up error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(LunchRouletteException)
    async def lunch_roulette_exception_handler(request: Request, exc: LunchRouletteException):
        return await error_handler.handle_lunch_roulette_exception(request, exc)
