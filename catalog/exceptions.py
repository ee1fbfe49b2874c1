"""
Custom exception classes for the application.

Each exception carries the HTTP status the error pages are rendered with,
so handlers raise domain errors and the application-level exception
handlers (see catalog/utils/error_handler.py) turn them into responses.
"""


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for the rendered error page.
    """

    http_status: int = 500

    def __init__(self, message: str):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class NotFoundError(AppException):
    """
    Resource not found.

    Raised when a requested author does not exist.

    HTTP Status: 404 Not Found
    """

    http_status = 404
