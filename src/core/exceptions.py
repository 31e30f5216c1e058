"""Custom exception classes.

This module defines custom exceptions used throughout the application.
"""

from typing import Any, Dict, Optional


class BaseAppException(Exception):
    """Base exception class for the application.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
            cause: Underlying exception that caused this error.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the exception."""
        return self.message

    def __repr__(self) -> str:
        """Detailed representation of the exception."""
        return f"{self.__class__.__name__}('{self.message}', details={self.details})"


class ConfigurationError(BaseAppException):
    """Raised when there's a configuration error."""
    pass


class ExternalServiceError(BaseAppException):
    """Raised when external service call fails.

    Attributes:
        service: Name of the external service.
        status_code: HTTP status code if applicable.
    """

    def __init__(
        self,
        message: str,
        service: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            service: Name of the external service.
            status_code: HTTP status code if applicable.
            details: Additional error details.
            cause: Underlying exception that caused this error.
        """
        super().__init__(message, details, cause)
        self.service = service
        self.status_code = status_code


class UpstreamStatusError(ExternalServiceError):
    """Raised when the upstream API answers with a non-2xx status.

    The status code is proxied back to the caller unchanged, and
    ``message`` is the caller-facing error text.

    Attributes:
        reason: Upstream reason phrase.
        path: Upstream path that was requested, without query string.
    """

    def __init__(
        self,
        message: str,
        service: str,
        status_code: int,
        reason: str = "",
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, service, status_code, details)
        self.reason = reason
        self.path = path

    def with_message(self, message: str) -> "UpstreamStatusError":
        """Copy of this error carrying a different caller-facing message."""
        return UpstreamStatusError(
            message,
            service=self.service,
            status_code=self.status_code,
            reason=self.reason,
            path=self.path,
            details=self.details,
        )
