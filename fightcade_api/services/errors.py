"""Error types raised by the Fightcade API client.

This module provides:
- A base exception carrying an error category and technical details
- Transport, remote-status, schema, not-found, argument and configuration errors
- Translation of httpx exceptions into transport errors
"""

from enum import Enum
from typing import Any

import httpx

USER_NOT_FOUND = "user not found"


class ErrorCategory(Enum):
    """Categories of errors for classification and handling."""
    TRANSPORT = "transport"
    REMOTE = "remote"
    SCHEMA = "schema"
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    CONFIGURATION = "configuration"


class FightcadeError(Exception):
    """Base exception class for client errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        technical_details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.category = category
        self.technical_details = technical_details

    def describe(self) -> str:
        """Format the message together with its technical details."""
        if not self.technical_details:
            return self.message
        return f"{self.message}\n{self.technical_details}"


class TransportError(FightcadeError):
    """Network failure, non-2xx status or a body that is not JSON."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        technical_details = None
        if original_error:
            technical_details = f"{type(original_error).__name__}: {str(original_error)}"
        if url:
            technical_details = f"URL: {url}" + (f"\n{technical_details}" if technical_details else "")
        if status_code:
            technical_details = f"Status: {status_code}" + (f"\n{technical_details}" if technical_details else "")

        super().__init__(message, ErrorCategory.TRANSPORT, technical_details)
        self.original_error = original_error
        self.url = url
        self.status_code = status_code


class RemoteError(FightcadeError):
    """The service answered with a status other than OK."""

    def __init__(self, status: str, operation: str | None = None) -> None:
        technical_details = f"Operation: {operation}" if operation else None
        super().__init__(status, ErrorCategory.REMOTE, technical_details)
        self.status = status
        self.operation = operation

    @property
    def is_user_not_found(self) -> bool:
        return self.status == USER_NOT_FOUND


class SchemaValidationError(FightcadeError):
    """The response does not have the expected shape."""

    def __init__(
        self,
        message: str,
        path: str = "",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        technical_details = f"Path: {path}" if path else None
        super().__init__(message, ErrorCategory.SCHEMA, technical_details)
        self.path = path
        self.errors = errors or []


class NotFoundError(FightcadeError):
    """A lookup succeeded but the requested item was absent."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(
            f"{resource} {identifier!r} not found",
            ErrorCategory.NOT_FOUND,
        )
        self.resource = resource
        self.identifier = identifier


class InvalidArgumentError(FightcadeError, ValueError):
    """A caller-supplied argument was rejected before any request was made."""

    def __init__(self, message: str, argument: str, value: Any = None) -> None:
        technical_details = f"Argument: {argument}"
        if value is not None:
            value_str = str(value)[:100]  # Truncate long values
            technical_details += f"\nValue: {value_str}"
        super().__init__(message, ErrorCategory.INVALID_ARGUMENT, technical_details)
        self.argument = argument
        self.value = value


class ConfigurationError(FightcadeError):
    """Exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        current_value: Any = None,
        expected: str | None = None,
    ) -> None:
        technical_details = None
        if setting:
            technical_details = f"Setting: {setting}"
        if current_value is not None:
            technical_details = (technical_details or "") + f"\nCurrent: {current_value}"
        if expected:
            technical_details = (technical_details or "") + f"\nExpected: {expected}"

        super().__init__(message, ErrorCategory.CONFIGURATION, technical_details)
        self.setting = setting
        self.current_value = current_value
        self.expected = expected


def _get_http_error_message(status_code: int) -> str:
    """Get a readable message for HTTP status codes."""
    messages = {
        400: "The request was rejected by the server.",
        403: "Access to the endpoint was denied.",
        404: "The endpoint was not found.",
        408: "The request timed out.",
        429: "Too many requests.",
        500: "The server encountered an error.",
        502: "The server is temporarily unavailable.",
        503: "The service is temporarily unavailable.",
        504: "The server took too long to respond.",
    }
    return messages.get(status_code, f"HTTP error {status_code} occurred.")


def transport_error_from(error: httpx.HTTPError, url: str) -> TransportError:
    """Convert an httpx exception into a TransportError."""
    if isinstance(error, httpx.HTTPStatusError):
        status_code = error.response.status_code
        return TransportError(
            _get_http_error_message(status_code),
            original_error=error,
            url=url,
            status_code=status_code,
        )
    if isinstance(error, httpx.TimeoutException):
        return TransportError(
            "The request timed out. The server may be slow or unavailable.",
            original_error=error,
            url=url,
        )
    if isinstance(error, httpx.ConnectError):
        return TransportError(
            "Unable to connect to the server.",
            original_error=error,
            url=url,
        )
    return TransportError("A network error occurred.", original_error=error, url=url)
