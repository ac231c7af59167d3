"""Exception classes for idleview.

This module defines the error hierarchy shared by the settings store,
the context engine and the provider clients. Every error carries a
human-readable message that the HTTP and GUI layers pass on verbatim.
"""

from __future__ import annotations

from typing import Any


class IdleviewError(Exception):
    """Base class for all idleview errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message


class StorageError(IdleviewError):
    """Settings file could not be read or its directory could not be created."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with storage error details.

        Args:
            message: Description of the storage failure
            original_error: The original exception that was caught
        """
        super().__init__(message)
        self.original_error = original_error


class PersistenceError(StorageError):
    """Raised when the settings file could not be written.

    The in-memory document has already been updated when this is raised.
    """


class ValidationError(IdleviewError):
    """A replacement or merged document does not fit the settings schema."""

    def __init__(
        self, message: str, errors: list[dict[str, Any]] | None = None
    ) -> None:
        super().__init__(message)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def from_pydantic(cls, exc: Any, prefix: str = "Invalid settings") -> ValidationError:
        """Build from a pydantic ``ValidationError``.

        Args:
            exc: The pydantic exception
            prefix: Leading text of the message

        Returns:
            ValidationError with one line per field error
        """
        errors = exc.errors()
        details = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}"
            for e in errors
        )
        return cls(f"{prefix}: {details}", errors)


class ParseError(IdleviewError):
    """A sunrise/sunset string did not match the expected format.

    Never leaves the context engine; it degrades to the fallback result.
    """


class ProviderError(IdleviewError):
    """Error during a weather, geolocation or photo provider request."""

    def __init__(self, code: int, message: str, response: Any = None) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code, 0 when no response was received
            message: Human-readable error message
            response: Optional raw response body for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.detail: str = message
        self.response: Any = response

    @classmethod
    def from_status(cls, status_code: int, message: str, response: Any = None) -> ProviderError:
        """Create the most specific error for an HTTP status code.

        Args:
            status_code: HTTP status code
            message: Error message reported by the provider
            response: Optional raw response body

        Returns:
            Appropriate ProviderError subclass
        """
        if status_code in (401, 403):
            return AuthenticationError(status_code, message, response)
        if status_code == 429:
            return RateLimitError(status_code, message, response)
        if 400 <= status_code < 500:
            return ClientError(status_code, message, response)
        if status_code >= 500:
            return ServerError(status_code, message, response)
        return cls(status_code, message, response)


class NetworkError(ProviderError):
    """Raised when a network issue prevents provider communication."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(0, message)
        self.original_error = original_error


class AuthenticationError(ProviderError):
    """Raised when the provider rejects the access key."""


class RateLimitError(ProviderError):
    """Raised when rate limits are exceeded."""


class ClientError(ProviderError):
    """Raised for general 4xx client errors."""


class ServerError(ProviderError):
    """Raised for 5xx server errors."""
