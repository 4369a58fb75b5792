"""
CodedX SSO SDK Error Classes

Every failure surfaced by the SDK is an ``SsoError``. The ``kind`` attribute
tells callers where the failure came from (local validation, configuration,
HTTP status, network or JSON handling), so they can branch on it instead of
parsing message text. ``reason`` carries the few semantic cases the
authenticator derives from the service's error text.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Where a failure originated."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CONFIGURATION = "CONFIGURATION"
    HTTP = "HTTP"
    NETWORK = "NETWORK"
    SERIALIZATION = "SERIALIZATION"


class FailureReason(str, Enum):
    """Semantic classification derived from the service's error message."""
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INVALID_VERIFICATION_CODE = "INVALID_VERIFICATION_CODE"
    RESEND_UNAVAILABLE = "RESEND_UNAVAILABLE"


class SsoError(Exception):
    """Base error class for the CodedX SSO SDK."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        reason: Optional[FailureReason] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.body = body
        self.reason = reason
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

    @property
    def code(self) -> str:
        return self.kind.value

    @classmethod
    def wrap(
        cls,
        prefix: str,
        error: "SsoError",
        reason: Optional[FailureReason] = None,
    ) -> "SsoError":
        """
        Build the error for a failed operation: ``prefix`` + the original message.

        Kind, status code and body are carried over so callers can still
        match on them. The caller is expected to ``raise ... from error``.
        """
        return cls.replace(f"{prefix}{error.message}", error, reason)

    @classmethod
    def replace(
        cls,
        message: str,
        error: "SsoError",
        reason: Optional[FailureReason] = None,
    ) -> "SsoError":
        """Like ``wrap``, but with a message that fully replaces the original."""
        return cls(
            message,
            error.kind,
            status_code=error.status_code,
            body=error.body,
            reason=reason or error.reason,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "name": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "reason": self.reason.value if self.reason else None,
            "details": self.details,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value!r}, message={self.message!r})"


class InvalidArgumentError(SsoError, ValueError):
    """A required argument was missing or blank. Raised before any request."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INVALID_ARGUMENT)


class ConfigurationError(SsoError, ValueError):
    """Configuration error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorKind.CONFIGURATION, details=details)


def is_sso_error(error: Any) -> bool:
    """Check if error is an SsoError."""
    return isinstance(error, SsoError)


def is_retryable_error(error: Any) -> bool:
    """
    Check if error is worth retrying.

    The SDK never retries on its own; this is for callers that want to.
    """
    if not isinstance(error, SsoError):
        return False
    if error.kind == ErrorKind.NETWORK:
        return True
    if error.kind == ErrorKind.HTTP and error.status_code is not None:
        return error.status_code == 429 or 500 <= error.status_code < 600
    return False
