"""
CodedX SSO Python SDK

Client for the CodedX Single Sign-On service: login, token refresh, logout,
profile retrieval, token validation, registration, account verification and
password reset.
"""

from .client import CodedxSso, create_sso_client
from .authenticator import SsoAuthenticator, extract_session_id
from .transport import HttpTransport, Transport
from .types import (
    DEFAULT_USER_AGENT,
    SsoConfig,
    UserProfile,
    AuthResult,
)
from .errors import (
    SsoError,
    ErrorKind,
    FailureReason,
    InvalidArgumentError,
    ConfigurationError,
    is_sso_error,
    is_retryable_error,
)
from .masking import mask_email, mask_phone, mask_identifier, mask_code

__version__ = "1.0.5"
__all__ = [
    # Client
    "CodedxSso",
    "create_sso_client",
    "SsoAuthenticator",
    "extract_session_id",
    # Transport
    "HttpTransport",
    "Transport",
    # Types
    "DEFAULT_USER_AGENT",
    "SsoConfig",
    "UserProfile",
    "AuthResult",
    # Errors
    "SsoError",
    "ErrorKind",
    "FailureReason",
    "InvalidArgumentError",
    "ConfigurationError",
    "is_sso_error",
    "is_retryable_error",
    # Masking
    "mask_email",
    "mask_phone",
    "mask_identifier",
    "mask_code",
]
