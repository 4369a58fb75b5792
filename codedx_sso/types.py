"""
CodedX SSO SDK Type Definitions

Configuration and the value objects returned by the SSO service. Wire keys are
camelCase; attributes are snake_case. Unknown response fields are ignored.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .errors import ConfigurationError


DEFAULT_USER_AGENT = "CodedX-SSO-SDK/1.0.0"


@dataclass(frozen=True)
class SsoConfig:
    """SDK configuration. Validated on construction and read-only afterwards."""

    # Base URL of the SSO service, e.g. https://sso.example.com/api/sso
    base_url: str
    # API key issued when the client application was registered
    api_key: str
    # API secret paired with the API key
    api_secret: str
    # Identifier of the calling application
    client_app_id: str
    # Connection timeout in milliseconds (default: 5000)
    connect_timeout: int = 5000
    # Read timeout in milliseconds (default: 10000)
    read_timeout: int = 10000
    # Accepted for compatibility; requests are never retried by the SDK
    max_retries: int = 3
    # Emit SDK log records (default: False)
    enable_logging: bool = False
    # User-Agent header sent with every request
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if _is_blank(self.base_url):
            raise ConfigurationError("Base URL is required")
        if _is_blank(self.api_key):
            raise ConfigurationError("API key is required")
        if _is_blank(self.api_secret):
            raise ConfigurationError("API secret is required")
        if _is_blank(self.client_app_id):
            raise ConfigurationError("Client application ID is required")
        if not self.base_url.startswith("http"):
            raise ConfigurationError("Base URL must start with http:// or https://")
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ConfigurationError(
                "Timeouts must be positive",
                {"connect_timeout": self.connect_timeout, "read_timeout": self.read_timeout},
            )
        if self.max_retries < 0:
            raise ConfigurationError("max_retries cannot be negative")

    @property
    def connect_timeout_seconds(self) -> float:
        return self.connect_timeout / 1000.0

    @property
    def read_timeout_seconds(self) -> float:
        return self.read_timeout / 1000.0


@dataclass(frozen=True)
class UserProfile:
    """User profile information."""

    id: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    email_verified: Optional[bool] = None
    phone_verified: Optional[bool] = None
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        """Create from a response dictionary."""
        return cls(
            id=data.get("id"),
            email=data.get("email"),
            phone_number=data.get("phoneNumber"),
            email_verified=data.get("emailVerified"),
            phone_verified=data.get("phoneVerified"),
            created_at=parse_timestamp(data.get("createdAt")),
            last_login=parse_timestamp(data.get("lastLogin")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the wire shape, omitting unset fields."""
        result: Dict[str, Any] = {}
        if self.id is not None:
            result["id"] = self.id
        if self.email is not None:
            result["email"] = self.email
        if self.phone_number is not None:
            result["phoneNumber"] = self.phone_number
        if self.email_verified is not None:
            result["emailVerified"] = self.email_verified
        if self.phone_verified is not None:
            result["phoneVerified"] = self.phone_verified
        if self.created_at is not None:
            result["createdAt"] = self.created_at.isoformat()
        if self.last_login is not None:
            result["lastLogin"] = self.last_login.isoformat()
        return result


@dataclass(frozen=True)
class AuthResult:
    """Tokens and user snapshot returned by login and refresh."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    user: Optional[UserProfile] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthResult":
        """Create from a response dictionary."""
        user_data = data.get("user")
        return cls(
            access_token=data.get("accessToken"),
            refresh_token=data.get("refreshToken"),
            token_type=data.get("tokenType"),
            expires_in=data.get("expiresIn"),
            user=UserProfile.from_dict(user_data) if user_data is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the wire shape, omitting unset fields."""
        result: Dict[str, Any] = {}
        if self.access_token is not None:
            result["accessToken"] = self.access_token
        if self.refresh_token is not None:
            result["refreshToken"] = self.refresh_token
        if self.token_type is not None:
            result["tokenType"] = self.token_type
        if self.expires_in is not None:
            result["expiresIn"] = self.expires_in
        if self.user is not None:
            result["user"] = self.user.to_dict()
        return result


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp such as ``2024-01-01T10:00:00``."""
    if value is None:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
