"""
CodedX SSO SDK Authenticator

One method per SSO use case. Each method validates its arguments locally,
builds the request payload, performs a single call through the transport and
turns any failure into an ``SsoError`` prefixed with the operation that failed.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional, TypeVar

from .errors import ErrorKind, FailureReason, InvalidArgumentError, SsoError
from .masking import mask_code, mask_email, mask_identifier, mask_phone
from .transport import HttpTransport, Transport
from .types import AuthResult, SsoConfig, UserProfile


logger = logging.getLogger("codedx_sso.authenticator")

T = TypeVar("T")

SESSION_ID_LENGTH = 20

ACCOUNT_NOT_FOUND_MESSAGE = "Account not found. Please check the identifier and try again."
INVALID_CODE_MESSAGE = "Invalid verification code. Please check the code and try again."
RESEND_UNAVAILABLE_MESSAGE = (
    "Resend verification is not currently available. "
    "Please try registering again or contact support."
)


class SsoAuthenticator:
    """
    Authentication operations against the CodedX SSO service.

    Instances hold no per-user state; the same authenticator can serve any
    number of users and threads.
    """

    def __init__(self, config: SsoConfig, transport: Optional[Transport] = None) -> None:
        self._config = config
        self._transport: Transport = transport if transport is not None else HttpTransport(config)

    def _log(self, level: int, message: str, *args: Any, exc_info: Any = None) -> None:
        if self._config.enable_logging:
            logger.log(level, message, *args, exc_info=exc_info)

    # =========================================================================
    # Session Methods
    # =========================================================================

    def login(self, identifier: str, password: str) -> AuthResult:
        """
        Login with an email address or phone number and a password.

        Args:
            identifier: Email or phone number
            password: Account password

        Returns:
            AuthResult with tokens and the user snapshot

        Raises:
            InvalidArgumentError: If an argument is missing or blank
            SsoError: If the request fails or the response cannot be parsed
        """
        _require(identifier, "identifier")
        _require(password, "password")

        self._log(logging.DEBUG, "Attempting login for identifier: %s", mask_identifier(identifier))
        body = {
            "identifier": identifier,
            "password": password,
            "clientAppId": self._config.client_app_id,
        }

        try:
            response = self._transport.post("/auth/login", body)
            result = _decode(response, AuthResult.from_dict)
        except SsoError as e:
            self._log(logging.ERROR, "Login failed for identifier: %s",
                      mask_identifier(identifier), exc_info=e)
            raise SsoError.wrap("Login failed: ", e) from e

        self._log(logging.INFO, "Login successful for user: %s", mask_identifier(identifier))
        return result

    def refresh_token(self, refresh_token: str) -> AuthResult:
        """Exchange a refresh token for a new token pair."""
        _require(refresh_token, "refreshToken")

        self._log(logging.DEBUG, "Refreshing access token")
        body = {
            "refreshToken": refresh_token,
            "clientAppId": self._config.client_app_id,
        }

        try:
            response = self._transport.post("/auth/refresh", body)
            result = _decode(response, AuthResult.from_dict)
        except SsoError as e:
            self._log(logging.ERROR, "Token refresh failed", exc_info=e)
            raise SsoError.wrap("Token refresh failed: ", e) from e

        self._log(logging.INFO, "Token refresh successful")
        return result

    def logout(self, access_token: str) -> None:
        """End the session the access token belongs to."""
        _require(access_token, "accessToken")

        self._log(logging.DEBUG, "Logging out user")
        body = {"sessionId": extract_session_id(access_token)}

        try:
            self._transport.post("/auth/logout", body, access_token)
        except SsoError as e:
            self._log(logging.ERROR, "Logout failed", exc_info=e)
            raise SsoError.wrap("Logout failed: ", e) from e

        self._log(logging.INFO, "Logout successful")

    def get_user_profile(self, access_token: str) -> UserProfile:
        """Fetch the profile of the user the access token belongs to."""
        _require(access_token, "accessToken")

        self._log(logging.DEBUG, "Retrieving user profile")
        try:
            response = self._transport.get("/user/profile", access_token)
            profile = _decode(response, UserProfile.from_dict)
        except SsoError as e:
            self._log(logging.ERROR, "Failed to retrieve user profile", exc_info=e)
            raise SsoError.wrap("Failed to retrieve user profile: ", e) from e

        self._log(logging.DEBUG, "User profile retrieved successfully")
        return profile

    def validate_token(self, access_token: str) -> bool:
        """
        Ask the service whether an access token is still valid.

        Returns True only for a ``true`` response body (case-insensitive,
        surrounding whitespace ignored); any other body means False. HTTP and
        network failures raise instead.
        """
        _require(access_token, "accessToken")

        self._log(logging.DEBUG, "Validating access token")
        try:
            response = self._transport.get("/auth/validate", access_token)
        except SsoError as e:
            self._log(logging.ERROR, "Token validation failed", exc_info=e)
            raise SsoError.wrap("Token validation failed: ", e) from e

        return response.strip().lower() == "true"

    # =========================================================================
    # Account Methods
    # =========================================================================

    def register_user(
        self,
        email: Optional[str],
        phone_number: Optional[str],
        password: str,
    ) -> None:
        """
        Register a new user by email, phone number or both.

        Args:
            email: Email address (optional if phone_number is given)
            phone_number: Phone number (optional if email is given)
            password: Account password

        Raises:
            InvalidArgumentError: If neither email nor phone number is given,
                or the password is blank
            SsoError: If the registration request fails
        """
        has_email = not _is_blank(email)
        has_phone = not _is_blank(phone_number)
        if not has_email and not has_phone:
            raise InvalidArgumentError("Either email or phone number must be provided")
        _require(password, "password")

        self._log(logging.DEBUG, "Registering new user - Email: %s, Phone: %s",
                  mask_email(email), mask_phone(phone_number))

        body: Dict[str, Any] = {}
        if has_email:
            body["email"] = email.strip()
        if has_phone:
            body["phoneNumber"] = phone_number.strip()
        body["password"] = password
        body["clientAppId"] = self._config.client_app_id

        try:
            self._transport.post("/auth/register", body)
        except SsoError as e:
            self._log(logging.ERROR, "User registration failed", exc_info=e)
            raise SsoError.wrap("User registration failed: ", e) from e

        self._log(logging.INFO, "User registration successful")

    def request_password_reset(self, identifier: str, is_email: bool) -> None:
        """Ask the service to send a password reset to an email or phone number."""
        _require(identifier, "identifier")

        self._log(logging.DEBUG, "Requesting password reset for identifier: %s",
                  mask_email(identifier) if is_email else mask_phone(identifier))
        body = {"identifier": identifier, "isEmail": is_email}

        try:
            self._transport.post("/auth/password/reset/request", body)
        except SsoError as e:
            self._log(logging.ERROR, "Password reset request failed", exc_info=e)
            raise SsoError.wrap("Password reset request failed: ", e) from e

        self._log(logging.INFO, "Password reset request sent successfully")

    def verify_account(self, code: str, identifier: str) -> None:
        """
        Confirm account ownership with a verification code.

        Failures are classified from the service's message: an unknown
        account sets ``reason`` to ``ACCOUNT_NOT_FOUND`` and a wrong code to
        ``INVALID_VERIFICATION_CODE``.
        """
        _require(code, "code")
        _require(identifier, "identifier")

        self._log(logging.DEBUG, "Verifying account for identifier: %s with code: %s",
                  mask_identifier(identifier), mask_code(code))
        body = {
            "identifier": identifier,
            "code": code,
            "isEmail": "@" in identifier,
        }

        try:
            self._transport.post("/auth/verify/confirm", body)
        except SsoError as e:
            self._log(logging.ERROR, "Account verification failed for: %s with code: %s",
                      mask_identifier(identifier), mask_code(code), exc_info=e)
            raise classify_verification_failure(e) from e

        self._log(logging.INFO, "Account verification successful for: %s",
                  mask_identifier(identifier))

    def resend_verification_code(self, identifier: str) -> None:
        """
        Ask the service to send a new verification code.

        A 404 from the service means the deployment does not offer resending;
        that case is reported with ``reason`` set to ``RESEND_UNAVAILABLE``.
        """
        _require(identifier, "identifier")

        self._log(logging.DEBUG, "Resending verification code for identifier: %s",
                  mask_identifier(identifier))
        body = {"identifier": identifier}

        try:
            self._transport.post("/auth/verify/resend", body)
        except SsoError as e:
            self._log(logging.ERROR, "Failed to resend verification code to: %s",
                      mask_identifier(identifier), exc_info=e)
            raise classify_resend_failure(e) from e

        self._log(logging.INFO, "Verification code resent successfully to: %s",
                  mask_identifier(identifier))


# =============================================================================
# Helpers
# =============================================================================

def extract_session_id(access_token: str) -> str:
    """
    Derive the session id sent on logout.

    This is the first 20 characters of the token (or the whole token when
    shorter). It is not decoded or verified in any way.
    """
    return access_token[:SESSION_ID_LENGTH]


def classify_verification_failure(error: SsoError) -> SsoError:
    """Map a failed verification to the caller-facing error."""
    if "User not found" in error.message:
        return SsoError.replace(ACCOUNT_NOT_FOUND_MESSAGE, error,
                                reason=FailureReason.ACCOUNT_NOT_FOUND)
    if "Invalid verification code" in error.message:
        return SsoError.replace(INVALID_CODE_MESSAGE, error,
                                reason=FailureReason.INVALID_VERIFICATION_CODE)
    return SsoError.wrap("Account verification failed: ", error)


def classify_resend_failure(error: SsoError) -> SsoError:
    """Map a failed resend to the caller-facing error."""
    prefix = "Failed to resend verification code: "
    if "404" in error.message or "Not Found" in error.message:
        return SsoError.replace(prefix + RESEND_UNAVAILABLE_MESSAGE, error,
                                reason=FailureReason.RESEND_UNAVAILABLE)
    return SsoError.wrap(prefix, error)


def _decode(response: str, factory: Callable[[Dict[str, Any]], T]) -> T:
    """Parse a JSON object response and build a model from it."""
    try:
        data = json.loads(response)
    except ValueError as e:
        raise SsoError(f"JSON parsing failed: {e}", ErrorKind.SERIALIZATION) from e
    if not isinstance(data, dict):
        raise SsoError(
            f"JSON parsing failed: expected an object, got {type(data).__name__}",
            ErrorKind.SERIALIZATION,
        )
    try:
        return factory(data)
    except (TypeError, ValueError, AttributeError) as e:
        raise SsoError(f"JSON parsing failed: {e}", ErrorKind.SERIALIZATION) from e


def _require(value: Optional[str], field_name: str) -> None:
    if _is_blank(value):
        raise InvalidArgumentError(f"{field_name} cannot be null or empty")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
