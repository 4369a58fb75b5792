"""
CodedX SSO Python SDK - Basic Usage Example

This example demonstrates the basic usage of the CodedX SSO Python SDK.
"""

import logging

from codedx_sso import (
    CodedxSso,
    SsoConfig,
    SsoError,
    ErrorKind,
    FailureReason,
    InvalidArgumentError,
)


def build_sdk() -> CodedxSso:
    return CodedxSso.create(SsoConfig(
        base_url="https://sso.example.com/api/sso",
        api_key="ak_your_api_key_123",
        api_secret="as_your_api_secret_456",
        client_app_id="your-client-app-id",
        connect_timeout=5000,
        read_timeout=10000,
        enable_logging=True,
    ))


def login_example(sdk: CodedxSso) -> None:
    """Login, fetch the profile and logout."""
    print("=== Login Example ===\n")

    auth = sdk.get_authenticator()
    try:
        result = auth.login("user@example.com", "SecurePassword123!")
        print(f"Logged in, token expires in {result.expires_in}s")

        profile = auth.get_user_profile(result.access_token)
        print(f"Profile: {profile.id} ({profile.email})")

        print(f"Token valid: {auth.validate_token(result.access_token)}")

        refreshed = auth.refresh_token(result.refresh_token)
        auth.logout(refreshed.access_token)
        print("Logged out")
    except InvalidArgumentError as e:
        print(f"Bad input: {e.message}")
    except SsoError as e:
        if e.kind == ErrorKind.HTTP and e.status_code == 401:
            print("Invalid credentials")
        else:
            print(f"Error (expected without real API): {e.kind.value}")


def registration_example(sdk: CodedxSso) -> None:
    """Register and verify an account."""
    print("\n=== Registration Example ===\n")

    auth = sdk.get_authenticator()
    try:
        auth.register_user("newuser@example.com", None, "SecurePassword123!")
        auth.verify_account("123456", "newuser@example.com")
        print("Account verified")
    except SsoError as e:
        if e.reason == FailureReason.INVALID_VERIFICATION_CODE:
            print(e.message)
            try:
                auth.resend_verification_code("newuser@example.com")
            except SsoError as resend_error:
                print(resend_error.message)
        else:
            print(f"Error (expected without real API): {e.kind.value}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    sdk = build_sdk()
    login_example(sdk)
    registration_example(sdk)
