"""
CodedX SSO SDK Client

Entry point of the SDK. Validates the configuration once and hands out
authenticators bound to it.
"""

import logging
from typing import Optional

from .authenticator import SsoAuthenticator
from .errors import ConfigurationError
from .transport import Transport
from .types import SsoConfig


logger = logging.getLogger("codedx_sso")


class CodedxSso:
    """
    CodedX SSO SDK entry point.

    Example:
        sdk = CodedxSso.create(SsoConfig(
            base_url="https://sso.example.com/api/sso",
            api_key="ak_your_api_key",
            api_secret="as_your_api_secret",
            client_app_id="your-client-app-id",
        ))
        auth = sdk.get_authenticator()
        result = auth.login("user@example.com", "password")
    """

    def __init__(self, config: SsoConfig) -> None:
        if config is None:
            raise ConfigurationError("SsoConfig cannot be None")
        if not isinstance(config, SsoConfig):
            raise ConfigurationError(
                f"Expected SsoConfig, got {type(config).__name__}"
            )
        self._config = config

        if config.enable_logging:
            logger.debug("CodedX SSO SDK initialized for base URL: %s", config.base_url)

    @classmethod
    def create(cls, config: SsoConfig) -> "CodedxSso":
        """Create an SDK instance from a configuration."""
        return cls(config)

    @property
    def config(self) -> SsoConfig:
        return self._config

    def get_authenticator(self, transport: Optional[Transport] = None) -> SsoAuthenticator:
        """
        Create an authenticator for this configuration.

        Args:
            transport: Alternative transport; defaults to an httpx transport
                built from the configuration
        """
        return SsoAuthenticator(self._config, transport)


def create_sso_client(config: SsoConfig) -> SsoAuthenticator:
    """Create an authenticator directly from a configuration."""
    return CodedxSso.create(config).get_authenticator()
