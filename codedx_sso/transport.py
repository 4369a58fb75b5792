"""
CodedX SSO SDK HTTP Transport

Performs one HTTP exchange per call with the SDK's headers and error
semantics. A fresh ``httpx.Client`` is opened for every request and closed on
every exit path; nothing is pooled or cached between calls.
"""

import json
import logging
from typing import Any, Dict, Optional, Protocol

import httpx

from .errors import ErrorKind, SsoError
from .types import SsoConfig


logger = logging.getLogger("codedx_sso.transport")


class Transport(Protocol):
    """Interface the authenticator uses to reach the SSO service."""

    def post(self, path: str, body: Dict[str, Any], access_token: Optional[str] = None) -> str:
        """POST a JSON body and return the raw response body."""
        ...

    def get(self, path: str, access_token: Optional[str] = None) -> str:
        """GET a resource and return the raw response body."""
        ...


class HttpTransport:
    """httpx-backed transport signed with the configured API key and secret."""

    def __init__(self, config: SsoConfig) -> None:
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._timeout = httpx.Timeout(
            config.read_timeout_seconds,
            connect=config.connect_timeout_seconds,
        )

    def _log(self, level: int, message: str, *args: Any) -> None:
        if self._config.enable_logging:
            logger.log(level, message, *args)

    def post(self, path: str, body: Dict[str, Any], access_token: Optional[str] = None) -> str:
        try:
            payload = json.dumps(body)
        except (TypeError, ValueError) as e:
            raise SsoError(f"JSON conversion failed: {e}", ErrorKind.SERIALIZATION) from e

        self._log(logging.DEBUG, "Sending POST request to: %s", path)
        return self._execute("POST", path, access_token, content=payload)

    def get(self, path: str, access_token: Optional[str] = None) -> str:
        self._log(logging.DEBUG, "Sending GET request to: %s", path)
        return self._execute("GET", path, access_token)

    def build_headers(self, access_token: Optional[str] = None) -> Dict[str, str]:
        """Headers sent with every request, plus the bearer token when given."""
        headers = {
            "X-API-KEY": self._config.api_key,
            "X-API-SECRET": self._config.api_secret,
            "Content-Type": "application/json",
            "User-Agent": self._config.user_agent,
        }
        if access_token is not None:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    def _execute(
        self,
        method: str,
        path: str,
        access_token: Optional[str],
        content: Optional[str] = None,
    ) -> str:
        url = f"{self._base_url}{path}"
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.request(
                    method,
                    url,
                    headers=self.build_headers(access_token),
                    content=content,
                )
                body = response.text
        except httpx.TimeoutException as e:
            raise SsoError(
                f"HTTP {method} request failed: request timed out ({e})",
                ErrorKind.NETWORK,
                details={"connect_timeout": self._config.connect_timeout,
                         "read_timeout": self._config.read_timeout},
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise SsoError(f"HTTP {method} request failed: {e}", ErrorKind.NETWORK) from e
        except UnicodeEncodeError as e:
            # httpx encodes header values as ASCII
            raise SsoError(
                f"HTTP {method} request failed: header value is not ASCII ({e.reason})",
                ErrorKind.SERIALIZATION,
            ) from e

        return self._handle_response(response.status_code, body)

    def _handle_response(self, status_code: int, body: str) -> str:
        if 200 <= status_code < 300:
            self._log(logging.DEBUG, "Request successful - Status: %s", status_code)
            return body

        self._log(logging.ERROR, "HTTP error - Status: %s, Response: %s", status_code, body)
        raise SsoError(
            f"HTTP error {status_code}: {body}",
            ErrorKind.HTTP,
            status_code=status_code,
            body=body,
        )
