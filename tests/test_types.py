"""
Tests for configuration validation and response models.
"""

import dataclasses
from datetime import datetime, timezone
from typing import Optional

import pytest
from hypothesis import given, settings, strategies as st

from codedx_sso import AuthResult, SsoConfig, UserProfile, DEFAULT_USER_AGENT
from codedx_sso.errors import ConfigurationError, ErrorKind


def make_config(**overrides) -> SsoConfig:
    values = {
        "base_url": "https://sso.example.com/api/sso",
        "api_key": "ak_key",
        "api_secret": "as_secret",
        "client_app_id": "app",
    }
    values.update(overrides)
    return SsoConfig(**values)


class TestConfiguration:
    """Tests for SDK configuration."""

    def test_defaults(self):
        config = make_config()

        assert config.connect_timeout == 5000
        assert config.read_timeout == 10000
        assert config.max_retries == 3
        assert config.enable_logging is False
        assert config.user_agent == DEFAULT_USER_AGENT == "CodedX-SSO-SDK/1.0.0"
        assert config.connect_timeout_seconds == 5.0
        assert config.read_timeout_seconds == 10.0

    @pytest.mark.parametrize("field,message", [
        ("base_url", "Base URL is required"),
        ("api_key", "API key is required"),
        ("api_secret", "API secret is required"),
        ("client_app_id", "Client application ID is required"),
    ])
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_required_fields(self, field: str, message: str, value: Optional[str]):
        with pytest.raises(ConfigurationError) as exc_info:
            make_config(**{field: value})

        assert exc_info.value.message == message
        assert exc_info.value.kind == ErrorKind.CONFIGURATION

    @pytest.mark.parametrize("url", ["sso.example.com", "ftp://sso.example.com", "//sso"])
    def test_base_url_scheme(self, url: str):
        with pytest.raises(ConfigurationError) as exc_info:
            make_config(base_url=url)
        assert "must start with http" in exc_info.value.message

    def test_http_base_url_allowed(self):
        assert make_config(base_url="http://localhost:8080").base_url == "http://localhost:8080"

    @pytest.mark.parametrize("overrides", [
        {"connect_timeout": 0},
        {"read_timeout": -1},
        {"max_retries": -1},
    ])
    def test_invalid_numbers(self, overrides):
        with pytest.raises(ConfigurationError):
            make_config(**overrides)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            make_config(api_key="")

    def test_immutable(self):
        config = make_config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "other"

    @given(
        connect_timeout=st.integers(min_value=1, max_value=120000),
        read_timeout=st.integers(min_value=1, max_value=120000),
        max_retries=st.integers(min_value=0, max_value=10),
        enable_logging=st.booleans(),
    )
    @settings(max_examples=50)
    def test_valid_options_accepted(self, connect_timeout, read_timeout, max_retries, enable_logging):
        config = make_config(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            max_retries=max_retries,
            enable_logging=enable_logging,
        )

        assert config.connect_timeout_seconds == connect_timeout / 1000.0
        assert config.max_retries == max_retries


class TestModels:
    """Tests for response models."""

    def test_user_profile_from_dict(self):
        profile = UserProfile.from_dict({
            "id": "u1",
            "email": "a@b.com",
            "phoneNumber": "+123456",
            "emailVerified": True,
            "phoneVerified": False,
            "createdAt": "2024-01-01T10:00:00",
            "lastLogin": "2024-02-01T10:00:00Z",
            "roles": ["admin"],
        })

        assert profile.id == "u1"
        assert profile.phone_number == "+123456"
        assert profile.created_at == datetime(2024, 1, 1, 10, 0, 0)
        assert profile.last_login == datetime(2024, 2, 1, 10, 0, 0, tzinfo=timezone.utc)

    def test_user_profile_missing_fields(self):
        profile = UserProfile.from_dict({"id": "u1"})

        assert profile.email is None
        assert profile.email_verified is None
        assert profile.phone_verified is None
        assert profile.created_at is None
        assert profile.last_login is None

    def test_user_profile_bad_timestamp(self):
        with pytest.raises(ValueError):
            UserProfile.from_dict({"createdAt": "not a date"})

    def test_auth_result_ignores_unknown_fields(self):
        result = AuthResult.from_dict({
            "accessToken": "t",
            "refreshToken": "r",
            "tokenType": "Bearer",
            "expiresIn": 3600,
            "user": {"id": "u1"},
            "sessionState": "xyz",
        })

        assert result.access_token == "t"
        assert result.token_type == "Bearer"
        assert result.expires_in == 3600
        assert result.user == UserProfile(id="u1")

    def test_auth_result_without_user(self):
        assert AuthResult.from_dict({"accessToken": "t"}).user is None

    def test_auth_result_empty_user_object(self):
        assert AuthResult.from_dict({"accessToken": "t", "user": {}}).user == UserProfile()

    def test_to_dict_round_trip_shape(self):
        data = {
            "accessToken": "t",
            "refreshToken": "r",
            "tokenType": "Bearer",
            "expiresIn": 60,
            "user": {"id": "u1", "email": "a@b.com", "createdAt": "2024-01-01T10:00:00"},
        }

        assert AuthResult.from_dict(data).to_dict() == data

    def test_to_dict_omits_none(self):
        assert UserProfile(id="u1").to_dict() == {"id": "u1"}

    def test_models_immutable(self):
        profile = UserProfile(id="u1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.id = "u2"
