"""Tests for settings, logging configuration and exception mapping."""

import pytest
from pydantic import ValidationError

from authz.config import AuthZSettings
from authz.config.constants import HttpMethod, PermissionAction
from authz.config.logging_config import LoggingConfig, get_log_level_from_verbosity
from authz.core.exceptions import (
    AuthZError,
    ConfigurationError,
    InvalidPermissionStringError,
    InvalidTokenError,
    InvalidUserError,
    PermissionDeniedError,
    TokenExpiredError,
    create_error_response,
    get_http_status_code,
)


class TestAuthZSettings:
    """Test cases for AuthZSettings."""

    def test_defaults(self):
        settings = AuthZSettings(secret="s3cret")

        assert settings.expiration_time_span == 3600
        assert settings.authentication_path == "/authenticate"
        assert settings.authentication_method is HttpMethod.POST
        assert settings.iam_endpoint_enabled
        assert settings.iam_path == "/authz/iam"
        assert settings.iam_method is HttpMethod.GET
        assert settings.exempt_paths == []

    def test_from_environment(self, monkeypatch):
        """Test that values are read from AUTHZ_ variables."""
        monkeypatch.setenv("AUTHZ_SECRET", "from-env")
        monkeypatch.setenv("AUTHZ_EXPIRATION_TIME_SPAN", "60")
        monkeypatch.setenv("AUTHZ_IAM_ENDPOINT_ENABLED", "false")

        settings = AuthZSettings()

        assert settings.secret.get_secret_value() == "from-env"
        assert settings.expiration_time_span == 60
        assert not settings.iam_endpoint_enabled

    def test_secret_hidden_in_repr(self):
        assert "s3cret" not in repr(AuthZSettings(secret="s3cret"))

    def test_empty_secret_rejected(self):
        with pytest.raises(ValidationError, match="secret"):
            AuthZSettings(secret="")

    @pytest.mark.parametrize("span", [0, -5])
    def test_non_positive_expiration_rejected(self, span):
        with pytest.raises(ValidationError):
            AuthZSettings(secret="s3cret", expiration_time_span=span)

    def test_relative_path_rejected(self):
        with pytest.raises(ValidationError):
            AuthZSettings(secret="s3cret", iam_path="authz/iam")

    def test_method_is_case_insensitive(self):
        settings = AuthZSettings(secret="s3cret", authentication_method="patch")
        assert settings.authentication_method is HttpMethod.PATCH

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError):
            AuthZSettings(secret="s3cret", iam_method="FETCH")


class TestPermissionAction:
    """Test cases for action tokens."""

    def test_parse(self):
        assert PermissionAction.parse("Read") is PermissionAction.READ
        assert PermissionAction.parse("ReadWrite") is PermissionAction.READ_WRITE
        assert PermissionAction.parse("read") is None
        assert PermissionAction.parse("Delete") is None

    def test_expand(self):
        assert PermissionAction.READ_WRITE.expand() == (PermissionAction.READ, PermissionAction.WRITE)
        assert PermissionAction.WRITE.expand() == (PermissionAction.WRITE,)


class TestLoggingConfig:
    """Test cases for environment-driven logging configuration."""

    @pytest.mark.parametrize("verbosity, level", [
        ("QUIET", "ERROR"),
        ("normal", "WARNING"),
        ("VERBOSE", "INFO"),
        ("DEBUG", "DEBUG"),
        ("LOUD", "WARNING"),
    ])
    def test_verbosity_levels(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level

    def test_defaults(self, monkeypatch):
        for name in ("LOG_VERBOSITY", "LOG_FORMAT", "ENABLE_AUTH_LOGGING"):
            monkeypatch.delenv(name, raising=False)

        config = LoggingConfig.build()

        assert config["root"]["level"] == "WARNING"
        assert config["loggers"]["httpx"]["level"] == "ERROR"
        assert config["loggers"]["authz.features.auth"]["propagate"] is False

    def test_auth_logging_enabled(self, monkeypatch):
        monkeypatch.setenv("ENABLE_AUTH_LOGGING", "true")

        assert "authz.features.auth" not in LoggingConfig.build()["loggers"]

    def test_detailed_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "detailed")

        assert "%(lineno)d" in LoggingConfig.build()["formatters"]["default"]["format"]


class TestExceptionMapping:
    """Test cases for HTTP status mapping and error bodies."""

    @pytest.mark.parametrize("exception, status", [
        (InvalidPermissionStringError("User", "missing action segment"), 400),
        (InvalidTokenError("bad"), 401),
        (TokenExpiredError("old"), 401),
        (InvalidUserError("who"), 401),
        (PermissionDeniedError("no"), 403),
        (ConfigurationError("broken"), 500),
        (AuthZError("generic"), 500),
        (RuntimeError("other"), 500),
    ])
    def test_status_codes(self, exception, status):
        assert get_http_status_code(exception) == status

    def test_invalid_permission_is_value_error(self):
        error = InvalidPermissionStringError("User", "missing action segment")

        assert isinstance(error, ValueError)
        assert error.message == "Invalid permission string 'User': missing action segment"
        assert error.details == {"permission": "User", "reason": "missing action segment"}

    def test_error_response(self):
        body = create_error_response(PermissionDeniedError("Denied"))
        assert body == {"error": "Denied", "code": "PermissionDeniedError"}

    def test_custom_error_code(self):
        body = create_error_response(AuthZError("Denied", error_code="CUSTOM"))
        assert body["code"] == "CUSTOM"
