"""
Unit tests for EvaluationServiceSettings.

Settings are loaded from EVALLOG_* environment variables via monkeypatch.
"""

import pytest
from pydantic import ValidationError

from evallog.clients import EvaluationServiceClient
from evallog.errors import ConfigurationError
from evallog.models import DEFAULT_BASE_URL
from evallog.session import AuthenticatedSession
from evallog.settings import EvaluationServiceSettings

pytestmark = pytest.mark.unit

_CREDENTIAL_ENV = {
    "EVALLOG_EMAIL": "student@abc.edu",
    "EVALLOG_NAME": "Test Student",
    "EVALLOG_ROLL_NO": "22cs1001",
    "EVALLOG_ACCESS_CODE": "xYzAbC",
    "EVALLOG_CLIENT_ID": "client-id",
    "EVALLOG_CLIENT_SECRET": "client-secret",
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove any EVALLOG_* variables inherited from the host."""
    for name in [
        *_CREDENTIAL_ENV,
        "EVALLOG_BASE_URL",
        "EVALLOG_TIMEOUT_SECONDS",
        "EVALLOG_REAUTHENTICATE_ON_UNAUTHORIZED",
    ]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def credential_env(monkeypatch):
    for name, value in _CREDENTIAL_ENV.items():
        monkeypatch.setenv(name, value)


class TestEvaluationServiceSettings:
    """Tests for environment-sourced settings."""

    def test_defaults(self):
        settings = EvaluationServiceSettings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout_seconds == 30.0
        assert settings.reauthenticate_on_unauthorized is False

    def test_client_config_from_env(self, monkeypatch):
        monkeypatch.setenv("EVALLOG_BASE_URL", "http://eval.test/svc/")
        monkeypatch.setenv("EVALLOG_TIMEOUT_SECONDS", "2.5")

        config = EvaluationServiceSettings().to_client_config()

        assert config.base_url == "http://eval.test/svc"
        assert config.timeout_seconds == 2.5

    def test_reauth_flag_from_env(self, monkeypatch):
        monkeypatch.setenv("EVALLOG_REAUTHENTICATE_ON_UNAUTHORIZED", "true")
        assert EvaluationServiceSettings().reauthenticate_on_unauthorized is True

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("EVALLOG_TIMEOUT_SECONDS", "-1")
        with pytest.raises(ValidationError):
            EvaluationServiceSettings()

    def test_to_credentials(self, credential_env):
        settings = EvaluationServiceSettings()
        creds = settings.to_credentials()

        assert creds.roll_no == "22cs1001"
        assert creds.client_secret == "client-secret"
        assert "client-secret" not in repr(settings)

    def test_missing_credentials_named(self, monkeypatch):
        monkeypatch.setenv("EVALLOG_EMAIL", "student@abc.edu")
        monkeypatch.setenv("EVALLOG_NAME", "")

        with pytest.raises(ConfigurationError) as exc_info:
            EvaluationServiceSettings().to_credentials()

        missing = exc_info.value.details["missing_fields"]
        assert "email" not in missing
        assert "name" in missing
        assert "client_secret" in missing
        assert "EVALLOG_ROLL_NO" in str(exc_info.value)

    def test_create_session_honours_reauth_flag(
        self, credential_env, monkeypatch, client_config
    ):
        monkeypatch.setenv("EVALLOG_REAUTHENTICATE_ON_UNAUTHORIZED", "1")
        client = EvaluationServiceClient(client_config)

        session = EvaluationServiceSettings().create_session(client)

        assert isinstance(session, AuthenticatedSession)
        assert session._reauthenticate is True
        assert session.is_authenticated is False
