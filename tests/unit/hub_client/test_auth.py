"""Unit tests for hub_client.auth module."""

import os

import dotenv
import pytest
from unittest.mock import patch

from src.hub_client import auth as auth_module
from src.hub_client.auth import (
    Authenticator,
    Credentials,
    DEFAULT_API_URL,
    DEFAULT_AUTH_URL,
)
from src.hub_client.errors import InvalidCredentialsError


class TestCredentials:
    """Test cases for Credentials NamedTuple."""

    def test_credentials_default_urls(self):
        """Credentials default to the public API and auth endpoints."""
        creds = Credentials(client_id="id", client_secret="secret", hub_id="hub1")

        assert creds.api_url == DEFAULT_API_URL
        assert creds.auth_url == DEFAULT_AUTH_URL

    def test_credentials_are_immutable(self):
        """Credentials fields cannot be modified after creation."""
        creds = Credentials(client_id="id", client_secret="secret", hub_id="hub1")
        with pytest.raises(AttributeError):
            creds.hub_id = "other"


@patch('src.hub_client.auth.load_dotenv')
class TestAuthenticator:
    """Test cases for Authenticator class."""

    def test_init_loads_dotenv(self, mock_load_dotenv):
        """Authenticator __init__ should call load_dotenv()."""
        Authenticator()
        mock_load_dotenv.assert_called_once()

    def test_credentials_from_environment(self, mock_load_dotenv, monkeypatch):
        """Credentials are read from DC_* environment variables."""
        monkeypatch.setenv('DC_CLIENT_ID', 'env-id')
        monkeypatch.setenv('DC_CLIENT_SECRET', 'env-secret')
        monkeypatch.setenv('DC_HUB_ID', 'env-hub')

        creds = Authenticator().get_credentials()

        assert creds == Credentials(
            client_id='env-id',
            client_secret='env-secret',
            hub_id='env-hub',
        )

    def test_overrides_win_over_environment(self, mock_load_dotenv, monkeypatch):
        """CLI overrides take precedence over environment variables."""
        monkeypatch.setenv('DC_CLIENT_ID', 'env-id')
        monkeypatch.setenv('DC_CLIENT_SECRET', 'env-secret')
        monkeypatch.setenv('DC_HUB_ID', 'env-hub')

        creds = Authenticator(overrides={'hub_id': 'cli-hub', 'client_id': None}).get_credentials()

        assert creds.hub_id == 'cli-hub'
        assert creds.client_id == 'env-id'

    def test_environment_wins_over_file_values(self, mock_load_dotenv, monkeypatch):
        """Environment variables take precedence over configuration file values."""
        monkeypatch.setenv('DC_HUB_ID', 'env-hub')

        creds = Authenticator(file_values={
            'client_id': 'file-id',
            'client_secret': 'file-secret',
            'hub_id': 'file-hub',
            'api_url': 'https://api.example.com/v2/content/',
        }).get_credentials()

        assert creds.hub_id == 'env-hub'
        assert creds.client_id == 'file-id'
        assert creds.api_url == 'https://api.example.com/v2/content'

    def test_missing_credentials_raise(self, mock_load_dotenv):
        """A missing hub ID should raise InvalidCredentialsError."""
        auth = Authenticator(overrides={'client_id': 'id', 'client_secret': 'secret'})

        with pytest.raises(InvalidCredentialsError) as exc_info:
            auth.get_credentials()

        assert exc_info.value.client_id == 'id'
        assert exc_info.value.endpoint == DEFAULT_AUTH_URL

    def test_missing_everything_reports_unknown_client(self, mock_load_dotenv):
        """With nothing configured the error names an unknown client."""
        with pytest.raises(InvalidCredentialsError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.client_id == 'unknown'


class TestDotenvIsolation:
    """Test cases for the credential isolation applied to every test."""

    def test_dotenv_file_is_not_loaded(self):
        """A developer's .env file cannot put credentials back into tests."""
        assert auth_module.load_dotenv is not dotenv.load_dotenv

        Authenticator()

        assert "DC_CLIENT_ID" not in os.environ
        with pytest.raises(InvalidCredentialsError):
            Authenticator().get_credentials()
