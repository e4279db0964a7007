"""Authentication module for loading content hub credentials.

This module handles loading the hub client credentials from CLI overrides,
environment variables (via python-dotenv) and the optional YAML configuration
file. It validates that all required credentials are present and raises
appropriate errors if any are missing.
"""

import os
from typing import Dict, NamedTuple, Optional

from dotenv import load_dotenv

from .errors import InvalidCredentialsError

DEFAULT_API_URL = "https://api.amplience.net/v2/content"
DEFAULT_AUTH_URL = "https://auth.amplience.net/oauth/token"

# Credential field -> environment variable
ENV_VARS = {
    'client_id': 'DC_CLIENT_ID',
    'client_secret': 'DC_CLIENT_SECRET',
    'hub_id': 'DC_HUB_ID',
    'api_url': 'DC_API_URL',
    'auth_url': 'DC_AUTH_URL',
}


class Credentials(NamedTuple):
    """Content hub API credentials."""
    client_id: str
    client_secret: str
    hub_id: str
    api_url: str = DEFAULT_API_URL
    auth_url: str = DEFAULT_AUTH_URL


class Authenticator:
    """Loads and validates hub credentials.

    Values are resolved per field in this order: CLI overrides, environment
    variables (a .env file is loaded first), values from the configuration
    file, then built-in defaults for the API and auth URLs. Credentials are
    never cached or logged.

    Required values:
        client_id (DC_CLIENT_ID): OAuth client ID
        client_secret (DC_CLIENT_SECRET): OAuth client secret
        hub_id (DC_HUB_ID): ID of the hub to operate on

    Example:
        >>> auth = Authenticator(overrides={'hub_id': 'abc123'})
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to hub {creds.hub_id}")
    """

    def __init__(
        self,
        overrides: Optional[Dict[str, Optional[str]]] = None,
        file_values: Optional[Dict[str, Optional[str]]] = None,
    ):
        """Initialize the authenticator by loading environment variables from .env file.

        Args:
            overrides: Values supplied on the command line (None entries are ignored)
            file_values: Values read from the YAML configuration file
        """
        load_dotenv()
        self._overrides = overrides or {}
        self._file_values = file_values or {}

    def _resolve(self, field: str) -> Optional[str]:
        value = self._overrides.get(field)
        if value:
            return value
        value = os.getenv(ENV_VARS[field])
        if value:
            return value
        return self._file_values.get(field) or None

    def get_credentials(self) -> Credentials:
        """Get hub credentials.

        Returns:
            Credentials: A named tuple with client_id, client_secret, hub_id and URLs

        Raises:
            InvalidCredentialsError: If any required credential is missing
        """
        client_id = self._resolve('client_id')
        client_secret = self._resolve('client_secret')
        hub_id = self._resolve('hub_id')
        api_url = self._resolve('api_url') or DEFAULT_API_URL
        auth_url = self._resolve('auth_url') or DEFAULT_AUTH_URL

        if not client_id or not client_secret or not hub_id:
            raise InvalidCredentialsError(
                client_id=client_id if client_id else "unknown",
                endpoint=auth_url
            )

        return Credentials(
            client_id=client_id,
            client_secret=client_secret,
            hub_id=hub_id,
            api_url=api_url.rstrip('/'),
            auth_url=auth_url,
        )
