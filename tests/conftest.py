"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

import pytest

# urllib3 logs retries and connection resets at WARNING; tests never hit the network
logging.getLogger("urllib3").setLevel(logging.ERROR)

HUB_ENV_VARS = ("DC_CLIENT_ID", "DC_CLIENT_SECRET", "DC_HUB_ID", "DC_API_URL", "DC_AUTH_URL")


@pytest.fixture(autouse=True)
def isolated_hub_env(monkeypatch):
    """Keep real hub credentials from the environment and any .env file out of tests."""
    for name in HUB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("src.hub_client.auth.load_dotenv", lambda *args, **kwargs: False)
