"""Configuration file loading and validation.

This module handles loading hub settings from an optional YAML file. Values
found here are the lowest-priority source of credentials: command line
options and environment variables override them.
"""

import os
from typing import Any, Dict

import yaml

from .errors import ConfigError
from .models import HubConfig


class ConfigLoader:
    """Handles configuration file loading and validation.

    Configuration file structure:
        client_id: "my-client"
        client_secret: "..."
        hub_id: "5b32377e4cedfd01c45036d8"
        api_url: "https://api.amplience.net/v2/content"
        auth_url: "https://auth.amplience.net/oauth/token"
        page_size: 100

    A missing file is treated as an empty configuration.
    """

    DEFAULT_CONFIG_PATH = os.path.join('~', '.amplience', 'dc-cli-config.yaml')

    STRING_FIELDS = ('client_id', 'client_secret', 'hub_id', 'api_url', 'auth_url')

    @classmethod
    def load(cls, config_path: str) -> HubConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file (``~`` is expanded)

        Returns:
            HubConfig with parsed settings

        Raises:
            ConfigError: If the file cannot be read or is invalid
        """
        path = os.path.expanduser(config_path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return HubConfig()
        except PermissionError:
            raise ConfigError(f"Permission denied reading {path}")
        except OSError as e:
            raise ConfigError(f"Failed to read {path}: {e}")

        if not content.strip():
            return HubConfig()

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return HubConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> HubConfig:
        values: Dict[str, Any] = {}

        for name in cls.STRING_FIELDS:
            value = config_dict.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigError(
                    f"must be a string, got {type(value).__name__}",
                    name
                )
            if value.strip():
                values[name] = value.strip()

        page_size = config_dict.get('page_size')
        if page_size is not None:
            # bool is an int subclass
            if not isinstance(page_size, int) or isinstance(page_size, bool):
                raise ConfigError(
                    f"must be an integer, got {type(page_size).__name__}",
                    'page_size'
                )
            if page_size < 1:
                raise ConfigError("must be at least 1", 'page_size')
            values['page_size'] = page_size

        return HubConfig(**values)
