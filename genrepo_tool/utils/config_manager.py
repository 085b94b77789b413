"""
Configuration management utilities.

This module provides centralized configuration loading and validation.
Any failure is reported as a ConfigError before a network call is made.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..exceptions import ConfigError
from ..models.config import ToolConfig
from .constants import DEFAULT_CONFIG_PATH


class ConfigManager:
    """
    Manages configuration loading and access.

    Expected layout::

        [auth]
        username = "ci-bot"
        token = "..."

        [server]            # optional
        base_url = "https://mirrors.tencent.com"
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default path.
        """
        self.config_path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load the raw configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            ConfigError: If the file is missing, unreadable or not valid TOML
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise ConfigError(
                f"Configuration file not found: {self.config_path}",
                operation="load configuration",
                target=str(self.config_path),
            )

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(
                f"Invalid TOML: {e}", operation="load configuration", target=str(self.config_path)
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Cannot read file: {e}", operation="load configuration", target=str(self.config_path)
            ) from e

        logging.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def load_config(self) -> ToolConfig:
        """
        Load and validate the configuration.

        Returns:
            Validated ToolConfig

        Raises:
            ConfigError: If loading fails or required settings are missing
        """
        raw = self.load()
        try:
            config = ToolConfig.model_validate(raw)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
            )
            raise ConfigError(
                f"Invalid configuration: {problems}", operation="load configuration", target=str(self.config_path)
            ) from e

        logging.debug("Using repository server %s as user %s", config.server.base_url, config.auth.username)
        return config


__all__ = ["ConfigManager"]
