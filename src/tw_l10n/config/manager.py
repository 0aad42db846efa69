"""Configuration manager for the localization sync tool.

This module loads an optional YAML configuration file, validates it against
the Pydantic schema and overlays credentials taken from the environment.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import SecretStr, ValidationError

from ..exceptions import ConfigurationError
from .schema import SyncConfig


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TW_L10N_CONFIG"
TOKEN_ENV_VAR = "TX_TOKEN"
DEFAULT_CONFIG_FILE = Path("l10n-sync.yml")


class ConfigManager:
    """Loads and validates SyncConfig instances."""

    @staticmethod
    def load_config(config_path: Path) -> SyncConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            SyncConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ConfigurationError: If the YAML is invalid or fails validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML syntax in {config_path}: {e}", context=config_path
            ) from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}",
                context=config_path,
            )

        return ConfigManager.parse_config(config_data, source=str(config_path))

    @staticmethod
    def parse_config(config_data: dict[str, object], source: str = "<dict>") -> SyncConfig:
        """
        Validate raw configuration data.

        Raises:
            ConfigurationError: If the data fails Pydantic validation
        """
        try:
            return SyncConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {source}: {e}", context=source
            ) from e

    @staticmethod
    def resolve_config(environ: dict[str, str] | None = None) -> SyncConfig:
        """
        Build the effective configuration for a command-line run.

        The file named by TW_L10N_CONFIG is loaded when set, otherwise
        ./l10n-sync.yml when present, otherwise defaults are used. A TX_TOKEN
        environment variable always overrides the configured token.

        Args:
            environ: Environment mapping, defaults to os.environ

        Returns:
            SyncConfig: Effective configuration
        """
        env = dict(os.environ) if environ is None else environ

        explicit_path = env.get(CONFIG_ENV_VAR)
        if explicit_path:
            config = ConfigManager.load_config(Path(explicit_path))
        elif DEFAULT_CONFIG_FILE.exists():
            config = ConfigManager.load_config(DEFAULT_CONFIG_FILE)
        else:
            logger.debug("No configuration file found, using defaults")
            config = SyncConfig()

        token = env.get(TOKEN_ENV_VAR)
        if token:
            config.transifex.token = SecretStr(token)

        return config

    @staticmethod
    def require_token(config: SyncConfig) -> str:
        """
        Return the Transifex token or fail before any network access.

        Raises:
            ConfigurationError: If no token is configured
        """
        token = config.transifex.token
        if token is None or not token.get_secret_value():
            raise ConfigurationError(
                f"Transifex API token is required (set {TOKEN_ENV_VAR} or transifex.token)"
            )
        return token.get_secret_value()
