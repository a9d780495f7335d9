"""Configuration loader with multi-source support."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs
import toml
from pydantic import ValidationError

from ..errors import ConfigurationError
from .schema import APP_NAME, XPInstallConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads configuration from multiple sources with priority."""

    def __init__(self, app_name: str = APP_NAME) -> None:
        self.app_name = app_name

    def load(self, defaults_path: Optional[Path] = None) -> XPInstallConfig:
        """Load configuration from all sources.

        Args:
            defaults_path: Optional path to a defaults.toml file

        Returns:
            Validated configuration object

        Raises:
            ConfigurationError: If a config file is unreadable or invalid
        """
        # 1. Start with defaults (explicit file or ./config/defaults.toml)
        config_dict = self._load_defaults(defaults_path)

        # 2. Merge system config
        system_config = self._load_system_config()
        if system_config:
            config_dict = self._deep_merge(config_dict, system_config)

        # 3. Merge user config
        user_config = self._load_user_config()
        if user_config:
            config_dict = self._deep_merge(config_dict, user_config)

        # 4. Override with environment variables
        config_dict = self._apply_env_overrides(config_dict)

        # 5. Validate and create Config object
        try:
            config = XPInstallConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", errors=e.errors()) from e

        return config

    def _read_toml(self, path: Path) -> Dict[str, Any]:
        try:
            return toml.load(path)
        except toml.TomlDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}", path=str(path)) from e

    def _load_defaults(self, defaults_path: Optional[Path] = None) -> Dict[str, Any]:
        """Load default configuration file, if any."""
        if defaults_path is not None:
            defaults_path = Path(defaults_path)
            if not defaults_path.exists():
                raise ConfigurationError(
                    f"Config file not found: {defaults_path}", path=str(defaults_path)
                )
            return self._read_toml(defaults_path)

        cwd_defaults = Path.cwd() / "config" / "defaults.toml"
        if cwd_defaults.exists():
            return self._read_toml(cwd_defaults)

        # Field defaults in the schema cover everything else
        return {}

    def _load_system_config(self) -> Optional[Dict[str, Any]]:
        """Load system-wide configuration."""
        if os.name == "nt":  # Windows
            system_path = (
                Path(os.environ.get("PROGRAMDATA", "C:\\ProgramData"))
                / self.app_name
                / "config.toml"
            )
        else:  # Linux/Mac
            system_path = Path(f"/etc/{self.app_name}/config.toml")

        if system_path.exists():
            return self._read_toml(system_path)

        return None

    def _load_user_config(self) -> Optional[Dict[str, Any]]:
        """Load user-specific configuration."""
        user_config_dir = platformdirs.user_config_dir(appname=self.app_name, appauthor=False)
        user_config_path = Path(user_config_dir) / "config.toml"

        logger.debug(f"Looking for user config at {user_config_path}")

        if user_config_path.exists():
            logger.debug(f"Loading user config from {user_config_path}")
            return self._read_toml(user_config_path)

        return None

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Override config with environment variables."""
        # Environment variables format: XPINSTALL_SECTION_KEY
        prefix = f"{self.app_name.upper().replace('-', '_')}_"

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            # XPINSTALL_INSTALL_INSTALL_DIR -> install.install_dir
            section, _, key = env_key[len(prefix):].lower().partition("_")
            if not key:
                continue

            current = config.setdefault(section, {})
            if not isinstance(current, dict):
                continue
            current[key] = env_value

        return config
