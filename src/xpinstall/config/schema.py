"""Configuration schema definitions using Pydantic."""

import tempfile
from pathlib import Path
from typing import Literal, Optional

import platformdirs
from pydantic import BaseModel, ConfigDict, Field, field_validator

APP_NAME = "xpinstall"


def expand_path_variables(value: str) -> str:
    """Expand ${VAR} placeholders in a configured path."""
    replacements = {
        "${USER_HOME}": str(Path.home()),
        "${USER_DATA}": platformdirs.user_data_dir(APP_NAME, appauthor=False),
        "${USER_CONFIG}": platformdirs.user_config_dir(APP_NAME, appauthor=False),
        "${TEMP}": tempfile.gettempdir(),
    }

    for var, replacement in replacements.items():
        value = value.replace(var, replacement)

    return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra='forbid', validate_default=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level"
    )
    format: Literal["simple", "detailed", "json"] = Field(
        default="simple",
        description="Log format type"
    )
    file: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Normalize log level to uppercase for case-insensitive input."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('format', mode='before')
    @classmethod
    def normalize_format(cls, v: str) -> str:
        """Normalize format to lowercase for case-insensitive input."""
        if isinstance(v, str):
            return v.lower()
        return v

    @field_validator('file')
    @classmethod
    def expand_file(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return expand_path_variables(v)


class InstallConfig(BaseModel):
    """Add-on installation settings."""

    model_config = ConfigDict(extra='forbid', validate_default=True)

    install_dir: str = Field(
        default="${USER_DATA}/extensions",
        description="Directory add-ons are installed into when none is given"
    )

    @field_validator('install_dir')
    @classmethod
    def expand_install_dir(cls, v: str) -> str:
        """Expand ${VAR} in the install directory."""
        return expand_path_variables(v)


class XPInstallConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra='forbid', validate_assignment=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    install: InstallConfig = Field(default_factory=InstallConfig)
