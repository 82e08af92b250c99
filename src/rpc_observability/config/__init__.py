"""Config – 12-factor settings and loaders."""

from rpc_observability.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from rpc_observability.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
