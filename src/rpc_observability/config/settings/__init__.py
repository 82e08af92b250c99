"""Config settings – 12-factor env-based configuration."""
from rpc_observability.config.settings.base import Settings
from rpc_observability.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
