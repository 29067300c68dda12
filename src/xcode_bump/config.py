"""Configuration management for xcode-bump.

Loads configuration from a YAML file with fallback to default values.
"""

import copy
from pathlib import Path
from typing import Any, Optional

import yaml

from .constants import (
    BUNDLE_SHORT_VERSION_KEY,
    BUNDLE_VERSION_KEY,
    CONFIG_FILENAME,
    INFO_PLIST_SETTING,
    PROJECT_SUFFIX,
)
from .exceptions import ConfigError


class Config:
    """Central configuration class.

    Loads configuration from ``.xcode-bump.yaml`` or uses defaults.

    Example:
        >>> config = Config()
        >>> config.get("plist.version_key")
        'CFBundleShortVersionString'
        >>> config.bump.always_increment_build
        True
    """

    DEFAULT_CONFIG = {
        "project": {"suffix": PROJECT_SUFFIX, "info_plist_setting": INFO_PLIST_SETTING},
        "plist": {"version_key": BUNDLE_SHORT_VERSION_KEY, "build_key": BUNDLE_VERSION_KEY},
        "bump": {"always_increment_build": True},
        "output": {"color": True},
        "logging": {"level": "WARNING", "file": None},
    }

    def __init__(self, config_path: Optional[Path] = Path(CONFIG_FILENAME)):
        """Initializes the configuration.

        Args:
            config_path: Path to the YAML configuration file (default: .xcode-bump.yaml).
                None uses the defaults only.
        """
        self._config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_path is not None and config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                user_config = yaml.safe_load(f)
            if user_config is not None and not isinstance(user_config, dict):
                raise ConfigError(
                    f"{config_path} must contain a mapping of settings, got {type(user_config).__name__}"
                )
            if user_config:
                self._merge_config(user_config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merges the user config over the defaults (deep merge)."""

        def deep_merge(base: dict, override: dict) -> dict:
            result = base.copy()
            for key, value in override.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = deep_merge(result[key], value)
                else:
                    result[key] = value
            return result

        self._config = deep_merge(self._config, user_config)

    def get(self, key: str, default: Any = None) -> Any:
        """Fetches a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g. "plist.build_key").
            default: Value returned if the key does not exist.

        Returns:
            Configuration value or default.
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def project(self) -> "ProjectConfig":
        """Access to the project scanning configuration."""
        return ProjectConfig(self._config["project"])

    @property
    def plist(self) -> "PlistConfig":
        """Access to the plist key configuration."""
        return PlistConfig(self._config["plist"])

    @property
    def bump(self) -> "BumpConfig":
        """Access to the bump policy configuration."""
        return BumpConfig(self._config["bump"])

    @property
    def output(self) -> "OutputConfig":
        """Access to the console output configuration."""
        return OutputConfig(self._config["output"])

    @property
    def logging(self) -> "LoggingConfig":
        """Access to the logging configuration."""
        return LoggingConfig(self._config["logging"])


class ProjectConfig:
    """Helper class for project scanning settings."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def suffix(self) -> str:
        return str(self._config["suffix"])

    @property
    def info_plist_setting(self) -> str:
        return str(self._config["info_plist_setting"])


class PlistConfig:
    """Helper class for plist keys."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def version_key(self) -> str:
        return str(self._config["version_key"])

    @property
    def build_key(self) -> str:
        return str(self._config["build_key"])


class BumpConfig:
    """Helper class for the bump policy."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def always_increment_build(self) -> bool:
        return bool(self._config["always_increment_build"])


class OutputConfig:
    """Helper class for console output."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def color(self) -> bool:
        return bool(self._config["color"])


class LoggingConfig:
    """Helper class for logging settings."""

    def __init__(self, config: dict):
        self._config = config

    @property
    def level(self) -> str:
        return str(self._config["level"])

    @property
    def file(self) -> Optional[str]:
        value = self._config.get("file")
        return str(value) if value else None


# Global config instance
_global_config: Config = None


def get_config() -> Config:
    """Returns the global configuration instance (singleton).

    Returns:
        Config instance.
    """
    global _global_config
    if _global_config is None:
        _global_config = Config()
    return _global_config


def reset_config() -> None:
    """Drops the global configuration so the next get_config() reloads it."""
    global _global_config
    _global_config = None
