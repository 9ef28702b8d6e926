"""
Configuration management for lockaudit.

Handles loading, merging, and discovery of configuration files, and turns
the merged configuration plus CLI arguments into AuditSettings.
"""
import importlib.resources as importlib_resources
import os
from typing import Optional

import yaml

from lockaudit.models import DEFAULT_LOCK_PATH, DEFAULT_MIN_PACKAGES, AuditSettings

DEBUG_ENV_VAR = "ACTION_DEBUG"
LOCAL_CONFIG_FILE = ".lockaudit.yaml"


def is_debug_enabled() -> bool:
    """Debug output is on whenever ACTION_DEBUG is set, whatever its value."""
    return os.getenv(DEBUG_ENV_VAR) is not None


class ConfigManager:
    """Manages lockaudit configuration loading and merging operations."""

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        with open(path, "r") as f:
            return yaml.safe_load(f) or {}

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        import lockaudit.config
        default_config_path = importlib_resources.files(lockaudit.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f) or {}

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config and merge with package default."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        if not isinstance(user_config, dict):
            raise ValueError(f"Config file {user_config_path} must contain a mapping")
        return self.deep_merge(default_config, user_config)

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            raise FileNotFoundError(f"Config file not found: {config_arg}")

        # Priority 2: .lockaudit.yaml in the working directory
        if os.path.exists(LOCAL_CONFIG_FILE):
            return self.load_and_merge_config(LOCAL_CONFIG_FILE)

        # Priority 3: package defaults
        return self.load_package_default_config()

    def resolve_settings(self, config: dict, path_arg: Optional[str], debug: bool) -> AuditSettings:
        """Merge CLI arguments over configuration values."""
        audit_config = config.get("audit") or {}
        if not isinstance(audit_config, dict):
            raise ValueError(f"audit must be a mapping, got {type(audit_config).__name__}")

        lock_path = path_arg or audit_config.get("lock_path") or DEFAULT_LOCK_PATH
        min_packages = audit_config.get("min_packages", DEFAULT_MIN_PACKAGES)

        if isinstance(min_packages, bool) or not isinstance(min_packages, int) or min_packages < 1:
            raise ValueError(f"audit.min_packages must be a positive integer, got {min_packages!r}")

        return AuditSettings(lock_path=str(lock_path), min_packages=min_packages, debug=debug)
