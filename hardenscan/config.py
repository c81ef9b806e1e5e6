#!/usr/bin/env python3
"""
hardenscan Configuration Management
"""

import copy
import json
import os
from pathlib import Path
from typing import Any

from .core.constants import DEFAULT_MAX_FILE_SIZE_MB


class ConfigError(Exception):
    """Raised when a configuration file cannot be used"""


class Config:
    """Configuration manager for hardenscan"""

    DEFAULT_CONFIG = {
        "general": {"verbose": False},
        "analysis": {
            "max_file_size_mb": DEFAULT_MAX_FILE_SIZE_MB,
            "follow_symlinks": False,
        },
        "output": {"json_indent": 2, "list_functions": False},
    }

    def __init__(self, config_path: str | None = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        # Load configuration if exists
        if os.path.exists(self.config_path):
            self.load_config()

    def _get_default_config_path(self) -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".hardenscan" / "config.json")

    def load_config(self) -> None:
        """Load configuration from file"""
        try:
            with open(self.config_path) as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not load config from {self.config_path}: {e}") from e

        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file must contain a JSON object: {self.config_path}")
        self._merge_config(user_config)

    def save_config(self) -> None:
        """Save configuration to file"""
        config_dir = Path(self.config_path).parent
        config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, "w") as f:
            json.dump(self.config, f, indent=2)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def get(self, section: str, key: str | None = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value) -> None:
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    @property
    def max_file_size_bytes(self) -> int:
        return int(self.get("analysis", "max_file_size_mb", DEFAULT_MAX_FILE_SIZE_MB)) * 1024 * 1024

    @property
    def follow_symlinks(self) -> bool:
        return bool(self.get("analysis", "follow_symlinks", False))

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
