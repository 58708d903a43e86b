"""
Configuration management for TaskBoard.
Loads YAML configuration files on top of built-in defaults.
"""

import copy
import yaml
import os
from typing import Any, Dict
import logging


DEFAULT_CONFIG = {
    'web': {
        'host': '0.0.0.0',
        'port': 3009,
        'static_url_path': '/static',
    },
    'mongo': {
        'url': 'mongodb://localhost:27017',
        'database': 'node_project',
        'collection': 'todo',
        'timeout_ms': 5000,
    },
    'logging': {
        'level': 'INFO',
        'console': True,
        'file': None,
    },
}


class Config:
    """
    Application configuration manager
    """

    def __init__(self, config_path: str):
        """
        Load configuration from YAML file

        Args:
            config_path: Path to config.yaml
        """
        self.logger = logging.getLogger(__name__)

        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            loaded = yaml.safe_load(f) or {}

        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration root must be a mapping: {config_path}")

        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self._merge(self._config, loaded)

        # Expand environment variables in paths
        self._expand_paths(self._config)

        self.logger.info(f"Configuration loaded from {config_path}")

    def _merge(self, base: Dict, override: Dict):
        """Recursively merge override into base"""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _expand_paths(self, config: Dict):
        """Recursively expand environment variables in path strings"""
        for key, value in config.items():
            if isinstance(value, dict):
                self._expand_paths(value)
            elif isinstance(value, str) and ('$' in value or '~' in value):
                config[key] = os.path.expandvars(os.path.expanduser(value))

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            path: Configuration path (e.g., 'mongo.url')
            default: Default value if path doesn't exist

        Returns:
            Configuration value
        """
        keys = path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value
