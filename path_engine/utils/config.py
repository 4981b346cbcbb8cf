"""
Configuration for the path engine.
"""

import copy
import json
import logging
import os
import threading
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PATH_ENGINE_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG",
        "file": None,
        "to_default_file": False
    },
    "engine": {
        "strategy": "recursive",
        "log_timing": False
    },
    "parser": {
        "backend": None,
        "keep_whitespace": False
    }
}


def default_config_path() -> str:
    """
    Get the configuration file path.

    Returns:
        $PATH_ENGINE_CONFIG if set, else ~/.path_engine/config.json
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path
    return os.path.join(os.path.expanduser("~"), ".path_engine", "config.json")


class Config:
    """
    JSON-backed configuration with dotted keys.

    Keys address nested sections, e.g. config.get('engine.strategy'). Values
    missing from the file fall back to DEFAULTS.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file
        """
        self.config_path = config_path or default_config_path()
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """Load configuration from file, keeping defaults for missing keys."""
        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, 'r') as f:
                    loaded = json.load(f)
                if not isinstance(loaded, dict):
                    raise ValueError("top level of the configuration must be an object")
                with self._lock:
                    self.config = _merge(copy.deepcopy(DEFAULTS), loaded)
                logger.debug(f"Configuration loaded from {self.config_path}")
            else:
                logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
                self._set_defaults()
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            self._set_defaults()

    def save(self) -> None:
        """
        Save configuration to file.

        Raises:
            OSError: If the file cannot be written
        """
        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'engine.strategy')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            section = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if not isinstance(section.get(part), dict):
                    return default
                section = section[part]
            return section.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots)
            value: Configuration value
        """
        with self._lock:
            section = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if not isinstance(section.get(part), dict):
                    section[part] = {}
                section = section[part]
            section[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            section = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if not isinstance(section.get(part), dict):
                    return False
                section = section[part]
            if parts[-1] in section:
                del section[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: A copy of the configuration
        """
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        with self._lock:
            self.config = copy.deepcopy(DEFAULTS)
        logger.debug("Default configuration set")


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base
