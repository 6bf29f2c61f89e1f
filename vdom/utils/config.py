"""
Configuration utility for vdom.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "VDOM_CONFIG"

# HTML5 void elements, these never have a closing tag
DEFAULT_VOID_ELEMENTS = [
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr'
]

DEFAULTS: Dict[str, Any] = {
    "parser": {
        "encoding": "utf-8",
        "keep_whitespace": True,
        "void_elements": DEFAULT_VOID_ELEMENTS,
    },
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG",
        "file": None,
    },
}


def default_config_path() -> str:
    """Return the config path from $VDOM_CONFIG or ~/.vdom/config.json."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path
    return os.path.join(os.path.expanduser("~"), ".vdom", "config.json")


class Config:
    """Configuration manager with dotted-key access."""

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
        """Load configuration from file, layered over the defaults."""
        self._set_defaults()
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(loaded, dict):
            logger.error(f"Configuration in {self.config_path} is not a JSON object, using defaults")
            return

        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """Save configuration to file."""
        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'parser.encoding')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots)
            value: Configuration value
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return False
                config = config[part]

            if parts[-1] in config:
                del config[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        """Get a deep copy of all configuration values."""
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        with self._lock:
            self.config = copy.deepcopy(DEFAULTS)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
