"""
Configuration loader for YAML-based configuration.
Loads scorer settings from config/config.yml and falls back to built-in defaults
for any key the file does not set.

Sample input: config/config.yml with fetch_timeout_seconds, default_report_format
Expected output: ConfigLoader instance with merged configuration
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "fetch_timeout_seconds": 10,
    "default_report_format": "console",
    "progress_delay_seconds": 0.0,
    "max_priority_suggestions": 5,
    "description_preview_length": 100,
    "templates_dir": str(Path(__file__).resolve().parent.parent / "templates"),
}


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the configuration file

    Returns:
        Loaded configuration as dictionary, empty when the file is missing or unreadable
    """
    if not config_path.exists():
        logger.debug(f"Configuration file not found, using defaults: {config_path}")
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration from {config_path}: {e}")
        return {}

    if not isinstance(loaded, dict):
        logger.warning(f"Ignoring configuration file without a mapping: {config_path}")
        return {}

    logger.debug(f"Loaded configuration from {config_path}")
    for key, value in loaded.items():
        logger.debug(f"   {key}: {value}")
    return loaded


class ConfigLoader:
    """Configuration loader for YAML-based configuration."""

    def __init__(self, config_dir: str = "config"):
        """Initialize the configuration loader.

        Args:
            config_dir: Directory containing config.yml
        """
        self.config_dir = Path(config_dir)
        self.config_path = self.config_dir / "config.yml"
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        self._config = {**DEFAULTS, **_load_yaml_config(self.config_path)}

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)

    def get_str(self, key: str, default: str = "") -> str:
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_int(self, key: str, default: int = 0) -> int:
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Config value for '{key}' is not an integer: {value!r}")
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self.get(key, default)
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning(f"Config value for '{key}' is not a number: {value!r}")
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "yes", "y", "1", "on")
        return bool(value)

    def get_path(self, key: str, default: str = "") -> Path:
        return Path(self.get_str(key, default))

    def reload(self) -> None:
        """Reload configuration from disk."""
        self._load_config()
        logger.info("Configuration reloaded")

    @property
    def all(self) -> Dict[str, Any]:
        """Get all effective configuration values."""
        return dict(self._config)


# Global configuration instance
config = ConfigLoader()
