"""
Simplified configuration for the OpenAPI specification scorer.
Provides path helpers and basic utilities.
All configuration parameters are in config/config.yml via config_loader.
"""

import logging
from pathlib import Path

from .services.config_loader import DEFAULTS, config

# Configure logging with basicConfig
logging.basicConfig(
    level=logging.INFO,  # Set the log level to INFO
    # Define log message format
    format="%(asctime)s,p%(process)s,{%(filename)s:%(lineno)d},%(levelname)s,%(message)s",
)

logger = logging.getLogger(__name__)


def get_templates_dir() -> Path:
    """Get the report templates directory, falling back to the packaged templates."""
    templates_dir = config.get_path("templates_dir", DEFAULTS["templates_dir"])
    if not templates_dir.is_dir():
        logger.warning(
            f"Templates directory {templates_dir} not found, using packaged templates"
        )
        return Path(DEFAULTS["templates_dir"])
    return templates_dir


def get_config_file() -> Path:
    """Get the path of the YAML configuration file."""
    return config.config_path


if __name__ == "__main__":
    """Standalone testing of simplified configuration."""
    logger.info("Testing simplified configuration module...")

    logger.info(f"Templates dir: {get_templates_dir()}")
    logger.info(f"Config file: {get_config_file()} (exists: {get_config_file().exists()})")
    logger.info(f"Fetch timeout from config.yml: {config.get_float('fetch_timeout_seconds')}")

    logger.info("Simplified configuration module test completed successfully")
