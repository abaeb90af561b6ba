"""
Configuration management for Recipe Home.

This module centralizes environment variable loading from the .env file at project root.
It should be imported early by the Streamlit entry point (recipe_app/app.py) and by every
page so that .env is loaded before any other code accesses environment variables.

In production, .env will not exist; load_dotenv() is safe to call and will no-op.
Environment variables set by the hosting platform will be used instead.

Environment Variables:
- RECIPE_API_URL: Optional, recipe list endpoint (defaults to http://localhost:3001/recipes)
- RECIPE_API_TIMEOUT: Optional, request timeout in seconds (defaults to 10)
- APP_LANGUAGE: Optional, UI language code (defaults to "ko")
- LOG_LEVEL: Optional, logging level name (defaults to "INFO")
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:3001/recipes"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LANGUAGE = "ko"
DEFAULT_LOG_LEVEL = "INFO"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is located by going up from this file's location
    (recipe_app/config.py -> recipe_app/ -> project root).

    Safe to call multiple times. Existing environment variables take precedence
    over values in .env (override=False).
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class ApiConfig:
    """Configuration for the recipe storage API."""

    @staticmethod
    def get_recipes_url() -> str:
        """
        Get the recipe collection endpoint.

        Returns:
            Endpoint URL with trailing slash removed.
        """
        url = os.getenv("RECIPE_API_URL") or DEFAULT_API_URL
        return url.rstrip("/")

    @staticmethod
    def get_timeout() -> float:
        """
        Get the request timeout in seconds.

        Returns:
            Timeout as float. Falls back to the default when the variable
            is missing, not a number, or not positive.
        """
        raw = os.getenv("RECIPE_API_TIMEOUT")
        if not raw:
            return DEFAULT_TIMEOUT_SECONDS
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Invalid RECIPE_API_TIMEOUT %r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        if timeout <= 0:
            logger.warning("Non-positive RECIPE_API_TIMEOUT %r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
            return DEFAULT_TIMEOUT_SECONDS
        return timeout


class UiConfig:
    """Configuration for the Streamlit front end."""

    @staticmethod
    def get_language() -> str:
        """Get the UI language code (lowercased), default "ko"."""
        return (os.getenv("APP_LANGUAGE") or DEFAULT_LANGUAGE).strip().lower()

    @staticmethod
    def get_log_level() -> str:
        return (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()


def configure_logging() -> None:
    """
    Apply LOG_LEVEL to the root logger.

    Streamlit reruns the entry script on every interaction; logging.basicConfig
    only installs a handler the first time, so repeated calls just reset the level.
    """
    level_name = UiConfig.get_log_level()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
