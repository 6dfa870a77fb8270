"""
Main configuration class that composes all configs.
"""

import json
import os
import re
from functools import lru_cache
from typing import Any

import structlog
from dotenv import load_dotenv

from microcors.core.config.cors_config import CorsConfig
from microcors.core.config.logging_config import LoggingConfig
from microcors.core.errors import CorsConfigurationError

logger = structlog.get_logger(__name__)


def _env_bool(name: str) -> bool | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> list[str] | None:
    """Parse a JSON list from the environment, None when unset or malformed."""
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        # Fallback to default values if JSON parsing fails
        logger.warning("cors_env_list_invalid", variable=name, value=raw)
        return None
    if not isinstance(value, list):
        logger.warning("cors_env_list_invalid", variable=name, value=raw)
        return None
    return [str(item) for item in value]


def _env_max_age() -> int | str | None:
    raw = os.getenv("CORS_MAX_AGE")
    if not raw:
        return None
    # Non-numeric values are sent verbatim
    return int(raw) if raw.isdigit() else raw


def _env_origin() -> Any:
    pattern = os.getenv("CORS_ORIGIN_REGEX")
    if pattern:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise CorsConfigurationError("CORS_ORIGIN_REGEX", pattern, str(e)) from e

    raw = os.getenv("CORS_ORIGIN")
    if not raw:
        return None

    lowered = raw.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if raw.lstrip().startswith("["):
        # An unreadable allowlist must not widen to the "*" default
        try:
            origins = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorsConfigurationError("CORS_ORIGIN", raw, str(e)) from e
        return [str(item) for item in origins]
    return raw


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        # CORS configuration; unset variables keep the built-in defaults
        self.cors = CorsConfig(
            origin=_env_origin(),
            max_age=_env_max_age(),
            allow_methods=_env_list("CORS_ALLOW_METHODS"),
            allow_headers=_env_list("CORS_ALLOW_HEADERS"),
            expose_headers=_env_list("CORS_EXPOSE_HEADERS"),
            allow_credentials=_env_bool("CORS_ALLOW_CREDENTIALS"),
            run_handler_on_preflight_request=_env_bool("CORS_RUN_HANDLER_ON_PREFLIGHT"),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file_path=os.getenv("LOG_FILE_PATH"),
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load environment variables from a .env file and build the shared config."""
    load_dotenv()
    return Config()
