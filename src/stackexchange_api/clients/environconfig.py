#!/usr/bin/env python3
"""
Lesson: environconfig
Created: 2026-10-17T10:31:12+01:00
Project: stackexchange_api
Template: script
"""
import os
from typing import Dict, Optional

from dotenv import find_dotenv, load_dotenv  # pip install python-dotenv

from stackexchange_api.clients.api_logging import resolve_log_level
from stackexchange_api.clients.exceptions import ConfigurationError

DEFAULT_HOST = "api.stackoverflow.com"
DEFAULT_API_VERSION = "1.1"
DEFAULT_LOG_LEVEL = "WARNING"


class EnvironmentConfig:
    """Stack Exchange client configuration from environment variables / .env"""

    def __init__(self, load_env_file: bool = True):
        if load_env_file:
            # Real environment variables win over values from .env
            load_dotenv(find_dotenv(usecwd=True), override=False)

        self.api_key = self._get_optional_env('STACKEXCHANGE_API_KEY')
        self.host = self._get_optional_env('STACKEXCHANGE_HOST') or DEFAULT_HOST
        self.api_version = self._get_optional_env('STACKEXCHANGE_API_VERSION') or DEFAULT_API_VERSION
        self.log_level = self._get_log_level('STACKEXCHANGE_LOG_LEVEL')

    def _get_required_env(self, key: str) -> str:
        """Get required environment variable"""
        value = os.getenv(key)
        if not value:
            raise ConfigurationError(f"Required environment variable {key} is not set")
        return value

    def _get_optional_env(self, key: str) -> Optional[str]:
        """Get optional environment variable"""
        return os.getenv(key)

    def _get_log_level(self, key: str) -> str:
        """Log level name, checked against the levels logging knows about"""
        value = (self._get_optional_env(key) or '').strip().upper() or DEFAULT_LOG_LEVEL
        try:
            resolve_log_level(value)
        except ConfigurationError as e:
            raise ConfigurationError(f"{key} is not a valid log level: {value!r}") from e
        return value

    def require_api_key(self) -> str:
        """For callers that refuse to run against the anonymous quota"""
        return self._get_required_env('STACKEXCHANGE_API_KEY')

    def validate_all(self) -> Dict[str, bool]:
        """Check which settings are available"""
        return {
            'api_key': bool(self.api_key and self.api_key.strip()),
            'host': bool(self.host),
            'api_version': bool(self.api_version),
        }
