#!/usr/bin/env python3
"""
Lesson: api_logging
Created: 2026-10-17T10:20:05+01:00
Project: stackexchange_api
Template: script
"""
import logging
import re

from stackexchange_api.clients.exceptions import ConfigurationError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_KEY_PARAM = re.compile(r'([?&]key=)[^&]*')


def get_logger(name: str, log_level: str = "WARNING") -> logging.Logger:
    """
    Named `api_client.<name>` logger with a single stream handler.
    Calling it again for the same name only updates the level.
    """
    logger = logging.getLogger(f"api_client.{name}")
    logger.setLevel(resolve_log_level(log_level))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def resolve_log_level(log_level: str) -> int:
    """Level name (any case, surrounding spaces ignored) -> logging level number"""
    level = logging.getLevelName(str(log_level).strip().upper())
    # getLevelName hands back "Level X" for names it does not know
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {log_level!r}")
    return level


def mask_api_key(uri: str) -> str:
    """Hide the `key` query parameter before a URI goes anywhere near a log"""
    return _KEY_PARAM.sub(r'\1***HIDDEN***', uri)
