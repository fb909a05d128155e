#!/usr/bin/env python3
"""
Lesson: exceptions
Created: 2026-10-17T10:12:40+01:00
Project: stackexchange_api
Template: script
"""
from typing import Optional


class StackExchangeError(Exception):
    """Base class for every error raised by the Stack Exchange client."""
    pass


class TransportError(StackExchangeError):
    """
    The request never produced a usable body: network failure, non-2xx
    status, or a body that could not be gunzipped / decoded as UTF-8.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(StackExchangeError):
    """Malformed JSON, a missing or mistyped field, or a bad rate-limit header."""
    pass


class ConfigurationError(StackExchangeError):
    """Programming/setup error: unregistered record type or missing required setting."""
    pass
