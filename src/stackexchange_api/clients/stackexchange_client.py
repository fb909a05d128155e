#!/usr/bin/env python3
"""
Lesson: stackexchange_client
Created: 2026-10-17T11:48:30+01:00
Project: stackexchange_api
Template: auth (api key in query parameter)
"""
import gzip
import re
import zlib
from datetime import datetime
from typing import List, Optional, Type
from urllib.parse import quote

import requests
from urllib3.exceptions import HTTPError as Urllib3HTTPError

from stackexchange_api.clients.api_logging import get_logger, mask_api_key
from stackexchange_api.clients.environconfig import (
    DEFAULT_API_VERSION,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    EnvironmentConfig,
)
from stackexchange_api.clients.exceptions import ParseError, TransportError
from stackexchange_api.clients.models import ReputationChange, User
from stackexchange_api.clients.records import T, to_unix_time, unwrap, wrapper_field_for

# ASCII digits with an optional sign; no underscores or other Unicode digits
_RATE_LIMIT_VALUE = re.compile(r"\s*[+-]?[0-9]+\s*")
INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1


class StackExchangeClient:
    """
    Read-only Stack Exchange API client.

    - API key travels as the `key` query parameter
    - Every response body is gzip-compressed JSON
    - X-RateLimit-Max / X-RateLimit-Current are kept on the client after each call

    The rate limit attributes are plain last-write-wins fields: share one
    instance across threads only behind your own lock.
    """

    def __init__(self, api_key: Optional[str] = None, host: str = DEFAULT_HOST,
                 api_version: str = DEFAULT_API_VERSION, log_level: str = DEFAULT_LOG_LEVEL):
        self.api_key = api_key
        self.base_url = f"http://{host.strip('/')}/{api_version.strip('/')}"
        self.logger = get_logger(self.__class__.__name__, log_level)

        # Filled in from response headers, None until the server reports them
        self.max_rate_limit: Optional[int] = None
        self.current_rate_limit: Optional[int] = None

    @classmethod
    def from_environment(cls, config: Optional[EnvironmentConfig] = None) -> "StackExchangeClient":
        """Build a client from STACKEXCHANGE_* environment variables / .env"""
        config = config or EnvironmentConfig()
        return cls(
            api_key=config.api_key,
            host=config.host,
            api_version=config.api_version,
            log_level=config.log_level,
        )

    # ----------------------------
    # URI building
    # ----------------------------
    def compose_uri(self, path: str) -> str:
        """Base URL + path, with `key=` appended when an API key is set"""
        uri = f"{self.base_url}{path}"
        if self.api_key and self.api_key.strip():
            separator = '&' if '?' in path else '?'
            uri = f"{uri}{separator}key={quote(self.api_key, safe='')}"
        return uri

    # ----------------------------
    # Response reading
    # ----------------------------
    def fetch(self, uri: str) -> str:
        """GET `uri` and return the gunzipped UTF-8 body"""
        safe_uri = mask_api_key(uri)
        self.logger.info(f"🚀 REQUEST: GET {safe_uri}")

        try:
            with requests.get(uri, headers={'Accept': 'application/json'}, stream=True) as response:
                if not 200 <= response.status_code < 300:
                    self.logger.error(f"❌ ERROR: GET {safe_uri} - HTTP {response.status_code}")
                    raise TransportError(
                        f"HTTP {response.status_code} for GET {safe_uri}",
                        status_code=response.status_code,
                    )

                self._parse_headers(response.headers)
                # Raw bytes: the body is gunzipped here, not by requests/urllib3
                compressed = response.raw.read(decode_content=False)
        except (requests.exceptions.RequestException, Urllib3HTTPError) as e:
            self.logger.error(f"❌ ERROR: GET {safe_uri} - {mask_api_key(str(e))}")
            # The library error repeats the full URI, so it is only chained when keyless
            cause = None if self.api_key and self.api_key.strip() else e
            raise TransportError(f"Request failed: {mask_api_key(str(e))}") from cause

        body = self._decompress(compressed)
        self.logger.debug(f"📥 RESPONSE: {len(compressed)} bytes gzip -> {len(body)} chars")
        return body

    def _parse_headers(self, headers) -> None:
        """Copy the server's rate limit counters; absent headers keep old values"""
        if 'X-RateLimit-Max' in headers:
            self.max_rate_limit = self._parse_rate_limit(headers, 'X-RateLimit-Max')
        if 'X-RateLimit-Current' in headers:
            self.current_rate_limit = self._parse_rate_limit(headers, 'X-RateLimit-Current')

        self.logger.debug(f"Rate limit: {self.current_rate_limit}/{self.max_rate_limit}")

    @staticmethod
    def _parse_rate_limit(headers, name: str) -> int:
        value = headers[name]
        if not isinstance(value, str) or not _RATE_LIMIT_VALUE.fullmatch(value):
            raise ParseError(f"{name} header is not an integer: {value!r}")
        number = int(value)
        if not INT32_MIN <= number <= INT32_MAX:
            raise ParseError(f"{name} header is out of range: {value!r}")
        return number

    @staticmethod
    def _decompress(compressed: bytes) -> str:
        try:
            return gzip.decompress(compressed).decode('utf-8')
        except (OSError, EOFError, zlib.error) as e:
            raise TransportError(f"Response body is not valid gzip: {e}") from e
        except UnicodeDecodeError as e:
            raise TransportError(f"Response body is not valid UTF-8: {e}") from e

    # ----------------------------
    # Request -> records pipeline
    # ----------------------------
    def _get_objects(self, record_type: Type[T], path: str) -> List[T]:
        wrapper_field_for(record_type)  # unregistered types fail before any I/O
        json_text = self.fetch(self.compose_uri(path))
        return unwrap(record_type, json_text)

    def _get_object(self, record_type: Type[T], path: str) -> Optional[T]:
        # Single-id lookups take the first element; any extras are dropped
        records = self._get_objects(record_type, path)
        return records[0] if records else None

    # ----------------------------
    # Public API
    # ----------------------------
    def get_user(self, user_id: int) -> Optional[User]:
        """User profile, or None when the id does not exist"""
        return self._get_object(User, f"/users/{user_id}")

    def get_reputation_changes(self, user_id: int, from_date: datetime, to_date: datetime) -> List[ReputationChange]:
        """Reputation events for a user between two dates (naive dates are UTC)"""
        path = (f"/users/{user_id}/reputation"
                f"?fromdate={to_unix_time(from_date)}&todate={to_unix_time(to_date)}")
        return self._get_objects(ReputationChange, path)
