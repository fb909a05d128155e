#!/usr/bin/env python3
"""
Pytest configuration: canned gzip responses for the Stack Exchange client.
"""
import gzip
import io
import json

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from urllib3.response import HTTPResponse

from stackexchange_api.clients.stackexchange_client import StackExchangeClient


USER_PAYLOAD = {
    "users": [
        {
            "user_id": 893099,
            "user_type": "registered",
            "display_name": "Test User",
            "reputation": 1234,
            "badge_counts": {"gold": 1, "silver": 7, "bronze": 19},
        }
    ]
}

REPUTATION_PAYLOAD = {
    "reputation_changes": [
        {
            "user_id": 893099,
            "post_id": 11,
            "post_type": "answer",
            "title": "How do I unzip a stream?",
            "positive_rep": 10,
            "negative_rep": 0,
            "on_date": 1388620800,
        },
        {
            "user_id": 893099,
            "post_id": 12,
            "post_type": "question",
            "title": "Why is my JSON empty?",
            "positive_rep": 0,
            "negative_rep": 2,
            "on_date": 1388707200,
        },
    ]
}


def build_response(payload=None, status=200, headers=None, raw_body=None):
    """A real requests.Response whose raw stream holds a gzip body"""
    if raw_body is None:
        raw_body = gzip.compress(json.dumps(payload).encode('utf-8'))

    response = requests.Response()
    response.status_code = status
    response.url = "http://api.stackoverflow.com/1.1/test"
    response.headers = CaseInsensitiveDict(headers or {})
    response.raw = HTTPResponse(
        body=io.BytesIO(raw_body),
        headers=headers or {},
        status=status,
        preload_content=False,
    )
    return response


@pytest.fixture
def make_response():
    """Factory fixture for canned responses"""
    return build_response


@pytest.fixture
def client():
    """Anonymous client (no API key)"""
    return StackExchangeClient()


@pytest.fixture
def keyed_client():
    """Client with an API key"""
    return StackExchangeClient(api_key="secret-key")


@pytest.fixture
def user_payload():
    return json.loads(json.dumps(USER_PAYLOAD))


@pytest.fixture
def reputation_payload():
    return json.loads(json.dumps(REPUTATION_PAYLOAD))
