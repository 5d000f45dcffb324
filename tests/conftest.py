"""Pytest configuration: repo root on sys.path, fake Roads API responses."""

import json
import os
import sys
from pathlib import Path

import pytest
import requests

os.environ.setdefault("REQUIRE_AUTH", "false")
os.environ.setdefault("GOOGLE_MAPS_API_KEY", "test-key")

ROOT_PATH = Path(__file__).resolve().parents[1]
if str(ROOT_PATH) not in sys.path:
    sys.path.insert(0, str(ROOT_PATH))


def make_response(body, status_code=200, headers=None):
    """Build a requests.Response without touching the network."""
    r = requests.Response()
    r.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    r._content = (body or "").encode("utf-8")
    r.headers.update(headers or {})
    r.encoding = "utf-8"
    r.url = "https://roads.googleapis.com/v1/test"
    return r


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def no_sleep():
    from unittest.mock import patch
    with patch("roadsBackendFlask.utils.http.time.sleep") as sleep:
        yield sleep
