"""Shared fixtures for wxcover tests."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

ARTICLE_URL = "https://mp.weixin.qq.com/s/AbCdEf123"


def build_response(status_code=200, body=b"", content_type=None, url="https://example.invalid/"):
    """Build a real requests.Response so raise_for_status behaves normally."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.encoding = "utf-8"
    resp.url = url
    if content_type:
        resp.headers["Content-Type"] = content_type
    return resp


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def fake_session():
    """A Mock standing in for requests.Session; configure .get per test."""
    session = Mock(spec=requests.Session)
    return session


@pytest.fixture
def article_url():
    return ARTICLE_URL
