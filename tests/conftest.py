"""Shared pytest fixtures for a2a-client tests."""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import MagicMock, patch

import pytest
import requests

from a2a_client.client import RemoteToolClient
from a2a_client.models import ClientConfig

BASE_URL = "http://agent.test/tools"


def build_response(
    status_code: int = 200,
    body: Any = None,
    text: str | None = None,
    reason: str = "OK",
) -> requests.Response:
    """Build a real requests.Response without touching the network.

    Args:
        status_code: HTTP status.
        body: JSON-serializable body (ignored when text is given).
        text: Raw body text.
        reason: Status reason phrase.
    """
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = BASE_URL
    response.encoding = "utf-8"
    raw = text if text is not None else json.dumps(body if body is not None else {})
    response._content = raw.encode("utf-8")
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def session() -> MagicMock:
    """A stand-in requests.Session; set .post.side_effect / .return_value per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def no_sleep():
    """Patch out backoff sleeps and expose the mock for assertions."""
    with patch("a2a_client.client.time.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture
def remote_client(session: MagicMock) -> RemoteToolClient:
    """Client pointed at BASE_URL with the default retry budget."""
    return RemoteToolClient(ClientConfig(base_url=BASE_URL), session=session)


@pytest.fixture
def mock_client(session: MagicMock) -> RemoteToolClient:
    """Client with no remote configured."""
    return RemoteToolClient(ClientConfig(), session=session)
