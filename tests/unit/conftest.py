"""
Unit test configuration.

Patches dotenv so pydantic-settings never reads the project's real .env file
during unit tests. Tests control config exclusively through monkeypatch.setenv().
"""

import json
from unittest.mock import MagicMock

import pytest


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch):
    """Prevent pydantic-settings from loading .env files in all unit tests."""
    import pydantic_settings.sources.providers.dotenv as ps_dotenv

    monkeypatch.setattr(ps_dotenv, "dotenv_values", lambda *a, **kw: {})


@pytest.fixture
def make_response():
    """Build a fake HTTP response; ``payload`` dicts are JSON-encoded."""

    def _make(payload=None, status_code=200, content=None):
        if content is None:
            content = json.dumps(payload if payload is not None else {}).encode()
        return MagicMock(status_code=status_code, content=content)

    return _make


@pytest.fixture
def http():
    """A mock HttpPoster whose post() answers ``{"success": true}`` by default."""
    client = MagicMock()
    client.post.return_value = MagicMock(status_code=200, content=b'{"success": true}')
    return client
