"""Pytest fixtures shared across the test suite.

Global test safety measures:
 - Handler registry is reset around every test
 - requests.get is replaced so no test can reach the real Spotify API
"""
import pytest
import requests

from apimeta.handlers.registry import clear_handlers
from tests.mocks.fakes import RecordingBroadcaster


@pytest.fixture(autouse=True)
def _clean_registry():
    clear_handlers()
    yield
    clear_handlers()


@pytest.fixture(autouse=True)
def _no_network(monkeypatch):
    def _blocked(*a, **k):  # pragma: no cover - only hit by a broken test
        raise RuntimeError("network access attempted during tests")
    monkeypatch.setattr(requests, "get", _blocked)


@pytest.fixture
def bcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster()


@pytest.fixture
def test_config() -> dict:
    """Minimal configuration dict; pass as ``obj`` to the CLI to skip env loading."""
    return {
        'log_level': 'DEBUG',
        'provider': 'spotify',
        'providers': {
            'spotify': {
                'access_token': 'test-token',
                'api_base': 'https://api.spotify.test/v1',
                'timeout_seconds': 5.0,
                'market': None,
                'track_batch_size': 50,
                'album_batch_size': 20,
                'artist_batch_size': 50,
            },
        },
    }
