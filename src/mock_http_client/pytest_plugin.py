"""
pytest integration - registered via the pytest11 entry point

Usage:

    @pytest.mark.mock_http(mode="record", recording_dir="tests/.mock_responses")
    def test_something(mock_http_session):
        response = mock_http_session.get("https://example.com/")

Without the marker, the configuration comes from the MOCK_HTTP_* environment variables.
"""

import logging

import pytest

from mock_http_client.config_loader import create_session, get_config_from_env_vars
from mock_http_client.models import MockHttpConfig

logger = logging.getLogger(__name__)


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "mock_http(mode=None, recording_dir=None): override the mock HTTP mode/recording directory for a test",
    )


@pytest.fixture
def mock_http_config(request) -> MockHttpConfig:
    marker = request.node.get_closest_marker("mock_http")
    if not marker:
        return get_config_from_env_vars(logger)

    # marker values take priority over environment variables
    overrides = {}
    if marker.kwargs.get("mode"):
        overrides["MOCK_HTTP_MODE"] = marker.kwargs["mode"]
    if marker.kwargs.get("recording_dir"):
        overrides["MOCK_HTTP_RECORDING_DIR"] = str(marker.kwargs["recording_dir"])
    return MockHttpConfig(**overrides)


@pytest.fixture
def mock_http_session(mock_http_config: MockHttpConfig):
    session = create_session(mock_http_config)
    yield session
    session.close()
