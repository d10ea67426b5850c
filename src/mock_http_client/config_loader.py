import logging

import requests
from requests.adapters import BaseAdapter

from mock_http_client import constants
from mock_http_client.models import MockHttpConfig
from mock_http_client.record_replay import HttpFileRecordingPersister, RecordReplayAdapter, ReplayAdapter


def get_config_from_env_vars(logger: logging.Logger) -> MockHttpConfig:
    """
    Load configuration from environment variables
    """
    config = MockHttpConfig()
    logger.info("📼 Mock HTTP mode           : %s", config.mode)
    logger.info("📼 Mock HTTP recording dir  : %s", config.recording_dir)
    return config


def create_adapter(config: MockHttpConfig, forwarder: BaseAdapter | None = None) -> BaseAdapter:
    """
    Create the transport adapter for config.mode

    forwarder is only used in record mode - if not set, requests' HTTPAdapter is used
    """
    persister = HttpFileRecordingPersister(config.recording_dir)

    if config.mode == constants.MODE_REPLAY:
        return ReplayAdapter(persister)
    if config.mode == constants.MODE_RECORD:
        return RecordReplayAdapter(persister, forwarder=forwarder)

    logging.getLogger(__name__).error("mode must be one of %s", constants.ALLOWED_MODES)
    raise ValueError(f"Invalid mock HTTP mode: {config.mode}")


def create_session(config: MockHttpConfig, forwarder: BaseAdapter | None = None) -> requests.Session:
    """
    Create a requests Session with all http:// and https:// traffic routed via the mock adapter
    """
    adapter = create_adapter(config, forwarder=forwarder)
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
