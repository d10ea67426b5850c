# pylint: disable=useless-import-alias
from mock_http_client.config_loader import create_adapter as create_adapter
from mock_http_client.config_loader import create_session as create_session
from mock_http_client.config_loader import get_config_from_env_vars as get_config_from_env_vars
from mock_http_client.models import MockHttpConfig as MockHttpConfig
from mock_http_client.record_replay import (
    HttpFileRecordingPersister as HttpFileRecordingPersister,
    MockTransportError as MockTransportError,
    RecordReplayAdapter as RecordReplayAdapter,
    ReplayAdapter as ReplayAdapter,
)
