from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mock_http_client import constants


class MockHttpConfig(BaseSettings):
    """
    Configuration for the mock HTTP client

    recording_dir: directory holding one <fingerprint>.http file per recorded request
    mode: "replay" to only serve recordings, "record" to forward and record on a miss
    """

    model_config = SettingsConfigDict(extra="ignore")

    recording_dir: str = Field(default=constants.DEFAULT_RECORDING_DIR, alias="MOCK_HTTP_RECORDING_DIR")
    mode: str = Field(default=constants.MODE_REPLAY, alias="MOCK_HTTP_MODE", pattern=constants.MODE_PATTERN)
