import logging
import os
import tempfile

from requests import PreparedRequest, Response

from mock_http_client import constants
from ._codec import deserialize_response, serialize_response
from ._fingerprint import request_fingerprint

logger = logging.getLogger(__name__)


class RecordingNotFoundError(FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"No recording file found at {path}")
        self.path = path


class HttpFileRecordingPersister:
    """
    Stores one recorded response per request as <recording_dir>/<fingerprint>.http
    """

    def __init__(self, recording_dir: str = constants.DEFAULT_RECORDING_DIR):
        self._recording_dir = recording_dir

    @property
    def recording_dir(self) -> str:
        return self._recording_dir

    def get_recording_file_path(self, request: PreparedRequest) -> str:
        recording_file_name = request_fingerprint(request) + constants.RECORDING_FILE_EXTENSION
        return os.path.join(self._recording_dir, recording_file_name)

    def ensure_recording_dir_exists(self):
        os.makedirs(self._recording_dir, exist_ok=True)

    def has_recording(self, request: PreparedRequest) -> bool:
        return os.path.isfile(self.get_recording_file_path(request))

    def save_recording(self, request: PreparedRequest, response: Response):
        data = serialize_response(response)

        recording_path = self.get_recording_file_path(request)
        self.ensure_recording_dir_exists()
        # write to a temp file alongside and swap it in, so readers see either the old or the new recording
        temp_file = tempfile.NamedTemporaryFile(
            dir=self._recording_dir, prefix=os.path.basename(recording_path) + ".", suffix=".tmp", delete=False
        )
        try:
            with temp_file:
                temp_file.write(data)
            os.replace(temp_file.name, recording_path)
        except BaseException:
            os.remove(temp_file.name)
            raise
        logger.info("💾 Recording saved to %s", recording_path)

    def load_recording(self, request: PreparedRequest) -> Response:
        recording_path = self.get_recording_file_path(request)
        try:
            with open(recording_path, "rb") as f:
                data = f.read()
        except FileNotFoundError as e:
            raise RecordingNotFoundError(recording_path) from e

        return deserialize_response(data, request)
