# imports here allow aggregrating types under mock_http_client.record_replay
# pylint: disable=useless-import-alias
from ._adapters import MockTransportError as MockTransportError
from ._adapters import RecordReplayAdapter as RecordReplayAdapter
from ._adapters import ReplayAdapter as ReplayAdapter
from ._codec import MalformedResponseError as MalformedResponseError
from ._codec import MalformedStatusLineError as MalformedStatusLineError
from ._codec import deserialize_response as deserialize_response
from ._codec import serialize_response as serialize_response
from ._fingerprint import fingerprint as fingerprint
from ._fingerprint import request_fingerprint as request_fingerprint
from ._persistence import HttpFileRecordingPersister as HttpFileRecordingPersister
from ._persistence import RecordingNotFoundError as RecordingNotFoundError
