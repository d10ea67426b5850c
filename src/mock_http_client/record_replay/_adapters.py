import logging

from requests import PreparedRequest, Response
from requests.adapters import BaseAdapter, HTTPAdapter
from requests.exceptions import ConnectionError as RequestsConnectionError

from ._codec import MalformedResponseError
from ._persistence import HttpFileRecordingPersister

logger = logging.getLogger(__name__)


class MockTransportError(RequestsConnectionError):
    """
    The only error raised by the mock adapters.
    The original request is available as .request and the underlying failure as __cause__
    """


class ReplayAdapter(BaseAdapter):
    """
    Transport adapter that only ever answers from recordings - no network access.
    A missing, unreadable or malformed recording is reported as a MockTransportError.
    """

    def __init__(self, persister: HttpFileRecordingPersister):
        super().__init__()
        self._persister = persister

    @property
    def persister(self) -> HttpFileRecordingPersister:
        return self._persister

    def execute(self, request: PreparedRequest) -> Response:
        try:
            return self._persister.load_recording(request)
        except (OSError, MalformedResponseError) as e:
            logger.warning("📼 No usable recording for %s %s: %s", request.method, request.url, e)
            raise MockTransportError(
                f"No usable recording for {request.method} {request.url}: {e}", request=request
            ) from e

    # pylint: disable-next=too-many-arguments
    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        return self.execute(request)

    def close(self):
        pass


class RecordReplayAdapter(BaseAdapter):
    """
    Transport adapter that answers from recordings when present.
    On a miss (including an unreadable or malformed recording) the request is sent via the forwarder
    and the response recorded for next time.
    Any error from the forwarder (normally a RequestException) is raised as a MockTransportError.
    Recording is best-effort: a failure to save is logged and the forwarded response still returned.
    """

    def __init__(self, persister: HttpFileRecordingPersister, forwarder: BaseAdapter | None = None):
        super().__init__()
        self._persister = persister
        self._forwarder = forwarder if forwarder is not None else HTTPAdapter()

    @property
    def persister(self) -> HttpFileRecordingPersister:
        return self._persister

    @property
    def forwarder(self) -> BaseAdapter:
        return self._forwarder

    def execute(self, request: PreparedRequest, **send_kwargs) -> Response:
        try:
            return self._persister.load_recording(request)
        except (OSError, MalformedResponseError) as e:
            logger.debug("📼 Recording miss for %s %s: %s", request.method, request.url, e)

        response = self._forward_request(request, **send_kwargs)
        self._store_recorded_response(request, response)
        return response

    def _forward_request(self, request: PreparedRequest, **send_kwargs) -> Response:
        logger.info("📼 Forwarding %s %s", request.method, request.url)
        send_kwargs["stream"] = False
        try:
            response = self._forwarder.send(request, **send_kwargs)
            # read the body while failures still count as transport errors
            _ = response.content
        except Exception as e:  # pylint: disable=broad-exception-caught
            raise MockTransportError(
                f"Failed to forward {request.method} {request.url}: {e}", request=request
            ) from e
        return response

    def _store_recorded_response(self, request: PreparedRequest, response: Response):
        try:
            self._persister.save_recording(request, response)
        except OSError as e:
            logger.warning("⚠️ Failed to store recording for %s %s: %s", request.method, request.url, e)

    # pylint: disable-next=too-many-arguments
    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        return self.execute(request, timeout=timeout, verify=verify, cert=cert, proxies=proxies)

    def close(self):
        self._forwarder.close()
