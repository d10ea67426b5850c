import http.client
import io
import re

from requests import PreparedRequest, Response
from requests.structures import CaseInsensitiveDict
from requests.cookies import extract_cookies_to_jar
from requests.utils import get_encoding_from_headers
from urllib3 import HTTPResponse

from mock_http_client import constants

_STATUS_LINE_PATTERN = re.compile(r"HTTP/[0-9]\.[0-9]\s+([0-9]{3})(?:\s+(.*))?")


class MalformedResponseError(ValueError):
    """Raised when recorded bytes can't be parsed as an HTTP response"""


class MalformedStatusLineError(MalformedResponseError):
    def __init__(self, status_line: str):
        super().__init__(f"Bad status line: {status_line!r}")
        self.status_line = status_line


def serialize_response(response: Response) -> bytes:
    """
    Serialize a response to HTTP/1.1 wire format:

        HTTP/1.1 <status>\\r\\n
        <name>: <value>\\r\\n   (one per header)
        \\r\\n
        <body>

    Header values are written as-is and the body is appended verbatim.
    Accessing response.content reads the body into memory if it hasn't been already,
    so errors raised by the underlying connection surface here.
    """
    body = response.content or b""

    head = f"{constants.RECORDED_HTTP_VERSION} {response.status_code}{constants.CRLF}"
    for name, value in response.headers.items():
        head += f"{name}: {value}{constants.CRLF}"
    head += constants.CRLF

    return head.encode("utf-8") + body


def deserialize_response(data: bytes, request: PreparedRequest) -> Response:
    """
    Parse wire format bytes (as written by serialize_response) into a Response bound to request
    """
    separator_index = data.find(constants.HEAD_BODY_SEPARATOR)
    if separator_index < 0:
        raise MalformedResponseError("Malformed response: missing CRLFCRLF")

    try:
        head = data[:separator_index].decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedResponseError(f"Malformed response: head is not valid UTF-8 ({e})") from e
    body = data[separator_index + len(constants.HEAD_BODY_SEPARATOR) :]

    lines = head.split(constants.CRLF)
    status_line = lines[0]
    match = _STATUS_LINE_PATTERN.fullmatch(status_line)
    if not match:
        raise MalformedStatusLineError(status_line)
    status_code = int(match.group(1))
    # recordings don't carry a reason phrase, fall back to the standard one for the status
    reason = match.group(2) or http.client.responses.get(status_code)

    headers = CaseInsensitiveDict()
    # keeps repeated headers (e.g. Set-Cookie) as separate fields for cookie extraction
    header_message = http.client.HTTPMessage()
    for line in lines[1:]:
        if not line:
            continue
        colon_index = line.find(":")
        if colon_index <= 0:
            # lenient: ignore lines that don't look like headers
            continue
        name = line[:colon_index].strip()
        value = line[colon_index + 1 :].strip()
        header_message[name] = value
        if name in headers:
            headers[name] = headers[name] + ", " + value
        else:
            headers[name] = value

    return _build_response(request, status_code, reason, headers, header_message, body)


class _RecordedOriginalResponse:
    """
    Stands in for the http.client response urllib3 normally wraps.
    requests only reads .msg from it (to extract cookies)
    """

    def __init__(self, msg: http.client.HTTPMessage):
        self.msg = msg

    def isclosed(self) -> bool:
        return True

    def close(self):
        pass


def _build_response(
    request: PreparedRequest,
    status_code: int,
    reason: str | None,
    headers: CaseInsensitiveDict,
    header_message: http.client.HTTPMessage,
    body: bytes,
) -> Response:
    # mirrors requests.adapters.HTTPAdapter.build_response, but with the body already in memory
    # headers live on response.headers, raw only needs the original response for cookie extraction
    raw = HTTPResponse(
        body=io.BytesIO(body),
        status=status_code,
        reason=reason,
        preload_content=False,
        decode_content=False,
        original_response=_RecordedOriginalResponse(header_message),
    )

    response = Response()
    response.status_code = status_code
    response.reason = reason
    response.headers = headers
    response.encoding = get_encoding_from_headers(headers)
    response.raw = raw
    response.url = request.url
    response.request = request
    extract_cookies_to_jar(response.cookies, request, raw)
    # pylint: disable=protected-access
    response._content = body
    response._content_consumed = True
    return response
