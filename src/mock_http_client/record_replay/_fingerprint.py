import base64

from requests import PreparedRequest


def fingerprint(method: str, url: str) -> str:
    # Two requests share a recording only when "<METHOD> <URL>" is literally identical, no normalisation
    key = f"{method} {url}".encode("utf-8")
    return base64.urlsafe_b64encode(key).rstrip(b"=").decode("ascii")


def request_fingerprint(request: PreparedRequest) -> str:
    return fingerprint(request.method, request.url)
