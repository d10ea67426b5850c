"""
Test the replay-only adapter
"""

import os

import pytest
import requests

from mock_http_client.record_replay import HttpFileRecordingPersister, MockTransportError, ReplayAdapter

from tests.fakes import TempDirectory, make_response, prepare_request


def _get_session(adapter: ReplayAdapter) -> requests.Session:
    session = requests.Session()
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def test_replay_returns_recorded_response():
    request = prepare_request("GET", "https://example.com/x?q=1")

    with TempDirectory() as temp_dir:
        persister = HttpFileRecordingPersister(temp_dir.path)
        persister.save_recording(request, make_response(200, {"Content-Type": "application/json"}, b'{"a":1}'))

        with _get_session(ReplayAdapter(persister)) as session:
            response = session.get("https://example.com/x?q=1")

        assert response.status_code == 200
        assert response.headers["Content-Type"] == "application/json"
        assert response.json() == {"a": 1}
        assert response.url == "https://example.com/x?q=1"


def test_replay_miss_raises_transport_error_with_request():
    """
    A request with no recording fails without touching the network
    (example.invalid can't resolve, so any real call would fail differently)
    """
    with TempDirectory() as temp_dir:
        persister = HttpFileRecordingPersister(temp_dir.path)
        adapter = ReplayAdapter(persister)

        with _get_session(adapter) as session:
            with pytest.raises(MockTransportError) as exc_info:
                session.get("https://example.invalid/not-recorded")

        assert exc_info.value.request.url == "https://example.invalid/not-recorded"
        assert exc_info.value.request.method == "GET"
        assert isinstance(exc_info.value, requests.ConnectionError)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        # replay must never create the recording directory
        assert os.listdir(temp_dir.path) == []


def test_replay_malformed_recording_raises_transport_error():
    request = prepare_request("GET", "https://example.com/")

    with TempDirectory() as temp_dir:
        persister = HttpFileRecordingPersister(temp_dir.path)
        with open(persister.get_recording_file_path(request), "wb") as f:
            f.write(b"HTTP/1.1 200\r\nno separator")

        with pytest.raises(MockTransportError) as exc_info:
            ReplayAdapter(persister).execute(request)

        assert exc_info.value.request is request
        assert isinstance(exc_info.value.__cause__, ValueError)


def test_replay_distinguishes_methods():
    get_request = prepare_request("GET", "https://example.com/items")

    with TempDirectory() as temp_dir:
        persister = HttpFileRecordingPersister(temp_dir.path)
        persister.save_recording(get_request, make_response(200, body=b"items"))

        with _get_session(ReplayAdapter(persister)) as session:
            assert session.get("https://example.com/items").content == b"items"
            with pytest.raises(MockTransportError):
                session.post("https://example.com/items", data=b"new")


def test_replay_is_repeatable():
    request = prepare_request("GET", "https://example.com/")

    with TempDirectory() as temp_dir:
        persister = HttpFileRecordingPersister(temp_dir.path)
        persister.save_recording(request, make_response(200, body=b"same"))
        adapter = ReplayAdapter(persister)

        first = adapter.execute(request)
        second = adapter.execute(request)

        assert first is not second
        assert first.content == second.content == b"same"


def test_replay_updates_session_cookies():
    request = prepare_request("GET", "https://example.com/login")

    with TempDirectory() as temp_dir:
        persister = HttpFileRecordingPersister(temp_dir.path)
        persister.save_recording(request, make_response(200, {"Set-Cookie": "sid=abc; Path=/"}, b"welcome"))

        with _get_session(ReplayAdapter(persister)) as session:
            response = session.get("https://example.com/login")

            assert response.cookies.get("sid") == "abc"
            assert session.cookies.get("sid") == "abc"
