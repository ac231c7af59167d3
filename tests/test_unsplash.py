from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from idleview.errors import AuthenticationError, NetworkError, RateLimitError
from idleview.photos.unsplash import (
    PLACEHOLDER_KEY,
    RANDOM_PHOTO_URL,
    UnsplashAPI,
    build_photo_url,
    is_usable_key,
)

PHOTO: dict[str, Any] = {
    "id": "abc",
    "urls": {"regular": "https://images.unsplash.com/photo-1?ixid=x&q=80&fm=jpg"},
    "user": {"name": "Ansel", "links": {"html": "https://unsplash.com/@ansel"}},
    "links": {"download_location": "https://api.unsplash.com/photos/abc/download"},
}


def response(status: int = 200, body: Any = None) -> Mock:
    resp = Mock()
    resp.status_code = status
    resp.text = "error body"
    resp.json.return_value = body
    return resp


@pytest.mark.parametrize(
    "key, expected",
    [
        (None, False),
        ("", False),
        ("short", False),
        (PLACEHOLDER_KEY, False),
        ("a-real-looking-key", True),
    ],
)
def test_is_usable_key(key: str | None, expected: bool) -> None:
    assert is_usable_key(key) is expected


@pytest.mark.parametrize(
    "base, expected",
    [
        (
            "https://img/x?ixid=1&q=80&fm=jpg",
            "https://img/x?ixid=1&fm=jpg&w=800&h=600&fit=crop&q=65&t=42",
        ),
        (
            "https://img/x?ixid=1&q=80",
            "https://img/x?ixid=1&w=800&h=600&fit=crop&q=65&t=42",
        ),
        ("https://img/x", "https://img/x?w=800&h=600&fit=crop&q=65&t=42"),
    ],
)
def test_build_photo_url(base: str, expected: str) -> None:
    assert build_photo_url(base, 800, 600, 65, 42) == expected


def test_random_photo() -> None:
    session = Mock()
    session.get.return_value = response(body=PHOTO)
    api = UnsplashAPI("a-real-looking-key", session=session)

    with patch("idleview.photos.unsplash.time.time", return_value=1.5):
        photo = api.random_photo(1920, 1080, "summer cloudy", 100)

    assert photo.url == (
        "https://images.unsplash.com/photo-1?ixid=x&fm=jpg&w=1920&h=1080&fit=crop&q=100&t=1500"
    )
    assert photo.author == "Ansel"
    assert photo.author_url == "https://unsplash.com/@ansel"
    assert photo.download_location.endswith("/abc/download")

    args, kwargs = session.get.call_args
    assert args[0] == RANDOM_PHOTO_URL
    assert kwargs["params"]["query"] == "summer cloudy"
    assert kwargs["params"]["orientation"] == "landscape"
    assert kwargs["headers"] == {"Authorization": "Client-ID a-real-looking-key"}


@pytest.mark.parametrize("status, error", [(401, AuthenticationError), (429, RateLimitError)])
def test_random_photo_http_errors(status: int, error: type[Exception]) -> None:
    session = Mock()
    session.get.return_value = response(status=status)

    with pytest.raises(error, match="Unsplash API error"):
        UnsplashAPI("a-real-looking-key", session=session).random_photo(1, 1, "q", 80)


def test_random_photo_malformed_body() -> None:
    session = Mock()
    session.get.return_value = response(body={"urls": {}})

    with pytest.raises(NetworkError):
        UnsplashAPI("a-real-looking-key", session=session).random_photo(1, 1, "q", 80)


def test_missing_key_sends_placeholder() -> None:
    assert UnsplashAPI(None).headers["Authorization"] == f"Client-ID {PLACEHOLDER_KEY}"


def test_trigger_download() -> None:
    session = Mock()
    api = UnsplashAPI("a-real-looking-key", session=session)

    api.trigger_download("https://api.unsplash.com/photos/abc/download")

    session.get.assert_called_once()
    assert session.get.call_args.args[0] == "https://api.unsplash.com/photos/abc/download"


def test_trigger_download_network_error() -> None:
    session = Mock()
    session.get.side_effect = requests.Timeout("slow")

    with pytest.raises(NetworkError):
        UnsplashAPI("a-real-looking-key", session=session).trigger_download("https://x")
