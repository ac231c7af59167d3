"""Unsplash client for background photos."""

from __future__ import annotations

import logging
import time
from typing import Final

import requests
from pydantic import BaseModel, ValidationError as PydanticValidationError

from idleview.errors import NetworkError, ProviderError

logger: Final = logging.getLogger(__name__)

RANDOM_PHOTO_URL: Final = "https://api.unsplash.com/photos/random"
PLACEHOLDER_KEY: Final = "YOUR_UNSPLASH_ACCESS_KEY"


class UnsplashPhoto(BaseModel):
    url: str
    author: str
    author_url: str
    download_location: str


class CurrentPhoto(BaseModel):
    """Photo currently on screen, reported by the display for remote clients."""

    url: str
    author: str
    author_url: str


class _Urls(BaseModel):
    regular: str


class _UserLinks(BaseModel):
    html: str


class _User(BaseModel):
    name: str
    links: _UserLinks


class _PhotoLinks(BaseModel):
    download_location: str


class _RandomPhotoResponse(BaseModel):
    urls: _Urls
    user: _User
    links: _PhotoLinks


def is_usable_key(key: str | None) -> bool:
    """Whether *key* looks like a real access key rather than a placeholder."""
    return bool(key) and len(key) > 10 and key != PLACEHOLDER_KEY


def build_photo_url(base_url: str, width: int, height: int, quality: int, timestamp: int) -> str:
    """Return *base_url* sized, cropped and set to *quality*.

    Any existing ``q`` parameter is removed first; ``t`` busts
    browser and CDN caches.
    """
    url = base_url
    pos = url.find("&q=")
    if pos != -1:
        end = url.find("&", pos + 1)
        url = url[:pos] + url[end:] if end != -1 else url[:pos]

    separator = "&" if "?" in url else "?"
    return f"{url}{separator}w={width}&h={height}&fit=crop&q={quality}&t={timestamp}"


class UnsplashAPI:
    """Fetches random landscape photos matching a search query."""

    def __init__(
        self,
        access_key: str | None,
        session: requests.Session | None = None,
        timeout: float = 10,
    ) -> None:
        self.access_key = access_key or PLACEHOLDER_KEY
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Client-ID {self.access_key}"}

    def random_photo(self, width: int, height: int, query: str, quality: int) -> UnsplashPhoto:
        """Fetch a random photo for *query* sized for the screen.

        Raises:
            NetworkError: When the request fails or the body is malformed
            ProviderError: For non-success responses (bad key, rate limit...)
        """
        params = {
            "orientation": "landscape",
            "query": query,
            "w": width,
            "h": height,
        }
        try:
            resp = self.session.get(
                RANDOM_PHOTO_URL, params=params, headers=self.headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.warning("Unsplash network error: %s", exc)
            raise NetworkError(f"Failed to fetch photo: {exc}", exc) from exc

        if not 200 <= resp.status_code < 300:
            logger.error("Unsplash API error: %s - %s", resp.status_code, resp.text)
            raise ProviderError.from_status(
                resp.status_code, f"Unsplash API error ({resp.status_code}): {resp.text}"
            )

        try:
            data = _RandomPhotoResponse.model_validate(resp.json())
        except (ValueError, PydanticValidationError) as exc:
            raise NetworkError(f"Failed to parse photo data: {exc}", exc) from exc

        timestamp = int(time.time() * 1000)
        return UnsplashPhoto(
            url=build_photo_url(data.urls.regular, width, height, quality, timestamp),
            author=data.user.name,
            author_url=data.user.links.html,
            download_location=data.links.download_location,
        )

    def trigger_download(self, download_url: str) -> None:
        """Report a photo download, as required by the Unsplash guidelines.

        Raises:
            NetworkError: When the request cannot be sent
        """
        try:
            self.session.get(download_url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"Failed to trigger download: {exc}", exc) from exc
