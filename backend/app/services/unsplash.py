"""Random destination photos from the Unsplash API."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "Unsplash API key is not configured"
UPSTREAM_FAILURE_MESSAGE = "Failed to fetch image from Unsplash"


class UnsplashNotConfiguredError(RuntimeError):
    pass


class UnsplashUpstreamError(RuntimeError):
    """Unsplash answered with a non-2xx status; ``detail`` is its ``errors`` list when present."""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"Unsplash returned {status_code}")
        self.status_code = status_code
        self.detail = detail


def get_http_client() -> httpx.Client:
    return httpx.Client(base_url=settings.unsplash_api_url, timeout=settings.unsplash_timeout_seconds)


def fetch_random_photo_url(query: str) -> str:
    """Return the ``regular`` size URL of a random photo matching ``query``."""
    access_key = settings.unsplash_access_key
    if not access_key:
        raise UnsplashNotConfiguredError(NOT_CONFIGURED_MESSAGE)

    with get_http_client() as client:
        response = client.get("/photos/random", params={"query": query, "client_id": access_key})
    data = response.json()
    if response.is_success:
        return data["urls"]["regular"]

    detail = data.get("errors") if isinstance(data, dict) else None
    logger.warning("Unsplash request failed with %s: %s", response.status_code, detail)
    raise UnsplashUpstreamError(response.status_code, detail or UPSTREAM_FAILURE_MESSAGE)
