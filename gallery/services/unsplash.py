"""Unsplash REST API client.

Thin adapter over the three photo endpoints plus download tracking.
Every failure surfaces as ``UpstreamUnavailable`` (or ``NotFound`` for a
404 on a single-photo lookup); callers decide whether to degrade.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from gallery.errors import NotFound, UpstreamUnavailable
from gallery.models import PagedPhotoResult, Photo

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.unsplash.com"


class UnsplashClient:
    def __init__(
        self,
        client: httpx.AsyncClient,
        access_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        user_agent: str = "Photo-Gallery/1.0",
    ) -> None:
        self.client = client
        self.access_key = access_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET with credential + UA; map transport and status errors."""
        query = {**(params or {}), "client_id": self.access_key}
        try:
            resp = await self.client.get(
                f"{self.base_url}{path}",
                params=query,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise UpstreamUnavailable(
                f"Unsplash {path} returned {status}", status_code=status
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(
                f"Unsplash {path} failed: {type(e).__name__}: {e}"
            ) from e
        except ValueError as e:
            raise UpstreamUnavailable(f"Unsplash {path} sent invalid JSON") from e

    # ---- Public API --------------------------------------------------------

    async def random_photos(self, count: int) -> list[Photo]:
        data = await self._get("/photos/random", {"count": count})
        try:
            return [Photo.model_validate(p) for p in data]
        except (TypeError, ValidationError) as e:
            raise UpstreamUnavailable(f"Unexpected random-photos payload: {e}") from e

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 10
    ) -> PagedPhotoResult:
        data = await self._get(
            "/search/photos",
            {"query": query, "page": page, "per_page": per_page},
        )
        try:
            return PagedPhotoResult.model_validate({
                "results": data.get("results", []),
                "total": data.get("total", 0),
                "total_pages": data.get("total_pages", 0),
            })
        except (AttributeError, ValidationError) as e:
            raise UpstreamUnavailable(f"Unexpected search payload: {e}") from e

    async def photo(self, photo_id: str) -> Photo:
        try:
            data = await self._get(f"/photos/{photo_id}")
        except UpstreamUnavailable as e:
            if e.status_code == 404:
                raise NotFound(f"Photo {photo_id} not found") from e
            raise
        try:
            return Photo.model_validate(data)
        except ValidationError as e:
            raise UpstreamUnavailable(f"Unexpected photo payload: {e}") from e

    async def track_download(self, photo_id: str) -> None:
        """Ping the download endpoint; required by the API guidelines."""
        await self._get(f"/photos/{photo_id}/download")
        log.debug("Tracked download for %s", photo_id)
