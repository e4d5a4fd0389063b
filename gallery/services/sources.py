"""Where photo reads come from: the live provider or the mock pool.

The source is picked once when the service is built, so the development
switch never has to be re-read per request.
"""
from __future__ import annotations

import logging
from typing import Protocol

from gallery.errors import AnalyticsNotificationFailure, NotFound, UpstreamUnavailable
from gallery.models import PagedPhotoResult, Photo
from gallery.services.mock_photos import find_mock_photo, mock_photos
from gallery.services.unsplash import UnsplashClient

log = logging.getLogger(__name__)


class DataSource(Protocol):
    name: str

    async def random_photos(self, count: int, query: str | None = None) -> list[Photo]: ...

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 10
    ) -> PagedPhotoResult: ...

    async def photo(self, photo_id: str) -> Photo: ...

    async def track_download(self, photo_id: str) -> None: ...


class LiveSource:
    name = "live"

    def __init__(self, api: UnsplashClient) -> None:
        self.api = api

    async def random_photos(self, count: int, query: str | None = None) -> list[Photo]:
        # The random endpoint has no text filter; use search for queried reads
        if query:
            page = await self.api.search_photos(query, page=1, per_page=count)
            return page.results
        return await self.api.random_photos(count)

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 10
    ) -> PagedPhotoResult:
        return await self.api.search_photos(query, page=page, per_page=per_page)

    async def photo(self, photo_id: str) -> Photo:
        return await self.api.photo(photo_id)

    async def track_download(self, photo_id: str) -> None:
        try:
            await self.api.track_download(photo_id)
        except UpstreamUnavailable as e:
            raise AnalyticsNotificationFailure(str(e)) from e


class MockSource:
    name = "mock"

    async def random_photos(self, count: int, query: str | None = None) -> list[Photo]:
        return mock_photos(count)

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 10
    ) -> PagedPhotoResult:
        # Degraded pagination: one page, exactly as large as generated
        return PagedPhotoResult(
            results=mock_photos(per_page),
            total=per_page,
            total_pages=1,
        )

    async def photo(self, photo_id: str) -> Photo:
        found = find_mock_photo(photo_id)
        if found is None:
            raise NotFound(f"Photo {photo_id} not found")
        return found

    async def track_download(self, photo_id: str) -> None:
        log.debug("Mock source: skipping download tracking for %s", photo_id)


def select_source(development: bool, api: UnsplashClient) -> DataSource:
    if development:
        return MockSource()
    return LiveSource(api)
