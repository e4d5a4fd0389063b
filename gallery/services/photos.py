"""Photo query service: cache-first reads with mock fallback, plus actions.

Reads (random / search / topic) never raise on upstream trouble. They
serve a fresh cache entry, else fetch from the configured source, else
fall back to synthetic photos. Detail lookups and user actions surface
their errors instead.

Caching policy for synthetic data: whatever the configured source returns
is cached, so in development mode (``MockSource``) mock photos are cached
like live ones. Fallback mocks served after an upstream failure are never
cached; the next call retries the provider instead of pinning mock data
for a full TTL, at the cost of re-hitting a provider that may still be down.

Concurrent misses on the same key share one in-flight fetch.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

from gallery.cache import DEFAULT_TTL, ResponseCache
from gallery.errors import (
    AnalyticsNotificationFailure,
    NotFound,
    UpstreamUnavailable,
)
from gallery.models import (
    DownloadRecord,
    DownloadResult,
    LikeRecord,
    LikeToggle,
    PagedPhotoResult,
    Photo,
)
from gallery.services.actions import ActionRecorder
from gallery.services.sources import DataSource, MockSource

log = logging.getLogger(__name__)


# ---- Cache keys ------------------------------------------------------------


_NO_QUERY = "no-query"


def random_key(count: int, query: str | None = None) -> str:
    """Key format is random-{count}-{query or "no-query"}.

    A literal "no-query" query (or one starting with a backslash) is
    prefixed with a backslash so it cannot collide with the unqueried key.
    """
    if not query:
        return f"random-{count}-{_NO_QUERY}"
    if query == _NO_QUERY or query.startswith("\\"):
        query = "\\" + query
    return f"random-{count}-{query}"


def search_key(query: str, page: int = 1, per_page: int = 10) -> str:
    return f"search-{query}-{page}-{per_page}"


def topic_key(topic: str, page: int = 1, per_page: int = 10) -> str:
    return f"topic-{topic}-{page}-{per_page}"


# ---- Service ---------------------------------------------------------------


class PhotoService:
    def __init__(
        self,
        cache: ResponseCache,
        source: DataSource,
        recorder: ActionRecorder,
        ttl: float = DEFAULT_TTL,
        fallback: DataSource | None = None,
    ) -> None:
        self.cache = cache
        self.source = source
        self.recorder = recorder
        self.ttl = ttl
        self.fallback = fallback or MockSource()
        self._inflight: dict[str, asyncio.Task] = {}

    def _cached(self, key: str) -> Any | None:
        entry = self.cache.get(key)
        if entry is not None and self.cache.is_fresh(entry.stored_at, self.ttl):
            log.debug("Cache hit %s", key)
            return entry.value
        log.debug("Cache miss %s", key)
        return None

    async def _load(self, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        """Fetch and cache ``key``, joining a fetch already in flight."""
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_store(key, fetch))
            self._inflight[key] = task
            task.add_done_callback(lambda t: self._forget(key, t))
        # Shield so one cancelled caller does not cancel the shared fetch
        return await asyncio.shield(task)

    async def _fetch_and_store(
        self, key: str, fetch: Callable[[], Awaitable[Any]]
    ) -> Any:
        value = await fetch()
        self.cache.put(key, value)
        return value

    def _forget(self, key: str, task: asyncio.Task) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        # Mark a failure retrieved even if every waiter was cancelled
        if not task.cancelled():
            task.exception()

    # ---- Reads -------------------------------------------------------------

    async def get_random_photos(
        self, count: int = 10, query: str | None = None
    ) -> list[Photo]:
        key = random_key(count, query)
        cached = self._cached(key)
        if cached is not None:
            return cached
        try:
            return await self._load(
                key, lambda: self.source.random_photos(count, query)
            )
        except UpstreamUnavailable as e:
            log.warning("Random photos (%s) unavailable, serving mocks: %s", key, e)
            return await self.fallback.random_photos(count, query)

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 10
    ) -> PagedPhotoResult:
        return await self._paged(search_key(query, page, per_page), query, page, per_page)

    async def get_photos_by_topic(
        self, topic: str, page: int = 1, per_page: int = 10
    ) -> PagedPhotoResult:
        return await self._paged(topic_key(topic, page, per_page), topic, page, per_page)

    async def _paged(
        self, key: str, term: str, page: int, per_page: int
    ) -> PagedPhotoResult:
        cached = self._cached(key)
        if cached is not None:
            return cached
        try:
            return await self._load(
                key, lambda: self.source.search_photos(term, page, per_page)
            )
        except UpstreamUnavailable as e:
            log.warning("Search (%s) unavailable, serving mocks: %s", key, e)
            return await self.fallback.search_photos(term, page, per_page)

    async def get_photo_by_id(self, photo_id: str) -> Photo:
        """Live detail lookup; never cached, never substituted."""
        try:
            return await self.source.photo(photo_id)
        except UpstreamUnavailable as e:
            log.warning("Detail lookup for %s failed: %s", photo_id, e)
            raise NotFound(f"Photo {photo_id} not found") from e

    # ---- Actions -----------------------------------------------------------

    async def toggle_like(self, user_id: str, photo_id: str) -> LikeToggle:
        """Flip the like state; repeated calls alternate."""
        existing = await self.recorder.find_like(user_id, photo_id)
        if existing is not None:
            await self.recorder.delete_like(existing.id)
            return LikeToggle(liked=False)
        await self.recorder.create_like(user_id, photo_id)
        return LikeToggle(liked=True)

    async def record_download(
        self, user_id: str, photo_id: str, download_url: str
    ) -> DownloadResult:
        """Record the download, then best-effort ping provider analytics.

        A failed ping is logged and never rolls back the record.
        """
        await self.recorder.create_download(user_id, photo_id)
        try:
            await self.source.track_download(photo_id)
        except AnalyticsNotificationFailure as e:
            log.warning("Download tracking for %s failed: %s", photo_id, e)
        return DownloadResult(download_url=download_url)

    async def list_liked_photos(self, user_id: str) -> list[LikeRecord]:
        return await self.recorder.list_likes(user_id)

    async def list_downloads(self, user_id: str) -> list[DownloadRecord]:
        return await self.recorder.list_downloads(user_id)
