"""Photo Gallery: caching proxy over the Unsplash API."""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gallery.auth import verify_api_key
from gallery.cache import ResponseCache
from gallery.config import Settings, settings
from gallery.routes import health
from gallery.routes import photos as photo_routes
from gallery.services.actions import InMemoryActionRecorder
from gallery.services.photos import PhotoService
from gallery.services.sources import select_source
from gallery.services.unsplash import UnsplashClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("gallery")


async def _sweep_loop(cache: ResponseCache, ttl: float, interval: int) -> None:
    """Periodically drop stale cache entries so the store cannot grow forever."""
    while True:
        await asyncio.sleep(interval)
        removed = cache.sweep(ttl)
        if removed:
            log.debug("Swept %d stale cache entries", removed)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Settings.validate()

    client = httpx.AsyncClient(timeout=httpx.Timeout(settings.UNSPLASH_TIMEOUT))
    app.state.http = client

    api = UnsplashClient(
        client,
        settings.UNSPLASH_ACCESS_KEY,
        base_url=settings.UNSPLASH_BASE_URL,
        timeout=settings.UNSPLASH_TIMEOUT,
        user_agent=settings.USER_AGENT,
    )
    cache = ResponseCache(max_entries=settings.CACHE_MAX_ENTRIES)
    source = select_source(settings.is_development(), api)
    app.state.photos = PhotoService(
        cache,
        source,
        InMemoryActionRecorder(),
        ttl=settings.CACHE_TTL,
    )

    tasks = []
    if settings.CACHE_SWEEP_INTERVAL > 0:
        tasks.append(
            asyncio.create_task(
                _sweep_loop(cache, settings.CACHE_TTL, settings.CACHE_SWEEP_INTERVAL)
            )
        )

    log.info(
        "Photo Gallery started: source=%s, ttl=%ss, port %s",
        source.name,
        settings.CACHE_TTL,
        settings.PORT,
    )
    yield

    for t in tasks:
        t.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)
    await client.aclose()
    log.info("Photo Gallery shutdown complete")


app = FastAPI(
    title="Photo Gallery",
    version="0.1.0",
    lifespan=lifespan,
    dependencies=[Depends(verify_api_key)],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(photo_routes.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gallery.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
    )
