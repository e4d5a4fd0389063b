"""Shared fixtures: fake clock, provider payloads, respx-mocked Unsplash."""
from __future__ import annotations

import httpx
import pytest
import pytest_asyncio
import respx

from gallery.cache import ResponseCache
from gallery.services.actions import InMemoryActionRecorder
from gallery.services.photos import PhotoService
from gallery.services.sources import LiveSource
from gallery.services.unsplash import UnsplashClient

BASE_URL = "https://api.unsplash.test"
ACCESS_KEY = "test-access-key"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def photo_payload(photo_id: str, **overrides) -> dict:
    """Build a provider-shaped photo record."""
    payload = {
        "id": photo_id,
        "created_at": "2024-05-01T10:00:00Z",
        "updated_at": "2024-05-02T10:00:00Z",
        "width": 4000,
        "height": 3000,
        "color": "#a0c0e0",
        "description": f"Photo {photo_id}",
        "alt_description": None,
        "urls": {
            size: f"https://images.test/{photo_id}?size={size}"
            for size in ("raw", "full", "regular", "small", "thumb")
        },
        "links": {"html": f"https://unsplash.test/photos/{photo_id}"},
        "user": {
            "id": f"user-{photo_id}",
            "username": "photographer",
            "name": "Pat Photographer",
            "profile_image": {
                "small": "https://images.test/u?s=32",
                "medium": "https://images.test/u?s=64",
                "large": "https://images.test/u?s=128",
            },
        },
        "likes": 12,
        # Provider extra that is not a declared field
        "blur_hash": "LKO2?U%2Tw=w]~RBVZRi};RPxuwH",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> ResponseCache:
    return ResponseCache(clock=clock)


@pytest.fixture
def recorder() -> InMemoryActionRecorder:
    return InMemoryActionRecorder()


@pytest.fixture
def unsplash_api():
    """respx router scoped to the test provider base URL."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock


@pytest_asyncio.fixture
async def http():
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def api(http) -> UnsplashClient:
    return UnsplashClient(http, ACCESS_KEY, base_url=BASE_URL, timeout=10.0)


@pytest.fixture
def service(cache, api, recorder) -> PhotoService:
    return PhotoService(cache, LiveSource(api), recorder)
