"""Like and download records.

``ActionRecorder`` is the persistence seam. The bundled implementation
keeps everything in process memory, which is enough for a single-worker
deployment and for tests; swap in a database-backed recorder for
anything durable.
"""
from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Protocol

from gallery.errors import PersistenceFailure
from gallery.models import DownloadRecord, LikeRecord


class ActionRecorder(Protocol):
    async def find_like(self, user_id: str, photo_id: str) -> LikeRecord | None: ...

    async def create_like(self, user_id: str, photo_id: str) -> LikeRecord: ...

    async def delete_like(self, like_id: str) -> None: ...

    async def create_download(self, user_id: str, photo_id: str) -> DownloadRecord: ...

    async def list_likes(self, user_id: str) -> list[LikeRecord]: ...

    async def list_downloads(self, user_id: str) -> list[DownloadRecord]: ...


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryActionRecorder:
    """Process-local recorder; (user_id, photo_id) is unique for likes."""

    def __init__(self) -> None:
        self._likes: dict[tuple[str, str], LikeRecord] = {}
        self._downloads: list[DownloadRecord] = []

    async def find_like(self, user_id: str, photo_id: str) -> LikeRecord | None:
        return self._likes.get((user_id, photo_id))

    async def create_like(self, user_id: str, photo_id: str) -> LikeRecord:
        key = (user_id, photo_id)
        if key in self._likes:
            raise PersistenceFailure(
                f"Like for user {user_id} on photo {photo_id} already exists"
            )
        like = LikeRecord(
            id=uuid.uuid4().hex,
            user_id=user_id,
            photo_id=photo_id,
            created_at=_now(),
        )
        self._likes[key] = like
        return like

    async def delete_like(self, like_id: str) -> None:
        for key, like in self._likes.items():
            if like.id == like_id:
                del self._likes[key]
                return
        raise PersistenceFailure(f"Like {like_id} does not exist")

    async def create_download(self, user_id: str, photo_id: str) -> DownloadRecord:
        record = DownloadRecord(
            id=uuid.uuid4().hex,
            user_id=user_id,
            photo_id=photo_id,
            created_at=_now(),
        )
        self._downloads.append(record)
        return record

    async def list_likes(self, user_id: str) -> list[LikeRecord]:
        # Dict order is creation order; a re-like moves to the end
        return [v for v in reversed(self._likes.values()) if v.user_id == user_id]

    async def list_downloads(self, user_id: str) -> list[DownloadRecord]:
        # Appended in time order; newest first
        return [r for r in reversed(self._downloads) if r.user_id == user_id]
