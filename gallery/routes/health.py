from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from gallery.deps import get_photo_service
from gallery.services.photos import PhotoService

router = APIRouter()

_start_time = time.time()
_VERSION = "0.1.0"


@router.get("/healthz")
async def healthz(photos: PhotoService = Depends(get_photo_service)):
    return {
        "status": "ok",
        "version": _VERSION,
        "source": photos.source.name,
        "uptime_seconds": round(time.time() - _start_time),
        "cache_size": len(photos.cache),
        "cache_timestamps": photos.cache.timestamps(),
    }
