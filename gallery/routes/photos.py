from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from gallery.auth import current_user_id
from gallery.deps import get_photo_service
from gallery.errors import NotFound, PersistenceFailure
from gallery.models import (
    DownloadRecord,
    DownloadRequest,
    DownloadResult,
    LikeRecord,
    LikeToggle,
    PagedPhotoResult,
    Photo,
)
from gallery.services.photos import PhotoService

router = APIRouter(prefix="/api/photos")

MAX_PER_PAGE = 30


@router.get("/random", response_model=list[Photo])
async def get_random_photos(
    count: int = Query(10, ge=1, le=MAX_PER_PAGE),
    query: str | None = Query(None),
    photos: PhotoService = Depends(get_photo_service),
):
    return await photos.get_random_photos(count, query or None)


@router.get("/search", response_model=PagedPhotoResult)
async def search_photos(
    query: str = Query(..., min_length=1),
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=MAX_PER_PAGE, alias="perPage"),
    photos: PhotoService = Depends(get_photo_service),
):
    return await photos.search_photos(query, page, per_page)


@router.get("/topic/{topic}", response_model=PagedPhotoResult)
async def get_photos_by_topic(
    topic: str,
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=MAX_PER_PAGE, alias="perPage"),
    photos: PhotoService = Depends(get_photo_service),
):
    return await photos.get_photos_by_topic(topic, page, per_page)


@router.get("/detail/{photo_id}", response_model=Photo)
async def get_photo(
    photo_id: str,
    photos: PhotoService = Depends(get_photo_service),
):
    try:
        return await photos.get_photo_by_id(photo_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{photo_id}/like", response_model=LikeToggle)
async def toggle_like(
    photo_id: str,
    user_id: str = Depends(current_user_id),
    photos: PhotoService = Depends(get_photo_service),
):
    try:
        return await photos.toggle_like(user_id, photo_id)
    except PersistenceFailure as e:
        raise HTTPException(status_code=500, detail=f"Failed to toggle like: {e}")


@router.post("/{photo_id}/download", response_model=DownloadResult)
async def download_photo(
    photo_id: str,
    body: DownloadRequest,
    user_id: str = Depends(current_user_id),
    photos: PhotoService = Depends(get_photo_service),
):
    try:
        return await photos.record_download(user_id, photo_id, body.download_url)
    except PersistenceFailure as e:
        raise HTTPException(status_code=500, detail=f"Failed to process download: {e}")


@router.get("/user/likes", response_model=list[LikeRecord])
async def get_user_likes(
    user_id: str = Depends(current_user_id),
    photos: PhotoService = Depends(get_photo_service),
):
    try:
        return await photos.list_liked_photos(user_id)
    except PersistenceFailure as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/user/downloads", response_model=list[DownloadRecord])
async def get_user_downloads(
    user_id: str = Depends(current_user_id),
    photos: PhotoService = Depends(get_photo_service),
):
    try:
        return await photos.list_downloads(user_id)
    except PersistenceFailure as e:
        raise HTTPException(status_code=500, detail=str(e))
