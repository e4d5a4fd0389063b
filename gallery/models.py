"""Pydantic models for photos and user actions.

Photo field names mirror the provider's wire format so upstream payloads
validate directly and pass through to clients unchanged.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class _Passthrough(BaseModel):
    # Unknown provider fields (tags, views, total_likes, ...) are kept
    model_config = ConfigDict(frozen=True, extra="allow")


class PhotoUrls(_Record):
    raw: str
    full: str
    regular: str
    small: str
    thumb: str


class ProfileImage(_Record):
    small: str
    medium: str
    large: str


class PhotoUser(_Passthrough):
    id: str
    username: str
    name: str
    profile_image: ProfileImage


class PhotoLinks(_Passthrough):
    html: str | None = None
    download: str | None = None


class Photo(_Passthrough):
    """A single provider (or synthetic) image record."""

    id: str
    created_at: str
    updated_at: str
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    color: str
    description: str | None = None
    alt_description: str | None = None
    urls: PhotoUrls
    links: PhotoLinks | None = None
    user: PhotoUser
    likes: int = Field(default=0, ge=0)
    # List endpoints omit download counts
    downloads: int = Field(default=0, ge=0)


class PagedPhotoResult(_Record):
    results: list[Photo]
    total: int
    total_pages: int


class LikeToggle(BaseModel):
    liked: bool


class DownloadRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    download_url: str = Field(alias="downloadUrl", min_length=1)


class DownloadResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    download_url: str = Field(alias="downloadUrl")


class LikeRecord(BaseModel):
    id: str
    user_id: str
    photo_id: str
    created_at: datetime


class DownloadRecord(BaseModel):
    id: str
    user_id: str
    photo_id: str
    created_at: datetime
