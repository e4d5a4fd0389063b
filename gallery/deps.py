from __future__ import annotations

from fastapi import Request

from gallery.services.photos import PhotoService


def get_photo_service(request: Request) -> PhotoService:
    return request.app.state.photos
