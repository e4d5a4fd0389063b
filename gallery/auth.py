from __future__ import annotations

import secrets

from fastapi import Header, HTTPException, Request

from gallery.config import settings

# Reachable without the shared key
_OPEN_PATHS = frozenset({"/healthz"})


async def verify_api_key(request: Request) -> None:
    """Guard every photo route behind GALLERY_API_KEY when one is set."""
    expected = settings.API_KEY
    if not expected or request.url.path in _OPEN_PATHS:
        return
    supplied = request.headers.get("X-API-KEY", "")
    if not secrets.compare_digest(supplied.encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


async def current_user_id(x_user_id: str = Header(default="")) -> str:
    """Identify the caller for like/download actions via X-User-Id."""
    user_id = x_user_id.strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return user_id
