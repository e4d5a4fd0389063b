from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger(__name__)


def _csv_list(key: str, default: str = "") -> list[str]:
    raw = os.getenv(key, default)
    return [x.strip() for x in raw.split(",") if x.strip()]


def _env(primary: str, *fallbacks: str, default: str = "") -> str:
    """Read env var with fallback aliases."""
    val = os.getenv(primary)
    if val is not None:
        return val
    for fb in fallbacks:
        val = os.getenv(fb)
        if val is not None:
            return val
    return default


class Settings:
    # --- Auth / Server ---
    API_KEY: str = os.getenv("GALLERY_API_KEY", "")
    HOST: str = os.getenv("GALLERY_HOST", "0.0.0.0")
    PORT: int = int(_env("GALLERY_PORT", "PORT", default="3001"))
    CORS_ORIGINS: list[str] = _csv_list(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://localhost:5174",
    )

    # --- Mode ---
    # "development" serves synthetic photos and never calls the provider
    ENV: str = _env("GALLERY_ENV", "APP_ENV", default="production").lower()

    # --- Unsplash ---
    UNSPLASH_ACCESS_KEY: str = os.getenv("UNSPLASH_ACCESS_KEY", "")
    UNSPLASH_BASE_URL: str = os.getenv("UNSPLASH_BASE_URL", "https://api.unsplash.com")
    UNSPLASH_TIMEOUT: float = float(os.getenv("UNSPLASH_TIMEOUT", "10"))
    USER_AGENT: str = os.getenv("GALLERY_USER_AGENT", "Photo-Gallery/1.0")

    # --- Response cache ---
    CACHE_TTL: float = float(os.getenv("CACHE_TTL", "300"))
    CACHE_MAX_ENTRIES: int = int(os.getenv("CACHE_MAX_ENTRIES", "0"))
    CACHE_SWEEP_INTERVAL: int = int(os.getenv("CACHE_SWEEP_INTERVAL", "0"))

    @classmethod
    def is_development(cls) -> bool:
        return cls.ENV in ("development", "dev")

    @classmethod
    def validate(cls) -> None:
        """Log warnings for missing or suspicious settings."""
        if cls.is_development():
            log.info("Development mode: serving mock photos, provider disabled")
            return
        if not cls.UNSPLASH_ACCESS_KEY:
            log.warning(
                "Missing env var UNSPLASH_ACCESS_KEY, every provider call will "
                "fail and reads will fall back to mock photos"
            )
        if cls.CACHE_MAX_ENTRIES == 0:
            log.info("Response cache is unbounded (CACHE_MAX_ENTRIES=0)")


settings = Settings()
