"""Synthetic photo records for development mode and upstream fallback.

Output is deterministic: ``mock_photos(n)`` cycles through a fixed pool,
so repeats are expected once ``n`` exceeds the pool size.
"""
from __future__ import annotations

from gallery.models import Photo

_IMG = "https://picsum.photos/id/{img}"

# (img id, color, description, author username, author name, width, height, likes, downloads)
_SAMPLES = [
    (10, "#2c4a3b", "Misty forest at dawn", "forest_lens", "Ava Lindqvist", 2500, 1667, 842, 12040),
    (1015, "#5a7fa6", "River winding through a valley", "riverside", "Mateo Ruiz", 6000, 4000, 1310, 20511),
    (1025, "#8c7a66", "Pug wrapped in a blanket", "pawsandpixels", "Hana Sato", 4951, 3301, 2904, 40178),
    (1039, "#3d5c73", "Waterfall over mossy rocks", "wildwater", "Noah Okafor", 6945, 4635, 517, 6802),
    (1043, "#c9b79c", "Quiet city street in the evening", "urbanframes", "Lea Moreau", 5184, 3456, 389, 4455),
    (1069, "#1f2a44", "Jellyfish drifting in dark water", "deepblue", "Kai Nakamura", 3487, 2221, 1876, 15730),
]


def _build(n: int, sample: tuple) -> Photo:
    img, color, desc, username, name, width, height, likes, downloads = sample
    base = _IMG.format(img=img)
    avatar = f"https://i.pravatar.cc/{{size}}?u={username}"
    return Photo.model_validate({
        "id": f"mock-{n}",
        "created_at": f"2024-01-{n:02d}T08:00:00Z",
        "updated_at": f"2024-02-{n:02d}T08:00:00Z",
        "width": width,
        "height": height,
        "color": color,
        "description": desc,
        "alt_description": desc.lower(),
        "urls": {
            "raw": f"{base}/{width}/{height}",
            "full": f"{base}/{width}/{height}",
            "regular": f"{base}/1080/{height * 1080 // width}",
            "small": f"{base}/400/{height * 400 // width}",
            "thumb": f"{base}/200/{height * 200 // width}",
        },
        "links": {
            "html": f"https://picsum.photos/id/{img}/info",
            "download": f"{base}/{width}/{height}",
        },
        "user": {
            "id": f"mock-user-{n}",
            "username": username,
            "name": name,
            "profile_image": {
                "small": avatar.format(size=32),
                "medium": avatar.format(size=64),
                "large": avatar.format(size=128),
            },
        },
        "likes": likes,
        "downloads": downloads,
    })


POOL: tuple[Photo, ...] = tuple(
    _build(i, sample) for i, sample in enumerate(_SAMPLES, start=1)
)


def mock_photos(count: int) -> list[Photo]:
    """Return exactly ``count`` photos by cycling through the pool."""
    return [POOL[i % len(POOL)] for i in range(max(count, 0))]


def find_mock_photo(photo_id: str) -> Photo | None:
    for photo in POOL:
        if photo.id == photo_id:
            return photo
    return None
