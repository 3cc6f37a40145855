"""Disk storage for uploaded profile images."""
from pathlib import Path
import secrets
import time

ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif"}


class InvalidImageError(ValueError):
    """Upload rejected: wrong type or too large."""


def build_image_filename(original_name: str) -> str:
    """``profile-<millis>-<random><ext>`` for an accepted image name."""
    ext = Path(original_name or "").suffix.lower()
    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise InvalidImageError("Only image files are allowed!")
    unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    return f"profile-{unique_suffix}{ext}"


def save_image(upload_dir: Path, original_name: str, content: bytes, max_bytes: int) -> str:
    """Write the image to ``upload_dir`` and return its public URL."""
    if len(content) > max_bytes:
        raise InvalidImageError("File too large")
    filename = build_image_filename(original_name)
    upload_dir.mkdir(parents=True, exist_ok=True)
    (upload_dir / filename).write_bytes(content)
    return f"/uploads/{filename}"
