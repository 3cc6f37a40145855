"""Profile image upload endpoint."""
import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from app.api.deps import get_app_settings, get_current_user
from app.config import Settings
from app.schemas.help import ImageUploadResponse
from app.services.image_storage import InvalidImageError, save_image
from app.storage import Record

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uploads"])


@router.post("/upload-image", response_model=ImageUploadResponse)
async def upload_image(
    image: UploadFile | None = File(None),
    current_user: Record = Depends(get_current_user),
    settings: Settings = Depends(get_app_settings),
):
    """Store a single image and return the URL it is served from."""
    if image is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    # One byte past the limit is enough to tell an oversized file apart
    content = await image.read(settings.max_upload_bytes + 1)
    try:
        image_url = save_image(settings.upload_dir, image.filename, content, settings.max_upload_bytes)
    except InvalidImageError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except OSError:
        logger.exception("Error uploading file")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error uploading file")

    logger.info(f"User {current_user['id']} uploaded {image_url}")
    return ImageUploadResponse(image_url=image_url)
