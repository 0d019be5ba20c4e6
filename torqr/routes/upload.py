import logging
import os

from fastapi import APIRouter, Depends, File, Form, UploadFile

from ..auth import CurrentUser, get_current_user
from ..errors import UnexpectedError, ValidationError
from ..shared.responses import success_response
from ..utils.photo_storage import (
    ALLOWED_PHOTO_MIME_TYPES,
    MAX_PHOTO_SIZE_BYTES,
    PhotoUploadError,
    upload_maintenance_photo,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["Upload"])


@router.post("/maintenance-photo")
async def upload_photo(
    file: UploadFile = File(...),
    association_id: str = Form(..., alias="associationId", min_length=1, max_length=64),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Upload a maintenance photo to R2 and return its public URL"""
    logger.info(f"📤 Uploading maintenance photo for {association_id} (user {current_user.id})")

    if not association_id.replace("-", "").replace("_", "").isalnum():
        raise ValidationError.for_field("associationId", "Invalid association ID")

    if file.content_type not in ALLOWED_PHOTO_MIME_TYPES:
        raise ValidationError.for_field(
            "file", "Invalid file type. Only PNG, JPEG, WebP and HEIC images are allowed."
        )

    filename = file.filename or "photo.jpg"
    # Reject path components in the client-supplied name
    if os.path.basename(filename) != filename or ".." in filename:
        raise ValidationError.for_field("file", "Invalid filename")

    contents = await file.read()
    if not contents:
        raise ValidationError.for_field("file", "File is empty")
    if len(contents) > MAX_PHOTO_SIZE_BYTES:
        raise ValidationError.for_field(
            "file",
            f"File size exceeds 5MB limit. Your file is {len(contents) / (1024 * 1024):.2f}MB.",
        )

    try:
        url = upload_maintenance_photo(contents, filename, file.content_type, association_id)
    except PhotoUploadError as e:
        raise UnexpectedError("Failed to upload photo") from e

    return success_response({"url": url}, status_code=201)
