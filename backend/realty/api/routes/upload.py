from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from structlog import get_logger

from realty.core.config import get_settings
from realty.core.deps import get_current_admin
from realty.models.admin import Admin
from realty.schemas.upload import PresignedUploadResponse, UploadResponse
from realty.services import storage

logger = get_logger()

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("", response_model=UploadResponse)
async def upload_image(file: UploadFile | None = File(default=None), admin: Admin = Depends(get_current_admin)):
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    max_bytes = get_settings().UPLOAD_MAX_BYTES
    # Read one byte past the limit so oversized bodies are rejected without buffering them whole.
    data = await file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise HTTPException(status_code=400, detail="File size exceeds 10MB limit")
    if file.content_type not in storage.ALLOWED_CONTENT_TYPES:
        raise HTTPException(status_code=400, detail="Invalid file type. Only images are allowed.")

    try:
        return storage.upload_bytes(data, file.filename, file.content_type)
    except storage.StorageNotConfigured as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    except storage.StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc))


@router.get("", response_model=PresignedUploadResponse)
def presigned_upload(
    filename: str | None = None,
    content_type: str = Query(default="image/jpeg", alias="contentType"),
    admin: Admin = Depends(get_current_admin),
):
    if not filename:
        raise HTTPException(status_code=400, detail="Filename is required")
    if content_type not in storage.ALLOWED_CONTENT_TYPES:
        raise HTTPException(status_code=400, detail="Invalid file type. Only images are allowed.")

    try:
        result = storage.presigned_upload_url(filename, content_type)
    except storage.StorageNotConfigured as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    except storage.StorageError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    logger.info("Issued presigned upload URL", file_url=result["file_url"], admin=admin.username)
    return result
