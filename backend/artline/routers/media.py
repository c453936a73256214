"""Media upload API router."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from artline.database import get_db
from artline.middleware.auth_middleware import require_admin
from artline.models.user import User
from artline.schemas.media import MediaOut
from artline.services import media_service
from artline.utils.helpers import read_upload, write_upload

router = APIRouter(prefix="/api/media", tags=["media"])


@router.post("", response_model=List[MediaOut], status_code=status.HTTP_201_CREATED)
async def upload_media(
    files: List[UploadFile] = File(...),
    category: str = Form(media_service.DEFAULT_CATEGORY),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    if not files:
        raise HTTPException(status_code=400, detail="No files uploaded")
    category = media_service.normalize_category(category)
    # reject the whole batch before anything is written
    payloads = [(file, await read_upload(file)) for file in files]
    uploaded = []
    for file, content in payloads:
        info = write_upload(file, content, subfolder=category)
        row = media_service.create_media(db, info, category, current_user.user_id)
        uploaded.append(media_service.to_response(row))
    return uploaded


@router.get("", response_model=List[MediaOut])
def list_media(category: Optional[str] = None, db: Session = Depends(get_db)):
    return [media_service.to_response(row) for row in media_service.list_media(db, category)]


@router.delete("/{media_id}")
def delete_media(
    media_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_admin),
):
    media_service.delete_media(db, media_id)
    return {"message": "Media deleted"}
