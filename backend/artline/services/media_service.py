"""Uploaded media records and their files on disk."""

import logging
import os
import re
from typing import Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from artline.models.media import Media
from artline.schemas.media import MediaOut
from artline.utils.helpers import upload_url

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "general"
CATEGORY_PATTERN = re.compile(r"[a-z0-9_-]+")


def normalize_category(category: Optional[str]) -> str:
    text = (category or "").strip().lower()
    if not text:
        return DEFAULT_CATEGORY
    # categories become folder names under UPLOAD_DIR
    if not CATEGORY_PATTERN.fullmatch(text):
        raise HTTPException(
            status_code=400,
            detail="Category may only contain letters, digits, hyphens and underscores",
        )
    return text


def create_media(db: Session, file_info: Dict, category: str, actor_id: Optional[int]) -> Media:
    row = Media(
        filename=file_info["filename"],
        original_name=file_info["original_name"],
        mime_type=file_info["mime_type"],
        size=file_info["size"],
        path=file_info["path"],
        category=category,
        uploaded_by=actor_id,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def list_media(db: Session, category: Optional[str] = None) -> List[Media]:
    q = db.query(Media)
    if category:
        q = q.filter(Media.category == normalize_category(category))
    return q.order_by(Media.uploaded_at.desc(), Media.media_id.desc()).all()


def get_media(db: Session, media_id: int) -> Media:
    row = db.query(Media).filter(Media.media_id == media_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Media not found")
    return row


def delete_media(db: Session, media_id: int) -> None:
    row = get_media(db, media_id)
    try:
        os.remove(row.path)
    except OSError as exc:
        # the record goes away even when the file is already gone
        logger.warning("[media] could not remove %s: %s", row.path, exc)
    db.delete(row)
    db.commit()


def to_response(row: Media) -> MediaOut:
    return MediaOut(
        media_id=row.media_id,
        filename=row.filename,
        original_name=row.original_name,
        mime_type=row.mime_type,
        size=row.size,
        path=row.path,
        url=upload_url(row.path),
        category=row.category,
        uploaded_at=row.uploaded_at,
        uploaded_by=row.uploaded_by,
    )
