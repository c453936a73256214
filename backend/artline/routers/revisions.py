"""Content revision history API router."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from artline.database import get_db
from artline.middleware.auth_middleware import require_admin
from artline.models.user import User
from artline.schemas.content import ContentOut, ContentRevisionOut
from artline.services import content_service, revision_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/revisions", tags=["revisions"])


@router.get("", response_model=List[ContentRevisionOut])
def list_revisions(
    section_type: Optional[str] = Query(None, alias="sectionType"),
    section_key: Optional[str] = Query(None, alias="sectionKey"),
    language: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_admin),
):
    if not section_type or not section_key or not language:
        raise HTTPException(status_code=400, detail="Missing required query parameters")
    rows = revision_service.list_revisions(
        db, section_type=section_type, section_key=section_key, language=language
    )
    return [ContentRevisionOut.model_validate(row) for row in rows]


@router.post("/restore/{revision_id}", response_model=ContentOut)
def restore_revision(
    revision_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    try:
        item = content_service.restore_revision(db, revision_id, current_user.user_id)
    except SQLAlchemyError:
        logger.exception("[content] restoring revision %s failed", revision_id)
        raise HTTPException(status_code=500, detail="Error restoring content revision")
    return ContentOut.model_validate(item)
