"""Section content API router: public reads, admin saves with optional auto-translation."""

import logging
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from artline.config import settings
from artline.database import get_db
from artline.middleware.auth_middleware import require_admin
from artline.models.user import User
from artline.schemas.content import (
    BulkImportRequest,
    BulkImportResult,
    ContentOut,
    ContentSaveRequest,
    ContentSaveWithTranslationsOut,
)
from artline.services import bulk_import_service, content_service, translation_service
from artline.services.translation_service import Translator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/content", tags=["content"])


def _content_out(row) -> Optional[ContentOut]:
    return ContentOut.model_validate(row) if row is not None else None


@router.get("", response_model=None)
def get_content(
    section_type: Optional[str] = Query(None, alias="sectionType"),
    section_key: Optional[str] = Query(None, alias="sectionKey"),
    language: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if language is not None:
        language = language.strip().lower()
    if language and language not in settings.SUPPORTED_LANGUAGES:
        raise HTTPException(
            status_code=400,
            detail=f"Language must be one of: {', '.join(settings.SUPPORTED_LANGUAGES)}",
        )

    if section_type and section_key and language:
        row = content_service.get_content(db, section_type, section_key, language)
        if not row:
            raise HTTPException(status_code=404, detail="Content not found")
        return _content_out(row)

    if section_type and section_key:
        rows = content_service.get_content_languages(db, section_type, section_key)
        return {lang: _content_out(row) for lang, row in rows.items()}

    if section_type:
        return [_content_out(row) for row in content_service.list_section_content(db, section_type)]

    raise HTTPException(status_code=400, detail="Missing required query parameters")


@router.post(
    "",
    response_model=Union[ContentSaveWithTranslationsOut, ContentOut],
    status_code=status.HTTP_201_CREATED,
)
def save_content(
    data: ContentSaveRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
    translator: Translator = Depends(translation_service.get_translator),
):
    try:
        item, report = content_service.save_content_with_translation(
            db,
            section_type=data.section_type,
            section_key=data.section_key,
            language=data.language,
            content=data.content,
            actor_id=current_user.user_id,
            auto_translate=data.auto_translate,
            translator=translator,
        )
    except SQLAlchemyError:
        logger.exception(
            "[content] saving %s/%s/%s failed", data.section_type, data.section_key, data.language
        )
        raise HTTPException(status_code=500, detail="Error saving content")

    original = ContentOut.model_validate(item)
    if report is None:
        return original
    return ContentSaveWithTranslationsOut(original=original, **report)


@router.post("/bulk-import", response_model=BulkImportResult)
def bulk_import(
    data: BulkImportRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
):
    result = bulk_import_service.bulk_import(
        db,
        section_type=data.section_type,
        fmt=data.format,
        raw=data.content,
        language=data.language,
        actor_id=current_user.user_id,
    )
    return BulkImportResult(**result)
