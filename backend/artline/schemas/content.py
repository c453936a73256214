"""Pydantic schemas for content, revisions and bulk import requests/responses."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from artline.config import settings
from artline.schemas.common import CamelModel


def _validate_language(value: str) -> str:
    text = (value or "").strip().lower()
    if text not in settings.SUPPORTED_LANGUAGES:
        raise ValueError(f"Language must be one of: {', '.join(settings.SUPPORTED_LANGUAGES)}")
    return text


class ContentSaveRequest(CamelModel):
    section_type: str = Field(..., min_length=1, max_length=50)
    section_key: str = Field(..., min_length=1, max_length=100)
    language: str
    content: Any
    auto_translate: bool = False

    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        return _validate_language(value)


class ContentOut(CamelModel):
    content_id: int
    section_type: str
    section_key: str
    language: str
    content: Any
    created_at: datetime
    updated_at: datetime
    created_by: Optional[int] = None
    updated_by: Optional[int] = None


class TranslationResultOut(CamelModel):
    language: str
    saved: bool
    translated: bool
    untranslated_fields: List[str] = []
    error: Optional[str] = None


class ContentSaveWithTranslationsOut(CamelModel):
    original: ContentOut
    translations_created: bool
    languages: List[str]
    results: List[TranslationResultOut] = []
    translation_error: Optional[str] = None


class ContentRevisionOut(CamelModel):
    revision_id: int
    content_id: int
    content: Any
    created_at: datetime
    created_by: Optional[int] = None


class BulkImportRequest(CamelModel):
    section_type: str = Field(..., min_length=1)
    format: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    language: str

    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        return _validate_language(value)


class BulkImportResult(CamelModel):
    imported_count: int
    total_count: int
    errors: Optional[List[str]] = None
    success: bool
