"""Pydantic schemas for the ad-hoc translation endpoints."""

from typing import Optional

from pydantic import Field, field_validator

from artline.schemas.common import CamelModel
from artline.schemas.content import _validate_language


class TranslateRequest(CamelModel):
    text: str = Field(..., min_length=1)
    source_lang: str = "ru"
    target_lang: str

    @field_validator("source_lang", "target_lang")
    @classmethod
    def check_language(cls, value: str) -> str:
        return _validate_language(value)


class TranslateResponse(CamelModel):
    source_lang: str
    target_lang: str
    translated_text: str


class DetectLanguageRequest(CamelModel):
    text: str = Field(..., min_length=1)


class DetectLanguageResponse(CamelModel):
    language: Optional[str] = None
