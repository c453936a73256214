"""Ad-hoc translation helpers for the admin editor."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from artline.middleware.auth_middleware import require_admin
from artline.models.user import User
from artline.schemas.translation import (
    DetectLanguageRequest,
    DetectLanguageResponse,
    TranslateRequest,
    TranslateResponse,
)
from artline.services import translation_service
from artline.services.ai_client import AIClient
from artline.services.translation_service import Translator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/translate", tags=["translate"])


@router.post("", response_model=TranslateResponse)
def translate_text(
    data: TranslateRequest,
    _current_user: User = Depends(require_admin),
    translator: Translator = Depends(translation_service.get_translator),
):
    try:
        translated = translator(data.text, data.source_lang, data.target_lang)
    except Exception as exc:
        logger.warning("[translation] ad-hoc %s->%s failed: %s", data.source_lang, data.target_lang, exc)
        raise HTTPException(status_code=502, detail="Translation provider error")
    return TranslateResponse(
        source_lang=data.source_lang,
        target_lang=data.target_lang,
        translated_text=translated,
    )


def get_detection_client() -> AIClient:
    return AIClient.get_client("detection")


@router.post("/detect", response_model=DetectLanguageResponse)
def detect_language(
    data: DetectLanguageRequest,
    _current_user: User = Depends(require_admin),
    client: AIClient = Depends(get_detection_client),
):
    return DetectLanguageResponse(language=client.detect_language(data.text))
