"""OpenAI-compatible LLM client used for content translation and language detection."""

import json
import logging
from typing import Optional, List, Dict, Any

from openai import OpenAI

from artline.config import settings

logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {
    "ru": "Russian",
    "kz": "Kazakh",
    "en": "English",
}

TRANSLATION_SYSTEM_PROMPT = (
    "You are a professional translator for an advertising agency website. "
    "Translate the text from {source} to {target}, keeping the style, meaning and formatting. "
    "If the text contains HTML, Markdown or JSON, keep its structure and translate only human-readable values. "
    "Return only the translation without any explanations."
)

DETECTION_SYSTEM_PROMPT = (
    "Detect the language of the text. Answer with a JSON object {\"language\": \"<code>\"} "
    "where <code> is 'ru' for Russian, 'kz' for Kazakh or 'en' for English."
)


class AIClient:
    """Thin wrapper over the OpenAI SDK with model fallback."""

    def __init__(self, model_name: Optional[str] = None):
        self.model_name = model_name or settings.AI_TRANSLATION_MODEL
        self._client = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(
                api_key=settings.OPENAI_API_KEY,
                base_url=settings.OPENAI_BASE_URL,
                timeout=settings.AI_TIMEOUT_SECONDS,
                max_retries=settings.AI_MAX_RETRIES,
            )
        return self._client

    def _normalize_content(self, content: Any) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            chunks: List[str] = []
            for part in content:
                if isinstance(part, dict) and part.get("type") == "text":
                    chunks.append(str(part.get("text", "")))
            return "".join(chunks)
        return str(content or "")

    def invoke(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.7,
        response_format: Optional[Dict[str, str]] = None,
    ) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        candidates = [self.model_name]
        if settings.AI_FALLBACK_MODEL and settings.AI_FALLBACK_MODEL != self.model_name:
            candidates.append(settings.AI_FALLBACK_MODEL)
        tried = []

        for candidate in candidates:
            tried.append(candidate)
            params: Dict[str, Any] = {
                "model": candidate,
                "messages": messages,
                "temperature": temperature,
            }
            if response_format:
                params["response_format"] = response_format
            try:
                response = self._get_client().chat.completions.create(**params)
                if not response.choices:
                    return ""
                message = response.choices[0].message
                return self._normalize_content(message.content if message else "")
            except Exception as exc:
                text = str(exc)
                invalid_model_error = (
                    "does not exist" in text
                    or '"code":404' in text
                    or "NotFoundError" in text
                    or "model_not_found" in text
                )
                if invalid_model_error and candidate != candidates[-1]:
                    logger.warning("[translation] model %s unavailable, trying fallback", candidate)
                    continue
                raise RuntimeError(
                    f"AI model call failed (tried: {', '.join(tried)}): {text}"
                ) from exc
        return ""

    def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        for lang in (source_lang, target_lang):
            if lang not in LANGUAGE_NAMES:
                raise ValueError(f"Unsupported language code: {lang}")
        if source_lang == target_lang or not text:
            return text
        system_prompt = TRANSLATION_SYSTEM_PROMPT.format(
            source=LANGUAGE_NAMES[source_lang],
            target=LANGUAGE_NAMES[target_lang],
        )
        result = self.invoke(text, system_prompt, temperature=settings.TRANSLATION_TEMPERATURE)
        return result or text

    def detect_language(self, text: str) -> Optional[str]:
        try:
            raw = self.invoke(
                text,
                DETECTION_SYSTEM_PROMPT,
                temperature=settings.TRANSLATION_TEMPERATURE,
                response_format={"type": "json_object"},
            )
        except RuntimeError as exc:
            logger.warning("[translation] language detection failed: %s", exc)
            return None
        try:
            payload = json.loads(raw or "{}")
        except json.JSONDecodeError:
            logger.warning("[translation] unparsable detection answer: %s", raw)
            return "ru"
        if not isinstance(payload, dict):
            return "ru"
        lang = payload.get("language") or payload.get("lang") or payload.get("code")
        if lang in LANGUAGE_NAMES:
            return lang
        return "ru"

    @classmethod
    def get_client(cls, purpose: str) -> "AIClient":
        mapping = {
            "translation": settings.AI_TRANSLATION_MODEL,
            "detection": settings.AI_DETECTION_MODEL,
            "general": settings.AI_TRANSLATION_MODEL,
        }
        return cls(model_name=mapping.get(purpose, settings.AI_TRANSLATION_MODEL))
