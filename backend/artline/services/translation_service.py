"""Auto-translation of section content from the source language into the other site languages."""

import copy
import json
import logging
import re
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeout
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from artline.config import settings
from artline.services.ai_client import AIClient

logger = logging.getLogger(__name__)

# (text, source_lang, target_lang) -> translated text
Translator = Callable[[str, str, str], str]

TRANSLATABLE_FIELDS: Dict[str, List[str]] = {
    "hero": ["title", "description", "content"],
    "services": ["title", "description", "content"],
    "about": ["title", "description", "content"],
}
DEFAULT_TRANSLATABLE_FIELDS = ["content"]

_CODE_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


@dataclass
class LanguageTranslation:
    language: str
    content: Any = None
    untranslated_fields: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def llm_translate(text: str, source_lang: str, target_lang: str) -> str:
    return AIClient.get_client("translation").translate(text, source_lang, target_lang)


def get_translator() -> Translator:
    return llm_translate


def fields_for_section(section_type: str) -> List[str]:
    return list(TRANSLATABLE_FIELDS.get(section_type, DEFAULT_TRANSLATABLE_FIELDS))


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, (str, list, dict)) and len(value) == 0


def _strip_code_fence(text: str) -> str:
    stripped = (text or "").strip()
    match = _CODE_FENCE_RE.match(stripped)
    return match.group(1) if match else stripped


def translate_value(
    value: Any,
    source_lang: str,
    target_lang: str,
    translator: Translator,
) -> Tuple[Any, bool]:
    """Translate one field value. Returns ``(value, translated)``.

    Strings are translated as prose. Objects and arrays travel as a single
    JSON string and are parsed back; anything that does not come back as the
    same JSON type keeps the original value. Provider errors never propagate.
    """
    if _is_empty(value) or source_lang == target_lang:
        return value, True

    if isinstance(value, str):
        try:
            return translator(value, source_lang, target_lang), True
        except Exception as exc:
            logger.warning("[translation] %s->%s text translation failed: %s", source_lang, target_lang, exc)
            return value, False

    if isinstance(value, (dict, list)):
        serialized = json.dumps(value, ensure_ascii=False)
        try:
            translated = translator(serialized, source_lang, target_lang)
        except Exception as exc:
            logger.warning("[translation] %s->%s json translation failed: %s", source_lang, target_lang, exc)
            return value, False
        try:
            parsed = json.loads(_strip_code_fence(translated))
        except (json.JSONDecodeError, TypeError):
            logger.warning("[translation] %s->%s returned invalid JSON, keeping original", source_lang, target_lang)
            return value, False
        if type(parsed) is not type(value):
            logger.warning("[translation] %s->%s changed JSON shape, keeping original", source_lang, target_lang)
            return value, False
        return parsed, True

    # numbers and booleans are language neutral
    return value, True


def translate_content(
    content: Any,
    fields: List[str],
    source_lang: str,
    target_lang: str,
    translator: Translator,
) -> Tuple[Any, List[str]]:
    """Build the ``target_lang`` version of ``content``.

    Only the allowlisted top-level ``fields`` are translated; everything else
    is copied verbatim. Returns the new document and the fields that had to
    fall back to the source text.
    """
    if not isinstance(content, dict):
        # a bare value is treated as the "content" field itself
        if "content" not in fields:
            return copy.deepcopy(content), []
        value, ok = translate_value(content, source_lang, target_lang, translator)
        return value, ([] if ok else ["content"])

    result = copy.deepcopy(content)
    untranslated: List[str] = []
    for name in fields:
        if name not in content:
            continue
        value, ok = translate_value(content[name], source_lang, target_lang, translator)
        result[name] = value
        if not ok:
            untranslated.append(name)
    return result, untranslated


def fan_out(
    content: Any,
    fields: List[str],
    source_lang: str,
    targets: List[str],
    translator: Translator,
    timeout: Optional[float] = None,
) -> List[LanguageTranslation]:
    """Translate ``content`` into every target language concurrently.

    Each language is independent: a failure or timeout is recorded on that
    language's result and the others still complete.
    """
    if not targets:
        return []
    wait_seconds = settings.TRANSLATION_FANOUT_TIMEOUT_SECONDS if timeout is None else timeout
    results: List[LanguageTranslation] = []
    executor = ThreadPoolExecutor(max_workers=len(targets), thread_name_prefix="translate")
    try:
        futures = {
            lang: executor.submit(translate_content, content, fields, source_lang, lang, translator)
            for lang in targets
        }
        deadline = time.monotonic() + wait_seconds
        for lang, future in futures.items():
            try:
                translated, untranslated = future.result(timeout=max(0.0, deadline - time.monotonic()))
            except FuturesTimeout:
                logger.warning("[translation] %s->%s timed out after %.1fs", source_lang, lang, wait_seconds)
                results.append(LanguageTranslation(language=lang, error="Translation timed out"))
                continue
            except Exception as exc:
                logger.warning("[translation] %s->%s failed: %s", source_lang, lang, exc)
                results.append(LanguageTranslation(language=lang, error=str(exc)))
                continue
            results.append(
                LanguageTranslation(language=lang, content=translated, untranslated_fields=untranslated)
            )
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
    return results
