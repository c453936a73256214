"""Section content write path: upsert by (section type, key, language) with revision history and auto-translation."""

import copy
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from artline.config import settings
from artline.models.content import ContentItem
from artline.services import revision_service, translation_service
from artline.services.translation_service import Translator

logger = logging.getLogger(__name__)


def get_content(db: Session, section_type: str, section_key: str, language: str) -> Optional[ContentItem]:
    return (
        db.query(ContentItem)
        .filter(
            ContentItem.section_type == section_type,
            ContentItem.section_key == section_key,
            ContentItem.language == language,
        )
        .first()
    )


def get_content_languages(db: Session, section_type: str, section_key: str) -> Dict[str, Optional[ContentItem]]:
    rows = (
        db.query(ContentItem)
        .filter(
            ContentItem.section_type == section_type,
            ContentItem.section_key == section_key,
        )
        .all()
    )
    by_language = {row.language: row for row in rows}
    return {lang: by_language.get(lang) for lang in settings.SUPPORTED_LANGUAGES}


def list_section_content(db: Session, section_type: str) -> List[ContentItem]:
    return (
        db.query(ContentItem)
        .filter(ContentItem.section_type == section_type)
        .order_by(ContentItem.section_key, ContentItem.language)
        .all()
    )


def _apply(
    db: Session,
    section_type: str,
    section_key: str,
    language: str,
    content: Any,
    actor_id: Optional[int],
) -> ContentItem:
    item = get_content(db, section_type, section_key, language)
    now = datetime.utcnow()
    if item:
        # the snapshot has to capture the value being superseded
        revision_service.create_revision(db, item, actor_id)
        item.content = content
        item.updated_at = now
        item.updated_by = actor_id
        db.flush()
        return item

    item = ContentItem(
        section_type=section_type,
        section_key=section_key,
        language=language,
        content=content,
        created_at=now,
        updated_at=now,
        created_by=actor_id,
        updated_by=actor_id,
    )
    db.add(item)
    db.flush()
    return item


def save_content(
    db: Session,
    *,
    section_type: str,
    section_key: str,
    language: str,
    content: Any,
    actor_id: Optional[int],
) -> ContentItem:
    """Insert or update the row for the triple in a single transaction.

    An update first stores the previous value as a revision. A concurrent
    first insert for the same triple loses on the unique constraint and is
    replayed once as an update.
    """
    try:
        item = _apply(db, section_type, section_key, language, content, actor_id)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(
            "[content] concurrent insert for %s/%s/%s, retrying as update",
            section_type, section_key, language,
        )
        try:
            item = _apply(db, section_type, section_key, language, content, actor_id)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(item)
    return item


def should_auto_translate(language: str, auto_translate: bool) -> bool:
    return bool(auto_translate) and settings.AUTO_TRANSLATE_ENABLED and language == settings.SOURCE_LANGUAGE


def translate_and_save(
    db: Session,
    item: ContentItem,
    actor_id: Optional[int],
    translator: Translator,
) -> Dict[str, Any]:
    """Fan the source-language item out to the other languages.

    Every target is saved through ``save_content`` on its own; failures are
    reported per language and never raised.
    """
    source_content = copy.deepcopy(item.content)
    section_type, section_key = item.section_type, item.section_key
    fields = translation_service.fields_for_section(section_type)
    translations = translation_service.fan_out(
        source_content,
        fields,
        settings.SOURCE_LANGUAGE,
        settings.target_languages(),
        translator,
    )

    results = []
    for translation in translations:
        entry = {
            "language": translation.language,
            "saved": False,
            "translated": False,
            "untranslated_fields": list(translation.untranslated_fields),
            "error": translation.error,
        }
        if translation.ok:
            try:
                save_content(
                    db,
                    section_type=section_type,
                    section_key=section_key,
                    language=translation.language,
                    content=translation.content,
                    actor_id=actor_id,
                )
            except Exception as exc:
                db.rollback()
                logger.exception(
                    "[content] saving %s translation of %s/%s failed: %s",
                    translation.language, section_type, section_key, exc,
                )
                entry["error"] = "Error saving translation"
            else:
                entry["saved"] = True
                entry["translated"] = not translation.untranslated_fields
        results.append(entry)

    complete = bool(results) and all(r["saved"] and r["translated"] for r in results)
    report = {
        "translations_created": complete,
        "languages": [r["language"] for r in results if r["saved"]],
        "results": results,
        "translation_error": None,
    }
    if not complete:
        incomplete = [r["language"] for r in results if not (r["saved"] and r["translated"])]
        report["translation_error"] = f"Content saved, translation incomplete for: {', '.join(incomplete)}"
        logger.warning("[content] %s/%s %s", section_type, section_key, report["translation_error"])
    return report


def save_content_with_translation(
    db: Session,
    *,
    section_type: str,
    section_key: str,
    language: str,
    content: Any,
    actor_id: Optional[int],
    auto_translate: bool = False,
    translator: Optional[Translator] = None,
) -> Tuple[ContentItem, Optional[Dict[str, Any]]]:
    item = save_content(
        db,
        section_type=section_type,
        section_key=section_key,
        language=language,
        content=content,
        actor_id=actor_id,
    )
    if not should_auto_translate(language, auto_translate):
        return item, None
    report = translate_and_save(db, item, actor_id, translator or translation_service.get_translator())
    return item, report


def restore_revision(db: Session, revision_id: int, actor_id: Optional[int]) -> ContentItem:
    """Make a past snapshot current again; the replaced value becomes a new revision."""
    revision = revision_service.get_revision(db, revision_id)
    item = revision.content_item
    snapshot = copy.deepcopy(revision.content)
    logger.info(
        "[content] restoring revision %s onto %s/%s/%s",
        revision_id, item.section_type, item.section_key, item.language,
    )
    return save_content(
        db,
        section_type=item.section_type,
        section_key=item.section_key,
        language=item.language,
        content=snapshot,
        actor_id=actor_id,
    )
