"""Admin dashboard counters."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from artline.config import settings
from artline.models.contact import ContactSubmission
from artline.models.content import ContentItem, ContentRevision
from artline.models.media import Media


def get_stats(db: Session) -> dict:
    by_section = dict(
        db.query(ContentItem.section_type, func.count(ContentItem.content_id))
        .group_by(ContentItem.section_type)
        .all()
    )
    language_rows = dict(
        db.query(ContentItem.language, func.count(ContentItem.content_id))
        .group_by(ContentItem.language)
        .all()
    )
    by_language = {lang: int(language_rows.get(lang, 0)) for lang in settings.SUPPORTED_LANGUAGES}
    return {
        "total_content": db.query(func.count(ContentItem.content_id)).scalar() or 0,
        "total_revisions": db.query(func.count(ContentRevision.revision_id)).scalar() or 0,
        "total_media": db.query(func.count(Media.media_id)).scalar() or 0,
        "total_contacts": db.query(func.count(ContactSubmission.submission_id)).scalar() or 0,
        "unprocessed_contacts": (
            db.query(func.count(ContactSubmission.submission_id))
            .filter(ContactSubmission.processed == False)  # noqa: E712
            .scalar()
            or 0
        ),
        "content_by_section": {key: int(value) for key, value in by_section.items()},
        "content_by_language": by_language,
    }
