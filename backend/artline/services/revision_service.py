"""Content revision snapshots, bounded retention and restore."""

import copy
import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from artline.config import settings
from artline.models.content import ContentItem, ContentRevision

logger = logging.getLogger(__name__)


def _newest_first(query):
    # equal timestamps fall back to insertion order
    return query.order_by(ContentRevision.created_at.desc(), ContentRevision.revision_id.desc())


def create_revision(db: Session, item: ContentItem, actor_id: Optional[int]) -> ContentRevision:
    """Snapshot the current value of ``item`` and trim its history.

    Must run before the new value is assigned. The caller owns the commit.
    """
    row = ContentRevision(
        content_id=item.content_id,
        content=copy.deepcopy(item.content),
        created_by=actor_id,
    )
    db.add(row)
    db.flush()
    enforce_retention(db, item.content_id)
    return row


def enforce_retention(db: Session, content_id: int, max_revisions: Optional[int] = None) -> int:
    limit = settings.MAX_REVISIONS if max_revisions is None else max_revisions
    revisions = _newest_first(
        db.query(ContentRevision).filter(ContentRevision.content_id == content_id)
    ).all()
    excess = revisions[limit:]
    for row in excess:
        db.delete(row)
    if excess:
        db.flush()
        logger.info("[content] trimmed %d old revision(s) of content %s", len(excess), content_id)
    return len(excess)


def list_revisions_for(db: Session, content_id: int) -> List[ContentRevision]:
    return _newest_first(
        db.query(ContentRevision).filter(ContentRevision.content_id == content_id)
    ).all()


def list_revisions(db: Session, *, section_type: str, section_key: str, language: str) -> List[ContentRevision]:
    item = (
        db.query(ContentItem)
        .filter(
            ContentItem.section_type == section_type,
            ContentItem.section_key == section_key,
            ContentItem.language == language,
        )
        .first()
    )
    if not item:
        return []
    return list_revisions_for(db, item.content_id)


def get_revision(db: Session, revision_id: int) -> ContentRevision:
    row = db.query(ContentRevision).filter(ContentRevision.revision_id == revision_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Revision not found")
    return row

