"""Contact form submissions left by site visitors."""

from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from artline.models.contact import ContactSubmission
from artline.schemas.contact import ContactSubmissionCreate


def create_submission(db: Session, data: ContactSubmissionCreate) -> ContactSubmission:
    row = ContactSubmission(
        name=data.name.strip(),
        phone=data.phone.strip(),
        email=(data.email or "").strip() or None,
        service=data.service,
        message=data.message,
        processed=False,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def list_submissions(db: Session, processed: Optional[bool] = None) -> List[ContactSubmission]:
    q = db.query(ContactSubmission)
    if processed is not None:
        q = q.filter(ContactSubmission.processed == processed)
    return q.order_by(ContactSubmission.created_at.desc(), ContactSubmission.submission_id.desc()).all()


def get_submission(db: Session, submission_id: int) -> ContactSubmission:
    row = db.query(ContactSubmission).filter(ContactSubmission.submission_id == submission_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Submission not found")
    return row


def update_submission(db: Session, submission_id: int, processed: bool) -> ContactSubmission:
    row = get_submission(db, submission_id)
    row.processed = processed
    db.commit()
    db.refresh(row)
    return row
