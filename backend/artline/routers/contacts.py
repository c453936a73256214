"""Contact form API router. Submitting is public, reviewing requires an admin."""

from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session

from artline.database import get_db
from artline.middleware.auth_middleware import require_admin
from artline.models.user import User
from artline.schemas.contact import ContactSubmissionCreate, ContactSubmissionOut, ContactSubmissionUpdate
from artline.services import contact_service, email_service

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.post("", response_model=ContactSubmissionOut, status_code=status.HTTP_201_CREATED)
def create_submission(
    data: ContactSubmissionCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
):
    row = contact_service.create_submission(db, data)
    out = ContactSubmissionOut.model_validate(row)
    # notification runs after the response; its failures are only logged
    background_tasks.add_task(email_service.notify_new_submission, out.model_dump())
    return out


@router.get("", response_model=List[ContactSubmissionOut])
def list_submissions(
    processed: Optional[bool] = None,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_admin),
):
    return [ContactSubmissionOut.model_validate(row) for row in contact_service.list_submissions(db, processed)]


@router.get("/{submission_id}", response_model=ContactSubmissionOut)
def get_submission(
    submission_id: int,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_admin),
):
    return ContactSubmissionOut.model_validate(contact_service.get_submission(db, submission_id))


@router.patch("/{submission_id}", response_model=ContactSubmissionOut)
def update_submission(
    submission_id: int,
    data: ContactSubmissionUpdate,
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_admin),
):
    row = contact_service.update_submission(db, submission_id, data.processed)
    return ContactSubmissionOut.model_validate(row)
