"""Pydantic schemas for contact form submissions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from artline.schemas.common import CamelModel


class ContactSubmissionCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    service: Optional[str] = Field(None, max_length=255)
    message: Optional[str] = None


class ContactSubmissionUpdate(CamelModel):
    processed: bool


class ContactSubmissionOut(CamelModel):
    submission_id: int
    name: str
    phone: str
    email: Optional[str] = None
    service: Optional[str] = None
    message: Optional[str] = None
    created_at: datetime
    processed: bool
