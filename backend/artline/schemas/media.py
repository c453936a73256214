"""Pydantic schemas for uploaded media."""

from datetime import datetime
from typing import Optional

from artline.schemas.common import CamelModel


class MediaOut(CamelModel):
    media_id: int
    filename: str
    original_name: str
    mime_type: str
    size: int
    path: str
    url: str
    category: Optional[str] = None
    uploaded_at: datetime
    uploaded_by: Optional[int] = None
