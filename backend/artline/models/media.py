"""Uploaded media file metadata."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from sqlalchemy.sql import func

from artline.database import Base


class Media(Base):
    __tablename__ = "media"

    media_id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(100), nullable=False)
    size = Column(Integer, nullable=False)
    path = Column(String(255), nullable=False)
    category = Column(String(50))  # portfolio/services/hero/general...
    uploaded_at = Column(DateTime, server_default=func.now(), nullable=False)
    uploaded_by = Column(Integer, ForeignKey("users.user_id"), nullable=True)

    __table_args__ = (
        Index("idx_media_category", "category"),
    )
