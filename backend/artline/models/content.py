"""Editable section content and its revision history."""

from datetime import datetime

from sqlalchemy import Column, Integer, String, JSON, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from artline.database import Base


class ContentItem(Base):
    __tablename__ = "contents"

    content_id = Column(Integer, primary_key=True, autoincrement=True)
    section_type = Column(String(50), nullable=False)
    section_key = Column(String(100), nullable=False)
    language = Column(String(10), nullable=False, default="ru")
    content = Column(JSON, nullable=False)  # opaque document, shape owned by the admin forms
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    created_by = Column(Integer, ForeignKey("users.user_id"), nullable=True)
    updated_by = Column(Integer, ForeignKey("users.user_id"), nullable=True)

    revisions = relationship(
        "ContentRevision",
        back_populates="content_item",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        UniqueConstraint("section_type", "section_key", "language", name="uq_contents_section_language"),
        Index("idx_contents_section_type", "section_type"),
    )


class ContentRevision(Base):
    __tablename__ = "content_revisions"

    revision_id = Column(Integer, primary_key=True, autoincrement=True)
    content_id = Column(Integer, ForeignKey("contents.content_id", ondelete="CASCADE"), nullable=False)
    content = Column(JSON, nullable=False)  # snapshot of the superseded value
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    created_by = Column(Integer, ForeignKey("users.user_id"), nullable=True)

    content_item = relationship("ContentItem", back_populates="revisions")

    __table_args__ = (
        Index("idx_content_revisions_content", "content_id", "created_at"),
    )
