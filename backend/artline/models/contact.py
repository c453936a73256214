"""Contact form submission SQLAlchemy model."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.sql import func

from artline.database import Base


class ContactSubmission(Base):
    __tablename__ = "contact_submissions"

    submission_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    email = Column(String(255))
    service = Column(String(255))
    message = Column(Text)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    processed = Column(Boolean, default=False, nullable=False)
